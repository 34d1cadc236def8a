"""Entity: Book."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from src.book_api.entities._base import Entity

# SQLite INTEGER is a signed 64-bit value.
SqliteInt = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]


class Book(Entity):
    """Book entity representing a catalog record.

    This is the read model returned by the API. It inherits ``id`` and the
    timestamps from Entity; all of them are assigned by the storage layer.
    """

    autor: str = Field(description="Author of the book")
    isbn: int = Field(description="ISBN number, unique across all books")
    editorial: str | None = Field(default=None, description="Publisher")
    paginas: int | None = Field(default=None, description="Number of pages")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.autor == other.autor
            and self.isbn == other.isbn
            and self.editorial == other.editorial
            and self.paginas == other.paginas
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.autor,
            self.isbn,
            self.editorial,
            self.paginas,
        ))


class BookCreate(BaseModel):
    """Fields accepted when creating a book.

    Unknown keys (including ``id`` and the timestamps) are dropped, and
    values are coerced to the column types so url-encoded bodies validate
    the same way JSON bodies do. Numbers sent for text fields are stored
    as their string form.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    autor: str
    isbn: SqliteInt
    editorial: str | None = None
    paginas: SqliteInt | None = None


class BookUpdate(BaseModel):
    """Partial update; only the keys present in the body are applied."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    autor: str | None = None
    isbn: SqliteInt | None = None
    editorial: str | None = None
    paginas: SqliteInt | None = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
