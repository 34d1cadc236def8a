"""Book database table model."""

from sqlmodel import Field

from src.book_api.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database.
    ``isbn`` carries the unique constraint; SQLite enforces it on write.
    AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again.
    """

    __tablename__ = "books"
    __table_args__ = {"sqlite_autoincrement": True}

    autor: str = Field(nullable=False, description="Author of the book")
    isbn: int = Field(nullable=False, unique=True, description="ISBN number")
    editorial: str | None = Field(default=None, description="Publisher")
    paginas: int | None = Field(default=None, description="Number of pages")
