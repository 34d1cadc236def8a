"""Structured errors raised at the book storage boundary."""

from enum import StrEnum

from pydantic import ValidationError

NOT_FOUND_MESSAGE = "Libro no encontrado"


class BookErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    MISSING_FIELD = "missing_field"
    INVALID_FIELD = "invalid_field"
    DUPLICATE = "duplicate"
    MALFORMED_BODY = "malformed_body"


class BookStoreError(Exception):
    """Base class for every book storage failure."""

    kind: BookErrorKind

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, str]:
        body = {"message": self.message, "kind": self.kind.value}
        if self.field is not None:
            body["field"] = self.field
        return body


class BookNotFoundError(BookStoreError):
    kind = BookErrorKind.NOT_FOUND

    def __init__(self, book_id: int) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.book_id = book_id

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}


class BookValidationError(BookStoreError):
    """A payload that does not fit the book schema."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        kind: BookErrorKind = BookErrorKind.INVALID_FIELD,
    ) -> None:
        super().__init__(message, field)
        self.kind = kind

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "BookValidationError":
        """Report the first failing field of a pydantic validation error."""
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        if error["type"] == "missing":
            return cls(f"{field} is required", field, BookErrorKind.MISSING_FIELD)
        return cls(f"{field}: {error['msg']}", field, BookErrorKind.INVALID_FIELD)


class BookConflictError(BookStoreError):
    """A write that would break the ``isbn`` uniqueness constraint."""

    kind = BookErrorKind.DUPLICATE

    def __init__(self, isbn: int | None) -> None:
        super().__init__(f"isbn {isbn} already exists", "isbn")
        self.isbn = isbn
