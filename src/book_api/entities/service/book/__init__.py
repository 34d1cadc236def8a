"""Entity package: Book."""

from .entity import Book, BookCreate, BookUpdate
from .errors import (
    BookConflictError,
    BookErrorKind,
    BookNotFoundError,
    BookStoreError,
    BookValidationError,
)
from .repository import BookRepository
from .table import BookTable

__all__ = [
    "Book",
    "BookCreate",
    "BookUpdate",
    "BookRepository",
    "BookTable",
    "BookErrorKind",
    "BookStoreError",
    "BookNotFoundError",
    "BookValidationError",
    "BookConflictError",
]
