from collections.abc import Mapping
from typing import Any

from sqlmodel import Session

from src.book_api.entities.service.book import Book, BookRepository

DELETED_MESSAGE = "Libro eliminado"


class BookService:
    """The five book operations exposed over HTTP.

    Each call is one logical storage operation; nothing is shared between
    calls apart from the database engine behind the session.
    """

    def __init__(self, db_session: Session):
        self._repo = BookRepository(db_session)

    def list_books(self) -> list[Book]:
        return self._repo.list_all()

    def get_book(self, book_id: int) -> Book | None:
        """Return the book, or ``None`` when no row has ``book_id``."""
        return self._repo.get(book_id)

    def create_book(self, payload: Mapping[str, Any]) -> Book:
        return self._repo.create(payload)

    def update_book(self, book_id: int, payload: Mapping[str, Any]) -> Book:
        """Apply the fields in ``payload`` to an existing book.

        Raises BookNotFoundError before looking at the payload when the book
        does not exist.
        """
        return self._repo.update(book_id, payload)

    def delete_book(self, book_id: int) -> str:
        self._repo.delete(book_id)
        return DELETED_MESSAGE
