"""Unit tests for BookService."""

import pytest
from sqlmodel import Session

from src.book_api.core.services import DELETED_MESSAGE, BookService
from src.book_api.entities.service.book import BookNotFoundError, BookValidationError


class TestBookService:
    def test_create_then_get(self, session: Session):
        service = BookService(session)

        created = service.create_book({"autor": "A", "isbn": 111})

        assert service.get_book(created.id) == created

    def test_get_missing_returns_none(self, session: Session):
        assert BookService(session).get_book(999999) is None

    def test_list_books(self, session: Session):
        service = BookService(session)
        for isbn in (1, 2, 3):
            service.create_book({"autor": "A", "isbn": isbn})

        assert sorted(book.isbn for book in service.list_books()) == [1, 2, 3]

    def test_update_missing_checks_existence_before_payload(self, session: Session):
        """An invalid body for a missing book still reports not found."""
        with pytest.raises(BookNotFoundError):
            BookService(session).update_book(999999, {"isbn": "bad"})

    def test_update_existing_with_invalid_payload(self, session: Session):
        service = BookService(session)
        book = service.create_book({"autor": "A", "isbn": 111})

        with pytest.raises(BookValidationError):
            service.update_book(book.id, {"isbn": "bad"})

    def test_delete_returns_fixed_message(self, session: Session):
        service = BookService(session)
        book = service.create_book({"autor": "A", "isbn": 111})

        assert service.delete_book(book.id) == DELETED_MESSAGE == "Libro eliminado"
        assert service.get_book(book.id) is None

    def test_delete_missing_raises_not_found(self, session: Session):
        with pytest.raises(BookNotFoundError):
            BookService(session).delete_book(999999)
