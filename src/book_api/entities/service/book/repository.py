"""Book repository: data access for the ``books`` table."""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, select

from .entity import Book, BookCreate, BookUpdate
from .errors import BookConflictError, BookNotFoundError, BookValidationError
from .table import BookTable


def _validate(schema: type[BookCreate] | type[BookUpdate], payload: Mapping[str, Any]):
    try:
        return schema.model_validate(dict(payload))
    except ValidationError as e:
        raise BookValidationError.from_pydantic(e) from e


class BookRepository:
    """Data-access layer for books.

    Every write commits immediately; a failed write rolls the session back so
    the same session can keep serving the request.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Book]:
        rows = self._session.exec(select(BookTable)).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def get(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def create(self, payload: Mapping[str, Any]) -> Book:
        data = _validate(BookCreate, payload)
        row = BookTable(**data.model_dump())
        self._session.add(row)
        self._commit(isbn=data.isbn)
        self._session.refresh(row)
        logger.info("Created book {} (isbn={})", row.id, row.isbn)
        return Book.model_validate(row, from_attributes=True)

    def update(self, book_id: int, payload: Mapping[str, Any]) -> Book:
        """Merge ``payload`` into the stored book and persist it.

        Raises:
            BookNotFoundError: no book has ``book_id``, including when it was
                deleted between the read and the write.
            BookValidationError: the merged record breaks the schema.
            BookConflictError: the new ``isbn`` belongs to another book.
        """
        row = self._session.get(BookTable, book_id)
        if row is None:
            raise BookNotFoundError(book_id)

        changes = _validate(BookUpdate, payload).changes()
        current = row.model_dump(include={"autor", "isbn", "editorial", "paginas"})
        merged = _validate(BookCreate, {**current, **changes})

        for field in changes:
            setattr(row, field, getattr(merged, field))
        row.updated_at = datetime.now(UTC)
        self._session.add(row)
        try:
            self._commit(isbn=merged.isbn)
        except StaleDataError as e:
            self._session.rollback()
            logger.warning("Book {} vanished before its update was written", book_id)
            raise BookNotFoundError(book_id) from e

        logger.info("Updated book {} fields={}", book_id, sorted(changes))
        return Book.model_validate(row, from_attributes=True)

    def delete(self, book_id: int) -> None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            raise BookNotFoundError(book_id)
        self._session.delete(row)
        try:
            self._session.commit()
        except StaleDataError as e:
            self._session.rollback()
            raise BookNotFoundError(book_id) from e
        logger.info("Deleted book {}", book_id)

    def _commit(self, isbn: int | None) -> None:
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            logger.warning("Rejected duplicate isbn {}: {}", isbn, e.orig)
            raise BookConflictError(isbn) from e
