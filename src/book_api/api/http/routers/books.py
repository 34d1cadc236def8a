"""Book API router with CRUD operations."""

from typing import Any

from fastapi import APIRouter, Depends

from src.book_api.api.http.deps import get_book_service, read_book_payload
from src.book_api.core.services import BookService
from src.book_api.entities.service.book import Book

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[Book])
def list_books(
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    """List all books."""
    return service.list_books()


@router.get("/{book_id}", response_model=Book | None)
def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Book | None:
    """Get a book by ID; answers ``null`` when it does not exist."""
    return service.get_book(book_id)


@router.post("", response_model=Book)
def create_book(
    payload: dict[str, Any] = Depends(read_book_payload),
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a new book."""
    return service.create_book(payload)


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: int,
    payload: dict[str, Any] = Depends(read_book_payload),
    service: BookService = Depends(get_book_service),
) -> Book:
    """Update some or all fields of a book."""
    return service.update_book(book_id, payload)


@router.delete("/{book_id}")
def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> dict[str, str]:
    """Delete a book."""
    return {"message": service.delete_book(book_id)}
