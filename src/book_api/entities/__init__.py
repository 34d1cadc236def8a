"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model and input schemas
- table.py: Database persistence model
- repository.py: Data access layer
- errors.py: Structured storage errors
"""

from .service.book import Book, BookRepository, BookTable

__all__ = [
    "Book",
    "BookTable",
    "BookRepository",
]
