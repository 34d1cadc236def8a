"""Core services exports."""

from .book.book_service import BookService, DELETED_MESSAGE
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    "BookService",
    "DELETED_MESSAGE",
    "DbManageService",
    "DbSessionService",
]
