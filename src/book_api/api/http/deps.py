"""FastAPI dependency implementations."""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

from fastapi import Depends, Request
from sqlmodel import Session

from src.book_api.api.http.app_data import ApplicationDependencies
from src.book_api.core.services import BookService, DbSessionService
from src.book_api.entities.service.book import BookErrorKind, BookValidationError

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service created at startup."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_book_service(db: Session = Depends(get_db_session)) -> BookService:
    return BookService(db)


async def read_book_payload(request: Request) -> dict[str, Any]:
    """Read the request body as a flat field mapping.

    Url-encoded and multipart forms are read as strings and left to the schema
    to coerce. An empty body is an empty mapping. Anything else must be a
    JSON object.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BookValidationError(
            "Request body is not valid JSON", kind=BookErrorKind.MALFORMED_BODY
        ) from e
    if not isinstance(payload, dict):
        raise BookValidationError(
            "Request body must be a JSON object", kind=BookErrorKind.MALFORMED_BODY
        )
    return payload
