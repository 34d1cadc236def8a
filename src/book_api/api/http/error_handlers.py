"""Translate book storage errors into JSON responses."""

from fastapi import FastAPI, Request
from loguru import logger
from starlette.responses import JSONResponse

from src.book_api.entities.service.book import BookErrorKind, BookStoreError

STATUS_BY_KIND: dict[BookErrorKind, int] = {
    BookErrorKind.NOT_FOUND: 404,
    BookErrorKind.MISSING_FIELD: 422,
    BookErrorKind.INVALID_FIELD: 422,
    BookErrorKind.DUPLICATE: 409,
    BookErrorKind.MALFORMED_BODY: 400,
}


async def book_store_error_handler(request: Request, exc: BookStoreError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    logger.bind(status_code=status_code, kind=exc.kind.value).info(
        "{} {} rejected: {}", request.method, request.url.path, exc.message
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookStoreError, book_store_error_handler)
