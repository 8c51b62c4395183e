"""
Top‑level router for version 1 of the API.

``ROUTES`` is the complete dispatch table: every HTTP method and path
the service answers, the handler it calls and the status code of a
successful response.  ``build_router`` binds the table onto an
``APIRouter``; to add an endpoint, add a row.
"""

from typing import Callable, Tuple

from fastapi import APIRouter, status

from books_api.app.api.v1.endpoints import books
from books_api.app.schemas.book import ErrorResponse

Route = Tuple[str, str, Callable, int]

ROUTES: Tuple[Route, ...] = (
    ("GET", "/books", books.list_books, status.HTTP_200_OK),
    ("GET", "/books/{isbn}", books.get_book, status.HTTP_200_OK),
    ("POST", "/books", books.create_book, status.HTTP_201_CREATED),
    ("PUT", "/books/{isbn}", books.update_book, status.HTTP_200_OK),
    ("DELETE", "/books/{isbn}", books.delete_book, status.HTTP_200_OK),
)

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def build_router(routes: Tuple[Route, ...] = ROUTES) -> APIRouter:
    """Create an ``APIRouter`` serving ``routes``."""
    router = APIRouter()
    for method, path, handler, status_code in routes:
        router.add_api_route(
            path,
            handler,
            methods=[method],
            status_code=status_code,
            responses=dict(ERROR_RESPONSES),
            tags=["books"],
        )
    return router


router = build_router()
