"""
Error types raised by the service and store layers.

Each error carries the HTTP status it maps to.  The exception handlers
registered in ``main.py`` turn them into the JSON envelope
``{"message": ..., "status": ...}`` so route handlers only ever need
to raise.
"""

from typing import List, Sequence, Union

from fastapi import status


class BooksApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Union[str, List[str]]) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BooksApiError):
    """The request body does not match the book schema."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, violations: Sequence[str]) -> None:
        super().__init__(list(violations))
        self.violations = list(violations)


class NotFoundError(BooksApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, isbn: str) -> None:
        super().__init__(f"There is no book with an isbn '{isbn}'")
        self.isbn = isbn


class ConflictError(BooksApiError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, isbn: str) -> None:
        super().__init__(f"A book with isbn '{isbn}' already exists")
        self.isbn = isbn


class InternalError(BooksApiError):
    """Unexpected failure in the store; the detail is logged, never returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
