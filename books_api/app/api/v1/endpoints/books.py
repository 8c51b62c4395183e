"""
Book endpoints for API v1.

One handler per operation on the ``books`` collection.  Write handlers
run the request body through ``validate_book`` before touching the
store, so an invalid body never reaches the database.  Failures are
raised as ``BooksApiError`` subclasses and rendered by the exception
handlers registered on the application.

The handlers are bound to paths by the static table in
``api/v1/router.py``; nothing here registers itself.
"""

from typing import Any

from fastapi import Body, Depends

from books_api.app.core.errors import NotFoundError, ValidationError
from books_api.app.schemas.book import Book, BookListResponse, BookResponse, MessageResponse
from books_api.app.schemas.validation import Invalid, validate_book
from books_api.app.services.book_service import BookService, get_book_service


def _require_valid(payload: Any) -> Book:
    result = validate_book(payload)
    if isinstance(result, Invalid):
        raise ValidationError(result.violations)
    return result.book


async def list_books(service: BookService = Depends(get_book_service)) -> BookListResponse:
    """Return every stored book."""
    books = await service.list_books()
    return BookListResponse(books=books)


async def get_book(isbn: str, service: BookService = Depends(get_book_service)) -> BookResponse:
    """Retrieve a single book by isbn.

    Returns HTTP 404 if the book is not found.
    """
    book = await service.get_book(isbn)
    if book is None:
        raise NotFoundError(isbn)
    return BookResponse(book=book)


async def create_book(
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Create a book from a JSON body.

    Responds 201 with the submitted book, 400 with the list of
    violations when the body does not match the schema, and 409 when
    the isbn is already taken.
    """
    book = _require_valid(payload)
    await service.create_book(book)
    return BookResponse(book=book)


async def update_book(
    isbn: str,
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Replace the book stored under ``isbn`` with the JSON body.

    The response echoes the submitted book.  The stored key is always
    the path isbn, even when the body carries a different one.
    """
    book = _require_valid(payload)
    replaced = await service.replace_book(isbn, book)
    if replaced is None:
        raise NotFoundError(isbn)
    return BookResponse(book=book)


async def delete_book(isbn: str, service: BookService = Depends(get_book_service)) -> MessageResponse:
    deleted = await service.delete_book(isbn)
    if not deleted:
        raise NotFoundError(isbn)
    return MessageResponse(message="Book deleted")
