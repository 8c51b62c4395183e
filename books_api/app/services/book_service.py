"""
Service layer for books.

``BookService`` is the boundary between the route handlers and the
``books`` table.  It is constructed around an open ``Database`` and
exposes one coroutine per operation.  Absence is signalled with
``None`` (or ``False`` for deletes); a duplicate isbn raises
``ConflictError`` and any other SQLite failure raises
``InternalError`` after being logged.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional, Sequence

from fastapi import Depends

from books_api.app.core.db import Database, get_database
from books_api.app.core.errors import ConflictError, InternalError
from books_api.app.schemas.book import Book

logger = logging.getLogger(__name__)

COLUMNS = "isbn, amazon_url, author, language, pages, publisher, title, year"


class BookService:
    """CRUD operations on the ``books`` table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def list_books(self) -> List[Book]:
        """Return every stored book ordered by isbn."""
        rows = self._query(f"SELECT {COLUMNS} FROM books ORDER BY isbn")
        return [self._row_to_book(row) for row in rows]

    async def get_book(self, isbn: str) -> Optional[Book]:
        rows = self._query(f"SELECT {COLUMNS} FROM books WHERE isbn = ?", (isbn,))
        if not rows:
            return None
        return self._row_to_book(rows[0])

    async def create_book(self, book: Book) -> Book:
        """Insert a new book and return it.

        Raises ``ConflictError`` when a book with the same isbn exists.
        """
        try:
            rows = self._query(
                f"""
                INSERT INTO books ({COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                RETURNING {COLUMNS}
                """,
                (
                    book.isbn,
                    book.amazon_url,
                    book.author,
                    book.language,
                    book.pages,
                    book.publisher,
                    book.title,
                    book.year,
                ),
            )
        except sqlite3.IntegrityError as exc:
            logger.warning("Rejected duplicate book %s: %s", book.isbn, exc)
            raise ConflictError(book.isbn) from exc
        logger.info("Created book %s", book.isbn)
        return self._row_to_book(rows[0])

    async def replace_book(self, isbn: str, book: Book) -> Optional[Book]:
        """Overwrite every non-key field of the book stored under ``isbn``.

        The key itself never changes, whatever ``book.isbn`` says.
        Returns ``None`` when no book has that isbn.
        """
        rows = self._query(
            f"""
            UPDATE books
            SET amazon_url = ?, author = ?, language = ?, pages = ?,
                publisher = ?, title = ?, year = ?
            WHERE isbn = ?
            RETURNING {COLUMNS}
            """,
            (
                book.amazon_url,
                book.author,
                book.language,
                book.pages,
                book.publisher,
                book.title,
                book.year,
                isbn,
            ),
        )
        if not rows:
            return None
        logger.info("Updated book %s", isbn)
        return self._row_to_book(rows[0])

    async def delete_book(self, isbn: str) -> bool:
        """Delete a book by isbn.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        rows = self._query("DELETE FROM books WHERE isbn = ? RETURNING isbn", (isbn,))
        if rows:
            logger.info("Deleted book %s", isbn)
        return bool(rows)

    def _query(self, sql: str, params: Sequence = ()) -> List[sqlite3.Row]:
        try:
            return self.db.query(sql, params)
        except sqlite3.IntegrityError:
            raise
        except sqlite3.Error as exc:
            logger.exception("Book query failed")
            raise InternalError() from exc

    @staticmethod
    def _row_to_book(row: sqlite3.Row) -> Book:
        """Convert a database row to a Book schema instance."""
        return Book(**dict(row))


def get_book_service(db: Database = Depends(get_database)) -> BookService:
    """FastAPI dependency building a ``BookService`` on the shared database."""
    return BookService(db)
