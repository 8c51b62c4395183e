"""Shared test data and database helpers."""

from typing import Any, Dict

from books_api.app.core.db import Database

TEST_BOOK: Dict[str, Any] = {
    "isbn": "987654321",
    "amazon_url": "www.amazon.com",
    "author": "Test Author",
    "language": "test",
    "pages": 456,
    "publisher": "Test Publisher",
    "title": "Title",
    "year": 1900,
}

NEW_BOOK: Dict[str, Any] = {
    "isbn": "123456789",
    "amazon_url": "http://www.amazon.com/",
    "author": "Rey The Dogge",
    "language": "english",
    "pages": 123,
    "publisher": "Test Publisher",
    "title": "Test Title",
    "year": 2020,
}


def insert_book(db: Database, book: Dict[str, Any]) -> None:
    db.query(
        """
        INSERT INTO books (isbn, amazon_url, author, language, pages, publisher, title, year)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            book["isbn"],
            book["amazon_url"],
            book["author"],
            book["language"],
            book["pages"],
            book["publisher"],
            book["title"],
            book["year"],
        ),
    )


def count_books(db: Database) -> int:
    return db.query("SELECT COUNT(*) AS total FROM books")[0]["total"]
