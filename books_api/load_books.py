#!/usr/bin/env python3
"""
Load books from a JSON file into the Books API SQLite database.

The file holds either a list of book objects or an object with a
``books`` list (the shape returned by ``GET /books``).  Every entry is
validated against the book schema; valid entries are inserted and the
rest are reported on stderr together with their violations.  Existing
isbns are reported as duplicates and left untouched.

Usage:
    python -m books_api.load_books --db ./books.db books.json

Exit codes: 0 when every entry was loaded, 1 when the input could not
be read, 2 when at least one entry was rejected.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional

from books_api.app.core.config import settings
from books_api.app.core.db import Database
from books_api.app.core.errors import ConflictError
from books_api.app.core.logging_config import setup_logging
from books_api.app.schemas.validation import Invalid, validate_book
from books_api.app.services.book_service import BookService

logger = logging.getLogger(__name__)


def read_entries(path: str) -> List[Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and "books" in data:
        data = data["books"]
    if not isinstance(data, list):
        raise ValueError("expected a list of books or an object with a 'books' list")
    return data


async def load(service: BookService, entries: List[Any]) -> int:
    """Insert ``entries`` and return how many were rejected."""
    rejected = 0
    for index, entry in enumerate(entries):
        result = validate_book(entry)
        if isinstance(result, Invalid):
            rejected += 1
            print(f"[!] Entry {index}: {'; '.join(result.violations)}", file=sys.stderr)
            continue
        try:
            await service.create_book(result.book)
        except ConflictError as exc:
            rejected += 1
            print(f"[!] Entry {index}: {exc.message}", file=sys.stderr)
            continue
        print(f"[+] Loaded {result.book.isbn}")
    return rejected


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Load books from a JSON file (SQLite).")
    ap.add_argument("file", help="JSON file with a list of books")
    ap.add_argument("--db", default=settings.database_url, help="Path to SQLite DB file (default: DATABASE_URL)")
    args = ap.parse_args(argv)

    setup_logging(settings.log_level, settings.log_file, settings.debug)

    try:
        entries = read_entries(args.file)
    except (OSError, ValueError) as exc:
        print(f"[!] Cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    db = Database(args.db)
    db.open()
    try:
        rejected = asyncio.run(load(BookService(db), entries))
    finally:
        db.close()

    logger.info("Loaded %s of %s books", len(entries) - rejected, len(entries))
    return 2 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
