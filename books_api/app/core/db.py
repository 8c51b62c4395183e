"""
SQLite database integration and simple migration system.

``Database`` owns the single connection used by the process.  It is
opened once when the application starts (``open`` also applies any
pending migrations) and closed when it shuts down.  The handle lives on
``app.state`` and is handed to the store layer through the
``get_database`` dependency, so there is no module level connection.

``query`` is the only way statements reach SQLite: it takes a
parameterized SQL string, commits, and returns every row produced.
Statements are serialized by a lock since the connection is shared by
all requests.
"""

import logging
import os
import sqlite3
import threading
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from fastapi import Request

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS books (
            isbn TEXT PRIMARY KEY,
            amazon_url TEXT NOT NULL,
            author TEXT NOT NULL,
            language TEXT NOT NULL,
            pages INTEGER NOT NULL,
            publisher TEXT NOT NULL,
            title TEXT NOT NULL,
            year INTEGER NOT NULL
        );
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are used as is.  Relative paths are
    resolved against the project root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Process-wide handle on the books database."""

    def __init__(self, database_url: str) -> None:
        self.path = get_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Connect and bring the schema up to date.  Opening twice is a no-op."""
        if self._conn is not None:
            return
        # The connection is shared between the event loop and the
        # threadpool; access is serialized by ``self._lock``.
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        self._conn = conn
        logger.info("Opened database %s", self.path)
        self.migrate()

    def close(self) -> None:
        if self._conn is None:
            return
        with self._lock:
            self._conn.close()
            self._conn = None
        logger.info("Closed database %s", self.path)

    def query(self, sql: str, params: Sequence = ()) -> List[sqlite3.Row]:
        """Execute one parameterized statement and return its rows.

        The transaction is committed on success and rolled back on any
        SQLite error, which is re-raised unchanged.
        """
        conn = self._connection()
        with self._lock:
            try:
                rows = conn.execute(sql, tuple(params)).fetchall()
                conn.commit()
            except sqlite3.Error:
                conn.rollback()
                raise
        return rows

    def migrate(self) -> int:
        """Apply pending migrations and return the resulting schema version.

        Applied versions are recorded in the ``migrations`` table.  To
        change the schema, append a new entry to ``MIGRATIONS`` with an
        incremented version number.
        """
        conn = self._connection()
        with self._lock:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    conn.executescript(sql)
                    conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    logger.info("Applied migration %s", version)
                    current_version = version
            conn.commit()
        return current_version

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database is not open")
        return self._conn


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the database opened at startup."""
    return request.app.state.db
