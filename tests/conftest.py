"""Test configuration and fixtures for the Books API."""

import pytest
from fastapi.testclient import TestClient

from books_api.app.core.config import Settings
from books_api.app.core.db import Database
from books_api.app.main import create_app
from tests.utils import TEST_BOOK, insert_book


@pytest.fixture
def database(tmp_path):
    """A database file in a temporary directory, closed after the test."""
    db = Database(str(tmp_path / "books.db"))
    yield db
    db.close()


@pytest.fixture
def open_database(database):
    database.open()
    return database


@pytest.fixture
def settings(database) -> Settings:
    return Settings(database_url=database.path)


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture(name="client")
def client_fixture(app, database):
    """Test client with one book already stored.

    Used as a context manager so that startup opens the database.
    """
    with TestClient(app) as client:
        insert_book(database, TEST_BOOK)
        yield client
