"""Tests for application assembly: route table, settings and lifecycle."""

import logging

from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from books_api.app.api.v1.endpoints import books
from books_api.app.api.v1.router import ROUTES, build_router
from books_api.app.core.config import Settings
from books_api.app.main import create_app


def test_route_table_is_bound_to_router():
    router = build_router()
    bound = {
        (method, route.path): (route.endpoint, route.status_code)
        for route in router.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    }
    assert bound == {
        ("GET", "/books"): (books.list_books, 200),
        ("GET", "/books/{isbn}"): (books.get_book, 200),
        ("POST", "/books"): (books.create_book, 201),
        ("PUT", "/books/{isbn}"): (books.update_book, 200),
        ("DELETE", "/books/{isbn}"): (books.delete_book, 200),
    }
    assert len(ROUTES) == 5


def test_api_prefix(database):
    app = create_app(Settings(database_url=database.path, api_prefix="/api"), database=database)
    with TestClient(app) as client:
        assert client.get("/api/books").json() == {"books": []}
        assert client.get("/books").status_code == 404


def test_database_lifecycle_follows_app(database):
    app = create_app(Settings(database_url=database.path), database=database)
    assert not database.is_open
    with TestClient(app):
        assert database.is_open
        assert app.state.db is database
    assert not database.is_open


def test_database_created_from_settings(tmp_path):
    path = str(tmp_path / "from_settings.db")
    app = create_app(Settings(database_url=path))
    with TestClient(app) as client:
        assert app.state.db.path == path
        assert client.get("/books").status_code == 200


def test_settings_defaults():
    settings = Settings()
    assert settings.project_name
    assert isinstance(settings.port, int)
    assert isinstance(settings.debug, bool)


def test_openapi_documents_books_routes(app):
    with TestClient(app) as client:
        schema = client.get("/openapi.json").json()
    assert set(schema["paths"]) == {"/books", "/books/{isbn}"}
    assert "201" in schema["paths"]["/books"]["post"]["responses"]


def test_debug_opens_package_logger(database):
    package_logger = logging.getLogger("books_api")
    try:
        create_app(Settings(database_url=database.path, debug=True), database=database)
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger("books_api.app.services.book_service").isEnabledFor(logging.DEBUG)

        create_app(Settings(database_url=database.path), database=database)
        assert package_logger.level == logging.NOTSET
    finally:
        package_logger.setLevel(logging.NOTSET)
