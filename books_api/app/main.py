"""
Main entrypoint for the Books API.

This module assembles the FastAPI application: it sets up logging,
mounts the version 1 routes, registers the exception handlers that
render every failure as ``{"message": ..., "status": ...}`` and ties
the database lifecycle to application startup and shutdown.  The
``app`` instance created at import time can be served directly::

    uvicorn books_api.app.main:app --reload
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import BooksApiError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def error_response(status_code: int, message, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "status": status_code},
        headers=headers,
    )


async def books_api_error_handler(request: Request, exc: BooksApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Raised by FastAPI itself, e.g. when the body is not valid JSON.
    messages = [error.get("msg", "Invalid request") for error in exc.errors()]
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, messages)
    return error_response(400, messages)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Keeps headers such as ``Allow`` on a 405.
    return error_response(exc.status_code, exc.detail, getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Internal server error")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.
    database : Optional[Database]
        Database handle to serve from.  When omitted one is created
        from ``settings.database_url``.  Either way it is opened on
        startup and closed on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file, settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.db = database or Database(settings.database_url)

    app.include_router(v1_router, prefix=settings.api_prefix)

    app.add_exception_handler(BooksApiError, books_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.db.open()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.db.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
