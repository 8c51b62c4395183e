"""
Logging configuration for the application.

Handlers are attached to the root logger only once per process, so
repeated calls to ``create_app`` (as happens in tests) do not duplicate
log lines.  The ``books_api`` logger is adjusted on every call: debug
mode opens it up to DEBUG records while third-party loggers stay at
the configured level.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "books_api"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger and the ``books_api`` logger.

    ``level`` is a level name, case insensitive; unknown names fall
    back to ``INFO``.  ``logfile``, when given, receives the same
    records as the console.
    """
    # NOTSET defers to the root logger's level.
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if debug else logging.NOTSET)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
