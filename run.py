"""Entry point for serving the Books API.

Host, port, database location and log level are read from environment
variables (``HOST``, ``PORT``, ``DATABASE_URL``, ``LOG_LEVEL``); they
can also be placed in the environment of a process manager such as
Docker or systemd.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from books_api.app.core.config import settings
from books_api.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
