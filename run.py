"""Entry point for the Resource Store API.

Starts the FastAPI application under Uvicorn.  Host, port and log
level are taken from ``Settings`` (``HOST``, ``PORT``, ``LOG_LEVEL``
environment variables); defaults serve on ``127.0.0.1:8080``.  The
store is seeded with two example resources before the listener starts
unless ``SEED_RESOURCES`` is disabled.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from resource_store_api.app.core.config import settings
from resource_store_api.app.main import app


async def main() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting server on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
