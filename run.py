"""Entry point for the Playlist API.

This script serves the FastAPI application with Uvicorn.  Host and
port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``3000``); see
``playlist_api/app/core/config.py`` for the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from playlist_api.app.core.config import settings
from playlist_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.info("Playlist API listening on http://localhost:%d", settings.port)
    logging.info("Swagger UI: http://localhost:%d%s", settings.port, settings.docs_url)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
