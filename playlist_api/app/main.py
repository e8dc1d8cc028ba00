"""
Main entrypoint for the Playlist API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn playlist_api.app.main:app --reload

The interactive documentation is served at ``settings.docs_url``
(``/api-docs`` by default) and the raw OpenAPI document at
``/openapi.json``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.song_service import SongNotFoundError, SongStore


async def song_not_found_handler(request: Request, exc: SongNotFoundError) -> PlainTextResponse:
    """Render a missing song as a plain‑text 404."""
    return PlainTextResponse(str(exc), status_code=404)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[SongStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; the module‑level settings by default.
    store : Optional[SongStore]
        Song store owned by the application.  When omitted a new store
        is built, seeded with the demo playlist unless
        ``settings.seed_songs`` is false.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the store and
    # routers can safely log messages.
    setup_logging(settings)
    logger = logging.getLogger(__name__)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        docs_url=settings.docs_url,
    )

    if store is None:
        store = SongStore.with_defaults() if settings.seed_songs else SongStore()
    app.state.song_store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SongNotFoundError, song_not_found_handler)
    app.include_router(api_router)

    logger.info("Playlist ready with %d songs", len(store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
