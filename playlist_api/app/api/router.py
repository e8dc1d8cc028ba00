"""
Top‑level API router.

This router aggregates the domain routers under a unified entry
point.  Songs live under ``/songs``; the liveness check answers at
the application root.
"""

from fastapi import APIRouter

from .endpoints import health, songs

router = APIRouter()

router.include_router(health.router, tags=["Health"])
router.include_router(songs.router, prefix="/songs", tags=["Songs"])
