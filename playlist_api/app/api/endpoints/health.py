"""
Liveness endpoint.

``GET /`` answers with a fixed plain‑text message so that load
balancers and humans can check that the process is up.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

LIVENESS_MESSAGE = "Playlist API is running!"


@router.get("/", response_class=PlainTextResponse, summary="Liveness check")
async def root() -> str:
    return LIVENESS_MESSAGE
