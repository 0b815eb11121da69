"""
Notes API — Health Check Route
================================

What:  Liveness endpoint for container health checks and load balancer probes.
How:   The only dependency is the in-memory store, so "healthy" means the
       process is serving requests; the note count is reported alongside.
"""

import time

from fastapi import APIRouter, Depends

from notes_api import __version__
from notes_api.routes.notes import get_store
from notes_api.schemas.note import HealthResponse
from notes_api.store import NoteStore

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: NoteStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
