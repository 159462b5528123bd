"""
Notes API: Health Check Route
===============================

What:  Health check endpoint for monitoring and load balancer probes.
How:   The only dependency is the in-process store, so the service is
       healthy whenever it can answer; the response adds the note count
       and uptime for dashboards.
Who:   Called by container health checks and monitoring systems.

Requests to /health are not written to the access log (see
middleware/logging.py).
"""

import logging
import time

from fastapi import APIRouter, Depends

from notes_api import __version__
from notes_api.deps import get_note_service
from notes_api.schemas.note import HealthResponse
from notes_api.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(service: NoteService = Depends(get_note_service)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        total_notes=service.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
