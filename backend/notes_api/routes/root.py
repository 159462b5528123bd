"""
Notes API: Root Route
=======================

What:  GET / returns service metadata: a greeting, the version, the number
       of notes held, and where the generated API docs live.
"""

from fastapi import APIRouter, Depends, Request

from notes_api import __version__
from notes_api.deps import get_note_service
from notes_api.schemas.note import RootResponse
from notes_api.services.note_service import NoteService

router = APIRouter(tags=["Meta"])


@router.get("/", response_model=RootResponse, summary="Service metadata")
async def root(
    request: Request,
    service: NoteService = Depends(get_note_service),
) -> RootResponse:
    app = request.app
    return RootResponse(
        message=f"{app.title} is running!",
        version=__version__,
        total_notes=service.count(),
        docs=app.docs_url,
        redoc=app.redoc_url,
        openapi=app.openapi_url,
    )
