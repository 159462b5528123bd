"""
Notes API: Notes Route Handlers
=================================

What:  CRUD endpoints under /notes.
How:   Reads path params and the raw JSON body, delegates to NoteService,
       wraps results in the success envelopes. Errors raised by the service
       become error envelopes in the global exception handlers (main.py).

Endpoints:
    GET    /notes          → 200 {success, data: [...], count}
    GET    /notes/{id}     → 200 {success, data} | 404
    POST   /notes          → 201 {success, data} | 400
    PUT    /notes/{id}     → 200 {success, data} | 400 | 404
    DELETE /notes/{id}     → 200 {success, message} | 404

The bodies are read with read_json_body rather than declared as Pydantic
parameters, so malformed JSON and rule violations share one 400 path and
the configured validation strategy decides what is valid.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from notes_api.deps import get_note_service, read_json_body
from notes_api.schemas.note import (
    DeleteEnvelope,
    ErrorEnvelope,
    NoteCreateRequest,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
    NoteUpdateRequest,
)
from notes_api.services.note_service import NoteService

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/notes", tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorEnvelope}}
_INVALID = {400: {"description": "Malformed JSON or invalid fields", "model": ErrorEnvelope}}


def _json_body(model) -> dict:
    """OpenAPI requestBody entry for a body the route reads by hand."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@router.get(
    "",
    response_model=NoteListEnvelope,
    summary="List all notes",
    description="Returns every note in creation order, with the total count.",
)
async def list_notes(service: NoteService = Depends(get_note_service)) -> NoteListEnvelope:
    return NoteListEnvelope.from_notes(service.list_notes())


@router.get(
    "/{note_id}",
    response_model=NoteEnvelope,
    responses=_NOT_FOUND,
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    return NoteEnvelope(data=NoteResponse.from_note(service.get_note(note_id)))


@router.post(
    "",
    response_model=NoteEnvelope,
    status_code=201,
    responses=_INVALID,
    summary="Create a note",
    description="Title and content are trimmed; both must be non-empty afterwards.",
    openapi_extra=_json_body(NoteCreateRequest),
)
async def create_note(
    body: Any = Depends(read_json_body),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    return NoteEnvelope(data=NoteResponse.from_note(service.create_note(body)))


@router.put(
    "/{note_id}",
    response_model=NoteEnvelope,
    responses={**_INVALID, **_NOT_FOUND},
    summary="Update a note",
    description=(
        "Replaces only the fields present in the body and refreshes updatedAt. "
        "The body is validated before the note is looked up."
    ),
    openapi_extra=_json_body(NoteUpdateRequest),
)
async def update_note(
    note_id: str,
    body: Any = Depends(read_json_body),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    return NoteEnvelope(data=NoteResponse.from_note(service.update_note(note_id, body)))


@router.delete(
    "/{note_id}",
    response_model=DeleteEnvelope,
    responses=_NOT_FOUND,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> DeleteEnvelope:
    service.delete_note(note_id)
    return DeleteEnvelope()
