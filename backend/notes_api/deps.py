"""
Notes API: Route Dependencies
===============================

What:  FastAPI dependencies shared by the route modules.
How:   The NoteService lives on app.state (set by create_app()); routes ask
       for it with Depends(get_note_service) instead of importing a global.
"""

from typing import Any

from fastapi import Request

from notes_api.exceptions import ValidationError
from notes_api.services.note_service import NoteService


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service


async def read_json_body(request: Request) -> Any:
    """
    Decode the request body as JSON.

    Any decoding failure (empty body, syntax error, invalid UTF-8) is a
    client error and surfaces as a 400, never as a 500.
    """
    try:
        return await request.json()
    except ValueError as exc:
        raise ValidationError(
            "Request body must be valid JSON",
            context={"decode_error": str(exc)},
        ) from exc
