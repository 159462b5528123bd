"""
Notes API: Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract.
How:   Response models shape the JSON envelopes and generate OpenAPI docs.
       Request models back the schema-driven validation strategy and
       document the request bodies in OpenAPI.
Who:   Used by route handlers as response models and by SchemaNoteValidator.

Wire format:
    Field names are camelCase on the wire (createdAt, totalNotes) and
    snake_case in Python. Every model accepts either form on input.

Envelopes:
    Success:  {"success": true, "data": ..., "count": n}   (count: list only)
    Delete:   {"success": true, "message": "Note deleted successfully"}
    Error:    {"success": false, "error": "..."}
"""

from typing import Any, Annotated, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, Field, StringConstraints, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from notes_api.models.note import (
    BODY_NOT_OBJECT_MESSAGE,
    CONTENT_MAX_LENGTH,
    EMPTY_PATCH_MESSAGE,
    FIELD_MAX_LENGTHS,
    TITLE_MAX_LENGTH,
    Note,
)


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends (schema validation strategy)
# ══════════════════════════════════════════════════════════════════════════


def _strip_text(value: Any) -> Any:
    # Non-strings pass through so the strict str check reports them
    return value.strip() if isinstance(value, str) else value


NoteTitle = Annotated[
    str,
    StringConstraints(strict=True, min_length=1, max_length=TITLE_MAX_LENGTH),
    BeforeValidator(_strip_text),
]

NoteContent = Annotated[
    str,
    StringConstraints(strict=True, min_length=1, max_length=CONTENT_MAX_LENGTH),
    BeforeValidator(_strip_text),
]


def _require_object(data: Any) -> Any:
    if not isinstance(data, dict):
        raise PydanticCustomError("body_not_object", BODY_NOT_OBJECT_MESSAGE)
    return data


class NoteCreateRequest(BaseModel):
    """Body of POST /notes. Both fields required, trimmed before length checks."""

    title: NoteTitle = Field(description=f"Note title (1-{TITLE_MAX_LENGTH} characters)")
    content: NoteContent = Field(description=f"Note body (1-{CONTENT_MAX_LENGTH} characters)")

    @model_validator(mode="before")
    @classmethod
    def check_object(cls, data: Any) -> Any:
        return _require_object(data)


class NoteUpdateRequest(BaseModel):
    """
    Body of PUT /notes/{id}. At least one field must be present.

    Defaults are not validated, so an absent field stays None while an
    explicit JSON null still has to pass the strict string check.
    """

    title: NoteTitle = Field(default=None, description="Replacement title")
    content: NoteContent = Field(default=None, description="Replacement body")

    @model_validator(mode="before")
    @classmethod
    def check_patch(cls, data: Any) -> Any:
        data = _require_object(data)
        if not any(name in data for name in FIELD_MAX_LENGTHS):
            raise PydanticCustomError("note_patch_empty", EMPTY_PATCH_MESSAGE)
        return data


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(CamelModel):
    id: str = Field(description="Store-assigned identifier")
    title: str
    content: str
    created_at: str = Field(description="Creation time (UTC ISO 8601)")
    updated_at: str = Field(description="Last update time (UTC ISO 8601)")

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class NoteEnvelope(CamelModel):
    """Returned by GET/POST/PUT for a single note."""

    success: Literal[True] = True
    data: NoteResponse


class NoteListEnvelope(CamelModel):
    """Returned by GET /notes; `count` mirrors len(data)."""

    success: Literal[True] = True
    data: List[NoteResponse]
    count: int

    @classmethod
    def from_notes(cls, notes: List[Note]) -> "NoteListEnvelope":
        return cls(data=[NoteResponse.from_note(n) for n in notes], count=len(notes))


class DeleteEnvelope(CamelModel):
    success: Literal[True] = True
    message: str = "Note deleted successfully"


class ErrorEnvelope(CamelModel):
    """
    Error format for every failure: validation, not found, unknown route,
    and unexpected server errors.
    """

    success: Literal[False] = False
    error: str = Field(description="Human-readable error description")


class RootResponse(CamelModel):
    """Service metadata returned by GET /."""

    message: str
    version: str
    total_notes: int
    docs: Optional[str] = Field(default=None, description="Swagger UI path")
    redoc: Optional[str] = Field(default=None, description="ReDoc path")
    openapi: Optional[str] = Field(default=None, description="OpenAPI schema path")


class HealthResponse(CamelModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    total_notes: int = Field(description="Notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")
