"""
Notes API: Note Domain Model
==============================

What:  The stored Note record plus the two input shapes the store accepts.
How:   Frozen dataclasses; updates produce a new Note via dataclasses.replace,
       so a Note handed to a caller never changes afterwards.
Who:   Built by NoteStore, produced by the validators, serialized by the
       Pydantic response schemas.

Field rules (enforced by the validators, not here):
    title:    non-empty after trimming, at most 200 characters
    content:  non-empty after trimming, at most 5000 characters
"""

from dataclasses import dataclass
from typing import Optional


TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 5000

# Checked in this order; the first violation is the one reported
FIELD_MAX_LENGTHS = {
    "title": TITLE_MAX_LENGTH,
    "content": CONTENT_MAX_LENGTH,
}

BODY_NOT_OBJECT_MESSAGE = "Request body must be a JSON object"
EMPTY_PATCH_MESSAGE = "At least one field (title or content) must be provided"


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    content: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class NoteCreate:
    """Validated, trimmed input for NoteStore.create()."""

    title: str
    content: str


@dataclass(frozen=True)
class NotePatch:
    """
    Partial update for NoteStore.update().

    Each field is either a replacement value or None for "leave unchanged".
    Validators never produce an empty string, so None is the only way a
    field can be absent.
    """

    title: Optional[str] = None
    content: Optional[str] = None
