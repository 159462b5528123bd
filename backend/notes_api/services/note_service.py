"""
Notes API: Note Service (Request Handling Logic)
==================================================

What:  Sits between the routes and the NoteStore: validates bodies, calls
       the store, and turns "no such note" outcomes into NotFoundError.
How:   Composes a NoteStore and a NoteValidator passed in by create_app().
Who:   Called by the /notes route handlers via the get_note_service dependency.

Ordering rule:
    update_note() validates the body before looking the note up, so a bad
    patch aimed at a missing id is reported as a 400, not a 404.
"""

import logging
from typing import Any, List

from notes_api.exceptions import NotFoundError
from notes_api.models.note import Note
from notes_api.services.validation import NoteValidator
from notes_api.storage.note_store import NoteStore

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Raises:
        ValidationError: from the validator, on bad create/update bodies
        NotFoundError:   when get/update/delete target an unknown id
    """

    def __init__(self, store: NoteStore, validator: NoteValidator):
        self.store = store
        self.validator = validator

    def list_notes(self) -> List[Note]:
        return self.store.list()

    def get_note(self, note_id: str) -> Note:
        note = self.store.get(note_id)
        if note is None:
            raise NotFoundError(resource_id=note_id)
        return note

    def create_note(self, body: Any) -> Note:
        data = self.validator.validate_create(body)
        note = self.store.create(title=data.title, content=data.content)
        logger.info("Note %s created", note.id)
        return note

    def update_note(self, note_id: str, body: Any) -> Note:
        patch = self.validator.validate_update(body)
        note = self.store.update(note_id, patch)
        if note is None:
            raise NotFoundError(resource_id=note_id)
        logger.info("Note %s updated", note_id)
        return note

    def delete_note(self, note_id: str) -> None:
        if not self.store.delete(note_id):
            raise NotFoundError(resource_id=note_id)
        logger.info("Note %s deleted", note_id)

    def count(self) -> int:
        return self.store.count()
