"""
Notes API: In-Memory Note Store
=================================

What:  Sole owner of note lifecycle and identity assignment.
How:   An insertion-ordered dict of id → Note guarded by a threading.Lock,
       plus an integer counter that only ever increases.
Who:   Constructed once by create_app() and injected into NoteService.
When:  Every request that reads or mutates notes goes through one instance.

Identity:
    Ids are the string form of a counter starting at 1. Deleting a note
    never rewinds the counter, so ids are not reused. Only reset() does.

Timestamps:
    ISO 8601 UTC strings with fixed microsecond precision, which keeps them
    comparable as plain strings. created_at == updated_at on creation.
"""

import dataclasses
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from notes_api.models.note import Note, NotePatch

logger = logging.getLogger(__name__)

_FIRST_ID = 1


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


class NoteStore:
    """
    In-memory note collection.

    The store performs no input validation; callers hand it trimmed,
    non-empty values. Absence is reported as None (get/update) or False
    (delete), never as an exception.
    """

    def __init__(self, clock: Callable[[], str] = utc_now_iso):
        self._clock = clock
        self._lock = threading.Lock()
        self._notes: Dict[str, Note] = {}
        self._next_id = _FIRST_ID

    def list(self) -> List[Note]:
        """Snapshot of all notes in insertion order."""
        with self._lock:
            return list(self._notes.values())

    def get(self, note_id: str) -> Optional[Note]:
        with self._lock:
            return self._notes.get(note_id)

    def create(self, title: str, content: str) -> Note:
        with self._lock:
            note_id = str(self._next_id)
            self._next_id += 1
            now = self._clock()
            note = Note(
                id=note_id,
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
            )
            self._notes[note_id] = note
        logger.debug("Stored note %s", note_id)
        return note

    def update(self, note_id: str, patch: NotePatch) -> Optional[Note]:
        """
        Replace the fields present in `patch` and refresh updated_at.

        Returns None when no note has `note_id`. The replacement keeps the
        note's position in list() order.
        """
        with self._lock:
            existing = self._notes.get(note_id)
            if existing is None:
                return None

            changes = {
                name: value
                for name, value in (("title", patch.title), ("content", patch.content))
                if value is not None
            }
            # A clock that steps backwards must not put updated_at before created_at
            changes["updated_at"] = max(self._clock(), existing.updated_at)

            updated = dataclasses.replace(existing, **changes)
            self._notes[note_id] = updated
        return updated

    def delete(self, note_id: str) -> bool:
        with self._lock:
            return self._notes.pop(note_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._notes)

    def reset(self) -> None:
        """Drop every note and restart ids at 1. Test isolation only."""
        with self._lock:
            self._notes.clear()
            self._next_id = _FIRST_ID
