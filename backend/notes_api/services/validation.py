"""
Notes API: Note Validation Strategies
=======================================

What:  Turns a decoded JSON body into a NoteCreate or NotePatch, or raises
       ValidationError describing the first rule the body breaks.
How:   NoteValidator is the interface; two strategies implement it:
       - ManualNoteValidator: hand-written isinstance/strip/len checks
       - SchemaNoteValidator: Pydantic request models, with Pydantic's
         error types translated into the manual strategy's messages
Who:   NoteService calls whichever strategy create_app() selected from
       settings.validation_strategy.

Rule set (identical in both strategies):
    - body must be a JSON object
    - create: title and content required
    - update: at least one of title/content present; JSON null counts as present
    - each present field: a string of valid Unicode text (no lone
      surrogates), non-empty after trimming, within its max length after
      trimming (title 200, content 5000)
    - fields are checked title first, then content
    - unknown keys are ignored
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from notes_api.exceptions import ValidationError
from notes_api.models.note import (
    BODY_NOT_OBJECT_MESSAGE,
    EMPTY_PATCH_MESSAGE,
    FIELD_MAX_LENGTHS,
    NoteCreate,
    NotePatch,
)
from notes_api.schemas.note import NoteCreateRequest, NoteUpdateRequest


# ── Messages ──────────────────────────────────────────────────────────────

def _required(field: str) -> str:
    return f"{field} is required"


def _not_a_string(field: str) -> str:
    return f"{field} must be a string"


def _not_unicode(field: str) -> str:
    return f"{field} must be valid Unicode text"


def _blank(field: str) -> str:
    return f"{field} must not be empty"


def _too_long(field: str, limit: int) -> str:
    return f"{field} must be at most {limit} characters"


class NoteValidator(ABC):
    """
    Contract for request-body validation.

    Implementations receive whatever request.json() produced (any JSON
    value) and either return trimmed values or raise ValidationError.
    They never touch the store.
    """

    name: str = ""

    @abstractmethod
    def validate_create(self, body: Any) -> NoteCreate:
        ...

    @abstractmethod
    def validate_update(self, body: Any) -> NotePatch:
        ...


class ManualNoteValidator(NoteValidator):
    name = "manual"

    def validate_create(self, body: Any) -> NoteCreate:
        payload = self._require_object(body)
        return NoteCreate(
            title=self._check_field(payload, "title"),
            content=self._check_field(payload, "content"),
        )

    def validate_update(self, body: Any) -> NotePatch:
        payload = self._require_object(body)
        present = [name for name in FIELD_MAX_LENGTHS if name in payload]
        if not present:
            raise ValidationError(EMPTY_PATCH_MESSAGE)
        return NotePatch(**{name: self._check_field(payload, name) for name in present})

    @staticmethod
    def _require_object(body: Any) -> Dict[str, Any]:
        if not isinstance(body, dict):
            raise ValidationError(BODY_NOT_OBJECT_MESSAGE)
        return body

    @staticmethod
    def _check_field(payload: Dict[str, Any], field: str) -> str:
        if field not in payload:
            raise ValidationError(_required(field), field=field)

        value = payload[field]
        if not isinstance(value, str):
            raise ValidationError(_not_a_string(field), field=field)
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValidationError(_not_unicode(field), field=field) from None

        value = value.strip()
        if not value:
            raise ValidationError(_blank(field), field=field)

        limit = FIELD_MAX_LENGTHS[field]
        if len(value) > limit:
            raise ValidationError(_too_long(field, limit), field=field)
        return value


class SchemaNoteValidator(NoteValidator):
    name = "schema"

    def validate_create(self, body: Any) -> NoteCreate:
        try:
            request = NoteCreateRequest.model_validate(body)
        except PydanticValidationError as exc:
            raise self._translate(exc) from exc
        return NoteCreate(title=request.title, content=request.content)

    def validate_update(self, body: Any) -> NotePatch:
        try:
            request = NoteUpdateRequest.model_validate(body)
        except PydanticValidationError as exc:
            raise self._translate(exc) from exc
        return NotePatch(title=request.title, content=request.content)

    @staticmethod
    def _translate(exc: PydanticValidationError) -> ValidationError:
        """Map the first Pydantic error onto the shared message set."""
        error = exc.errors()[0]
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else None
        kind = error["type"]

        if field is None:
            # Model-level PydanticCustomError; msg is already ours
            return ValidationError(error["msg"])
        if kind == "missing":
            message = _required(field)
        elif kind == "string_type":
            message = _not_a_string(field)
        elif kind == "string_unicode":
            message = _not_unicode(field)
        elif kind == "string_too_short":
            message = _blank(field)
        elif kind == "string_too_long":
            message = _too_long(field, error["ctx"]["max_length"])
        else:
            message = f"{field}: {error['msg']}"
        return ValidationError(message, field=field)


_STRATEGIES = {
    ManualNoteValidator.name: ManualNoteValidator,
    SchemaNoteValidator.name: SchemaNoteValidator,
}


def get_validator(name: str) -> NoteValidator:
    """Instantiate the strategy registered under `name` ("manual" or "schema")."""
    try:
        return _STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown validation strategy '{name}'. Must be one of: {sorted(_STRATEGIES)}"
        ) from None
