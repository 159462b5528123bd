"""
Notes API: Validation Strategy Tests
======================================

What:  Both NoteValidator strategies against one table of bodies.
Why:   The manual and schema strategies must accept, reject and describe
       exactly the same inputs.

Test Strategy:
    ✅ Valid bodies are trimmed
    ✅ Missing, non-string, lone-surrogate, blank and over-long fields
       rejected with the same message
    ✅ Update requires at least one field; null counts as present
    ✅ Non-object bodies rejected
    ✅ get_validator() registry
"""

import pytest

from notes_api.exceptions import ValidationError
from notes_api.models.note import NoteCreate, NotePatch
from notes_api.services.validation import (
    ManualNoteValidator,
    SchemaNoteValidator,
    get_validator,
)


@pytest.fixture(params=[ManualNoteValidator, SchemaNoteValidator], ids=["manual", "schema"])
def validator(request):
    return request.param()


# ── Create ────────────────────────────────────────────────────────────────

class TestValidateCreate:

    def test_trims_values(self, validator):
        result = validator.validate_create({"title": "  Groceries ", "content": "\tMilk, eggs\n"})

        assert result == NoteCreate(title="Groceries", content="Milk, eggs")

    def test_ignores_unknown_keys(self, validator):
        result = validator.validate_create({"title": "t", "content": "c", "pinned": True})

        assert result == NoteCreate(title="t", content="c")

    def test_accepts_max_lengths(self, validator):
        result = validator.validate_create({"title": "t" * 200, "content": "c" * 5000})

        assert len(result.title) == 200
        assert len(result.content) == 5000

    def test_max_length_applies_after_trim(self, validator):
        result = validator.validate_create({"title": " " + "t" * 200 + " ", "content": "c"})

        assert len(result.title) == 200

    @pytest.mark.parametrize(
        "body, message",
        [
            ({"content": "c"}, "title is required"),
            ({"title": "t"}, "content is required"),
            ({}, "title is required"),
            ({"title": 5, "content": "c"}, "title must be a string"),
            ({"title": None, "content": "c"}, "title must be a string"),
            ({"title": "t", "content": ["c"]}, "content must be a string"),
            ({"title": "\ud800", "content": "c"}, "title must be valid Unicode text"),
            ({"title": "t", "content": "milk \udfff"}, "content must be valid Unicode text"),
            ({"title": "", "content": "c"}, "title must not be empty"),
            ({"title": "   ", "content": "c"}, "title must not be empty"),
            ({"title": "t", "content": " \n\t "}, "content must not be empty"),
            ({"title": "t" * 201, "content": "c"}, "title must be at most 200 characters"),
            ({"title": "t", "content": "c" * 5001}, "content must be at most 5000 characters"),
            ({"title": "", "content": ""}, "title must not be empty"),
        ],
    )
    def test_rejects_invalid_fields(self, validator, body, message):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_create(body)

        assert exc_info.value.message == message

    @pytest.mark.parametrize("body", [None, [], ["title"], "note", 42, True])
    def test_rejects_non_object_body(self, validator, body):
        with pytest.raises(ValidationError, match="must be a JSON object"):
            validator.validate_create(body)


# ── Update ────────────────────────────────────────────────────────────────

class TestValidateUpdate:

    def test_title_only(self, validator):
        assert validator.validate_update({"title": " New "}) == NotePatch(title="New")

    def test_content_only(self, validator):
        assert validator.validate_update({"content": "Milk, eggs, bread"}) == NotePatch(
            content="Milk, eggs, bread"
        )

    def test_both_fields(self, validator):
        assert validator.validate_update({"title": "a", "content": "b"}) == NotePatch(
            title="a", content="b"
        )

    @pytest.mark.parametrize("body", [{}, {"pinned": True}])
    def test_requires_a_field(self, validator, body):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_update(body)

        assert exc_info.value.message == "At least one field (title or content) must be provided"

    @pytest.mark.parametrize(
        "body, message",
        [
            ({"title": None}, "title must be a string"),
            ({"content": 3}, "content must be a string"),
            ({"title": "\udc80 "}, "title must be valid Unicode text"),
            ({"title": ""}, "title must not be empty"),
            ({"title": "ok", "content": "  "}, "content must not be empty"),
            ({"title": "t" * 201}, "title must be at most 200 characters"),
            ({"content": "c" * 5001}, "content must be at most 5000 characters"),
        ],
    )
    def test_rejects_invalid_present_fields(self, validator, body, message):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_update(body)

        assert exc_info.value.message == message

    @pytest.mark.parametrize("body", [None, [{"title": "x"}], "title"])
    def test_rejects_non_object_body(self, validator, body):
        with pytest.raises(ValidationError, match="must be a JSON object"):
            validator.validate_update(body)


# ── Field tagging ─────────────────────────────────────────────────────────

def test_field_recorded_in_context(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate_create({"title": "t", "content": ""})

    assert exc_info.value.field == "content"
    assert exc_info.value.context["field"] == "content"


# ── Registry ──────────────────────────────────────────────────────────────

class TestGetValidator:

    def test_known_names(self):
        assert isinstance(get_validator("manual"), ManualNoteValidator)
        assert isinstance(get_validator("schema"), SchemaNoteValidator)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown validation strategy"):
            get_validator("zod")
