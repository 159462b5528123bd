"""
Notes API: Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the two client-facing failure modes.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"success": false, "error": ...}` envelopes with the right
       HTTP status code.
Who:   Raised by the validators and NoteService; caught by global handlers.

Exception Hierarchy:
    NotesAPIError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    └── NotFoundError     → 404 Not Found

Anything else that escapes a route is an unexpected error and becomes a
generic 500.
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when a request body fails the note rules.

    When:    Malformed JSON, non-object body, missing/empty/over-long fields,
             or an update that names neither title nor content.
    HTTP:    400 Bad Request

    Example response:
        {"success": false, "error": "title must not be empty"}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotesAPIError):
    """
    Raised when an operation targets an id the store does not hold.

    The store itself signals absence with None/False; NoteService converts
    that into this exception so routes never branch on it.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
