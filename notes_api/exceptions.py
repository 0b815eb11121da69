"""
Notes API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the ways a notes request can fail.
How:   Each exception carries a fixed, client-safe message, an optional context
       dict (logged, never returned), and class-level HTTP metadata. One
       boundary handler in main.py maps any NotesAPIError to its response.
Who:   Raised by NoteService and NoteStore; caught by the global handler.

Exception Hierarchy:
    NotesAPIError (base)
    ├── ValidationError         → 400 "Title and content are required"
    ├── MalformedRequestError   → 400 "Invalid request body"
    └── NotFoundError           → 404 "Note not found"
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:     User-facing error description (returned in the response)
        context:     Additional debug info (logged but NOT returned to client)
        status_code: HTTP status the boundary handler responds with
        error_code:  Machine-readable code placed in the "error" field
    """

    status_code: int = 500
    error_code: str = "server_error"
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when a create/update payload lacks a title or content.

    "Missing" means absent or falsy: an empty string, null, 0, false or an
    empty container all count. Whitespace-only strings are accepted.
    """

    status_code = 400
    error_code = "validation_error"
    default_message = "Title and content are required"

    def __init__(
        self,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(context=ctx)
        self.field = field


class MalformedRequestError(NotesAPIError):
    """
    Raised when the request body is not a JSON object of the expected shape.

    Covers unparseable JSON, an empty body, a JSON value that is not an
    object, and truthy title/content values that are not strings.
    """

    status_code = 400
    error_code = "malformed_request"
    default_message = "Invalid request body"


class NotFoundError(NotesAPIError):
    """Raised when a note id is not present in the store."""

    status_code = 404
    error_code = "not_found"
    default_message = "Note not found"

    def __init__(
        self,
        note_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if note_id is not None:
            ctx["note_id"] = note_id
        super().__init__(context=ctx)
        self.note_id = note_id
