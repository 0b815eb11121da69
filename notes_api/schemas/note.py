"""
Notes API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract.
How:   Response models use camelCase aliases on the wire (createdAt,
       updatedAt) while Python code uses snake_case names. FastAPI serializes
       response models by alias.

Request bodies are NOT declared as FastAPI body parameters: FastAPI would
answer a bad body with its own 422, whereas this API answers 400 with a fixed
message. NoteService parses the raw body and validates it against NotePayload.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from notes_api.models.note import Note


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NotePayload(BaseModel):
    """
    Body of POST /api/notes and PUT /api/notes/{id}.

    Strict strings: a number or list for title/content is a malformed body,
    not something to coerce. Extra keys are ignored.
    """

    title: StrictStr = Field(min_length=1)
    content: StrictStr = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Wire representation of a Note."""

    id: str = Field(description="Sequential note identifier, as a decimal string")
    title: str
    content: str
    created_at: str = Field(
        alias="createdAt",
        description="When the note was created (UTC ISO 8601)",
    )
    updated_at: str = Field(
        alias="updatedAt",
        description="When the note was last written (UTC ISO 8601)",
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class ErrorResponse(BaseModel):
    """
    Error envelope returned for every handled failure.

    Example:
        {
            "error": "not_found",
            "message": "Note not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")
