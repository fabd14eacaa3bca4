"""
Notes API: Request/Response Schemas
=====================================

What:  Pydantic models for the request body of POST /notes and for the
       response shapes that are not plain Notes.
Why:   FastAPI uses these for body parsing, serialization and the OpenAPI docs.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /notes.

    Both fields are optional at the schema level so that a missing field is
    reported by NoteService as "title and body required" (400) rather than
    as a body-parsing failure.
    """

    title: Optional[str] = Field(default=None, description="Note title (required, non-empty)")
    body: Optional[str] = Field(default=None, description="Note text (required, non-empty)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    message: str


class ErrorDetail(BaseModel):
    """Inner error object: human-readable message plus the HTTP status."""

    message: str = Field(description="Human-readable error description")
    status: int = Field(description="HTTP status code, repeated from the response line")


class ErrorResponse(BaseModel):
    """
    The uniform error envelope produced only by the error chain's terminal stage.

    Example:
        {"error": {"message": "Note not found", "status": 404}}
    """

    error: ErrorDetail
