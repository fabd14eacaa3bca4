"""
Notes API: Note Model
=======================

What:  The Note record and the fixed seed data the store starts with.
How:   A frozen Pydantic model, so a Note handed to a handler cannot be
       changed behind the store's back and serializes straight to JSON.
"""

from typing import Tuple

from pydantic import BaseModel, Field


class Note(BaseModel):
    """
    A single note.

    Lifecycle:
        1. Created at startup from SEED_NOTES, or appended by POST /notes
        2. Never updated, never deleted
    """

    id: str = Field(description="Sequential identifier, unique within the store")
    title: str = Field(description="Short title")
    body: str = Field(description="Note text")

    model_config = {"frozen": True}

    def __repr__(self) -> str:
        return f"<Note(id='{self.id}', title='{self.title}')>"


SEED_NOTES: Tuple[Note, ...] = (
    Note(id="1", title="Grocery", body="Buy milk"),
    Note(id="2", title="Workout", body="Leg day"),
)
