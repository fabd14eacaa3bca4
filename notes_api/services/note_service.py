"""
Notes API: Note Service
=========================

What:  Business rules over the NoteStore: list, fetch-or-404, validate-and-create.
How:   Stateless apart from the store it is given; one instance is built per
       request by the `get_note_service` dependency.
Who:   Called by route handlers and route dependencies in routes/notes.py.

Error Handling Strategy:
    Failures are raised as AppError subclasses (NotFoundError, ValidationError).
    The service never builds HTTP responses; the error chain renders them.
"""

import logging
from typing import List, Optional

from fastapi import Depends

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.models.note import Note
from notes_api.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

NOTE_NOT_FOUND = "Note not found"
FIELDS_REQUIRED = "title and body required"


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes(): every note in insertion order
        - get_note(): single note lookup with not-found handling
        - create_note(): field validation, then append
    """

    def __init__(self, store: NoteStore):
        self.store = store

    def list_notes(self) -> List[Note]:
        return self.store.list()

    def get_note(self, note_id: str) -> Note:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: no note with that id (→ 404)
        """
        note = self.store.find(note_id)
        if note is None:
            raise NotFoundError(message=NOTE_NOT_FOUND, context={"note_id": note_id})
        return note

    def create_note(self, title: Optional[str], body: Optional[str]) -> Note:
        """
        Validate and append a new note.

        Both fields must be present and non-empty. Validation runs before the
        store is touched, so a rejected request leaves the store unchanged.

        Raises:
            ValidationError: title or body missing or empty (→ 400)
        """
        missing = [name for name, value in (("title", title), ("body", body)) if not value]
        if missing:
            raise ValidationError(
                message=FIELDS_REQUIRED,
                field=missing[0],
                context={"missing": missing},
            )

        note = self.store.append(title=title, body=body)
        logger.info("Note %s created", note.id)
        return note


async def get_note_service(store: NoteStore = Depends(get_note_store)) -> NoteService:
    """FastAPI dependency wrapping the application's store in a NoteService."""
    return NoteService(store)
