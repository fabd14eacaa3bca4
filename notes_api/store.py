"""
Notes API: In-Memory Note Store
=================================

What:  The single owner of the Note sequence, plus the FastAPI dependency
       that hands it to route handlers.
How:   One NoteStore is created per application in create_app() and kept on
       `app.state`. Handlers receive it through `get_note_store`, never via a
       module-level list.

Concurrency:
    Requests run on one event loop and only interleave at `await` points.
    `append` never awaits, so a read-length-then-insert can not be split by
    another request. Keep it that way if the store ever grows async methods.
"""

import logging
from typing import Iterable, List, Optional

from fastapi import Request

from notes_api.models.note import SEED_NOTES, Note

logger = logging.getLogger(__name__)


class NoteStore:
    """Ordered, append-only collection of notes."""

    def __init__(self, seed: Iterable[Note] = SEED_NOTES):
        self._notes: List[Note] = list(seed)

    def __len__(self) -> int:
        return len(self._notes)

    def list(self) -> List[Note]:
        """Returns all notes in insertion order (a copy)."""
        return list(self._notes)

    def find(self, note_id: str) -> Optional[Note]:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def append(self, title: str, body: str) -> Note:
        """
        Add a note with the next sequential id, `str(len(store) + 1)`.

        No uniqueness check on title or body. Ids can not collide because the
        store never shrinks.
        """
        note = Note(id=str(len(self._notes) + 1), title=title, body=body)
        self._notes.append(note)
        logger.info("Note appended: id=%s (store size=%d)", note.id, len(self._notes))
        return note


# ── Dependency ────────────────────────────────────────────────────────────
async def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the store owned by the running application.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            return store.list()
    """
    return request.app.state.note_store
