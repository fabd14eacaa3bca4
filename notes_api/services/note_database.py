"""
Notes API: Simulated Note Database
====================================

What:  An awaitable note lookup that pretends to be a slow database.
How:   Sleeps for `fake_db_latency` seconds, then reads the NoteStore.
       A miss raises RecordNotFoundError, a plain LookupError.

RecordNotFoundError is NOT an AppError. A handler that awaits `fetch` without
catching it lets the fault escape the error chain entirely; the host then
answers with its own plain-text 500. Handlers that want the JSON envelope
must catch it and delegate an AppError themselves.
"""

import asyncio
import logging

from fastapi import Depends, Request

from notes_api.models.note import Note
from notes_api.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """The simulated database has no record with the requested id."""

    def __init__(self, note_id: str):
        self.note_id = note_id
        super().__init__("Note not found in database")


class NoteDatabase:
    """Latency-simulating read access to a NoteStore."""

    def __init__(self, store: NoteStore, latency: float):
        self.store = store
        self.latency = latency

    async def fetch(self, note_id: str) -> Note:
        """
        Look up a note after the simulated delay.

        Raises:
            RecordNotFoundError: no note with that id
        """
        if self.latency:
            await asyncio.sleep(self.latency)

        # The store is read only after the wait, so notes created while this
        # request was suspended are visible.
        note = self.store.find(note_id)
        if note is None:
            logger.debug("Simulated database miss for id=%s", note_id)
            raise RecordNotFoundError(note_id)
        return note


async def get_note_database(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> NoteDatabase:
    """FastAPI dependency building a NoteDatabase with the application's configured latency."""
    return NoteDatabase(store, latency=request.app.state.settings.fake_db_latency)
