"""
Notes API: Notes Route Handlers
=================================

What:  The /notes resource: list, lookup, create, and the two simulated-database
       lookups.
How:   Handlers either return a Note (respond) or raise an AppError
       (delegate to the error chain). They never build error responses.

The two simulated-database lookups differ on purpose:

    GET /notes/async-notes/{id}       awaits the lookup with no try/except.
                                      A miss escapes as RecordNotFoundError
                                      and the host answers with a plain 500.
    GET /notes/async-notes-safe/{id}  catches the miss and delegates a
                                      NotFoundError, so it renders as JSON.

Delegation is not automatic across an `await`: every suspension-capable
step that can fail has to be wrapped.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from notes_api.exceptions import NotFoundError
from notes_api.models.note import Note
from notes_api.schemas.note import ErrorResponse, NoteCreate
from notes_api.services.note_database import NoteDatabase, RecordNotFoundError, get_note_database
from notes_api.services.note_service import NoteService, get_note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])


# ── Route-specific dependency ─────────────────────────────────────────────
async def load_note(note_id: str, service: NoteService = Depends(get_note_service)) -> Note:
    """
    Resolves the `note_id` path parameter to a Note before the handler runs.

    A miss raises NotFoundError here, so the handler body never sees it.
    """
    return service.get_note(note_id)


@router.get("", response_model=List[Note], summary="List all notes")
async def list_notes(service: NoteService = Depends(get_note_service)) -> List[Note]:
    return service.list_notes()


@router.post(
    "",
    status_code=201,
    response_model=Note,
    responses={400: {"description": "Missing field or malformed body", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: Optional[NoteCreate] = None,
    service: NoteService = Depends(get_note_service),
) -> Note:
    """
    Append a note. Title and body are both required and non-empty.

    An absent body is treated like an empty one, so it gets the same
    "title and body required" 400 as a body with missing fields.
    """
    payload = payload or NoteCreate()
    return service.create_note(title=payload.title, body=payload.body)


@router.get(
    "/async-notes/{note_id}",
    response_model=Note,
    summary="Simulated database lookup (fault not handled)",
)
async def get_note_async(
    note_id: str,
    db: NoteDatabase = Depends(get_note_database),
) -> Note:
    # No try/except: a RecordNotFoundError propagates past the error chain.
    return await db.fetch(note_id)


@router.get(
    "/async-notes-safe/{note_id}",
    response_model=Note,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Simulated database lookup (fault delegated)",
)
async def get_note_async_safe(
    note_id: str,
    db: NoteDatabase = Depends(get_note_database),
) -> Note:
    try:
        return await db.fetch(note_id)
    except RecordNotFoundError as e:
        raise NotFoundError(message=str(e), context={"note_id": e.note_id}) from e


@router.get(
    "/{note_id}",
    response_model=Note,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note by id",
)
async def get_note(note: Note = Depends(load_note)) -> Note:
    return note
