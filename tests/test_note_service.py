"""
Notes API: Note Service Unit Tests
====================================

What we test:
    ✅ list_notes returns the store contents in order
    ✅ get_note returns a note or raises NotFoundError (404)
    ✅ create_note validates both fields and leaves the store untouched on failure
"""

import pytest

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.services.note_service import NoteService


class TestNoteServiceGet:

    def test_list_notes(self, note_service):
        assert [n.title for n in note_service.list_notes()] == ["Grocery", "Workout"]

    def test_get_note_found(self, note_service):
        note = note_service.get_note("1")
        assert note.id == "1"
        assert note.body == "Buy milk"

    def test_get_note_not_found(self, note_service):
        with pytest.raises(NotFoundError) as exc_info:
            note_service.get_note("999")
        assert exc_info.value.message == "Note not found"
        assert exc_info.value.status == 404
        assert exc_info.value.context["note_id"] == "999"


class TestNoteServiceCreate:

    def test_create_note_success(self, note_service, note_store):
        note = note_service.create_note(title="T", body="B")
        assert note.id == "3"
        assert note_store.list()[-1] == note

    @pytest.mark.parametrize(
        "title, body, missing",
        [
            (None, "B", ["title"]),
            ("T", None, ["body"]),
            ("", "B", ["title"]),
            ("T", "", ["body"]),
            (None, None, ["title", "body"]),
        ],
    )
    def test_create_note_missing_fields(self, note_service, note_store, title, body, missing):
        with pytest.raises(ValidationError) as exc_info:
            note_service.create_note(title=title, body=body)

        error = exc_info.value
        assert error.message == "title and body required"
        assert error.status == 400
        assert error.field == missing[0]
        assert error.context["missing"] == missing
        assert len(note_store) == 2

    def test_service_uses_given_store(self, note_store):
        NoteService(note_store).create_note(title="T", body="B")
        assert NoteService(note_store).get_note("3").title == "T"
