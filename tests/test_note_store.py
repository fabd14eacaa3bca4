"""
Notes API: NoteStore Unit Tests
=================================
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from notes_api.models.note import SEED_NOTES, Note
from notes_api.store import NoteStore


class TestNoteStoreRead:

    def test_list_returns_seed_in_insertion_order(self, note_store):
        assert [n.id for n in note_store.list()] == ["1", "2"]
        assert note_store.list() == list(SEED_NOTES)

    def test_list_is_a_copy(self, note_store):
        notes = note_store.list()
        notes.clear()
        assert len(note_store) == 2

    def test_find_existing(self, note_store):
        note = note_store.find("2")
        assert note == Note(id="2", title="Workout", body="Leg day")

    @pytest.mark.parametrize("missing_id", ["0", "3", "999", "abc", ""])
    def test_find_missing_returns_none(self, note_store, missing_id):
        assert note_store.find(missing_id) is None

    def test_custom_seed(self):
        store = NoteStore(seed=[Note(id="1", title="Only", body="One")])
        assert len(store) == 1
        assert store.find("1").title == "Only"


class TestNoteStoreAppend:

    def test_append_assigns_next_sequential_id(self, note_store):
        note = note_store.append(title="T", body="B")
        assert note == Note(id="3", title="T", body="B")
        assert note_store.list()[-1] == note

    def test_append_repeatedly(self, note_store):
        ids = [note_store.append(title=f"t{i}", body="b").id for i in range(3)]
        assert ids == ["3", "4", "5"]

    def test_append_allows_duplicate_content(self, note_store):
        first = note_store.append(title="Same", body="Same")
        second = note_store.append(title="Same", body="Same")
        assert first.id != second.id

    def test_append_to_empty_store(self):
        store = NoteStore(seed=())
        assert store.append(title="T", body="B").id == "1"

    def test_stores_are_independent(self):
        a, b = NoteStore(), NoteStore()
        a.append(title="T", body="B")
        assert len(a) == 3
        assert len(b) == 2


class TestNoteImmutability:

    def test_note_is_frozen(self, note_store):
        note = note_store.find("1")
        with pytest.raises(PydanticValidationError):
            note.title = "Changed"
