"""Fixtures for the terminal client: an in-memory stand-in for the notes API."""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from uuid import uuid4

import pytest

from quicknotes.client.api_client import ApiResult, TransportError
from quicknotes.client.models import DEFAULT_COLOR, ClientNote
from quicknotes.client.preferences import PreferenceStore
from quicknotes.client.storage import LocalStorage


class FakeNotesApi:
    """Answers like the server does, from a dict of notes."""

    def __init__(self, notes=()):
        self.notes: Dict[str, ClientNote] = {note.id: note for note in notes}
        self.calls: List[tuple] = []
        self.offline = False
        self.reject: Optional[Dict[str, List[str]]] = None
        self.closed = False
        self._clock = datetime(2025, 6, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _check_online(self) -> None:
        if self.offline:
            raise TransportError("Cannot reach the notes server")

    async def list_notes(self) -> ApiResult:
        self.calls.append(("list",))
        self._check_online()
        notes = sorted(self.notes.values(), key=lambda note: note.created_at, reverse=True)
        return ApiResult(success=True, status_code=200, data=notes)

    async def get_note(self, note_id: str) -> ApiResult:
        self.calls.append(("get", note_id))
        self._check_online()
        if note_id not in self.notes:
            return ApiResult(success=False, status_code=404, message="Note not found")
        return ApiResult(success=True, status_code=200, data=self.notes[note_id])

    async def create_note(self, title, content, color=DEFAULT_COLOR, order=None) -> ApiResult:
        self.calls.append(("create", title, content, color, order))
        self._check_online()
        if self.reject:
            return ApiResult(False, 422, message="Validation failed", errors=self.reject)
        now = self._tick()
        note = ClientNote(id=str(uuid4()), title=title, content=content, created_at=now, updated_at=now)
        self.notes[note.id] = note
        return ApiResult(True, 201, message="Note created successfully", data=note)

    async def update_note(self, note_id, title, content, color=DEFAULT_COLOR) -> ApiResult:
        self.calls.append(("update", note_id, title, content, color))
        self._check_online()
        if note_id not in self.notes:
            return ApiResult(False, 404, message="Note not found")
        if self.reject:
            return ApiResult(False, 422, message="Validation failed", errors=self.reject)
        note = self.notes[note_id].model_copy(
            update={"title": title, "content": content, "updated_at": self._tick()}
        )
        self.notes[note_id] = note
        return ApiResult(True, 200, message="Note updated successfully", data=note)

    async def delete_note(self, note_id) -> ApiResult:
        self.calls.append(("delete", note_id))
        self._check_online()
        if self.notes.pop(note_id, None) is None:
            return ApiResult(False, 404, message="Note not found")
        return ApiResult(True, 200, message="Note deleted successfully")

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_api():
    return FakeNotesApi


@pytest.fixture
def fake_api():
    return FakeNotesApi()


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "storage.json")


@pytest.fixture
def preference_store(storage):
    return PreferenceStore(storage, debounce_seconds=0.01)
