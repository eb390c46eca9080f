"""
Unit tests for Note model.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from quicknotes.core.models.note import Note


class TestNoteModel:
    """Test Note model functionality."""

    async def test_create_note(self, test_session):
        note = Note(title="Test Note", content="This is test content")

        test_session.add(note)
        await test_session.commit()
        await test_session.refresh(note)

        assert isinstance(note.id, uuid.UUID)
        assert note.title == "Test Note"
        assert note.content == "This is test content"
        assert note.created_at.tzinfo is not None
        assert note.updated_at.tzinfo is not None

    async def test_timestamps_read_back_as_utc(self, test_session):
        moment = datetime(2025, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        note = Note(title="tz", content="c", created_at=moment, updated_at=moment)
        test_session.add(note)
        await test_session.commit()
        test_session.expunge_all()

        loaded = (await test_session.execute(select(Note).where(Note.id == note.id))).scalar_one()

        assert loaded.created_at == moment
        assert loaded.created_at.utcoffset() == timedelta(0)

    async def test_note_repr(self, test_session):
        note = Note(
            title="A very long title that should be truncated in the representation",
            content="Content",
        )
        test_session.add(note)
        await test_session.commit()

        expected = f"<Note(id={note.id}, title='A very long title that should ...')>"
        assert repr(note) == expected

    async def test_note_required_fields(self, test_session):
        with pytest.raises(IntegrityError):
            test_session.add(Note(content="Content"))
            await test_session.commit()

        await test_session.rollback()

        with pytest.raises(IntegrityError):
            test_session.add(Note(title="Title"))
            await test_session.commit()

    async def test_updated_at_cannot_precede_created_at(self, test_session):
        now = datetime.now(timezone.utc)

        with pytest.raises(IntegrityError):
            test_session.add(
                Note(title="t", content="c", created_at=now, updated_at=now - timedelta(seconds=1))
            )
            await test_session.commit()
