"""Note repository for database operations."""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union
from uuid import UUID

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import utc_now
from ..models.note import Note

logger = logging.getLogger(__name__)


def parse_note_id(note_id: Union[str, UUID]) -> Optional[UUID]:
    """Parse an opaque identifier; malformed ids resolve to nothing."""
    if isinstance(note_id, UUID):
        return note_id
    try:
        return UUID(str(note_id))
    except ValueError:
        return None


def next_update_timestamp(previous: Optional[datetime]) -> datetime:
    """Return now, nudged forward so it is strictly after ``previous``."""
    now = utc_now()
    if previous is None:
        return now
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, title: str, content: str) -> Note:
        """Insert a note; both timestamps share one instant."""
        now = utc_now()
        note = Note(title=title, content=content, created_at=now, updated_at=now)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: Union[str, UUID]) -> Optional[Note]:
        """Get note by ID, None when absent or malformed."""
        parsed = parse_note_id(note_id)
        if parsed is None:
            return None
        stmt = select(Note).where(Note.id == parsed)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_notes(self) -> List[Note]:
        """All notes, newest first."""
        stmt = select(Note).order_by(desc(Note.created_at))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(Note.id)))
        return result.scalar() or 0

    async def replace_content(self, note: Note, title: str, content: str) -> Note:
        """Overwrite title and content of a loaded note and bump updated_at."""
        note.title = title
        note.content = content
        note.updated_at = next_update_timestamp(note.updated_at)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note: Note) -> None:
        """Delete a loaded note permanently."""
        try:
            await self.session.delete(note)
            await self.session.commit()
        except Exception:
            logger.exception("Failed to delete note %s", note.id)
            await self.session.rollback()
            raise
        logger.info("Deleted note %s", note.id)
