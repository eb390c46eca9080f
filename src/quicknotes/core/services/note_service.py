"""Note service implementation."""

from typing import Any, List

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NoteNotFoundError
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteResponse, validate_note_payload
from .interfaces import INoteService

logger = get_logger("services.notes")


class NoteService(INoteService):
    """Note service implementation.

    Payloads arrive unvalidated so that update can report a missing note
    before it looks at the body.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def list_notes(self) -> List[NoteResponse]:
        notes = await self.note_repo.list_notes()
        return [NoteResponse.model_validate(note) for note in notes]

    async def create_note(self, payload: Any) -> NoteResponse:
        """Create new note."""
        data = validate_note_payload(payload)
        note = await self.note_repo.create_note(data.title, data.content)
        logger.info("Note created", extra={"note_id": str(note.id)})
        return NoteResponse.model_validate(note)

    async def get_note(self, note_id: str) -> NoteResponse:
        note = await self._get_or_404(note_id)
        return NoteResponse.model_validate(note)

    async def update_note(self, note_id: str, payload: Any) -> NoteResponse:
        """Full replace of title and content."""
        note = await self._get_or_404(note_id)
        data = validate_note_payload(payload)
        note = await self.note_repo.replace_content(note, data.title, data.content)
        logger.info("Note updated", extra={"note_id": str(note.id)})
        return NoteResponse.model_validate(note)

    async def delete_note(self, note_id: str) -> None:
        note = await self._get_or_404(note_id)
        await self.note_repo.delete_note(note)

    async def _get_or_404(self, note_id: str) -> Note:
        note = await self.note_repo.get_by_id(note_id)
        if note is None:
            raise NoteNotFoundError(note_id)
        return note
