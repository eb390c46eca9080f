"""
Service interfaces for QuickNotes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteResponse


class INoteService(ABC):
    """Note service for CRUD operations."""

    @abstractmethod
    async def list_notes(self) -> List[NoteResponse]:
        """All notes, newest first."""
        pass

    @abstractmethod
    async def create_note(self, payload: Any) -> NoteResponse:
        """Validate and persist a new note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: str) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def update_note(self, note_id: str, payload: Any) -> NoteResponse:
        """Replace title and content of an existing note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: str) -> None:
        """Delete note."""
        pass


class IHealthService(ABC):
    """Health checks."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Overall health."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass
