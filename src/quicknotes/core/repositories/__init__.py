"""Repository layer for data access."""

from .note_repository import NoteRepository

__all__ = [
    "NoteRepository",
]
