"""
Database models for QuickNotes.

A single ``Note`` table keyed by an opaque UUID. Models are designed for
async SQLAlchemy sessions.
"""

from .base import BaseModel, utc_now
from .note import Note

__all__ = [
    "BaseModel",
    "Note",
    "utc_now",
]
