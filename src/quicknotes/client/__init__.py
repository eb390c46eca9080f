"""
Terminal client for the QuickNotes API.

The client fetches the whole note list once and does search, sort and
reorder locally. Only view preferences are persisted, to a local
key/value file.
"""

from .api_client import ApiResult, NotesApiClient, TransportError
from .board import NoteBoard
from .models import ClientNote, Preferences
from .state import BoardState, FormKind, FormMode, FormState

__all__ = [
    "ApiResult",
    "BoardState",
    "ClientNote",
    "FormKind",
    "FormMode",
    "FormState",
    "NoteBoard",
    "NotesApiClient",
    "Preferences",
    "TransportError",
]
