"""
Custom exceptions.

Application-specific exception classes raised by the service layer and
translated into response envelopes by ``exception_handlers``.
"""

from typing import Dict, List, Optional


class QuickNotesError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NoteNotFoundError(QuickNotesError):
    """Raised when an identifier does not resolve to a note."""

    status_code = 404

    def __init__(self, note_id: Optional[str] = None, message: str = "Note not found") -> None:
        self.note_id = note_id
        super().__init__(message)


class NoteValidationError(QuickNotesError):
    """Raised when a note payload fails validation.

    ``errors`` maps each failing field to its list of reasons.
    """

    status_code = 422

    def __init__(
        self, errors: Dict[str, List[str]], message: str = "Validation failed"
    ) -> None:
        self.errors = errors
        super().__init__(message)
