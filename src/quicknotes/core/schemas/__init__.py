"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .common import ApiResponse, ErrorResponse, HealthCheckResponse
from .notes import NoteResponse, NoteWrite, field_errors, validate_note_payload

__all__ = [
    # Note schemas
    "NoteWrite",
    "NoteResponse",
    "field_errors",
    "validate_note_payload",
    # Common schemas
    "ApiResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
