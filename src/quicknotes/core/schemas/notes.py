"""
Note schemas.

These schemas define the API contract for note CRUD operations and turn
pydantic validation failures into per-field reasons.
"""

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import NoteValidationError
from ..models.note import TITLE_MAX_LENGTH

REQUIRED_FIELDS = ("title", "content")

INVALID_JSON_REASON = "The request body must be valid JSON."

_REQUIRED_TYPES = {"missing", "string_too_short", "value_error"}


class NoteWrite(BaseModel):
    """Full title/content payload accepted by create and update."""

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH, description="Note title")
    content: str = Field(min_length=1, description="Note content")

    # color/order sent by the client are display hints the store ignores
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "Groceries",
                "content": "Milk, eggs, bread",
            }
        },
    )

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, v):
        """Whitespace-only values count as missing."""
        if len(v.strip()) == 0:
            raise ValueError("must not be blank")
        return v


class NoteResponse(BaseModel):
    """Note as returned by the API."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


def _reason(field: str, error: Dict[str, Any]) -> str:
    error_type = error.get("type", "")
    if error_type in _REQUIRED_TYPES or (error_type == "string_type" and error.get("input") is None):
        return f"The {field} field is required."
    if error_type == "string_type":
        return f"The {field} field must be a string."
    if error_type == "string_too_long":
        limit = (error.get("ctx") or {}).get("max_length", TITLE_MAX_LENGTH)
        return f"The {field} field must not be greater than {limit} characters."
    return error.get("msg", "Invalid value.")


def field_errors(errors: Iterable[Dict[str, Any]]) -> Dict[str, List[str]]:
    """Group pydantic error dicts into ``{field: [reason, ...]}``."""
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        reason = _reason(field, error)
        reasons = grouped.setdefault(field, [])
        if reason not in reasons:
            reasons.append(reason)
    return grouped


def body_errors_from_request(errors: Iterable[Dict[str, Any]]) -> Dict[str, List[str]]:
    """Field errors for a request FastAPI rejected before reaching a route."""
    errors = list(errors)
    if any(error.get("type") == "json_invalid" for error in errors):
        return {"body": [INVALID_JSON_REASON]}

    stripped = []
    for error in errors:
        loc = tuple(error.get("loc") or ())
        if loc and loc[0] == "body":
            loc = loc[1:]
        if not loc:
            # the whole body was missing or unusable
            stripped.extend({"loc": (name,), "type": "missing"} for name in REQUIRED_FIELDS)
        else:
            stripped.append({**error, "loc": loc})
    return field_errors(stripped)


def decode_note_body(raw: Any) -> Any:
    """Decode raw request bytes. An empty body decodes to an empty payload."""
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise NoteValidationError({"body": [INVALID_JSON_REASON]}) from exc


def validate_note_payload(payload: Any) -> NoteWrite:
    """Validate a request body as a full note payload.

    Raw request bytes are decoded first. Anything that is not a JSON object
    is treated as an empty payload.

    Raises:
        NoteValidationError: with the per-field reasons
    """
    if isinstance(payload, (bytes, bytearray)):
        payload = decode_note_body(payload)
    if not isinstance(payload, dict):
        payload = {}
    try:
        return NoteWrite.model_validate(payload)
    except ValidationError as exc:
        raise NoteValidationError(field_errors(exc.errors())) from exc
