"""Client-side data shapes."""

import json
from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from ..core.logging import get_logger

logger = get_logger("client.models")

SortBy = Literal["date", "title", "updated"]
SortOrder = Literal["asc", "desc"]
ViewMode = Literal["grid", "list"]

DEFAULT_COLOR = "#3B82F6"


class ClientNote(BaseModel):
    """A note as the client holds it.

    ``color`` and ``order`` are display hints that exist only on this side;
    ``order`` is reset by every refresh from the store.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    color: Optional[str] = None
    order: Optional[int] = None


class Preferences(BaseModel):
    """View preferences, stored under camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    search_term: str = ""
    sort_by: SortBy = "date"
    sort_order: SortOrder = "desc"
    view_mode: ViewMode = "grid"

    def to_json(self) -> str:
        return json.dumps(self.model_dump(by_alias=True))

    @classmethod
    def from_json(cls, raw: Optional[str]) -> "Preferences":
        """Parse stored preferences leniently.

        Malformed JSON yields the defaults. Each field that is missing,
        empty or invalid falls back to its own default.
        """
        if not raw:
            return cls()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring malformed preferences", extra={"error": str(e)})
            return cls()
        if not isinstance(data, dict):
            logger.warning("Ignoring preferences that are not an object")
            return cls()

        values: Dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            value = data.get(to_camel(name))
            if not value:
                continue
            try:
                values[name] = TypeAdapter(field.annotation).validate_python(value)
            except ValidationError:
                logger.warning("Ignoring invalid preference", extra={"field": name})
        return cls(**values)
