"""Explicit state owned by a note board and handed to the renderer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .listing import visible_notes
from .models import ClientNote, Preferences


class FormMode(str, Enum):
    IDLE = "idle"
    COMPOSING = "composing"
    SAVING = "saving"


class FormKind(str, Enum):
    ADD = "add"
    EDIT = "edit"


@dataclass
class FormState:
    """The single add/edit form."""

    mode: FormMode = FormMode.IDLE
    kind: Optional[FormKind] = None
    title: str = ""
    content: str = ""
    editing_id: Optional[str] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def is_open(self) -> bool:
        return self.mode is not FormMode.IDLE

    @property
    def is_blank(self) -> bool:
        return not self.title.strip() or not self.content.strip()


@dataclass
class BoardState:
    notes: List[ClientNote] = field(default_factory=list)
    preferences: Preferences = field(default_factory=Preferences)
    selected_id: Optional[str] = None
    form: FormState = field(default_factory=FormState)
    # set while the store is unreachable; shown as a banner until a fetch succeeds
    fetch_error: Optional[str] = None
    is_initial_loading: bool = True
    # last user-facing status line ("Note created successfully", "Note not found", ...)
    message: Optional[str] = None

    @property
    def visible_notes(self) -> List[ClientNote]:
        return visible_notes(self.notes, self.preferences)

    @property
    def selected_note(self) -> Optional[ClientNote]:
        return self.find_note(self.selected_id) if self.selected_id else None

    def find_note(self, note_id: str) -> Optional[ClientNote]:
        return next((note for note in self.notes if note.id == note_id), None)
