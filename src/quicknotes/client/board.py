"""
Note board controller.

Owns a ``BoardState`` and mutates it in response to user actions. Every
successful mutation is followed by a full re-fetch of the list; the only
purely local change is a reorder gesture, which the next fetch discards.
"""

from typing import Optional

from ..core.logging import get_logger
from .api_client import NotesApiClient, TransportError
from .listing import clear_order, reorder_notes
from .models import DEFAULT_COLOR, SortBy, SortOrder, ViewMode
from .preferences import PreferenceStore
from .state import BoardState, FormKind, FormMode, FormState

logger = get_logger("client.board")

CONNECTION_ERROR = "Cannot connect to the notes server. Make sure the API server is running."
API_ERROR = "API returned an error response"
NOT_FOUND = "Note not found"


class NoteBoard:
    """Client-side note list with search, sort, reorder and an edit form."""

    def __init__(
        self,
        api: NotesApiClient,
        preference_store: Optional[PreferenceStore] = None,
        state: Optional[BoardState] = None,
    ):
        self.api = api
        self.preference_store = preference_store
        self.state = state or BoardState()
        if preference_store is not None and state is None:
            self.state.preferences = preference_store.load()
        # fetch sequencing: a list response older than the newest applied one is dropped
        self._fetch_ticket = 0
        self._applied_ticket = 0

    # -- loading ----------------------------------------------------------

    async def fetch_notes(self) -> bool:
        """Replace the in-memory list with the store's. Returns True on success."""
        self._fetch_ticket += 1
        ticket = self._fetch_ticket
        try:
            result = await self.api.list_notes()
        except TransportError as e:
            if ticket < self._applied_ticket:
                return False
            self._applied_ticket = ticket
            logger.warning("Fetching notes failed", extra={"error": str(e)})
            self.state.fetch_error = CONNECTION_ERROR
            return False
        finally:
            self.state.is_initial_loading = False

        if ticket < self._applied_ticket:
            logger.debug("Dropping stale note list", extra={"ticket": ticket})
            return False
        self._applied_ticket = ticket

        if not result.success:
            self.state.fetch_error = API_ERROR
            return False

        self.state.notes = result.data
        self.state.fetch_error = None
        if self.state.selected_id and self.state.find_note(self.state.selected_id) is None:
            self.state.selected_id = None
        return True

    async def retry(self) -> bool:
        return await self.fetch_notes()

    async def open_note(self, note_id: str) -> bool:
        """Load one note from the store and select it."""
        try:
            result = await self.api.get_note(note_id)
        except TransportError:
            self.state.fetch_error = CONNECTION_ERROR
            return False
        if not result.success:
            self.state.message = NOT_FOUND if result.not_found else result.message
            return False

        note = result.data
        others = [existing for existing in self.state.notes if existing.id != note.id]
        self.state.notes = others + [note]
        self.state.selected_id = note.id
        return True

    # -- selection and form -------------------------------------------------

    def select(self, note_id: Optional[str]) -> bool:
        if note_id is not None and self.state.find_note(note_id) is None:
            return False
        self.state.selected_id = note_id
        return True

    def start_add(self) -> None:
        self.state.form = FormState(mode=FormMode.COMPOSING, kind=FormKind.ADD)
        self.state.selected_id = None

    def start_editing(self, note_id: str) -> bool:
        """Open the form pre-filled with a note, replacing any form in progress."""
        note = self.state.find_note(note_id)
        if note is None:
            return False
        self.state.form = FormState(
            mode=FormMode.COMPOSING,
            kind=FormKind.EDIT,
            title=note.title,
            content=note.content,
            editing_id=note.id,
        )
        self.state.selected_id = None
        return True

    def update_form(self, title: Optional[str] = None, content: Optional[str] = None) -> None:
        form = self.state.form
        if form.mode is not FormMode.COMPOSING:
            return
        if title is not None:
            form.title = title
        if content is not None:
            form.content = content

    def cancel_edit(self) -> None:
        if self.state.form.mode is FormMode.COMPOSING:
            self.state.form = FormState()

    async def save_note(self) -> bool:
        """Submit the form: composing -> saving -> idle, or back to composing."""
        form = self.state.form
        if form.mode is not FormMode.COMPOSING:
            return False
        if form.is_blank:
            form.errors = {
                name: [f"The {name} field is required."]
                for name in ("title", "content")
                if not getattr(form, name).strip()
            }
            return False

        form.mode = FormMode.SAVING
        form.errors = {}
        try:
            if form.kind is FormKind.EDIT and form.editing_id:
                result = await self.api.update_note(
                    form.editing_id, form.title, form.content, color=DEFAULT_COLOR
                )
            else:
                result = await self.api.create_note(
                    form.title, form.content, color=DEFAULT_COLOR, order=len(self.state.notes)
                )
        except TransportError as e:
            logger.warning("Saving note failed", extra={"error": str(e)})
            self.state.fetch_error = CONNECTION_ERROR
            form.mode = FormMode.COMPOSING
            return False

        self.state.message = result.message
        if not result.success:
            form.mode = FormMode.COMPOSING
            form.errors = dict(result.errors)
            return False

        self.state.form = FormState()
        self.state.selected_id = None
        await self.fetch_notes()
        return True

    async def delete_note(self, note_id: str) -> bool:
        try:
            result = await self.api.delete_note(note_id)
        except TransportError as e:
            logger.warning("Deleting note failed", extra={"error": str(e)})
            self.state.fetch_error = CONNECTION_ERROR
            return False

        self.state.message = result.message
        if not result.success:
            return False

        if self.state.selected_id == note_id:
            self.state.selected_id = None
        await self.fetch_notes()
        return True

    # -- reorder --------------------------------------------------------------

    def reorder(self, source_index: int, destination_index: Optional[int]) -> None:
        """Apply a drag gesture made on the visible list. Local only."""
        self.state.notes = reorder_notes(
            self.state.notes, self.state.visible_notes, source_index, destination_index
        )

    # -- preferences ----------------------------------------------------------

    def _set_preferences(self, **changes) -> None:
        current = self.state.preferences
        updated = current.model_copy(update=changes)
        if updated == current:
            return
        if updated.sort_by != current.sort_by or updated.sort_order != current.sort_order:
            self.state.notes = clear_order(self.state.notes)
        self.state.preferences = updated
        if self.preference_store is not None:
            self.preference_store.schedule_save(updated)

    def set_search_term(self, search_term: str) -> None:
        self._set_preferences(search_term=search_term)

    def set_sort_by(self, sort_by: SortBy) -> None:
        self._set_preferences(sort_by=sort_by)

    def set_sort_order(self, sort_order: SortOrder) -> None:
        self._set_preferences(sort_order=sort_order)

    def toggle_sort_order(self) -> None:
        self.set_sort_order("desc" if self.state.preferences.sort_order == "asc" else "asc")

    def set_view_mode(self, view_mode: ViewMode) -> None:
        self._set_preferences(view_mode=view_mode)

    async def close(self) -> None:
        """Flush pending preferences and release the HTTP client."""
        if self.preference_store is not None:
            self.preference_store.flush()
        await self.api.close()
