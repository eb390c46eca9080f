"""Rich rendering of a ``BoardState``: grid or list view, detail panel, banners."""

from datetime import datetime
from typing import Optional, Sequence

from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .listing import GRID_PREVIEW_LENGTH, LIST_PREVIEW_LENGTH, preview
from .models import ClientNote
from .state import BoardState, FormMode

SORT_LABELS = {"date": "Created Date", "updated": "Updated Date", "title": "Title"}


def _date(value: datetime) -> str:
    return value.astimezone().strftime("%Y-%m-%d")


def _datetime(value: datetime) -> str:
    return value.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def render_banner(error: str) -> Panel:
    body = Text(error)
    body.append("\nRun the command again to retry.", style="dim")
    return Panel(body, title="Backend disconnected", border_style="red")


def render_grid(notes: Sequence[ClientNote], selected_id: Optional[str] = None) -> Columns:
    panels = []
    for note in notes:
        selected = note.id == selected_id
        body = Text(preview(note.content, GRID_PREVIEW_LENGTH))
        body.append(f"\n\n{_date(note.created_at)}", style="dim")
        panels.append(
            Panel(
                body,
                title=Text(note.title, style="bold"),
                subtitle=note.id[:8],
                border_style="bright_blue" if selected else "blue",
                width=40,
            )
        )
    return Columns(panels, equal=True)


def render_list(notes: Sequence[ClientNote], selected_id: Optional[str] = None) -> Table:
    table = Table(show_header=True, expand=True)
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="bold cyan", ratio=1)
    table.add_column("Preview", ratio=3)
    table.add_column("Created", style="dim", no_wrap=True)
    table.add_column("ID", style="dim", no_wrap=True)
    for index, note in enumerate(notes):
        table.add_row(
            str(index),
            note.title,
            preview(note.content, LIST_PREVIEW_LENGTH),
            _date(note.created_at),
            note.id[:8],
            style="reverse" if note.id == selected_id else None,
        )
    return table


def render_note_detail(note: ClientNote) -> Panel:
    body = Text(note.content)
    body.append(f"\n\nCreated: {_datetime(note.created_at)}", style="dim")
    body.append(f"\nUpdated: {_datetime(note.updated_at)}", style="dim")
    return Panel(body, title=Text(note.title, style="bold"), subtitle=note.id, border_style="blue")


def render_form_errors(state: BoardState) -> Optional[Panel]:
    form = state.form
    if form.mode is not FormMode.COMPOSING or not form.errors:
        return None
    lines = Text()
    for field, reasons in form.errors.items():
        for reason in reasons:
            lines.append(f"{field}: {reason}\n")
    return Panel(lines, title=state.message or "Validation failed", border_style="yellow")


def render_board(state: BoardState) -> RenderableType:
    """Everything the board shows, top to bottom."""
    parts: list = []
    if state.fetch_error:
        parts.append(render_banner(state.fetch_error))

    notes = state.visible_notes
    prefs = state.preferences
    header = Text(f"Your Notes ({len(notes)})", style="bold")
    header.append(
        f"   sort: {SORT_LABELS.get(prefs.sort_by, prefs.sort_by)} "
        f"{'↑' if prefs.sort_order == 'asc' else '↓'}   view: {prefs.view_mode}",
        style="dim",
    )
    if prefs.search_term:
        header.append(f"   search: {prefs.search_term!r}", style="dim")
    parts.append(header)

    if not notes and not state.fetch_error:
        hint = "No notes match your search." if prefs.search_term else "No notes yet. Add one to get started."
        parts.append(Text(hint, style="italic dim"))
    elif notes:
        if prefs.view_mode == "list":
            parts.append(render_list(notes, state.selected_id))
        else:
            parts.append(render_grid(notes, state.selected_id))

    selected = state.selected_note
    if selected is not None:
        parts.append(render_note_detail(selected))

    form_errors = render_form_errors(state)
    if form_errors is not None:
        parts.append(form_errors)

    return Group(*parts)


def print_board(state: BoardState, console: Optional[Console] = None) -> None:
    (console or Console()).print(render_board(state))
