"""
QuickNotes command line.

Terminal front end for the notes API, plus a ``serve`` command that runs
the API itself.

Examples:
    quicknotes list --search groceries --sort title --order asc --view list
    quicknotes list --move 2:0
    quicknotes add --title "Groceries" --content "Milk, eggs"
    quicknotes edit <id> --content "Milk, eggs, bread"
    quicknotes delete <id> --yes
    quicknotes serve --reload
"""

import asyncio
from enum import Enum
from typing import Optional, Tuple

import typer
from rich.console import Console

from .client.api_client import NotesApiClient
from .client.board import NoteBoard
from .client.preferences import PreferenceStore
from .client.render import print_board, render_note_detail
from .client.storage import LocalStorage
from .config import get_settings
from .core.logging import setup_logging

app = typer.Typer(help="QuickNotes - minimal note taking from the terminal", no_args_is_help=True)
console = Console()


class SortField(str, Enum):
    date = "date"
    title = "title"
    updated = "updated"


class Order(str, Enum):
    asc = "asc"
    desc = "desc"


class View(str, Enum):
    grid = "grid"
    list = "list"


@app.callback()
def main(
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Override the API base URL."),
) -> None:
    """Terminal client for the QuickNotes API."""
    settings = get_settings()
    setup_logging(console=False, log_dir=settings.preferences_path.expanduser().parent / "logs")
    if api_url:
        settings.api_base_url = api_url


def build_board() -> NoteBoard:
    settings = get_settings()
    store = PreferenceStore(
        LocalStorage(settings.preferences_path),
        debounce_seconds=settings.preferences_debounce_seconds,
    )
    return NoteBoard(NotesApiClient(), preference_store=store)


def _parse_move(value: Optional[str]) -> Optional[Tuple[int, int]]:
    if value is None:
        return None
    try:
        source, destination = (int(part) for part in value.split(":", 1))
    except ValueError:
        raise typer.BadParameter("expected SOURCE:DESTINATION, e.g. 2:0", param_hint="--move")
    return source, destination


def _report(board: NoteBoard) -> None:
    """Print the status message and any form errors."""
    state = board.state
    if state.fetch_error:
        console.print(f"[red]{state.fetch_error}[/red]")
    for field, reasons in state.form.errors.items():
        for reason in reasons:
            console.print(f"[yellow]{field}:[/yellow] {reason}")
    if state.message:
        console.print(state.message)


@app.command("list")
def list_notes(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter by title or content."),
    sort: Optional[SortField] = typer.Option(None, "--sort", help="Sort field."),
    order: Optional[Order] = typer.Option(None, "--order", help="Sort direction."),
    view: Optional[View] = typer.Option(None, "--view", help="Grid or list view."),
    move: Optional[str] = typer.Option(None, "--move", help="Reorder the shown list, SOURCE:DESTINATION."),
) -> None:
    """Show notes using the saved search, sort and view preferences."""
    asyncio.run(_list(search, sort, order, view, _parse_move(move)))


async def _list(search, sort, order, view, move) -> None:
    board = build_board()
    try:
        if search is not None:
            board.set_search_term(search)
        if sort is not None:
            board.set_sort_by(sort.value)
        if order is not None:
            board.set_sort_order(order.value)
        if view is not None:
            board.set_view_mode(view.value)

        await board.fetch_notes()
        if move is not None and board.state.fetch_error is None:
            try:
                board.reorder(*move)
            except IndexError as e:
                raise typer.BadParameter(str(e), param_hint="--move")
        print_board(board.state, console)
    finally:
        await board.close()

    if board.state.fetch_error:
        raise typer.Exit(1)


@app.command()
def show(note_id: str = typer.Argument(..., help="Note identifier.")) -> None:
    """Show one note in full."""
    asyncio.run(_show(note_id))


async def _show(note_id: str) -> None:
    board = build_board()
    try:
        opened = await board.open_note(note_id)
    finally:
        await board.close()

    if not opened:
        _report(board)
        raise typer.Exit(1)
    console.print(render_note_detail(board.state.selected_note))


@app.command()
def add(
    title: str = typer.Option(..., "--title", "-t", prompt=True, help="Note title."),
    content: str = typer.Option(..., "--content", "-c", prompt=True, help="Note content."),
) -> None:
    """Create a note."""
    asyncio.run(_add(title, content))


async def _add(title: str, content: str) -> None:
    board = build_board()
    try:
        await board.fetch_notes()
        board.start_add()
        board.update_form(title=title, content=content)
        saved = await board.save_note()
    finally:
        await board.close()

    _report(board)
    if not saved:
        raise typer.Exit(1)


@app.command()
def edit(
    note_id: str = typer.Argument(..., help="Note identifier."),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title."),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New content."),
) -> None:
    """Replace a note's title and/or content; omitted fields keep their value."""
    asyncio.run(_edit(note_id, title, content))


async def _edit(note_id: str, title: Optional[str], content: Optional[str]) -> None:
    board = build_board()
    try:
        if not await board.open_note(note_id):
            _report(board)
            raise typer.Exit(1)
        board.start_editing(note_id)
        board.update_form(title=title, content=content)
        saved = await board.save_note()
    finally:
        await board.close()

    _report(board)
    if not saved:
        raise typer.Exit(1)


@app.command()
def delete(
    note_id: str = typer.Argument(..., help="Note identifier."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    """Delete a note permanently."""
    if not yes and not typer.confirm("Are you sure you want to delete this note?"):
        raise typer.Abort()
    asyncio.run(_delete(note_id))


async def _delete(note_id: str) -> None:
    board = build_board()
    try:
        deleted = await board.delete_note(note_id)
    finally:
        await board.close()

    _report(board)
    if not deleted:
        raise typer.Exit(1)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address."),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the notes API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "quicknotes.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload or settings.reload,
    )


if __name__ == "__main__":
    app()
