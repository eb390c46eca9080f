"""
Pure list transformations behind the note board.

Filter, sort and reorder never mutate their inputs; they return new lists
(and new ``ClientNote`` copies where ``order`` changes).
"""

from typing import Callable, Dict, List, Optional, Sequence

from .models import ClientNote, Preferences, SortBy, SortOrder

GRID_PREVIEW_LENGTH = 150
LIST_PREVIEW_LENGTH = 120

_SORT_KEYS: Dict[str, Callable[[ClientNote], object]] = {
    "title": lambda note: note.title.casefold(),
    "updated": lambda note: note.updated_at,
    "date": lambda note: note.created_at,
}


def matches_search(note: ClientNote, search_term: str) -> bool:
    """Case-insensitive substring match on title or content."""
    needle = search_term.casefold()
    return needle in note.title.casefold() or needle in note.content.casefold()


def filter_notes(notes: Sequence[ClientNote], search_term: str) -> List[ClientNote]:
    if not search_term:
        return list(notes)
    return [note for note in notes if matches_search(note, search_term)]


def sort_notes(
    notes: Sequence[ClientNote], sort_by: SortBy = "date", sort_order: SortOrder = "desc"
) -> List[ClientNote]:
    """Sort by title, creation or update time. Unknown fields sort by creation time."""
    key = _SORT_KEYS.get(sort_by, _SORT_KEYS["date"])
    return sorted(notes, key=key, reverse=sort_order == "desc")


def filtered_and_sorted(notes: Sequence[ClientNote], preferences: Preferences) -> List[ClientNote]:
    return sort_notes(
        filter_notes(notes, preferences.search_term),
        preferences.sort_by,
        preferences.sort_order,
    )


def visible_notes(notes: Sequence[ClientNote], preferences: Preferences) -> List[ClientNote]:
    """The sequence the board displays.

    Notes carrying an ``order`` from a reorder gesture come first, in that
    order; the rest follow in filter/sort order.
    """
    ordered = filtered_and_sorted(notes, preferences)
    if all(note.order is None for note in ordered):
        return ordered
    return sorted(ordered, key=lambda note: (note.order is None, note.order or 0))


def move_item(items: Sequence[ClientNote], source: int, destination: int) -> List[ClientNote]:
    """Splice the item at ``source`` out and reinsert it at ``destination``."""
    result = list(items)
    moved = result.pop(source)
    result.insert(destination, moved)
    return result


def reorder_notes(
    notes: Sequence[ClientNote],
    view: Sequence[ClientNote],
    source: int,
    destination: Optional[int],
) -> List[ClientNote]:
    """Apply a reorder gesture made on ``view`` to the full note set.

    Every note of the reordered view gets ``order`` equal to its new index.
    Notes outside the view are kept untouched, followed by the reordered
    view. A gesture without a destination changes nothing.

    Raises:
        IndexError: when ``source`` is outside the view
    """
    if destination is None:
        return list(notes)
    if not 0 <= source < len(view):
        raise IndexError(f"source index {source} outside view of {len(view)} notes")
    destination = max(0, min(destination, len(view) - 1))

    reordered = [
        note.model_copy(update={"order": index})
        for index, note in enumerate(move_item(view, source, destination))
    ]
    moved_ids = {note.id for note in reordered}
    untouched = [note for note in notes if note.id not in moved_ids]
    return untouched + reordered


def clear_order(notes: Sequence[ClientNote]) -> List[ClientNote]:
    """Drop reorder hints, e.g. when a new sort supersedes them."""
    return [
        note if note.order is None else note.model_copy(update={"order": None})
        for note in notes
    ]


def preview(content: str, limit: int) -> str:
    """Content cut to ``limit`` characters, with an ellipsis when cut."""
    if len(content) <= limit:
        return content
    return content[:limit] + "..."
