from quicknotes.client.listing import (
    clear_order,
    filter_notes,
    move_item,
    preview,
    reorder_notes,
    sort_notes,
    visible_notes,
)
from quicknotes.client.models import Preferences


class TestFilter:
    def test_empty_term_keeps_everything(self, make_note):
        notes = [make_note("a"), make_note("b")]
        assert filter_notes(notes, "") == notes

    def test_matches_title_or_content_case_insensitively(self, make_note):
        groceries = make_note("Groceries", "milk")
        work = make_note("Work", "Buy MILK for the office")
        other = make_note("Other", "nothing here")

        assert filter_notes([groceries, work, other], "Milk") == [groceries, work]

    def test_no_match(self, make_note):
        assert filter_notes([make_note("a", "b")], "zzz") == []


class TestSort:
    def test_title_ascending_and_descending(self, make_note):
        banana = make_note("Banana")
        apple = make_note("apple")

        assert sort_notes([banana, apple], "title", "asc") == [apple, banana]
        assert sort_notes([banana, apple], "title", "desc") == [banana, apple]

    def test_created_date_defaults_to_newest_first(self, make_note):
        older, newer = make_note("older"), make_note("newer")
        assert sort_notes([older, newer]) == [newer, older]

    def test_updated_date(self, make_note):
        first = make_note("first")
        second = make_note("second")
        first = first.model_copy(update={"updated_at": second.created_at.replace(year=2030)})

        assert sort_notes([first, second], "updated", "desc") == [first, second]
        assert sort_notes([first, second], "updated", "asc") == [second, first]

    def test_inputs_are_not_mutated(self, make_note):
        notes = [make_note("b"), make_note("a")]
        snapshot = list(notes)

        sort_notes(notes, "title", "asc")

        assert notes == snapshot


class TestReorder:
    def test_move_item(self, make_note):
        a, b, c = make_note("a"), make_note("b"), make_note("c")
        assert move_item([a, b, c], 2, 0) == [c, a, b]
        assert move_item([a, b, c], 0, 2) == [b, c, a]

    def test_reorder_assigns_new_indices(self, make_note):
        a, b, c = make_note("a"), make_note("b"), make_note("c")

        result = reorder_notes([a, b, c], [a, b, c], 2, 0)

        assert [note.title for note in result] == ["c", "a", "b"]
        assert [note.order for note in result] == [0, 1, 2]

    def test_notes_outside_the_view_are_untouched(self, make_note):
        hidden = make_note("hidden")
        a, b = make_note("a"), make_note("b")

        result = reorder_notes([hidden, a, b], [a, b], 1, 0)

        assert result[0] is hidden
        assert [(note.title, note.order) for note in result[1:]] == [("b", 0), ("a", 1)]

    def test_three_note_view_move_to_front_with_hidden_note(self, make_note):
        hidden = make_note("hidden", "other")
        a, b, c = (make_note(title, "keep") for title in ("a", "b", "c"))
        notes = [a, hidden, b, c]
        view = filter_notes(notes, "keep")
        assert view == [a, b, c]

        result = reorder_notes(notes, view, 2, 0)

        assert result[0] is hidden
        assert hidden.order is None
        assert [(note.title, note.order) for note in result[1:]] == [("c", 0), ("a", 1), ("b", 2)]

    def test_missing_destination_is_a_no_op(self, make_note):
        notes = [make_note("a"), make_note("b")]

        result = reorder_notes(notes, notes, 0, None)

        assert result == notes
        assert all(note.order is None for note in result)

    def test_destination_past_the_end_is_clamped(self, make_note):
        a, b = make_note("a"), make_note("b")

        result = reorder_notes([a, b], [a, b], 0, 10)

        assert [note.title for note in result] == ["b", "a"]

    def test_bad_source_raises(self, make_note):
        notes = [make_note("a")]
        try:
            reorder_notes(notes, notes, 3, 0)
        except IndexError as e:
            assert "source index 3" in str(e)
        else:
            raise AssertionError("expected IndexError")

    def test_reordered_notes_lead_the_visible_sequence(self, make_note):
        a, b, c = make_note("a"), make_note("b"), make_note("c")
        prefs = Preferences(sort_by="title", sort_order="asc")
        reordered = reorder_notes([a, b, c], visible_notes([a, b, c], prefs), 2, 0)

        assert [note.title for note in visible_notes(reordered, prefs)] == ["c", "a", "b"]

    def test_clear_order(self, make_note):
        ordered = [make_note("a", order=0), make_note("b", order=1)]

        assert all(note.order is None for note in clear_order(ordered))


class TestVisibleNotes:
    def test_filter_then_sort(self, make_note):
        notes = [make_note("Beta", "x"), make_note("alpha", "x"), make_note("Gamma", "y")]
        prefs = Preferences(search_term="x", sort_by="title", sort_order="asc")

        assert [note.title for note in visible_notes(notes, prefs)] == ["alpha", "Beta"]


def test_preview():
    assert preview("short", 150) == "short"
    assert preview("x" * 150, 150) == "x" * 150
    assert preview("x" * 151, 150) == "x" * 150 + "..."
    assert preview("y" * 200, 120) == "y" * 120 + "..."
