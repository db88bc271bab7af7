"""Tests for the in-memory host editor."""

import pytest

from richtext_find.editor import InMemoryEditor
from richtext_find.errors import StalePathError, ViewUnavailableError
from richtext_find.models.node import Match, Point, Selection
from richtext_find.protocols import EditorProtocol


def test_satisfies_editor_protocol(editor: InMemoryEditor) -> None:
    assert isinstance(editor, EditorProtocol)


def test_delete_and_insert_edit_one_leaf(editor: InMemoryEditor) -> None:
    editor.delete_range((1, 0), 2, 5)
    editor.insert_text((1, 0), 2, "dog")
    assert editor.text_at((1, 0)) == "A dog sat. "
    assert editor.text_at((1, 1)) == "Another cat"
    assert editor.version == 2


def test_mutation_clears_selection(editor: InMemoryEditor) -> None:
    editor.select(Match((1, 0), 2, 5).selection)
    assert editor.selection is not None
    editor.insert_text((1, 0), 0, "x")
    assert editor.selection is None


@pytest.mark.parametrize(
    ("path", "start", "end"),
    [((9,), 0, 1), ((1, 0), 5, 40), ((1,), 0, 1)],
)
def test_delete_outside_tree_is_stale(
    editor: InMemoryEditor, path: tuple[int, ...], start: int, end: int
) -> None:
    with pytest.raises(StalePathError):
        editor.delete_range(path, start, end)
    assert editor.version == 0


def test_select_rejects_offset_past_end(editor: InMemoryEditor) -> None:
    selection = Selection(anchor=Point((1, 2), 0), focus=Point((1, 2), 99))
    with pytest.raises(StalePathError):
        editor.select(selection)
    assert editor.selection is None


def test_headless_editor_cannot_scroll(editor: InMemoryEditor) -> None:
    with pytest.raises(ViewUnavailableError):
        editor.scroll_into_view((0, 0))


def test_surface_receives_scroll_requests(editor: InMemoryEditor) -> None:
    scrolled: list[tuple[int, ...]] = []
    editor.surface = scrolled.append
    editor.scroll_into_view((2, 0, 0))
    assert scrolled == [(2, 0, 0)]
