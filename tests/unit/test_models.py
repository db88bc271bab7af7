"""Tests for domain models."""

import pytest

from richtext_find.models.node import Match, Point, SearchState, SearchStatus, Selection


def test_match_is_frozen() -> None:
    match = Match(path=(0, 0), anchor_offset=1, focus_offset=4)
    with pytest.raises(AttributeError):
        match.anchor_offset = 2  # type: ignore[misc]


@pytest.mark.parametrize(("anchor", "focus"), [(3, 3), (4, 2), (-1, 2)])
def test_match_rejects_empty_or_reversed_range(anchor: int, focus: int) -> None:
    with pytest.raises(ValueError, match="Invalid match offsets"):
        Match(path=(0,), anchor_offset=anchor, focus_offset=focus)


def test_match_selection_spans_the_match() -> None:
    match = Match(path=(1, 2), anchor_offset=5, focus_offset=8)
    assert match.selection == Selection(anchor=Point((1, 2), 5), focus=Point((1, 2), 8))


def test_search_state_current_match() -> None:
    matches = (Match((0,), 0, 1), Match((1,), 0, 1))
    assert SearchState(matches=matches, current_index=1).current_match == matches[1]
    assert SearchState(matches=matches, current_index=-1).current_match is None
    assert SearchState().current_match is None


def test_status_label() -> None:
    assert SearchStatus().label == "0/0"
    assert not SearchStatus().has_matches
    assert SearchStatus(match_count=17, current_index=2).label == "3/17"
    assert SearchStatus(match_count=17, current_index=2).has_matches
