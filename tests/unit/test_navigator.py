"""Tests for stepping through matches."""

import pytest

from richtext_find.core.search.navigator import next_index, previous_index
from richtext_find.models.node import Match, SearchState


def _state(count: int, current: int) -> SearchState:
    matches = tuple(Match((i,), 0, 1) for i in range(count))
    return SearchState(term="x", matches=matches, current_index=current)


def test_no_matches_gives_minus_one() -> None:
    assert next_index(_state(0, -1)) == -1
    assert previous_index(_state(0, -1)) == -1


def test_next_from_unset_cursor_is_first() -> None:
    assert next_index(_state(4, -1)) == 0


def test_next_and_previous_wrap() -> None:
    assert next_index(_state(3, 2)) == 0
    assert previous_index(_state(3, 0)) == 2


@pytest.mark.parametrize("count", [1, 2, 5])
@pytest.mark.parametrize("step", [next_index, previous_index])
def test_stepping_count_times_returns_to_start(count: int, step: object) -> None:
    for start in range(count):
        state = _state(count, start)
        for _ in range(count):
            state = SearchState(matches=state.matches, current_index=step(state))  # type: ignore[operator]
        assert state.current_index == start


def test_out_of_range_cursor_still_lands_in_range() -> None:
    assert 0 <= next_index(_state(3, 10)) < 3
    assert 0 <= previous_index(_state(3, 10)) < 3
