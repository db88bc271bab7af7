"""Step a cursor through the match list with wraparound."""

from richtext_find.models.node import SearchState


def next_index(state: SearchState) -> int:
    """Index after the current one, wrapping to 0. From -1 this is 0.

    Returns -1 when there are no matches.
    """
    count = len(state.matches)
    if count == 0:
        return -1
    return (state.current_index + 1) % count


def previous_index(state: SearchState) -> int:
    """Index before the current one, wrapping to the last match.

    Returns -1 when there are no matches.
    """
    count = len(state.matches)
    if count == 0:
        return -1
    return (state.current_index - 1 + count) % count
