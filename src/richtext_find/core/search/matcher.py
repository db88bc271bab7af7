"""Locate occurrences of a search term inside document leaves."""

import re
from collections.abc import Iterable

from richtext_find.errors import SearchTermError
from richtext_find.models.node import LeafRef, Match


def compile_term(term: str, *, regex: bool = False) -> re.Pattern[str]:
    """Compile a search term into a case-insensitive matcher.

    Args:
        term: The user-entered term.
        regex: If True, the term is used as a regular expression as typed.
            Otherwise its metacharacters are escaped and it matches literally.

    Raises:
        SearchTermError: If the term is not a valid pattern.
    """
    source = term if regex else re.escape(term)
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as e:
        raise SearchTermError(term, str(e)) from e


def _scan_leaf(pattern: re.Pattern[str], ref: LeafRef) -> list[Match]:
    matches: list[Match] = []
    pos = 0
    text = ref.text
    while pos <= len(text):
        m = pattern.search(text, pos)
        if m is None:
            break
        # Zero-width hits ("a*" before "b") are not selectable.
        if m.end() > m.start():
            matches.append(Match(path=ref.path, anchor_offset=m.start(), focus_offset=m.end()))
        # Resume one past the start so overlapping occurrences are reported.
        pos = m.start() + 1
    return matches


def find_matches(
    leaf_refs: Iterable[LeafRef],
    term: str,
    *,
    regex: bool = False,
) -> list[Match]:
    """Find every occurrence of term, leaf by leaf.

    Each leaf is scanned on its own, so an occurrence split across two leaves is
    not found. Every starting offset that matches yields one Match, including
    overlapping ones ("aa" in "aaa" matches at 0 and 1).

    Returns:
        Matches ordered by leaf document order, then ascending anchor offset.
        An empty term yields an empty list.

    Raises:
        SearchTermError: If the term cannot be compiled.
    """
    if not term:
        return []

    pattern = compile_term(term, regex=regex)
    matches: list[Match] = []
    for ref in leaf_refs:
        matches.extend(_scan_leaf(pattern, ref))
    return matches
