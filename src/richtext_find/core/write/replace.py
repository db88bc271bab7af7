"""Apply replacements to the host editor without invalidating pending matches."""

from collections.abc import Iterable

from loguru import logger

from richtext_find.errors import StalePathError
from richtext_find.models.node import Match, StructuralPath
from richtext_find.protocols import EditorProtocol


def replace_one(editor: EditorProtocol, match: Match, replacement: str) -> bool:
    """Replace the text covered by match with replacement.

    Every match computed before this call must be considered stale afterwards.

    Returns:
        True if the edit was applied, False if the match no longer resolves.
    """
    try:
        editor.delete_range(match.path, match.anchor_offset, match.focus_offset)
        if replacement:
            editor.insert_text(match.path, match.anchor_offset, replacement)
    except StalePathError as e:
        logger.warning("Dropping replacement of stale match: {}", e)
        return False
    return True


def plan_replacements(matches: Iterable[Match]) -> list[Match]:
    """Order matches for a bulk replacement.

    Overlapping matches in the same leaf cannot all be replaced, so each leaf
    keeps its left-most non-overlapping occurrences (as ``str.replace`` would).
    The result is in strict reverse document order: editing a later match first
    never shifts the offsets of an earlier one in the same leaf.
    """
    kept: list[Match] = []
    end_by_path: dict[StructuralPath, int] = {}
    for match in sorted(matches, key=Match.sort_key):
        if match.anchor_offset < end_by_path.get(match.path, 0):
            continue
        kept.append(match)
        end_by_path[match.path] = match.focus_offset
    kept.reverse()
    return kept


def replace_all(editor: EditorProtocol, matches: Iterable[Match], replacement: str) -> int:
    """Replace every match with replacement, last match first.

    Stops at the first match that no longer resolves; the document then needs a
    fresh scan before anything else is applied.

    Returns:
        Number of replacements applied.
    """
    applied = 0
    for match in plan_replacements(matches):
        if not replace_one(editor, match, replacement):
            break
        applied += 1
    logger.info("Replaced {} occurrence(s)", applied)
    return applied
