"""Exceptions raised by the find-and-replace engine."""

from richtext_find.models.node import StructuralPath


class FindReplaceError(Exception):
    """Base class for find-and-replace failures."""


class SearchTermError(FindReplaceError):
    """The search term cannot be compiled into a matcher."""

    def __init__(self, term: str, reason: str) -> None:
        super().__init__(f"Invalid search term {term!r}: {reason}")
        self.term = term
        self.reason = reason


class StalePathError(FindReplaceError):
    """A path or offset no longer resolves in the current document tree."""

    def __init__(self, path: StructuralPath, reason: str) -> None:
        super().__init__(f"Path {list(path)!r} is stale: {reason}")
        self.path = path
        self.reason = reason


class HostUnavailableError(FindReplaceError):
    """No host editor is attached."""


class ViewUnavailableError(FindReplaceError):
    """The host has no rendering surface for a path."""

    def __init__(self, path: StructuralPath) -> None:
        super().__init__(f"No rendering surface for path {list(path)!r}")
        self.path = path
