"""Protocols for the collaborators the search engine drives."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from richtext_find.models.node import Block, Selection, StructuralPath


@runtime_checkable
class EditorProtocol(Protocol):
    """Protocol for host editors holding the document tree."""

    @property
    def root(self) -> Block:
        """Return the current root of the document tree."""
        ...

    def select(self, selection: Selection) -> None:
        """Set the active selection. Raises StalePathError if it does not resolve."""
        ...

    def scroll_into_view(self, path: StructuralPath) -> None:
        """Scroll the leaf at path into view. Raises ViewUnavailableError if it cannot."""
        ...

    def delete_range(self, path: StructuralPath, start: int, end: int) -> None:
        """Delete text[start:end] from the leaf at path."""
        ...

    def insert_text(self, path: StructuralPath, offset: int, text: str) -> None:
        """Insert text into the leaf at path before offset."""
        ...


class TimerHandle(Protocol):
    """Handle for a scheduled callback."""

    def cancel(self) -> None:
        """Prevent the callback from running if it has not run yet."""
        ...


class SchedulerProtocol(Protocol):
    """Protocol for delayed-callback schedulers (asyncio loops satisfy it)."""

    def call_later(self, delay: float, callback: Callable[[], object]) -> TimerHandle:
        """Run callback once after delay seconds."""
        ...
