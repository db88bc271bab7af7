"""Fake host editors and sample documents for testing the find-and-replace engine."""

from collections.abc import Callable
from typing import Any

from richtext_find.editor import InMemoryEditor
from richtext_find.errors import StalePathError
from richtext_find.models.node import Block, Leaf, Selection, StructuralPath


class RecordingEditor(InMemoryEditor):
    """In-memory editor that records every call made by the engine.

    ``after_mutation`` runs after each delete/insert, to simulate host callbacks
    that re-enter the controller.
    """

    def __init__(self, root: Block, **kwargs: Any) -> None:
        super().__init__(root, **kwargs)
        self.calls: list[tuple[Any, ...]] = []
        self.after_mutation: Callable[[], None] | None = None

    def select(self, selection: Selection) -> None:
        self.calls.append(("select", selection))
        super().select(selection)

    def scroll_into_view(self, path: StructuralPath) -> None:
        self.calls.append(("scroll", path))
        super().scroll_into_view(path)

    def delete_range(self, path: StructuralPath, start: int, end: int) -> None:
        self.calls.append(("delete", path, start, end))
        super().delete_range(path, start, end)
        if self.after_mutation is not None:
            self.after_mutation()

    def insert_text(self, path: StructuralPath, offset: int, text: str) -> None:
        self.calls.append(("insert", path, offset, text))
        super().insert_text(path, offset, text)
        if self.after_mutation is not None:
            self.after_mutation()

    def calls_named(self, name: str) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == name]


class StaleEditor(InMemoryEditor):
    """Editor whose tree was re-rendered behind the engine's back.

    Reads still work, but every selection or mutation is rejected as stale.
    """

    def __init__(self, root: Block, **kwargs: Any) -> None:
        super().__init__(root, **kwargs)
        self.rejected = 0

    def _reject(self, path: StructuralPath) -> None:
        self.rejected += 1
        raise StalePathError(path, "tree re-rendered")

    def select(self, selection: Selection) -> None:
        self._reject(selection.anchor.path)

    def delete_range(self, path: StructuralPath, start: int, end: int) -> None:
        self._reject(path)

    def insert_text(self, path: StructuralPath, offset: int, text: str) -> None:
        self._reject(path)


def single_leaf(text: str) -> Block:
    """Return a document holding one paragraph with one leaf, at path (0, 0)."""
    return Block(type="editor", children=[Block(type="p", children=[Leaf(text=text)])])


# Leaves, in reading order:
#   (0, 0)     "The Cat Chronicles"
#   (1, 0)     "A cat sat. "
#   (1, 1)     "Another cat"          (bold)
#   (1, 2)     " napped."
#   (2, 0, 0)  "Cats and more cats"
SAMPLE_DOCUMENT: list[dict[str, Any]] = [
    {"type": "h1", "children": [{"text": "The Cat Chronicles"}]},
    {
        "type": "p",
        "children": [
            {"text": "A cat sat. "},
            {"text": "Another cat", "bold": True},
            {"text": " napped."},
        ],
    },
    {
        "type": "blockquote",
        "children": [{"type": "p", "children": [{"text": "Cats and more cats"}]}],
    },
]
