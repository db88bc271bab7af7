"""In-memory host editor over a document tree."""

from collections.abc import Callable

from loguru import logger

from richtext_find.core.tree.navigation import check_range, leaf_at
from richtext_find.errors import StalePathError, ViewUnavailableError
from richtext_find.models.node import Block, Selection, StructuralPath


class InMemoryEditor:
    """Host editor holding a document tree, a selection and an optional view.

    Mutations are applied directly to the tree's leaves. Every mutation bumps
    ``version`` so callers can tell that paths captured earlier may be stale.

    Args:
        root: Root block of the document.
        surface: Callback that scrolls the rendered leaf at a path into view.
            Without one, the editor is headless and scroll requests fail with
            ViewUnavailableError.
    """

    def __init__(
        self,
        root: Block,
        *,
        surface: Callable[[StructuralPath], None] | None = None,
    ) -> None:
        self._root = root
        self.surface = surface
        self.selection: Selection | None = None
        self.version = 0

    @property
    def root(self) -> Block:
        return self._root

    def text_at(self, path: StructuralPath) -> str:
        """Return the text of the leaf at path."""
        return leaf_at(self._root, path).text

    def select(self, selection: Selection) -> None:
        """Set the active selection after checking both points resolve."""
        for point in (selection.anchor, selection.focus):
            leaf = leaf_at(self._root, point.path)
            if not 0 <= point.offset <= len(leaf.text):
                raise StalePathError(
                    point.path, f"offset {point.offset} outside text of length {len(leaf.text)}"
                )
        self.selection = selection

    def scroll_into_view(self, path: StructuralPath) -> None:
        if self.surface is None:
            raise ViewUnavailableError(path)
        leaf_at(self._root, path)
        self.surface(path)

    def delete_range(self, path: StructuralPath, start: int, end: int) -> None:
        leaf = leaf_at(self._root, path)
        check_range(leaf, path, start, end)
        leaf.text = leaf.text[:start] + leaf.text[end:]
        self._mutated()

    def insert_text(self, path: StructuralPath, offset: int, text: str) -> None:
        leaf = leaf_at(self._root, path)
        check_range(leaf, path, offset, offset)
        leaf.text = leaf.text[:offset] + text + leaf.text[offset:]
        self._mutated()

    def _mutated(self) -> None:
        self.version += 1
        # A selection may point past the end of a shortened leaf.
        self.selection = None
        logger.debug("Document mutated, now at version {}", self.version)
