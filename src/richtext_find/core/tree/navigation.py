"""Tree navigation: resolving structural paths to nodes."""

from richtext_find.errors import StalePathError
from richtext_find.models.node import Block, DocumentNode, Leaf, StructuralPath


def resolve_path(root: Block, path: StructuralPath) -> DocumentNode:
    """Return the node addressed by path.

    Raises:
        StalePathError: If any index along the path does not exist.
    """
    node: DocumentNode = root
    for depth, index in enumerate(path):
        if not isinstance(node, Block):
            raise StalePathError(path, f"a leaf sits at depth {depth}")
        if not 0 <= index < len(node.children):
            raise StalePathError(path, f"no child {index} at depth {depth}")
        node = node.children[index]
    return node


def leaf_at(root: Block, path: StructuralPath) -> Leaf:
    """Return the leaf addressed by path, raising StalePathError for anything else."""
    node = resolve_path(root, path)
    if not isinstance(node, Leaf):
        raise StalePathError(path, "path addresses a block, not a leaf")
    return node


def check_range(leaf: Leaf, path: StructuralPath, start: int, end: int) -> None:
    """Raise StalePathError unless 0 <= start <= end <= len(leaf.text)."""
    if not 0 <= start <= end <= len(leaf.text):
        raise StalePathError(
            path, f"range [{start}, {end}) outside text of length {len(leaf.text)}"
        )
