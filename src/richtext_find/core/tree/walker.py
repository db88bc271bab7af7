"""Flatten a document tree into its text-bearing leaves."""

from richtext_find.models.node import Block, DocumentNode, Leaf, LeafRef, StructuralPath


def walk(root: Block) -> tuple[LeafRef, ...]:
    """List every leaf under root in reading order (pre-order, left to right).

    Concatenating the ``text`` of the result gives the document's reading-order
    text. Leaves are reported separately even when a formatting boundary splits a
    word ("hel" + "lo"), because matches are addressed per leaf; a term that spans
    two leaves is therefore never found.
    """
    refs: list[LeafRef] = []
    # Explicit stack so deep documents do not hit the recursion limit.
    stack: list[tuple[DocumentNode, StructuralPath]] = [(root, ())]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            refs.append(LeafRef(path=path, text=node.text))
            continue
        for i in range(len(node.children) - 1, -1, -1):
            stack.append((node.children[i], (*path, i)))
    return tuple(refs)
