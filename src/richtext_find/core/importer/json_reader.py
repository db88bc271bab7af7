"""Parse rich-text JSON values (Slate/Plate shape) into document trees."""

import json
from pathlib import Path
from typing import Any

from richtext_find.models.node import Block, DocumentNode, Leaf

# Root of a value stored as a bare list of top-level elements.
ROOT_TYPE = "editor"
# Root of a value stored as an object with a ``children`` list; its other keys
# are kept in the root's attrs.
OBJECT_ROOT_TYPE = "editor-object"


def _parse_node(raw: Any, location: str) -> DocumentNode:
    """Parse one node. Blocks come back with no children; the caller fills them."""
    if not isinstance(raw, dict):
        msg = f"Expected an object at {location}, got {type(raw).__name__}"
        raise ValueError(msg)

    if "text" in raw:
        text = raw["text"]
        if not isinstance(text, str):
            msg = f"Leaf text at {location} must be a string"
            raise ValueError(msg)
        marks = {k: v for k, v in raw.items() if k != "text"}
        return Leaf(text=text, marks=marks)

    if "children" in raw:
        if not isinstance(raw["children"], list):
            msg = f"Children at {location} must be a list"
            raise ValueError(msg)
        attrs = {k: v for k, v in raw.items() if k not in ("type", "children")}
        return Block(type=raw.get("type"), attrs=attrs)

    msg = f"Node at {location} has neither 'text' nor 'children'"
    raise ValueError(msg)


def _parse_children(items: list[Any], root: Block) -> None:
    # Explicit stack, matching walk(), so any document that loads can be searched.
    stack: list[tuple[list[Any], str, Block]] = [(items, "", root)]
    while stack:
        raw_children, prefix, parent = stack.pop()
        for i, raw in enumerate(raw_children):
            location = f"{prefix}/{i}"
            node = _parse_node(raw, location)
            parent.children.append(node)
            if isinstance(node, Block):
                stack.append((raw["children"], location, node))


def parse_document_data(data: Any) -> Block:
    """Build a document tree from an editor value.

    Args:
        data: Either a list of top-level elements or an object with a
            ``children`` list. Elements carry ``children``; leaves carry ``text``.
            Any other keys are kept as block attributes or leaf marks, and an
            element without ``type`` keeps none.

    Returns:
        Root block of type ``"editor"`` for a list, or ``"editor-object"`` for an
        object, whose other keys become the root's attrs.
    """
    if isinstance(data, dict) and "children" in data:
        root = Block(
            type=OBJECT_ROOT_TYPE,
            attrs={k: v for k, v in data.items() if k != "children"},
        )
        data = data["children"]
    else:
        root = Block(type=ROOT_TYPE)
    if not isinstance(data, list):
        msg = f"Expected a list of elements, got {type(data).__name__}"
        raise ValueError(msg)
    _parse_children(data, root)
    return root


def dump_document_data(root: Block) -> list[dict[str, Any]] | dict[str, Any]:
    """Serialize a document tree back to the shape it was parsed from."""
    children = [child.to_data() for child in root.children]
    if root.type == OBJECT_ROOT_TYPE:
        return {**root.attrs, "children": children}
    return children


def load_document(path: Path) -> Block:
    """Read and parse a UTF-8 JSON document file."""
    with open(path, encoding="utf-8") as f:
        return parse_document_data(json.load(f))
