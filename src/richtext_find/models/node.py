"""Domain models for the find-and-replace engine."""

from dataclasses import dataclass, field
from typing import Any

# Child indices from the root to one node. Only valid until the next mutation.
StructuralPath = tuple[int, ...]


@dataclass
class Leaf:
    """A run of text with inline formatting marks.

    Leaves are owned and mutated by the host editor; the engine only reads them.
    """

    text: str
    marks: dict[str, Any] = field(default_factory=dict)

    def to_data(self) -> dict[str, Any]:
        return {"text": self.text, **self.marks}


@dataclass
class Block:
    """A structural node holding an ordered list of children.

    ``type`` is None when the source element had no ``type`` key.
    """

    type: str | None = None
    children: list["Block | Leaf"] = field(default_factory=list)
    attrs: dict[str, Any] = field(default_factory=dict)

    def _shell(self) -> dict[str, Any]:
        data: dict[str, Any] = {} if self.type is None else {"type": self.type}
        data.update(self.attrs)
        data["children"] = []
        return data

    def to_data(self) -> dict[str, Any]:
        """Serialize this block and its subtree without recursing."""
        data = self._shell()
        stack: list[tuple[Block, dict[str, Any]]] = [(self, data)]
        while stack:
            block, out = stack.pop()
            for child in block.children:
                if isinstance(child, Leaf):
                    out["children"].append(child.to_data())
                    continue
                shell = child._shell()
                out["children"].append(shell)
                stack.append((child, shell))
        return data


DocumentNode = Block | Leaf


@dataclass(frozen=True)
class LeafRef:
    """A text-bearing leaf as seen by a single walk of the tree."""

    path: StructuralPath
    text: str


@dataclass(frozen=True)
class Point:
    """A character offset inside the leaf at ``path``."""

    path: StructuralPath
    offset: int


@dataclass(frozen=True)
class Selection:
    """An anchor/focus pair, as set on the host editor."""

    anchor: Point
    focus: Point


@dataclass(frozen=True)
class Match:
    """One occurrence of the search term inside a single leaf.

    Offsets are half-open: the matched text is ``text[anchor_offset:focus_offset]``.
    """

    path: StructuralPath
    anchor_offset: int
    focus_offset: int

    def __post_init__(self) -> None:
        if not 0 <= self.anchor_offset < self.focus_offset:
            msg = (
                f"Invalid match offsets ({self.anchor_offset}, {self.focus_offset}) "
                f"at path {list(self.path)!r}"
            )
            raise ValueError(msg)

    @property
    def selection(self) -> Selection:
        return Selection(
            anchor=Point(self.path, self.anchor_offset),
            focus=Point(self.path, self.focus_offset),
        )

    def sort_key(self) -> tuple[StructuralPath, int]:
        """Key ordering matches by document position."""
        return self.path, self.anchor_offset


@dataclass(frozen=True)
class SearchState:
    """Snapshot of one search cycle.

    A new state is produced for every scan; states are never patched after a
    mutation because their paths and offsets may no longer resolve.
    """

    term: str = ""
    replace_term: str = ""
    matches: tuple[Match, ...] = ()
    current_index: int = -1
    error: str | None = None

    @property
    def current_match(self) -> Match | None:
        if 0 <= self.current_index < len(self.matches):
            return self.matches[self.current_index]
        return None


@dataclass(frozen=True)
class SearchStatus:
    """What the caller displays: match count and 0-based cursor (-1 when none)."""

    match_count: int = 0
    current_index: int = -1

    @property
    def has_matches(self) -> bool:
        return self.match_count > 0

    @property
    def label(self) -> str:
        """Position label such as ``3/17``, or ``0/0`` when there is nothing to show."""
        if not self.has_matches:
            return "0/0"
        return f"{self.current_index + 1}/{self.match_count}"
