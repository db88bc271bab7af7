"""Tests for structural path resolution."""

import pytest

from richtext_find.core.tree.navigation import check_range, leaf_at, resolve_path
from richtext_find.errors import StalePathError
from richtext_find.models.node import Block, Leaf


def test_resolve_path_to_block_and_leaf(sample_root: Block) -> None:
    block = resolve_path(sample_root, (2, 0))
    assert isinstance(block, Block)
    assert block.type == "p"
    assert leaf_at(sample_root, (2, 0, 0)).text == "Cats and more cats"


def test_empty_path_is_root(sample_root: Block) -> None:
    assert resolve_path(sample_root, ()) is sample_root


@pytest.mark.parametrize("path", [(3,), (1, 7), (0, 0, 0), (-1,)])
def test_unresolvable_path_is_stale(sample_root: Block, path: tuple[int, ...]) -> None:
    with pytest.raises(StalePathError):
        resolve_path(sample_root, path)


def test_leaf_at_rejects_block(sample_root: Block) -> None:
    with pytest.raises(StalePathError, match="not a leaf"):
        leaf_at(sample_root, (1,))


def test_check_range_bounds() -> None:
    leaf = Leaf(text="abc")
    check_range(leaf, (0,), 0, 3)
    check_range(leaf, (0,), 3, 3)
    with pytest.raises(StalePathError):
        check_range(leaf, (0,), 2, 4)
    with pytest.raises(StalePathError):
        check_range(leaf, (0,), 2, 1)
