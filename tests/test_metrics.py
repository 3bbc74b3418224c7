"""Tests for quadtree inspection metrics."""

import numpy as np
import pytest

from image_quadtree import QuadtreeIndex, SpatialNode
from image_quadtree.metrics import (
    check_tiling,
    compression_summary,
    iter_nodes,
    leaf_count,
    node_count,
    tree_depth,
)


@pytest.fixture
def index():
    """8x8 index over distinct values."""
    return QuadtreeIndex(np.arange(64).reshape(8, 8))


class TestCounts:
    """Tests for node, leaf and depth counts."""

    def test_node_count(self, index):
        """1 + 4 + 16 + 64 nodes."""
        assert node_count(index.root) == 85

    def test_leaf_count(self, index):
        """One leaf per cell."""
        assert leaf_count(index.root) == 64

    def test_tree_depth(self, index):
        """Depth matches the index depth."""
        assert tree_depth(index.root) == 3
        assert tree_depth(index.root.child_at(0)) == 2
        assert tree_depth(index.locate(index.root, 3, 0, 0)) == 0

    def test_none(self):
        """None subtrees are empty."""
        assert node_count(None) == 0
        assert leaf_count(None) == 0
        assert tree_depth(None) == -1
        assert list(iter_nodes(None)) == []

    def test_pre_order(self):
        """iter_nodes visits a node before its children, slot order."""
        idx = QuadtreeIndex([[1, 2], [3, 4]])
        colors = [n.color for n in iter_nodes(idx.root)]
        assert colors == [2, 1, 2, 3, 4]


class TestTiling:
    """Tests for structural tiling checks."""

    def test_built_tree_is_valid(self, index):
        """Built trees have no tiling issues."""
        assert check_tiling(index.root) == []

    def test_detects_bad_origin_and_parent(self):
        """Misplaced children and missing parent links are reported."""
        children = [
            SpatialNode(0, 0, 1),
            SpatialNode(1, 0, 1),
            SpatialNode(0, 1, 1),
            SpatialNode(0, 0, 1),
        ]
        node = SpatialNode(0, 0, 2, 0, children)

        issues = check_tiling(node)
        assert any("child 3 at (0, 0), expected (1, 1)" in msg for msg in issues)
        assert sum("parent link" in msg for msg in issues) == 4

    def test_detects_bad_size(self):
        """Children of the wrong size are reported."""
        children = [SpatialNode(0, 0, 2), SpatialNode(2, 0, 2), SpatialNode(0, 2, 2), SpatialNode(2, 2, 2)]
        node = SpatialNode(0, 0, 8, 0, children)
        for child in children:
            child.parent = node

        issues = check_tiling(node)
        assert sum("expected 4" in msg for msg in issues) == 4

    def test_detects_missing_slots(self):
        """Partially populated children are reported."""
        node = SpatialNode(0, 0, 2, 0, [SpatialNode(0, 0, 1), None, None, None])
        assert check_tiling(node) == ["Node (0, 0) size 2: missing children in slots [1, 2, 3]"]

    def test_detects_children_on_unit_node(self):
        """Unit nodes must be leaves."""
        leaf = SpatialNode(0, 0, 1)
        node = SpatialNode(0, 0, 1, 0, [leaf, leaf, leaf, leaf])
        assert check_tiling(node) == ["Node (0, 0) size 1: unit node has children"]


class TestCompressionSummary:
    """Tests for the compression summary."""

    def test_levels(self, index):
        """Ratio is pixels per node at the level."""
        assert compression_summary(index, 0) == {"nodes_at_level": 1, "pixels": 64, "ratio": 64.0}
        assert compression_summary(index, 1)["ratio"] == 16.0
        assert compression_summary(index, 3)["nodes_at_level"] == 64
        assert compression_summary(index, 3)["ratio"] == 1.0
