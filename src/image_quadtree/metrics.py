"""
Quadtree inspection metrics.

Provides structural measures of a built tree:
- Node, leaf and depth counts
- Tiling check: children exactly cover their parent
- Compression summary: pixels represented per node at a level

All metrics walk the tree read-only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from .spatial.node import SpatialNode

if TYPE_CHECKING:
    from .spatial.quadtree import QuadtreeIndex


def iter_nodes(node: Optional[SpatialNode]) -> Iterator[SpatialNode]:
    """
    Pre-order traversal of a subtree, children in slot order.

    Uses an explicit stack, so arbitrarily deep subtrees are safe.
    """
    if node is None:
        return
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if current.children:
            # Reversed so slot 0 is visited first
            for child in reversed(current.children):
                if child is not None:
                    stack.append(child)


def node_count(node: Optional[SpatialNode]) -> int:
    """Number of nodes in the subtree."""
    return sum(1 for _ in iter_nodes(node))


def leaf_count(node: Optional[SpatialNode]) -> int:
    """Number of leaves in the subtree."""
    return sum(1 for n in iter_nodes(node) if n.is_leaf())


def tree_depth(node: Optional[SpatialNode]) -> int:
    """
    Longest root-to-leaf path length in edges.

    Returns:
        0 for a single leaf, -1 for None
    """
    if node is None:
        return -1
    base = node.depth
    return max(n.depth for n in iter_nodes(node)) - base


def check_tiling(node: Optional[SpatialNode]) -> List[str]:
    """
    Verify that every internal node's children exactly tile it.

    Checks per internal node: all four slots filled, each child half the
    size, origins at the four quadrant corners, and each child's parent
    link pointing back. Unit nodes must be leaves.

    Returns:
        One message per violation (empty list when the subtree is valid)
    """
    issues: List[str] = []

    for n in iter_nodes(node):
        where = f"Node ({n.x}, {n.y}) size {n.size}"

        if n.children is None:
            continue
        if n.size == 1:
            issues.append(f"{where}: unit node has children")
            continue

        missing = [i for i, c in enumerate(n.children) if c is None]
        if missing:
            issues.append(f"{where}: missing children in slots {missing}")
            continue

        half = n.size // 2
        expected = [
            (n.x, n.y),
            (n.x + half, n.y),
            (n.x, n.y + half),
            (n.x + half, n.y + half),
        ]
        for i, (child, (ex, ey)) in enumerate(zip(n.children, expected)):
            assert child is not None
            if child.size != half:
                issues.append(f"{where}: child {i} has size {child.size}, expected {half}")
            if (child.x, child.y) != (ex, ey):
                issues.append(
                    f"{where}: child {i} at ({child.x}, {child.y}), expected ({ex}, {ey})"
                )
            if child.parent is not n:
                issues.append(f"{where}: child {i} parent link does not point back")

    return issues


def compression_summary(index: QuadtreeIndex, level: int) -> Dict[str, Any]:
    """
    Summarize how many pixels each node at a level stands for.

    Args:
        index: Built quadtree index
        level: Level passed to collect_at_level

    Returns:
        Dictionary with nodes_at_level, pixels and ratio (pixels per node)
    """
    nodes = index.collect_at_level(index.root, level)
    pixels = index.size * index.size
    return {
        "nodes_at_level": len(nodes),
        "pixels": pixels,
        "ratio": pixels / len(nodes) if nodes else 0.0,
    }


__all__ = [
    "iter_nodes",
    "node_count",
    "leaf_count",
    "tree_depth",
    "check_tiling",
    "compression_summary",
]
