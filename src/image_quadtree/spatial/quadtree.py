"""
Quadtree index over a square pixel grid.

The quadtree recursively subdivides an N x N grid (N a power of two) into
quadrants down to single cells, storing an aggregate color on every node.
The finished tree answers level-bounded listing, color matching and point
location queries.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any, List, NamedTuple, Optional

import numpy as np

if TYPE_CHECKING:
    from typing_extensions import Self

from ..color import colors_equal, mean_color
from ..types import Color, ColorAverager, ColorPredicate, GridLike
from ..validation import (
    MalformedInputError,
    as_grid_array,
    is_power_of_two,
    next_power_of_two,
    validate_grid,
)
from .node import SpatialNode


class GridShapeWarning(UserWarning):
    """Warning issued when an image has to be padded before indexing."""

    pass


class MatchResult(NamedTuple):
    """Nodes matching a color query and how many there are."""

    nodes: List[SpatialNode]
    count: int


class QuadtreeIndex:
    """
    Quadtree decomposition of a square grid of colors.

    Every node stores the injected aggregate color of its block. The tree is
    always subdivided down to unit cells, so a grid of side 2^k yields a tree
    of depth k with 4^k leaves.

    Usage:
        index = QuadtreeIndex(pixels)

        # Nodes two levels below the root
        blocks = index.collect_at_level(index.root, 2)

        # Nodes at level 3 whose color is close to red
        index = QuadtreeIndex(pixels, average_color=mean_argb_color,
                              similar_color=argb_similarity(16))
        result = index.find_matching(index.root, 0xFFFF0000, 3)

        # Unit cell holding pixel (10, 4)
        leaf = index.locate(index.root, index.depth, 10, 4)

    Queries never mutate the tree, so a built index can be shared between
    threads for reading.
    """

    def __init__(
        self,
        grid: GridLike,
        *,
        average_color: ColorAverager = mean_color,
        similar_color: ColorPredicate = colors_equal,
    ) -> None:
        """
        Build the index.

        Args:
            grid: Square 2D grid indexed as grid[row][col], side a power of two
            average_color: Aggregator called once per node
            similar_color: Predicate used by find_matching

        Raises:
            MalformedInputError: If the grid is not square with a power-of-two side
        """
        pixels = validate_grid(grid)

        self._average_color = average_color
        self._similar_color = similar_color
        self._size = int(pixels.shape[0])
        self._depth = self._size.bit_length() - 1
        self._root = self.build(pixels, 0, 0, self._size)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def root(self) -> SpatialNode:
        """Root node covering the whole grid."""
        return self._root

    @property
    def size(self) -> int:
        """Side length of the indexed grid."""
        return self._size

    @property
    def depth(self) -> int:
        """Number of levels below the root (log2 of size)."""
        return self._depth

    @property
    def average_color(self) -> ColorAverager:
        """Aggregator used during construction."""
        return self._average_color

    @property
    def similar_color(self) -> ColorPredicate:
        """Predicate used by find_matching."""
        return self._similar_color

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def build(self, grid: Any, x: int, y: int, size: int) -> SpatialNode:
        """
        Recursively build the subtree for the size x size block at (x, y).

        Subdivision always continues down to unit cells; uniform blocks are
        not collapsed.

        Args:
            grid: The pixel grid
            x, y: Top-left corner of the block
            size: Side of the block (power of two)

        Returns:
            Root of the new subtree
        """
        assert is_power_of_two(size), f"block size must be a power of two, got {size}"

        color = self._average_color(grid, x, y, size)

        if size == 1:
            return SpatialNode(x, y, 1, color)

        half = size // 2
        children = (
            self.build(grid, x, y, half),
            self.build(grid, x + half, y, half),
            self.build(grid, x, y + half, half),
            self.build(grid, x + half, y + half, half),
        )

        node = SpatialNode(x, y, size, color, children)
        for child in children:
            if child is not None:
                child.parent = node
        return node

    @classmethod
    def from_image(
        cls,
        image: GridLike,
        *,
        pad_value: Color = 0,
        average_color: ColorAverager = mean_color,
        similar_color: ColorPredicate = colors_equal,
    ) -> Self:
        """
        Build an index from an arbitrary 2D image.

        Images that are not square or whose side is not a power of two are
        padded on the bottom and right with pad_value.

        Args:
            image: 2D array-like indexed as image[row][col]
            pad_value: Color used for padding cells
            average_color: Aggregator called once per node
            similar_color: Predicate used by find_matching

        Returns:
            QuadtreeIndex over the (possibly padded) image
        """
        arr = as_grid_array(image)
        if arr.ndim != 2 or arr.size == 0:
            raise MalformedInputError(
                f"Image must be a non-empty 2D array, got shape {arr.shape}"
            )

        rows, cols = arr.shape
        side = next_power_of_two(max(rows, cols))
        if (rows, cols) != (side, side):
            warnings.warn(
                f"Image of shape {rows}x{cols} padded to {side}x{side} with {pad_value!r}.",
                GridShapeWarning,
                stacklevel=2,
            )
            padded = np.full((side, side), pad_value, dtype=np.result_type(arr, pad_value))
            padded[:rows, :cols] = arr
            arr = padded

        return cls(arr, average_color=average_color, similar_color=similar_color)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def collect_at_level(self, node: Optional[SpatialNode], level: int) -> List[SpatialNode]:
        """
        List the nodes level steps below node.

        Branches that end in a leaf before reaching the level contribute
        that leaf. Children are visited in slot order (TL, TR, BL, BR).

        Args:
            node: Subtree root (None gives an empty list)
            level: Number of levels to descend (<= 0 returns [node])

        Returns:
            Nodes in depth-first order
        """
        if node is None:
            return []

        if node.is_leaf() or level <= 0:
            return [node]

        nodes: List[SpatialNode] = []
        if node.children:
            for child in node.children:
                if child is not None:
                    nodes.extend(self.collect_at_level(child, level - 1))
        return nodes

    def find_matching(
        self,
        node: Optional[SpatialNode],
        target_color: Color,
        level: int,
    ) -> MatchResult:
        """
        Find nodes at a level whose color is similar to target_color.

        Candidates are exactly the nodes collect_at_level would return;
        each is kept if similar_color(candidate.color, target_color).

        Args:
            node: Subtree root (None gives no matches)
            target_color: Color to compare against
            level: Number of levels to descend

        Returns:
            MatchResult of matching nodes in depth-first order and their count
        """
        if node is None:
            return MatchResult([], 0)

        if node.is_leaf() or level <= 0:
            if self._similar_color(node.color, target_color):
                return MatchResult([node], 1)
            return MatchResult([], 0)

        nodes: List[SpatialNode] = []
        count = 0
        if node.children:
            for child in node.children:
                if child is not None:
                    sub = self.find_matching(child, target_color, level - 1)
                    nodes.extend(sub.nodes)
                    count += sub.count

        return MatchResult(nodes, count)

    def locate(
        self,
        node: Optional[SpatialNode],
        level: int,
        px: int,
        py: int,
    ) -> Optional[SpatialNode]:
        """
        Find the node level steps below node whose region holds (px, py).

        Regions are half-open: [x, x+size) x [y, y+size).

        Args:
            node: Subtree root
            level: Number of levels to descend
            px, py: Point in grid coordinates

        Returns:
            The node, or None if the point is outside node, level is
            negative, or the branch ends before reaching level
        """
        if level < 0 or node is None:
            return None

        if level == 0:
            return node if node.covers(px, py) else None

        if node.children:
            for child in node.children:
                if child is not None and child.covers(px, py):
                    found = self.locate(child, level - 1, px, py)
                    if found is not None:
                        return found

        return None


__all__ = ["GridShapeWarning", "MatchResult", "QuadtreeIndex"]
