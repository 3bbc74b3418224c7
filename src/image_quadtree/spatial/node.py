"""
Quadtree node covering a square block of a pixel grid.
"""

from __future__ import annotations

import weakref
from typing import Iterator, Optional, Sequence, Tuple

from ..types import Color
from ..validation import InvalidIndexError, validate_child_index

# Child slot order
TOP_LEFT = 0
TOP_RIGHT = 1
BOTTOM_LEFT = 2
BOTTOM_RIGHT = 3


class SpatialNode:
    """
    A node in the quadtree.

    Attributes:
        x, y: Top-left corner of this region (grid columns/rows), read-only
        size: Side length of this square region, read-only
        color: Color summarizing the region
        children: Four child quadrants (TL, TR, BL, BR) if internal, else None

    The parent link is a weak reference set once by whichever node adopts
    this one, so a subtree never keeps its ancestors alive.
    """

    def __init__(
        self,
        x: int,
        y: int,
        size: int,
        color: Color = 0,
        children: Optional[Sequence[Optional[SpatialNode]]] = None,
    ) -> None:
        if children is not None and len(children) != 4:
            raise ValueError(f"children must have exactly 4 slots, got {len(children)}")

        self._x = x
        self._y = y
        self._size = size
        self.color = color
        self._children: Optional[Tuple[Optional[SpatialNode], ...]] = (
            tuple(children) if children is not None else None
        )
        self._parent: Optional[weakref.ReferenceType[SpatialNode]] = None

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf() else "internal"
        return (
            f"SpatialNode(x={self._x}, y={self._y}, size={self._size}, "
            f"color={self.color!r}, {kind})"
        )

    # -------------------------------------------------------------------------
    # Read-only geometry
    # -------------------------------------------------------------------------

    @property
    def x(self) -> int:
        """Left column."""
        return self._x

    @property
    def y(self) -> int:
        """Top row."""
        return self._y

    @property
    def size(self) -> int:
        """Side length."""
        return self._size

    @property
    def children(self) -> Optional[Tuple[Optional[SpatialNode], ...]]:
        """Child slots in TL, TR, BL, BR order, or None for a leaf."""
        return self._children

    # -------------------------------------------------------------------------
    # Parent linkage
    # -------------------------------------------------------------------------

    @property
    def parent(self) -> Optional[SpatialNode]:
        """Adopting node, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: SpatialNode) -> None:
        where = f"Node ({self._x}, {self._y}) size {self._size}"
        if self._parent is not None:
            raise ValueError(f"{where} already has a parent")
        if node is self:
            raise ValueError(f"{where} cannot be its own parent")
        if any(ancestor is self for ancestor in node.ancestors()):
            raise ValueError(f"{where} cannot be adopted by its own descendant")
        self._parent = weakref.ref(node)

    def ancestors(self) -> Iterator[SpatialNode]:
        """Yield parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def depth(self) -> int:
        """Number of ancestors (0 for the root)."""
        return sum(1 for _ in self.ancestors())

    # -------------------------------------------------------------------------
    # Region tests
    # -------------------------------------------------------------------------

    @property
    def region(self) -> Tuple[int, int, int]:
        """(x, y, size)."""
        return self.x, self.y, self.size

    def contains(self, px: int, py: int) -> bool:
        """Check if (px, py) is within this region, both bounds inclusive."""
        return (
            self.x <= px <= self.x + self.size - 1
            and self.y <= py <= self.y + self.size - 1
        )

    def covers(self, px: int, py: int) -> bool:
        """Check if (px, py) is within [x, x+size) x [y, y+size)."""
        return self.x <= px < self.x + self.size and self.y <= py < self.y + self.size

    # -------------------------------------------------------------------------
    # Children
    # -------------------------------------------------------------------------

    def is_leaf(self) -> bool:
        """True if this node has no children or any child slot is empty."""
        if self.children is None:
            return True
        return any(child is None for child in self.children)

    def child_at(self, index: int) -> Optional[SpatialNode]:
        """
        Get the child in slot index.

        Args:
            index: 0=TL, 1=TR, 2=BL, 3=BR

        Raises:
            InvalidIndexError: If index not in [0, 3] or the node has no children
        """
        validate_child_index(index)
        if self.children is None:
            raise InvalidIndexError(f"Node at ({self.x}, {self.y}) size {self.size} has no children")
        return self.children[index]


__all__ = [
    "SpatialNode",
    "TOP_LEFT",
    "TOP_RIGHT",
    "BOTTOM_LEFT",
    "BOTTOM_RIGHT",
]
