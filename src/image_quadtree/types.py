"""
Common types for quadtree construction and queries.

This module provides the type aliases and callable protocols shared by the
tree and the color helpers:
- Color: scalar color value stored on every node
- GridLike: anything numpy can view as a 2D grid
- ColorAverager: aggregate color of a square block of the grid
- ColorPredicate: similarity test between two colors
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Union

import numpy as np

Color = Union[int, float]

GridLike = Union[np.ndarray, Sequence[Sequence[Color]]]


class ColorAverager(Protocol):
    """
    Aggregate the size x size block of grid starting at column x, row y.

    Must be deterministic. Called once per node during construction.
    """

    def __call__(self, grid: Any, x: int, y: int, size: int) -> Color: ...


class ColorPredicate(Protocol):
    """Deterministic, symmetric similarity test between two colors."""

    def __call__(self, a: Color, b: Color) -> bool: ...


__all__ = [
    "Color",
    "GridLike",
    "ColorAverager",
    "ColorPredicate",
]
