"""
Default color collaborators for the quadtree.

The tree only ever sees these through the ColorAverager and ColorPredicate
contracts, so any deterministic replacement can be injected instead.

Two color models are supported:
- plain scalars (grayscale, labels, measurements): mean_color / colors_equal
- packed 0xAARRGGBB integers: mean_argb_color / argb_similarity
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from .types import Color, ColorPredicate
from .validation import validate_tolerance


def _block(grid: Any, x: int, y: int, size: int) -> np.ndarray:
    """The size x size block at column x, row y."""
    arr = np.asarray(grid)
    return arr[y : y + size, x : x + size]


def mean_color(grid: Any, x: int, y: int, size: int) -> Color:
    """
    Mean of a block.

    Integer grids give the floor of the mean as an int so that a unit block
    returns its own value exactly. Float grids give the float mean.
    """
    block = _block(grid, x, y, size)
    if np.issubdtype(block.dtype, np.integer) or block.dtype == np.bool_:
        total = int(block.astype(np.int64).sum())
        return total // block.size
    return float(block.mean())


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a 0xAARRGGBB integer."""
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def unpack_argb(color: int) -> Tuple[int, int, int, int]:
    """Split a 0xAARRGGBB integer into (a, r, g, b)."""
    color = int(color)
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def mean_argb_color(grid: Any, x: int, y: int, size: int) -> int:
    """Per-channel floor mean of a block of packed ARGB values."""
    block = _block(grid, x, y, size).astype(np.int64)
    n = block.size
    channels = [int(((block >> shift) & 0xFF).sum()) // n for shift in (24, 16, 8, 0)]
    return pack_argb(*channels)


def colors_equal(a: Color, b: Color) -> bool:
    """Exact equality."""
    return a == b


def argb_similarity(tolerance: float) -> ColorPredicate:
    """
    Build a predicate for packed ARGB colors.

    Two colors are similar when each of the red, green and blue channels
    differs by at most ``tolerance``. Alpha is ignored.

    Args:
        tolerance: Maximum per-channel difference (0 = exact RGB match)

    Raises:
        ValidationError: If tolerance is negative
    """
    validate_tolerance(tolerance)

    def similar(a: Color, b: Color) -> bool:
        _, ra, ga, ba = unpack_argb(int(a))
        _, rb, gb, bb = unpack_argb(int(b))
        return abs(ra - rb) <= tolerance and abs(ga - gb) <= tolerance and abs(ba - bb) <= tolerance

    return similar


def argb_to_hex(color: Color) -> str:
    """CSS hex string (#rrggbb) for a packed ARGB color."""
    _, r, g, b = unpack_argb(int(color))
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = [
    "mean_color",
    "mean_argb_color",
    "colors_equal",
    "argb_similarity",
    "pack_argb",
    "unpack_argb",
    "argb_to_hex",
]
