"""
Input validation utilities for quadtree construction.

Provides the exception hierarchy and centralized checks for pixel grids.
Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

from typing import Any

import numpy as np


class ValidationError(ValueError):
    """Base exception for quadtree validation errors."""

    pass


class MalformedInputError(ValidationError):
    """Raised when a grid is not a square, power-of-two sized 2D array."""

    pass


class InvalidIndexError(ValidationError, IndexError):
    """Raised when a child slot is requested outside 0..3 or on a leaf."""

    pass


def is_power_of_two(n: int) -> bool:
    """True if n is a positive power of two (1 included)."""
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    p = 1
    while p < n:
        p <<= 1
    return p


def as_grid_array(grid: Any) -> np.ndarray:
    """
    View grid as a numpy array, rejecting ragged rows.

    Raises:
        MalformedInputError: If rows have different lengths
    """
    try:
        arr = np.asarray(grid)
    except ValueError as e:
        # Ragged nested sequences
        raise MalformedInputError(f"Grid rows must all have the same length: {e}") from e

    if arr.dtype == object:
        raise MalformedInputError("Grid rows must all have the same length")
    return arr


def validate_grid(grid: Any) -> np.ndarray:
    """
    Validate a pixel grid and return it as a numpy array.

    Args:
        grid: 2D array-like indexed as grid[row][col]

    Returns:
        The grid as an ndarray (no copy when already an ndarray)

    Raises:
        MalformedInputError: If the grid is not 2D, empty, not square,
            or its side is not a power of two
    """
    arr = as_grid_array(grid)
    if arr.ndim != 2:
        raise MalformedInputError(f"Grid must be two-dimensional, got {arr.ndim} dimension(s)")

    rows, cols = arr.shape
    if rows == 0 or cols == 0:
        raise MalformedInputError("Grid must not be empty")
    if rows != cols:
        raise MalformedInputError(f"Grid must be square, got {rows}x{cols}")
    if not is_power_of_two(rows):
        raise MalformedInputError(f"Grid side must be a power of two, got {rows}")

    return arr


def validate_child_index(index: int) -> int:
    """
    Validate a child slot index.

    Raises:
        InvalidIndexError: If index not in [0, 3]
    """
    if index < 0 or index > 3:
        raise InvalidIndexError(f"Child index must be in [0, 3], got {index}")
    return index


def validate_tolerance(tolerance: float) -> float:
    """
    Validate a color tolerance is non-negative.

    Raises:
        ValidationError: If tolerance < 0
    """
    if tolerance < 0:
        raise ValidationError(f"tolerance must be >= 0, got {tolerance}")
    return tolerance


__all__ = [
    "ValidationError",
    "MalformedInputError",
    "InvalidIndexError",
    "is_power_of_two",
    "next_power_of_two",
    "as_grid_array",
    "validate_grid",
    "validate_child_index",
    "validate_tolerance",
]
