"""Tests for input validation module."""

import numpy as np
import pytest

from image_quadtree.validation import (
    InvalidIndexError,
    MalformedInputError,
    ValidationError,
    is_power_of_two,
    next_power_of_two,
    validate_child_index,
    validate_grid,
    validate_tolerance,
)


class TestGridValidation:
    """Tests for grid validation."""

    def test_valid_list_grid(self):
        """Nested lists are converted to an array."""
        arr = validate_grid([[1, 2], [3, 4]])
        assert isinstance(arr, np.ndarray)
        assert arr.shape == (2, 2)

    def test_valid_array_not_copied(self):
        """ndarrays pass through without a copy."""
        grid = np.zeros((4, 4))
        assert validate_grid(grid) is grid

    def test_single_cell(self):
        """1x1 is a valid grid."""
        assert validate_grid([[7]]).shape == (1, 1)

    def test_non_square_raises(self):
        """Rectangular grids raise MalformedInputError."""
        with pytest.raises(MalformedInputError, match="must be square, got 2x4"):
            validate_grid(np.zeros((2, 4)))

    def test_non_power_of_two_raises(self):
        """Sides that are not powers of two raise."""
        with pytest.raises(MalformedInputError, match="power of two, got 6"):
            validate_grid(np.zeros((6, 6)))

    def test_one_dimensional_raises(self):
        """Flat sequences raise."""
        with pytest.raises(MalformedInputError, match="two-dimensional"):
            validate_grid([1, 2, 3, 4])

    def test_three_dimensional_raises(self):
        """RGB triples per cell are not scalar colors."""
        with pytest.raises(MalformedInputError, match="two-dimensional, got 3"):
            validate_grid(np.zeros((4, 4, 3)))

    def test_empty_raises(self):
        """Empty grids raise."""
        with pytest.raises(MalformedInputError, match="must not be empty"):
            validate_grid(np.zeros((0, 0)))

    def test_ragged_raises(self):
        """Rows of different lengths raise."""
        with pytest.raises(MalformedInputError, match="same length"):
            validate_grid([[1, 2], [3]])

    def test_malformed_is_validation_error(self):
        """MalformedInputError derives from ValidationError and ValueError."""
        with pytest.raises(ValidationError):
            validate_grid(np.zeros((3, 3)))
        with pytest.raises(ValueError):
            validate_grid(np.zeros((3, 3)))


class TestPowerOfTwo:
    """Tests for power-of-two helpers."""

    def test_is_power_of_two(self):
        """Powers of two are recognised, others are not."""
        assert all(is_power_of_two(2**k) for k in range(20))
        assert not any(is_power_of_two(n) for n in (0, -2, 3, 6, 12, 100))

    def test_next_power_of_two(self):
        """Rounds up to the next power of two."""
        assert next_power_of_two(0) == 1
        assert next_power_of_two(1) == 1
        assert next_power_of_two(5) == 8
        assert next_power_of_two(8) == 8
        assert next_power_of_two(9) == 16


class TestChildIndexValidation:
    """Tests for child index validation."""

    def test_valid_indices(self):
        """0..3 are returned unchanged."""
        assert [validate_child_index(i) for i in range(4)] == [0, 1, 2, 3]

    def test_out_of_range(self):
        """Anything else raises InvalidIndexError."""
        with pytest.raises(InvalidIndexError, match="got -1"):
            validate_child_index(-1)
        with pytest.raises(InvalidIndexError, match="got 4"):
            validate_child_index(4)


class TestToleranceValidation:
    """Tests for tolerance validation."""

    def test_valid(self):
        """Zero and positive tolerances are accepted."""
        assert validate_tolerance(0) == 0
        assert validate_tolerance(12.5) == 12.5

    def test_negative_raises(self):
        """Negative tolerance raises ValidationError."""
        with pytest.raises(ValidationError, match="tolerance must be >= 0"):
            validate_tolerance(-1)
