"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, rejection of bad input
    - check_2d: dimensionality check
    - check_order: non-negative integer orders
    - check_square: square shapes
    - check_index: 1-based bounds
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ValidationError,
)
from pylinalg.core.validation import (
    check_2d,
    check_array,
    check_index,
    check_order,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects bad input."""

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "grid")
        assert result.shape == (2, 2)
        assert result.dtype == np.float64

    def test_int_array_promoted_to_float64(self):
        result = check_array(np.array([[1, 2]], dtype=np.int32), "grid")
        assert result.dtype == np.float64

    def test_float32_promoted_to_float64(self):
        result = check_array(np.array([[1.5]], dtype=np.float32), "grid")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        source = np.array([[1.0, 2.0]])
        result = check_array(source, "grid")
        result[0, 0] = 99.0
        assert source[0, 0] == 1.0

    def test_rejects_ragged_rows(self):
        with pytest.raises(DimensionError, match="inconsistent lengths"):
            check_array([[1, 2, 3], [4, 5]], "grid")

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([[None, 1, 2.0]], "grid")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"], ["c", "d"]], "grid")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([[True, False]], "grid")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([[1 + 2j]], "grid")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="my_grid"):
            check_array([["x"]], "my_grid")


# ═══════════════════════════════════════════════════════════════════════
# check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheck2d:

    def test_accepts_2d(self):
        check_2d(np.zeros((2, 3)), "grid")

    def test_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "grid")

    def test_rejects_3d(self):
        with pytest.raises(DimensionError, match="got 3D"):
            check_2d(np.zeros((2, 2, 2)), "grid")


# ═══════════════════════════════════════════════════════════════════════
# check_order
# ═══════════════════════════════════════════════════════════════════════


class TestCheckOrder:

    @pytest.mark.parametrize("n", [0, 1, 5, np.int64(3)])
    def test_accepts_non_negative_ints(self, n):
        check_order(n, "n")

    def test_rejects_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_order(-1, "n")

    @pytest.mark.parametrize("n", [2.0, "3", True, None])
    def test_rejects_non_int(self, n):
        with pytest.raises(ValidationError, match="expected int"):
            check_order(n, "n")


# ═══════════════════════════════════════════════════════════════════════
# check_square / check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSquare:

    def test_accepts_square(self):
        check_square((3, 3), "lu")

    def test_rejects_rectangular(self):
        with pytest.raises(NotSquareError, match="2x3") as exc_info:
            check_square((2, 3), "lu")
        assert exc_info.value.shape == (2, 3)


class TestCheckIndex:

    def test_accepts_corners(self):
        check_index(1, 1, (2, 4))
        check_index(2, 4, (2, 4))

    @pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (0, 3), (3, 1), (1, 5), (-1, 1)])
    def test_rejects_outside(self, row, col):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            check_index(row, col, (2, 4))
        assert exc_info.value.row == row
        assert exc_info.value.col == col
        assert exc_info.value.shape == (2, 4)
