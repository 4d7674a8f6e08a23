"""
Tests for elementwise arithmetic, transpose and matrix product.
"""

import numpy as np
import pytest

from pylinalg import (
    DimensionMismatchError,
    Matrix,
    ShapeMismatchError,
)


@pytest.fixture
def other_wide():
    return Matrix.from_grid([
        [-5, 8, 1, 3],
        [0, 2, 4, -9],
    ])


@pytest.fixture
def single_row():
    return Matrix.from_grid([[1, 2, 3, 4]])


# ═══════════════════════════════════════════════════════════════════════
# add / subtract
# ═══════════════════════════════════════════════════════════════════════


class TestAdd:

    def test_values(self, wide, other_wide):
        result = wide.add(other_wide)
        assert result.shape == wide.shape
        assert result.to_list() == [[-4, 10, 4, 7], [4, 5, 6, -8]]

    def test_shape_mismatch(self, wide, single_row):
        with pytest.raises(ShapeMismatchError) as exc_info:
            wide.add(single_row)
        assert exc_info.value.left_shape == (2, 4)
        assert exc_info.value.right_shape == (1, 4)

    def test_shape_mismatch_reversed(self, single_row, other_wide):
        with pytest.raises(ShapeMismatchError):
            single_row.add(other_wide)

    def test_operands_unchanged(self, wide, other_wide):
        before = wide.to_list()
        wide.add(other_wide)
        assert wide.to_list() == before

    def test_operator(self, wide, other_wide):
        assert (wide + other_wide).equals(wide.add(other_wide))

    def test_empty_plus_empty(self):
        empty = Matrix.empty()
        assert empty.add(empty) is empty


class TestSubtract:

    def test_values(self, wide, other_wide):
        result = wide.subtract(other_wide)
        assert result.shape == wide.shape
        assert result.to_list() == [[6, -6, 2, 1], [4, 1, -2, 10]]

    def test_shape_mismatch(self, wide, single_row):
        with pytest.raises(ShapeMismatchError):
            wide.subtract(single_row)

    def test_operator(self, wide, other_wide):
        assert (wide - other_wide).equals(wide.subtract(other_wide))

    def test_add_then_subtract_round_trips(self, rng):
        A = Matrix.from_array(rng.integers(-50, 50, size=(4, 3)))
        B = Matrix.from_array(rng.integers(-50, 50, size=(4, 3)))
        assert A.add(B).subtract(B).equals(A)


class TestScale:

    def test_by_two(self, wide):
        result = wide.scale(2)
        assert result.shape == wide.shape
        assert result.to_list() == [[2, 4, 6, 8], [8, 6, 4, 2]]

    def test_by_half(self, wide):
        result = wide.scale(0.5)
        assert result.to_list() == [[0.5, 1, 1.5, 2], [2, 1.5, 1, 0.5]]

    def test_operators(self, wide):
        assert (wide * 3).equals(wide.scale(3))
        assert (3 * wide).equals(wide.scale(3))
        assert (np.float64(3.0) * wide).equals(wide.scale(3))
        assert (-wide).equals(wide.scale(-1))

    def test_matrix_times_matrix_not_supported(self, wide):
        with pytest.raises(TypeError):
            wide * wide

    def test_empty(self):
        assert Matrix.empty().scale(5) is Matrix.empty()


# ═══════════════════════════════════════════════════════════════════════
# transpose
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_shape_swapped(self, wide):
        t = wide.transpose()
        assert t.rows == wide.columns
        assert t.columns == wide.rows

    def test_values(self, wide):
        t = wide.transpose()
        assert t.to_list() == [[1, 4], [2, 3], [3, 2], [4, 1]]
        for i in range(1, wide.rows + 1):
            for j in range(1, wide.columns + 1):
                assert t.at(j, i) == wide.at(i, j)

    def test_involution(self, rng):
        A = Matrix.from_array(rng.standard_normal((3, 5)))
        assert A.transpose().transpose().equals(A)

    def test_empty(self):
        assert Matrix.empty().transpose() is Matrix.empty()


# ═══════════════════════════════════════════════════════════════════════
# multiply
# ═══════════════════════════════════════════════════════════════════════


class TestMultiply:

    def test_values(self):
        A = Matrix.from_grid([[-2, 8, 1], [3, 1, 6]])
        B = Matrix.from_grid([[1, 2], [-4, 3], [-2, 5]])
        result = A.multiply(B)
        assert result.shape == (2, 2)
        assert result.to_list() == [[-36, 25], [-13, 39]]

    def test_dimension_mismatch(self, single_row):
        A = Matrix.from_grid([[-2, 8, 1], [3, 1, 6]])
        with pytest.raises(DimensionMismatchError) as exc_info:
            A.multiply(single_row)
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (1, 4)

    def test_outer_shape(self, rng):
        A = Matrix.from_array(rng.standard_normal((2, 5)))
        B = Matrix.from_array(rng.standard_normal((5, 3)))
        assert A.multiply(B).shape == (2, 3)

    def test_identity_left_and_right(self, rng):
        A = Matrix.from_array(rng.integers(-9, 9, size=(4, 4)))
        I = Matrix.identity(4)
        assert I.multiply(A).equals(A)
        assert A.multiply(I).equals(A)

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((3, 4))
        b = rng.standard_normal((4, 2))
        result = Matrix.from_array(a).multiply(Matrix.from_array(b))
        np.testing.assert_allclose(result.to_numpy(), a @ b, rtol=1e-12)

    def test_operator(self, wide):
        t = wide.transpose()
        assert (wide @ t).equals(wide.multiply(t))
