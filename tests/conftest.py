"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def wide():
    """2x4 matrix used across arithmetic tests."""
    return Matrix.from_grid([
        [1, 2, 3, 4],
        [4, 3, 2, 1],
    ])


@pytest.fixture
def doolittle_example():
    """3x3 matrix with non-zero leading minors and integral LU factors."""
    return Matrix.from_grid([
        [2, -1, -2],
        [-4, 6, 3],
        [-4, -2, 8],
    ])


@pytest.fixture
def invertible_3x3():
    """3x3 matrix with determinant 105."""
    return Matrix.from_grid([
        [5, 7, 9],
        [4, 3, 8],
        [7, 5, 6],
    ])


@pytest.fixture
def singular_3x3():
    """3x3 matrix whose rows are linearly dependent."""
    return Matrix.from_grid([
        [1, 3, 10],
        [-1, 1, 10],
        [0, 2, 10],
    ])


@pytest.fixture
def diagonally_dominant(rng):
    """
    6x6 matrix that is strictly diagonally dominant by columns.

    Partial pivoting performs no row exchanges on such a matrix, so its
    Doolittle factors coincide with scipy's.
    """
    n = 6
    A = rng.standard_normal((n, n))
    for j in range(n):
        A[j, j] = np.sum(np.abs(A[:, j])) + 1.0
    return A
