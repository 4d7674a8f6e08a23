"""
Solver dispatch for the matrix engine.

Provides lu(), det() and inv() as functional entry points that accept a
Matrix or any 2D array-like.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pylinalg.core.exceptions import ValidationError
from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.solution import LUSolution, InverseSolution
from pylinalg.matrix.backends.cpu import CPUDoolittleBackend, CPUGaussJordanBackend


BackendChoice = Literal['auto', 'cpu']


def _ensure_matrix(data: ArrayLike | Matrix) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix.from_grid(data)


def _check_backend(backend: str) -> None:
    if backend not in ('auto', 'cpu'):
        raise ValidationError(
            f"Unknown backend: {backend!r}. Must be 'auto' or 'cpu'."
        )


def lu(
    A: ArrayLike | Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> LUSolution:
    """
    Doolittle LU decomposition.

    Parameters
    ----------
    A : array-like or Matrix
        Square matrix.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    LUSolution with L, U and diagnostics.

    Raises
    ------
    NotSquareError
        If A is not square.
    """
    matrix = _ensure_matrix(A)
    _check_backend(backend)
    result = CPUDoolittleBackend().solve(matrix)
    return LUSolution(_result=result, _matrix=matrix)


def det(A: ArrayLike | Matrix) -> float:
    """
    Determinant of a square matrix.

    Raises
    ------
    EmptyMatrixError
        If A is empty.
    NotSquareError
        If A is not square.
    """
    return _ensure_matrix(A).determinant()


def inv(
    A: ArrayLike | Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> InverseSolution:
    """
    Gauss-Jordan inverse.

    Parameters
    ----------
    A : array-like or Matrix
        Square, non-singular matrix.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    InverseSolution with the inverse, determinant and diagnostics.

    Raises
    ------
    NotSquareError
        If A is not square.
    EmptyMatrixError
        If A is empty.
    SingularMatrixError
        If the determinant of A is exactly zero.
    """
    matrix = _ensure_matrix(A)
    _check_backend(backend)
    result = CPUGaussJordanBackend().solve(matrix)
    return InverseSolution(_result=result, _matrix=matrix)
