"""
Doolittle LU decomposition kernel.

Factors a square matrix A into a unit lower-triangular L and an upper
triangular U with A = LU. Rows are never reordered, so the factorization
is only exact when every leading principal minor of A is non-zero.

When a computed pivot U[i, i] is exactly zero, the sub-diagonal entries
of column i in L are set to zero instead of dividing. The result is then
not a true factorization of A, but U still carries the zero on its
diagonal, which is what the determinant relies on.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def doolittle(
    A: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], list[int]]:
    """
    Doolittle factorization of a square array.

    Every inner product is accumulated left to right, one term at a time,
    so exactly which pivots come out as 0.0 does not depend on the BLAS
    build.

    Args:
        A: Square float64 array (n x n). Not modified.

    Returns:
        (L, U, guarded) where guarded lists the 0-based columns of L
        that were zeroed because their pivot was exactly zero.
    """
    n = A.shape[0]
    a = A.tolist()
    L = [[0.0] * n for _ in range(n)]
    U = [[0.0] * n for _ in range(n)]
    guarded: list[int] = []

    for i in range(n):
        # Row i of U, k >= i
        for k in range(i, n):
            s = 0.0
            for j in range(i):
                s += L[i][j] * U[j][k]
            U[i][k] = a[i][k] - s

        # Column i of L, rows below the diagonal
        L[i][i] = 1.0
        pivot = U[i][i]
        if pivot == 0.0:
            if i < n - 1:
                guarded.append(i)
            continue
        for k in range(i + 1, n):
            s = 0.0
            for j in range(i):
                s += L[k][j] * U[j][i]
            L[k][i] = (a[k][i] - s) / pivot

    return (
        np.array(L, dtype=np.float64).reshape(n, n),
        np.array(U, dtype=np.float64).reshape(n, n),
        guarded,
    )


def diagonal_product(U: NDArray[np.floating[Any]]) -> float:
    """Product of the diagonal of U, accumulated left to right."""
    product = 1.0
    for value in np.diag(U):
        product *= float(value)
    return product


def determinant(A: NDArray[np.floating[Any]]) -> tuple[float, list[int]]:
    """
    Determinant of a non-empty square array.

    Orders 1 and 2 use the closed forms; larger orders take the diagonal
    product of the Doolittle U factor.

    Returns:
        (det, guarded) with guarded as reported by doolittle()
    """
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0]), []
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0]), []

    _, U, guarded = doolittle(A)
    return diagonal_product(U), guarded
