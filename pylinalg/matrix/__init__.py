"""
Dense matrix module.

Public API:
    Matrix      - Immutable dense matrix with arithmetic, transpose,
                  product, LU decomposition, determinant and inverse
    lu(A)       - Doolittle LU decomposition with diagnostics
    det(A)      - Determinant
    inv(A)      - Gauss-Jordan inverse with diagnostics
"""

from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.solution import (
    LUParams,
    LUSolution,
    InverseParams,
    InverseSolution,
)
from pylinalg.matrix.solvers import lu, det, inv

__all__ = [
    "Matrix",
    "lu",
    "det",
    "inv",
    "LUParams",
    "LUSolution",
    "InverseParams",
    "InverseSolution",
]
