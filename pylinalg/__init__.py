"""
PyLinalg: dense real-valued matrix engine for Python.

Immutable matrices with elementwise arithmetic, transpose, matrix
product, Doolittle LU decomposition, determinant and Gauss-Jordan
inverse.

Submodules:
    matrix: The Matrix type and the lu/det/inv entry points
    core: Exceptions, result envelope, validation, timing, tolerances
"""

__version__ = "0.1.0"

from pylinalg.matrix import Matrix, lu, det, inv
from pylinalg import matrix
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    DimensionMismatchError,
    NotSquareError,
    EmptyMatrixError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    NumericalWarning,
)

__all__ = [
    "__version__",
    "matrix",
    "Matrix",
    "lu",
    "det",
    "inv",
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "NotSquareError",
    "EmptyMatrixError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "NumericalWarning",
]
