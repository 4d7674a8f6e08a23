"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by the
matrix engine.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pylinalg.core.protocols import Backend
from pylinalg.core.result import Result
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
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
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
