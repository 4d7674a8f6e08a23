"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Matrix operations raise the most specific
class below so callers can branch on the failure kind.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Elementwise operation on matrices of different shapes.

    Attributes:
        left_shape: (rows, columns) of the receiver
        right_shape: (rows, columns) of the argument
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class DimensionMismatchError(DimensionError):
    """
    Matrix product with incompatible inner dimensions.

    Attributes:
        left_shape: (rows, columns) of the left operand
        right_shape: (rows, columns) of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Raised by LU decomposition, determinant and inverse.

    Attributes:
        shape: (rows, columns) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class EmptyMatrixError(DimensionError):
    """Determinant requested on the empty (0 x 0) matrix."""
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    1-based positional access outside the matrix.

    Also an IndexError so generic sequence-handling code can catch it.

    Attributes:
        row: Requested 1-based row
        col: Requested 1-based column
        shape: (rows, columns) of the matrix
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an operation requires invertibility but the determinant
    of the matrix is exactly zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The computed determinant, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class NumericalWarning(UserWarning):
    """
    Non-fatal numerical condition.

    Emitted when an algorithm falls back to a degenerate branch, such as
    the zero-pivot guard in Doolittle LU.
    """
    pass
