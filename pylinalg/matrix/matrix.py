"""
Matrix: immutable dense real matrix.

Entries are stored in a single read-only, C-contiguous float64 buffer of
shape (rows, columns). Every operation returns a new Matrix; elimination
algorithms run on private copies of the buffer.

Positions are 1-based at the public accessor (at) and 0-based everywhere
else.

Construction:
    Matrix.from_grid([[1, 2], [3, 4]])
    Matrix.from_array(ndarray)
    Matrix.zeros(n)
    Matrix.identity(n)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any
import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.tolerances import ToleranceTier, CPU_FP64
from pylinalg.core.exceptions import (
    ShapeMismatchError,
    DimensionMismatchError,
    EmptyMatrixError,
    SingularMatrixError,
    NumericalWarning,
)
from pylinalg.core.validation import (
    check_array,
    check_2d,
    check_order,
    check_square,
    check_index,
)
from pylinalg.matrix._common import render_grid
from pylinalg.matrix._doolittle import doolittle, determinant
from pylinalg.matrix._gauss_jordan import gauss_jordan_inverse


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Immutable rectangular grid of float64 values.

    A matrix with zero rows or zero columns is always the canonical
    empty matrix (0 x 0), shared by every constructor.
    """
    _data: NDArray[np.floating[Any]]
    _rows: int
    _columns: int

    # numpy scalars defer to Matrix operators instead of broadcasting
    __array_ufunc__ = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_grid(cls, grid: ArrayLike) -> Matrix:
        """
        Build a Matrix from a rectangular grid of numbers.

        Parameters
        ----------
        grid : array-like
            Nested sequence of rows. An empty grid, or a grid whose first
            row is empty, yields the canonical empty matrix.

        Raises
        ------
        ValidationError
            If the grid holds non-numeric values.
        DimensionError
            If rows have different lengths or the grid is not 2D.
        """
        if _has_empty_first_row(grid):
            return _EMPTY
        return cls._build(check_array(grid, "grid"))

    @classmethod
    def from_array(cls, array: NDArray) -> Matrix:
        """Build a Matrix from a 2D numpy array. The array is copied."""
        return cls._build(check_array(array, "array"))

    @classmethod
    def zeros(cls, n: int) -> Matrix:
        """Square n x n matrix of zeros."""
        check_order(n, "n")
        return cls._build(np.zeros((n, n), dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """Square n x n identity matrix."""
        check_order(n, "n")
        return cls._build(np.eye(n, dtype=np.float64))

    @classmethod
    def empty(cls) -> Matrix:
        """The canonical empty matrix."""
        return _EMPTY

    @classmethod
    def _build(cls, data: NDArray) -> Matrix:
        """Internal builder. Takes ownership of data."""
        if data.ndim == 1 and data.shape[0] == 0:
            return _EMPTY

        check_2d(data, "grid")

        rows, columns = data.shape
        if rows == 0 or columns == 0:
            return _EMPTY

        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray) -> Matrix:
        buffer = np.ascontiguousarray(data, dtype=np.float64)
        buffer.flags.writeable = False
        return cls(_data=buffer, _rows=buffer.shape[0], _columns=buffer.shape[1])

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the underlying buffer."""
        return self._data.view()

    def at(self, row: int, col: int) -> float:
        """
        Value at a 1-based (row, col) position.

        Raises
        ------
        IndexOutOfRangeError
            If row or col is 0, negative, or past the matrix extent.
        """
        check_index(row, col, self.shape)
        return float(self._data[row - 1, col - 1])

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the grid."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    # ------------------------------------------------------------------
    # Elementwise arithmetic
    # ------------------------------------------------------------------

    def _check_same_shape(self, other: Matrix, operation: str) -> None:
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"{operation}: shapes differ, "
                f"{self._rows}x{self._columns} vs {other._rows}x{other._columns}",
                left_shape=self.shape,
                right_shape=other.shape,
            )

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        self._check_same_shape(other, "add")
        return Matrix._build(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        """
        Elementwise difference.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        self._check_same_shape(other, "subtract")
        return Matrix._build(self._data - other._data)

    def scale(self, k: float) -> Matrix:
        """Every entry multiplied by k."""
        return Matrix._build(self._data * float(k))

    # ------------------------------------------------------------------
    # Transpose and product
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        """columns x rows matrix with entry (i, j) = self(j, i)."""
        return Matrix._build(self._data.T.copy())

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self * other.

        Raises
        ------
        DimensionMismatchError
            If self.columns != other.rows.
        """
        if self._columns != other._rows:
            raise DimensionMismatchError(
                f"multiply: left operand has {self._columns} columns "
                f"but right operand has {other._rows} rows",
                left_shape=self.shape,
                right_shape=other.shape,
            )
        return Matrix._build(self._data @ other._data)

    # ------------------------------------------------------------------
    # LU decomposition, determinant, inverse
    # ------------------------------------------------------------------

    def _warn_guarded(self, guarded: list[int]) -> None:
        if guarded:
            warnings.warn(
                f"Zero pivot in LU decomposition at column(s) {guarded}; "
                f"sub-diagonal entries set to 0, L*U may differ from the input",
                NumericalWarning,
                stacklevel=3,
            )

    def decompose_lu(self) -> tuple[Matrix, Matrix]:
        """
        Doolittle LU decomposition without pivoting.

        Returns
        -------
        (L, U) : tuple of Matrix
            L is unit lower-triangular, U is upper-triangular and
            L * U equals self when every leading principal minor is
            non-zero.

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        """
        check_square(self.shape, "decompose_lu")
        L, U, guarded = doolittle(self._data)
        self._warn_guarded(guarded)
        return Matrix._build(L), Matrix._build(U)

    def determinant(self) -> float:
        """
        Determinant via the diagonal of the Doolittle U factor.

        Orders 1 and 2 use the closed forms.

        Raises
        ------
        EmptyMatrixError
            If the matrix is empty.
        NotSquareError
            If the matrix is not square.
        """
        if self._rows == 0 or self._columns == 0:
            raise EmptyMatrixError("determinant: matrix is empty")
        check_square(self.shape, "determinant")

        det, guarded = determinant(self._data)
        self._warn_guarded(guarded)
        return det

    def invert(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination on [self | I].

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        EmptyMatrixError
            If the matrix is empty.
        SingularMatrixError
            If the determinant is exactly zero.
        """
        check_square(self.shape, "invert")
        det = self.determinant()
        if det == 0.0:
            raise SingularMatrixError(
                "invert: determinant is zero, matrix cannot be inverted",
                matrix_name="A",
                determinant=det,
            )
        inverse, _, finite = gauss_jordan_inverse(self._data)
        if not finite:
            warnings.warn(
                "Gauss-Jordan elimination met a zero pivot; "
                "inverse contains non-finite values",
                NumericalWarning,
                stacklevel=2,
            )
        return Matrix._build(inverse)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equals(self, other: Matrix) -> bool:
        """Same shape and every entry exactly equal."""
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    def allclose(self, other: Matrix, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """Same shape and every entry equal within the tolerance tier."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # +0.0 folds -0.0 into 0.0 so equal matrices hash equally
        return hash((self.shape, (self._data + 0.0).tobytes()))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, k: object) -> Matrix:
        if isinstance(k, bool) or not isinstance(k, Real):
            return NotImplemented
        return self.scale(k)

    __rmul__ = __mul__

    def __neg__(self) -> Matrix:
        return self.scale(-1.0)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return render_grid(self._data)

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"


def _has_empty_first_row(grid: object) -> bool:
    """True for [] and for nested grids whose first row holds no values."""
    if not isinstance(grid, Sequence) or isinstance(grid, str):
        return False
    if len(grid) == 0:
        return True
    first = grid[0]
    return isinstance(first, Sequence) and not isinstance(first, str) and len(first) == 0


_EMPTY = Matrix._wrap(np.zeros((0, 0), dtype=np.float64))
