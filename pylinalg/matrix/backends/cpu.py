"""
CPU backends for the matrix engine.

Both backends run the matrix kernels and wrap their output in a
Result envelope with timing and diagnostics.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.compute.timing import Timer
from pylinalg.core.exceptions import EmptyMatrixError, SingularMatrixError
from pylinalg.core.result import Result
from pylinalg.core.validation import check_square
from pylinalg.matrix._doolittle import doolittle, determinant
from pylinalg.matrix._gauss_jordan import gauss_jordan_inverse
from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.solution import LUParams, InverseParams


class CPUDoolittleBackend:
    """Doolittle LU decomposition without pivoting."""

    @property
    def name(self) -> str:
        return 'cpu_doolittle'

    def solve(self, matrix: Matrix) -> Result[LUParams]:
        """
        Factor a square matrix.

        Unlike Matrix.decompose_lu, a zero pivot does not emit a warning;
        it is recorded in Result.warnings and info['guarded_columns'].
        """
        check_square(matrix.shape, "lu")

        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section('factorization'):
            L, U, guarded = doolittle(matrix.data)

        if guarded:
            warnings_list.append(
                f"zero pivot at column(s) {guarded}; L*U may differ from the input"
            )

        timer.stop()

        return Result(
            params=LUParams(L=Matrix._build(L), U=Matrix._build(U)),
            info={
                'method': 'doolittle',
                'order': matrix.rows,
                'guarded_columns': guarded,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUGaussJordanBackend:
    """Gauss-Jordan inversion on the augmented matrix [A | I]."""

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, matrix: Matrix) -> Result[InverseParams]:
        """
        Invert a square, non-singular matrix.

        Raises:
            NotSquareError: If the matrix is not square
            EmptyMatrixError: If the matrix is empty
            SingularMatrixError: If the determinant is exactly zero
        """
        check_square(matrix.shape, "inv")
        if matrix.rows == 0:
            raise EmptyMatrixError("inv: matrix is empty")

        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section('determinant'):
            det, _ = determinant(matrix.data)

        if det == 0.0:
            raise SingularMatrixError(
                "inv: determinant is zero, matrix cannot be inverted",
                matrix_name="A",
                determinant=det,
            )

        with timer.section('elimination'):
            inverse, swaps, finite = gauss_jordan_inverse(matrix.data)

        if not finite:
            warnings_list.append(
                "zero pivot during elimination; inverse contains non-finite values"
            )

        with timer.section('condition_number'):
            condition_number = float(np.linalg.cond(matrix.data))

        timer.stop()

        return Result(
            params=InverseParams(
                inverse=Matrix._build(inverse),
                determinant=det,
                row_swaps=swaps,
            ),
            info={
                'method': 'gauss_jordan',
                'order': matrix.rows,
                'condition_number': condition_number,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
