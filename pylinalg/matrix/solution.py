"""
Matrix solution types.

Contains the parameter payloads and user-facing solution wrappers
returned by lu() and inv().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pylinalg.core.compute.tolerances import ToleranceTier, select_tolerance
from pylinalg.core.result import Result

if TYPE_CHECKING:
    from pylinalg.matrix.matrix import Matrix


@dataclass(frozen=True)
class LUParams:
    """Doolittle factors: L unit lower-triangular, U upper-triangular."""
    L: 'Matrix'
    U: 'Matrix'


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for Gauss-Jordan inversion.

    row_swaps counts the exchanges made by the column-0 reordering pass.
    """
    inverse: 'Matrix'
    determinant: float
    row_swaps: int


@dataclass
class LUSolution:
    """
    User-facing LU decomposition results.

    Wraps Result[LUParams] and provides convenient accessors.
    """
    _result: Result[LUParams]
    _matrix: 'Matrix'

    @property
    def L(self) -> 'Matrix':
        return self._result.params.L

    @property
    def U(self) -> 'Matrix':
        return self._result.params.U

    @property
    def guarded_columns(self) -> tuple[int, ...]:
        """0-based columns of L zeroed by the zero-pivot guard."""
        return tuple(self._result.info.get('guarded_columns', ()))

    @property
    def is_exact(self) -> bool:
        """True when no zero-pivot guard fired, so L * U reproduces the input."""
        return not self.guarded_columns

    def reconstruct(self) -> 'Matrix':
        """L * U."""
        return self.L.multiply(self.U)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        lines = [
            f"Doolittle LU decomposition ({self._matrix.rows}x{self._matrix.columns})",
            "",
            "L:",
            str(self.L).rstrip("\n"),
            "",
            "U:",
            str(self.U).rstrip("\n"),
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        n = self._matrix.rows
        return f"LUSolution(order={n}, backend={self.backend_name!r})"


@dataclass
class InverseSolution:
    """
    User-facing inversion results.

    Wraps Result[InverseParams] and provides convenient accessors.
    """
    _result: Result[InverseParams]
    _matrix: 'Matrix'

    @property
    def inverse(self) -> 'Matrix':
        return self._result.params.inverse

    @property
    def determinant(self) -> float:
        return self._result.params.determinant

    @property
    def row_swaps(self) -> int:
        return self._result.params.row_swaps

    @property
    def condition_number(self) -> float | None:
        return self._result.info.get('condition_number')

    @property
    def tolerance(self) -> ToleranceTier:
        """Tolerance tier matching the conditioning of the input."""
        return select_tolerance(self.condition_number)

    def verify(self) -> bool:
        """Check that inverse * A is the identity within self.tolerance."""
        from pylinalg.matrix.matrix import Matrix

        product = self.inverse.multiply(self._matrix)
        return product.allclose(Matrix.identity(self._matrix.rows), self.tolerance)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        lines = [
            f"Gauss-Jordan inverse ({self._matrix.rows}x{self._matrix.columns})",
            f"Determinant: {self.determinant:.6g}",
        ]
        if self.condition_number is not None:
            lines.append(f"Condition number: {self.condition_number:.6g}")
        lines.append("")
        lines.append(str(self.inverse).rstrip("\n"))
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        n = self._matrix.rows
        return f"InverseSolution(order={n}, determinant={self.determinant:.6g})"
