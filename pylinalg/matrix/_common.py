"""
Text rendering helpers shared by Matrix and the solution wrappers.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def format_value(value: float) -> str:
    """
    Shortest round-trip digits in %g layout.

    Decimal exponents below -4 or from 6 upward switch to scientific
    notation with a signed, two-digit exponent ('1e+06', '2.5e-07').
    Integral values print without a fractional part, and the special
    values print as 'NaN', '+Inf' and '-Inf'.
    """
    value = float(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    scientific = np.format_float_scientific(value, trim='-', exp_digits=2)
    exponent = int(scientific.rpartition('e')[2])
    if exponent < -4 or exponent >= 6:
        return scientific
    return np.format_float_positional(value, trim='-')


def render_grid(data: NDArray[np.floating[Any]]) -> str:
    """
    One bracketed line per row, every value followed by a space.

    >>> render_grid(np.array([[1.0, 2.5], [3.0, 4.0]]))
    '[1 2.5 ]\\n[3 4 ]\\n'
    """
    lines = []
    for row in data:
        values = "".join(f"{format_value(v)} " for v in row)
        lines.append(f"[{values}]\n")
    return "".join(lines)
