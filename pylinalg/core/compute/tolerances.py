"""
Tolerance tiers for approximate matrix comparison.

Matrix.equals is exact. Anything that goes through elimination (inverse,
LU reconstruction) picks up rounding error, so comparisons of computed
results use one of these tiers via Matrix.allclose.

Used by the test suite and by Matrix.allclose.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision, well-conditioned input
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Double precision, ill-conditioned input (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Above this condition number a result is treated as ill-conditioned.
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(condition_number: float | None = None) -> ToleranceTier:
    """Select the tolerance tier for a problem with the given condition number."""
    if condition_number is not None and condition_number > ILL_CONDITIONED_THRESHOLD:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
