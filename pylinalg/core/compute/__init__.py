"""
Shared compute infrastructure for PyLinalg.

IMPORTANT: This is NOT where the matrix kernels live. Those go in
pylinalg/matrix/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for approximate comparison
"""

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]
