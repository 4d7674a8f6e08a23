"""Backends for the matrix engine."""

from pylinalg.matrix.backends.cpu import CPUDoolittleBackend, CPUGaussJordanBackend

__all__ = [
    "CPUDoolittleBackend",
    "CPUGaussJordanBackend",
]
