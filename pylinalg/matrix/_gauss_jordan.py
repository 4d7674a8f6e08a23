"""
Gauss-Jordan inversion kernel.

Works on a private augmented array [A | I]. Row exchanges are limited to a
single bottom-up pass comparing column 0 only, so a zero pivot outside the
first column is not avoided. Callers reject singular input beforehand by
checking the determinant.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def augment(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Build the n x 2n array [A | I]."""
    order = A.shape[0]
    augmented = np.zeros((order, 2 * order), dtype=np.float64)
    augmented[:, :order] = A
    augmented[:, order:] = np.eye(order)
    return augmented


def reorder_rows(augmented: NDArray[np.floating[Any]]) -> int:
    """
    Bubble larger column-0 entries upward in one pass, in place.

    Scans from the last row to the second, swapping rows i and i-1
    whenever augmented[i-1, 0] < augmented[i, 0].

    Returns:
        Number of swaps performed
    """
    swaps = 0
    for i in range(augmented.shape[0] - 1, 0, -1):
        if augmented[i - 1, 0] < augmented[i, 0]:
            augmented[[i - 1, i]] = augmented[[i, i - 1]]
            swaps += 1
    return swaps


def eliminate(augmented: NDArray[np.floating[Any]]) -> None:
    """Clear every off-diagonal entry of the left block, in place."""
    order = augmented.shape[0]
    for i in range(order):
        for j in range(order):
            if j == i:
                continue
            ratio = augmented[j, i] / augmented[i, i]
            augmented[j] -= augmented[i] * ratio


def normalize(augmented: NDArray[np.floating[Any]]) -> None:
    """Divide each row by its diagonal entry, in place."""
    for i in range(augmented.shape[0]):
        pivot = augmented[i, i]
        augmented[i] /= pivot


def gauss_jordan_inverse(
    A: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], int, bool]:
    """
    Invert a non-singular square array.

    A zero pivot left in place by reorder_rows produces inf/nan entries;
    they are returned as computed and reported through the finite flag.

    Args:
        A: Square float64 array (n x n). Not modified.

    Returns:
        (inverse, swaps, finite)
    """
    order = A.shape[0]
    augmented = augment(A)
    swaps = reorder_rows(augmented)
    with np.errstate(divide='ignore', invalid='ignore'):
        eliminate(augmented)
        normalize(augmented)

    inverse = augmented[:, order:].copy()
    return inverse, swaps, bool(np.all(np.isfinite(inverse)))
