"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    NotSquareError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged rows)
    and non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        DimensionError: If nested sequences are ragged
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except ValueError as e:
        # numpy refuses inhomogeneous nested sequences
        raise DimensionError(f"{name}: rows have inconsistent lengths: {e}") from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    # bool is accepted as 0/1 by numpy but rejected here
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_order(n: int, name: str) -> None:
    """
    Verify a requested matrix order is a non-negative integer.

    Raises:
        ValidationError: If n is not an int or is negative
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValidationError(f"{name}: expected int, got {type(n).__name__}")
    if n < 0:
        raise ValidationError(f"{name}: must be non-negative, got {n}")


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (rows, columns)
        name: Operation or parameter name for error messages

    Raises:
        NotSquareError: If rows != columns
    """
    rows, columns = shape
    if rows != columns:
        raise NotSquareError(
            f"{name}: requires a square matrix, got {rows}x{columns}",
            shape=shape,
        )


def check_index(row: int, col: int, shape: tuple[int, int]) -> None:
    """
    Verify a 1-based (row, col) pair lies inside a matrix of given shape.

    Raises:
        IndexOutOfRangeError: If either index is below 1 or past the extent
    """
    rows, columns = shape
    if not 1 <= row <= rows:
        raise IndexOutOfRangeError(
            f"row {row} out of range: valid rows are 1..{rows}",
            row=row, col=col, shape=shape,
        )
    if not 1 <= col <= columns:
        raise IndexOutOfRangeError(
            f"column {col} out of range: valid columns are 1..{columns}",
            row=row, col=col, shape=shape,
        )
