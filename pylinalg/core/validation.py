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
    NotSymmetricError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and complex inputs (only real symmetric problems are supported).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported, expected real data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square with at least one row.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not square or is empty
    """
    m, n = array.shape
    if m != n:
        raise DimensionError(f"{name}: matrix must be square, got shape {array.shape}")
    if n < 1:
        raise DimensionError(f"{name}: matrix dimension must be >= 1, got {n}")


def check_symmetric(
    array: NDArray[np.floating[Any]],
    name: str,
    tol: float,
) -> float:
    """
    Verify a square matrix is symmetric.

    The tolerance is absolute, scaled by max(1, max|A|), so that large
    entries may carry proportionally large rounding differences.

    Args:
        array: Square matrix to check
        name: Parameter name for error messages
        tol: Allowed asymmetry (before scaling)

    Returns:
        The largest |A[i, j] - A[j, i]| found

    Raises:
        NotSymmetricError: If the asymmetry exceeds the scaled tolerance
    """
    max_asymmetry = float(np.max(np.abs(array - array.T))) if array.size else 0.0
    scale = max(1.0, float(np.max(np.abs(array)))) if array.size else 1.0
    if max_asymmetry > tol * scale:
        i, j = np.unravel_index(np.argmax(np.abs(array - array.T)), array.shape)
        raise NotSymmetricError(
            f"{name}: matrix is not symmetric (max |A - A'| = {max_asymmetry:.3e} "
            f"at ({i}, {j}), tolerance {tol * scale:.3e})",
            matrix_name=name,
            max_asymmetry=max_asymmetry,
            tolerance=tol * scale,
        )
    return max_asymmetry
