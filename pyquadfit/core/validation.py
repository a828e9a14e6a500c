"""
Input validation utilities for PyQuadFit.

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

from pyquadfit.core.exceptions import (
    ValidationError,
    DimensionError,
    InsufficientPointsError,
)


def check_not_none(value: Any, name: str) -> None:
    """
    Verify a required argument was supplied.

    Args:
        value: Argument to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is None
    """
    if value is None:
        raise ValidationError(f"{name}: required, got None")


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    # Everything downstream is plain double precision
    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    n_nan, n_inf = count_nonfinite(array)
    if n_nan or n_inf:
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def count_nonfinite(array: NDArray[np.floating[Any]]) -> tuple[int, int]:
    """Return the number of NaN and Inf entries in array."""
    return int(np.sum(np.isnan(array))), int(np.sum(np.isinf(array)))


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
    Verify a 2D array is square.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If the row and column counts differ
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(f"{name}: expected square matrix, got shape {array.shape}")


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        InsufficientPointsError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientPointsError(
            f"{name}: insufficient points, requires at least {min_samples}, got {n}",
            n_points=n,
            min_points=min_samples,
        )


def check_positive_int(value: int, name: str) -> None:
    """
    Verify value is a strictly positive integer.

    Raises:
        ValidationError: If value is not an int or is <= 0
    """
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected integer, got {type(value).__name__}")
    if value <= 0:
        raise ValidationError(f"{name}: must be positive, got {value}")


def check_increasing_range(low: float, high: float, low_name: str, high_name: str) -> None:
    """
    Verify that high is strictly greater than low.

    Raises:
        ValidationError: If high <= low
    """
    if high <= low:
        raise ValidationError(
            f"{high_name} must be greater than {low_name}, got {low_name}={low}, {high_name}={high}"
        )


def check_non_negative(value: float, name: str) -> None:
    """
    Verify value is >= 0.

    Raises:
        ValidationError: If value is negative or NaN
    """
    if not value >= 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")


def check_positive(value: float, name: str) -> None:
    """
    Verify value is > 0.

    Raises:
        ValidationError: If value is zero, negative or NaN
    """
    if not value > 0:
        raise ValidationError(f"{name}: must be positive, got {value}")
