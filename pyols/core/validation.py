"""
Boundary validators.

Every public entry point runs its inputs through these before any matrix is
formed. Each check tests one condition, names the offending parameter and
reports the value it saw. Nothing is coerced beyond converting array-likes
to float64.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyols.core.exceptions import ValidationError, DimensionError, EmptyInputError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert an array-like to a C-contiguous float64 array.

    Args:
        array: Input to convert
        name: Parameter name for error messages

    Returns:
        C-contiguous float64 numpy.ndarray (a copy unless the input already
        had that layout)

    Raises:
        ValidationError: If the input is ragged, mixed, non-numeric or complex
    """
    try:
        arr = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.dtype == object:
        raise ValidationError(f"{name}: object dtype, input is ragged or not numeric")

    real = np.issubdtype(arr.dtype, np.number) and not np.issubdtype(arr.dtype, np.complexfloating)
    if not real:
        raise ValidationError(f"{name}: non-numeric or complex dtype {arr.dtype}")

    return np.ascontiguousarray(arr, dtype=np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """Raise ValidationError if the array holds NaN or Inf."""
    finite = np.isfinite(array)
    if not finite.all():
        n_nan = int(np.isnan(array).sum())
        n_inf = int(np.isinf(array).sum())
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """Raise DimensionError unless array.ndim == ndim."""
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D, got shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 2, name)


def check_positive_count(value: int, name: str) -> int:
    """
    Validate a declared dimension such as nobs or nparams.

    Python and numpy integers are accepted; bool and float are not.

    Returns:
        The count as a plain int

    Raises:
        ValidationError: Not an integer, or negative
        EmptyInputError: Zero
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    count = int(value)
    if count < 0:
        raise ValidationError(f"{name}: expected a non-negative integer, got {count}")
    if count == 0:
        raise EmptyInputError(f"{name}: must be at least 1, got 0")
    return count


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """Raise EmptyInputError if any axis has length zero."""
    if array.size == 0:
        raise EmptyInputError(f"{name}: empty input with shape {array.shape}")


def check_length(array: NDArray[np.floating[Any]], expected: int, name: str) -> None:
    """Raise DimensionError unless len(array) == expected."""
    actual = array.shape[0]
    if actual != expected:
        raise DimensionError(f"{name}: expected length {expected}, got {actual}")


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Require every array to have the same first dimension.

    Raises:
        ValueError: If names and arrays differ in number (caller bug)
        DimensionError: If the lengths differ
    """
    if len(names) != len(arrays):
        raise ValueError(f"got {len(arrays)} arrays but {len(names)} names")

    lengths = [a.shape[0] for a in arrays]
    if len(set(lengths)) > 1:
        pairs = ", ".join(f"{n}={k}" for n, k in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {pairs}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """Raise ValidationError if the array has fewer than min_samples rows."""
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )
