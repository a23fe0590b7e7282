"""Input validation shared by the distance, neighbor and metric layers."""

from __future__ import annotations

from numbers import Integral

import numpy as np
from numpy.typing import ArrayLike, NDArray

from zadu.core.exceptions import DimensionMismatch, InvalidParameter


def as_dataset(data: ArrayLike, name: str = "data") -> NDArray[np.float64]:
    """Coerce an array-like of points into a 2-D float64 array.

    Args:
        data: Sequence of equal-length numeric vectors.
        name: Argument name used in error messages.

    Returns:
        Array of shape (n_samples, n_features).

    Raises:
        DimensionMismatch: If points have differing lengths or the input
            is not a sequence of vectors.
    """
    try:
        arr = np.asarray(data, dtype=np.float64)
    except ValueError as e:
        # Ragged nested sequences cannot be coerced to a float array
        raise DimensionMismatch(f"{name} must contain points of equal length ({e})") from e

    if arr.ndim == 1 and arr.size == 0:
        return arr.reshape(0, 0)
    if arr.ndim != 2:
        raise DimensionMismatch(
            f"{name} must be a 2-D array of shape (n_samples, n_features), "
            f"got {arr.ndim}-D"
        )
    return arr


def check_paired(
    high_dim: NDArray[np.float64], low_dim: NDArray[np.float64]
) -> int:
    """Check that both datasets hold the same number of samples.

    Returns:
        The shared sample count.
    """
    if high_dim.shape[0] != low_dim.shape[0]:
        raise DimensionMismatch(
            f"high_dim has {high_dim.shape[0]} samples but low_dim has "
            f"{low_dim.shape[0]}"
        )
    return high_dim.shape[0]


def check_neighborhood_size(k: object, n: int) -> int:
    """Check that k is an integer with 1 <= k < n.

    Returns:
        k as a plain int.
    """
    if isinstance(k, bool) or not isinstance(k, Integral):
        raise InvalidParameter("k", k, "must be an integer")
    k = int(k)
    if k < 1:
        raise InvalidParameter("k", k, "must be at least 1")
    if k >= n:
        raise InvalidParameter(
            "k", k, f"k ({k}) must be less than number of samples ({n})"
        )
    return k
