"""Euclidean distance computation.

Distances are exact; every pair of points is compared, giving O(n^2 * d)
time and O(n^2) memory for a full matrix.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.spatial.distance import pdist, squareform

from zadu.core.exceptions import DimensionMismatch
from zadu.core.validation import as_dataset


def euclidean_distance(point1: ArrayLike, point2: ArrayLike) -> float:
    """Compute the Euclidean distance between two points.

    Args:
        point1: First coordinate vector.
        point2: Second coordinate vector of the same length.

    Returns:
        Non-negative distance.

    Raises:
        DimensionMismatch: If the points have different lengths.
    """
    a = np.asarray(point1, dtype=np.float64).ravel()
    b = np.asarray(point2, dtype=np.float64).ravel()
    if a.shape != b.shape:
        raise DimensionMismatch(
            f"points have different lengths ({a.shape[0]} vs {b.shape[0]})"
        )
    return float(np.sqrt(np.sum((a - b) ** 2)))


def distance_matrix(data: ArrayLike) -> NDArray[np.float64]:
    """Compute the symmetric pairwise Euclidean distance matrix.

    Only the upper triangle is computed; it is mirrored into the lower
    triangle and the diagonal is left at zero.

    Args:
        data: Dataset of shape (n_samples, n_features).

    Returns:
        Distance matrix of shape (n_samples, n_samples).
    """
    points = as_dataset(data)
    n = points.shape[0]
    if n < 2:
        return np.zeros((n, n), dtype=np.float64)

    condensed = pdist(points, metric="euclidean")
    return squareform(condensed)
