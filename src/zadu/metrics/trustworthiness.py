"""Trustworthiness metric.

Measures whether points that are close in the low-dimensional projection
were also close in the high-dimensional space. Projected neighbors that
were not true neighbors (false closeness) lower the score.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from zadu.core.exceptions import DimensionMismatch
from zadu.core.types import DEFAULT_K, MetricResult
from zadu.metrics.local import neighborhood_preservation, prepare_inputs
from zadu.neighbors.distance import distance_matrix


def trustworthiness_from_distances(
    high_dist: NDArray[np.float64],
    low_dist: NDArray[np.float64],
    k: int = DEFAULT_K,
) -> MetricResult:
    """Compute Trustworthiness from precomputed distance matrices.

    Args:
        high_dist: Distance matrix of the original data, shape (n, n).
        low_dist: Distance matrix of the projection, shape (n, n).
        k: Neighborhood size, 1 <= k < n.

    Returns:
        MetricResult with global and per-point scores.
    """
    high_dist = np.asarray(high_dist, dtype=np.float64)
    low_dist = np.asarray(low_dist, dtype=np.float64)
    if high_dist.shape != low_dist.shape:
        raise DimensionMismatch(
            f"distance matrices differ in shape ({high_dist.shape} vs {low_dist.shape})"
        )
    # Neighbors come from the projection, ranks from the original space
    return neighborhood_preservation(neighbor_dist=low_dist, rank_dist=high_dist, k=k)


def trustworthiness(
    high_dim: ArrayLike,
    low_dim: ArrayLike,
    k: int = DEFAULT_K,
) -> MetricResult:
    """Compute Trustworthiness of a projection.

    Args:
        high_dim: Original data of shape (n_samples, n_features_high).
        low_dim: Projection of shape (n_samples, n_features_low).
        k: Neighborhood size, must be smaller than n_samples.

    Returns:
        MetricResult with the global score, per-point scores, k and n.

    Raises:
        InvalidParameter: If k >= n_samples.
        DimensionMismatch: If the datasets differ in sample count.
    """
    high, low, k = prepare_inputs(high_dim, low_dim, k)
    return trustworthiness_from_distances(distance_matrix(high), distance_matrix(low), k)
