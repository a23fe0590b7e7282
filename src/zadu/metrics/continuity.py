"""Continuity metric.

Measures whether points that were close in the high-dimensional space
remain close in the low-dimensional projection. True neighbors pushed
apart by the projection (false distance) lower the score.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from zadu.core.exceptions import DimensionMismatch
from zadu.core.types import DEFAULT_K, MetricResult
from zadu.metrics.local import neighborhood_preservation, prepare_inputs
from zadu.neighbors.distance import distance_matrix


def continuity_from_distances(
    high_dist: NDArray[np.float64],
    low_dist: NDArray[np.float64],
    k: int = DEFAULT_K,
) -> MetricResult:
    """Compute Continuity from precomputed distance matrices."""
    high_dist = np.asarray(high_dist, dtype=np.float64)
    low_dist = np.asarray(low_dist, dtype=np.float64)
    if high_dist.shape != low_dist.shape:
        raise DimensionMismatch(
            f"distance matrices differ in shape ({high_dist.shape} vs {low_dist.shape})"
        )
    # Neighbors come from the original space, ranks from the projection
    return neighborhood_preservation(neighbor_dist=high_dist, rank_dist=low_dist, k=k)


def continuity(
    high_dim: ArrayLike,
    low_dim: ArrayLike,
    k: int = DEFAULT_K,
) -> MetricResult:
    """Compute Continuity of a projection.

    Args:
        high_dim: Original data of shape (n_samples, n_features_high).
        low_dim: Projection of shape (n_samples, n_features_low).
        k: Neighborhood size, must be smaller than n_samples.

    Returns:
        MetricResult with the global score, per-point scores, k and n.
    """
    high, low, k = prepare_inputs(high_dim, low_dim, k)
    return continuity_from_distances(distance_matrix(high), distance_matrix(low), k)
