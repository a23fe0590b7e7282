"""Rank-violation scoring shared by Trustworthiness and Continuity.

Both metrics take the k-neighborhood of each point in one space and look
up where those neighbors rank in the other space. Every neighbor whose
0-based rank r is at least k adds (r - k) to the point's error. Errors are
normalized by

    score = 1 - 2 / (n * k * (2n - 3k - 1)) * sum(errors)
    local_i = 1 - 2 * error_i / (k * (2n - 3k - 1))

Trustworthiness takes neighbors from the projection and ranks from the
original space; Continuity swaps the roles.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from zadu.core.types import MetricResult
from zadu.core.validation import as_dataset, check_neighborhood_size, check_paired
from zadu.neighbors.ranking import k_nearest_neighbors, rank_matrix

logger = logging.getLogger(__name__)


def prepare_inputs(
    high_dim: ArrayLike,
    low_dim: ArrayLike,
    k: int,
) -> tuple[NDArray[np.float64], NDArray[np.float64], int]:
    """Coerce and validate a dataset pair before any distance is computed.

    Returns:
        Tuple of (high_dim, low_dim, k) as validated arrays and int.

    Raises:
        InvalidParameter: If k is not in [1, n).
        DimensionMismatch: If the datasets are malformed or differ in size.
    """
    high = as_dataset(high_dim, "high_dim")
    k = check_neighborhood_size(k, high.shape[0])
    low = as_dataset(low_dim, "low_dim")
    check_paired(high, low)
    return high, low, k


def rank_violation_errors(
    neighbors: NDArray[np.int64],
    ranks: NDArray[np.int64],
    k: int,
) -> NDArray[np.float64]:
    """Accumulate the per-point rank-violation error.

    Args:
        neighbors: Neighbor indices of shape (n, k) from one space.
        ranks: Rank matrix of shape (n, n) from the other space.
        k: Neighborhood size.

    Returns:
        Per-point errors of shape (n,).
    """
    neighbor_ranks = np.take_along_axis(ranks, neighbors, axis=1)
    violations = np.where(neighbor_ranks >= k, neighbor_ranks - k, 0)
    return violations.sum(axis=1).astype(np.float64)


def normalize_errors(
    point_errors: NDArray[np.float64],
    n: int,
    k: int,
) -> tuple[float, NDArray[np.float64]]:
    """Turn per-point errors into a global score and local scores.

    A point (or dataset) without violations always scores 1.0. When
    2n - 3k - 1 is zero the normalizer is undefined and any nonzero error
    maps to -inf.

    Returns:
        Tuple of (score, local_scores).
    """
    local_norm = np.float64(k * (2 * n - 3 * k - 1))
    total_error = np.float64(point_errors.sum())

    with np.errstate(divide="ignore", invalid="ignore"):
        local_penalty = np.where(
            point_errors == 0, 0.0, 2.0 * point_errors / local_norm
        )
        global_penalty = (
            0.0 if total_error == 0 else 2.0 * total_error / (n * local_norm)
        )

    return float(1.0 - global_penalty), 1.0 - local_penalty


def neighborhood_preservation(
    neighbor_dist: NDArray[np.float64],
    rank_dist: NDArray[np.float64],
    k: int,
) -> MetricResult:
    """Score how well neighborhoods in one space are ranked in another.

    Args:
        neighbor_dist: Distance matrix supplying each point's k-neighborhood.
        rank_dist: Distance matrix supplying the full rankings.
        k: Neighborhood size, 1 <= k < n.

    Returns:
        MetricResult for the pair.
    """
    n = neighbor_dist.shape[0]
    neighbors = k_nearest_neighbors(neighbor_dist, k)
    ranks = rank_matrix(rank_dist)

    point_errors = rank_violation_errors(neighbors, ranks, k)
    score, local_scores = normalize_errors(point_errors, n, k)

    logger.debug(
        f"n={n}, k={k}: total error {point_errors.sum():.0f}, score {score:.6f}"
    )
    return MetricResult(score=score, local_scores=local_scores, k=k, n=n)
