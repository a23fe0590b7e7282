"""Exact k-nearest-neighbor and distance-rank extraction.

All orderings use a stable sort, so points at equal distance keep their
index order. A point is never its own neighbor and never ranked against
itself.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from zadu.core.exceptions import DimensionMismatch, InvalidParameter
from zadu.core.validation import check_neighborhood_size

logger = logging.getLogger(__name__)


def _as_distance_matrix(dist: ArrayLike) -> NDArray[np.float64]:
    dist = np.asarray(dist, dtype=np.float64)
    if dist.ndim != 2 or dist.shape[0] != dist.shape[1]:
        raise DimensionMismatch(
            f"distance matrix must be square, got shape {dist.shape}"
        )
    return dist


def _neighbor_order(dist: NDArray[np.float64]) -> NDArray[np.int64]:
    """Sort every row of a distance matrix, dropping the row's own index.

    The diagonal is pushed to -inf so the stable sort places each point
    first in its own row; the remaining columns then appear in the same
    order as sorting the row with the point filtered out.

    Returns:
        Array of shape (n, n - 1); row i lists all other indices from
        nearest to farthest.
    """
    masked = dist.copy()
    np.fill_diagonal(masked, -np.inf)
    order = np.argsort(masked, axis=1, kind="stable")
    return order[:, 1:].astype(np.int64, copy=False)


def k_nearest_neighbors(dist: ArrayLike, k: int) -> NDArray[np.int64]:
    """Get the k nearest neighbors of every point.

    Args:
        dist: Distance matrix of shape (n, n).
        k: Number of neighbors per point, 1 <= k < n.

    Returns:
        Neighbor indices of shape (n, k), nearest first.

    Raises:
        InvalidParameter: If k is not in [1, n).
    """
    dist = _as_distance_matrix(dist)
    k = check_neighborhood_size(k, dist.shape[0])
    return _neighbor_order(dist)[:, :k]


def rankings(distance_row: ArrayLike, self_index: int) -> NDArray[np.int64]:
    """Rank all points by distance from a reference point.

    Args:
        distance_row: Distances from the reference point to every point.
        self_index: Index of the reference point within the row.

    Returns:
        Array of length n where slot j holds the 0-based rank of point j
        (0 = nearest) and slot self_index holds -1.
    """
    row = np.asarray(distance_row, dtype=np.float64).ravel()
    n = row.shape[0]
    if not 0 <= self_index < n:
        raise InvalidParameter(
            "self_index", self_index, f"must be within [0, {n})"
        )

    others = np.delete(np.arange(n, dtype=np.int64), self_index)
    order = others[np.argsort(row[others], kind="stable")]

    ranks = np.full(n, -1, dtype=np.int64)
    ranks[order] = np.arange(n - 1, dtype=np.int64)
    return ranks


def rank_matrix(dist: ArrayLike) -> NDArray[np.int64]:
    """Compute the rank vector of every point at once.

    Row i equals ``rankings(dist[i], i)``.

    Args:
        dist: Distance matrix of shape (n, n).

    Returns:
        Rank matrix of shape (n, n) with -1 on the diagonal.
    """
    dist = _as_distance_matrix(dist)
    n = dist.shape[0]
    logger.debug(f"Ranking {n} points")

    order = _neighbor_order(dist)
    ranks = np.full((n, n), -1, dtype=np.int64)
    rows = np.arange(n)[:, np.newaxis]
    ranks[rows, order] = np.arange(n - 1, dtype=np.int64)[np.newaxis, :]
    return ranks
