"""Exact distance and neighbor computations."""

from zadu.neighbors.distance import distance_matrix, euclidean_distance
from zadu.neighbors.ranking import k_nearest_neighbors, rank_matrix, rankings

__all__ = [
    "euclidean_distance",
    "distance_matrix",
    "k_nearest_neighbors",
    "rankings",
    "rank_matrix",
]
