"""Unit tests for k-nearest-neighbor and rank extraction."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from zadu.core.exceptions import DimensionMismatch, InvalidParameter
from zadu.neighbors.distance import distance_matrix
from zadu.neighbors.ranking import k_nearest_neighbors, rank_matrix, rankings


class TestKNearestNeighbors:
    """Tests for k-NN extraction from a distance matrix."""

    def test_line(self) -> None:
        """Neighbors on a line, nearest first."""
        dist = distance_matrix([[0.0], [1.0], [3.0], [7.0]])
        neighbors = k_nearest_neighbors(dist, 2)
        expected = np.array([
            [1, 2],
            [0, 2],
            [1, 0],
            [2, 1],
        ])
        assert_array_equal(neighbors, expected)

    def test_excludes_self(self, sample_data: np.ndarray) -> None:
        neighbors = k_nearest_neighbors(distance_matrix(sample_data), 10)
        assert neighbors.shape == (60, 10)
        for i, row in enumerate(neighbors):
            assert i not in row
            assert len(set(row.tolist())) == 10

    def test_excludes_self_with_duplicates(self) -> None:
        """A duplicate point at distance zero is a neighbor; self is not."""
        dist = distance_matrix([[0.0], [0.0], [5.0]])
        assert_array_equal(k_nearest_neighbors(dist, 1), [[1], [0], [0]])

    def test_ties_keep_index_order(self, unit_square: np.ndarray) -> None:
        """Equidistant neighbors appear in index order."""
        neighbors = k_nearest_neighbors(distance_matrix(unit_square), 2)
        assert_array_equal(neighbors, [[1, 2], [0, 3], [0, 3], [1, 2]])

    def test_sorted_by_distance(self, sample_data: np.ndarray) -> None:
        dist = distance_matrix(sample_data)
        neighbors = k_nearest_neighbors(dist, 15)
        for i, row in enumerate(neighbors):
            assert np.all(np.diff(dist[i, row]) >= 0)

    @pytest.mark.parametrize("k", [0, -1, 4, 10])
    def test_invalid_k(self, unit_square: np.ndarray, k: int) -> None:
        with pytest.raises(InvalidParameter):
            k_nearest_neighbors(distance_matrix(unit_square), k)

    def test_non_square_rejected(self) -> None:
        with pytest.raises(DimensionMismatch):
            k_nearest_neighbors(np.zeros((3, 4)), 1)


class TestRankings:
    """Tests for single-row distance ranking."""

    def test_known_row(self) -> None:
        """Ties are ranked in index order and self is -1."""
        ranks = rankings([0.0, 3.0, 1.0, 1.0, 2.0], 0)
        assert_array_equal(ranks, [-1, 3, 0, 1, 2])

    def test_self_in_middle(self) -> None:
        ranks = rankings([4.0, 2.0, 0.0, 1.0], 2)
        assert_array_equal(ranks, [2, 1, -1, 0])

    def test_permutation(self, sample_data: np.ndarray) -> None:
        dist = distance_matrix(sample_data)
        ranks = rankings(dist[7], 7)
        assert ranks[7] == -1
        assert_array_equal(np.sort(np.delete(ranks, 7)), np.arange(59))

    def test_self_index_out_of_range(self) -> None:
        with pytest.raises(InvalidParameter):
            rankings([0.0, 1.0], 2)


class TestRankMatrix:
    """Tests for the vectorized rank matrix."""

    def test_matches_rankings(self, sample_data: np.ndarray) -> None:
        """Each row equals the single-row ranking."""
        dist = distance_matrix(sample_data)
        ranks = rank_matrix(dist)
        for i in range(dist.shape[0]):
            assert_array_equal(ranks[i], rankings(dist[i], i))

    def test_matches_rankings_with_ties(self, unit_square: np.ndarray) -> None:
        dist = distance_matrix(unit_square)
        ranks = rank_matrix(dist)
        for i in range(4):
            assert_array_equal(ranks[i], rankings(dist[i], i))

    def test_diagonal(self, sample_data: np.ndarray) -> None:
        ranks = rank_matrix(distance_matrix(sample_data))
        assert np.all(np.diag(ranks) == -1)

    def test_consistent_with_knn(self, sample_data: np.ndarray) -> None:
        """The k nearest neighbors are exactly the points ranked below k."""
        dist = distance_matrix(sample_data)
        ranks = rank_matrix(dist)
        neighbors = k_nearest_neighbors(dist, 8)
        for i in range(dist.shape[0]):
            assert_array_equal(ranks[i, neighbors[i]], np.arange(8))
