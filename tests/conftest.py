"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest


# Seed for reproducibility
RANDOM_SEED = 42


@pytest.fixture(scope="session")
def random_state() -> np.random.Generator:
    """Seeded random generator for reproducible tests."""
    return np.random.default_rng(RANDOM_SEED)


@pytest.fixture
def unit_square() -> np.ndarray:
    """Corners of the unit square."""
    return np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])


@pytest.fixture
def clustered_pair() -> tuple[np.ndarray, np.ndarray]:
    """Two well-separated clusters in 3-D and a faithful 2-D projection."""
    high_dim = np.array([
        [1.0, 2.0, 3.0],
        [2.0, 3.0, 4.0],
        [1.5, 2.5, 3.5],
        [10.0, 11.0, 12.0],
        [11.0, 12.0, 13.0],
    ])
    low_dim = np.array([
        [0.5, 1.0],
        [1.0, 1.5],
        [0.75, 1.25],
        [5.0, 6.0],
        [5.5, 6.5],
    ])
    return high_dim, low_dim


@pytest.fixture
def line_pair() -> tuple[np.ndarray, np.ndarray]:
    """Points on a line and a projection that breaks some neighborhoods.

    Original positions 0, 1, 2, 3, 10 are mapped to 0, 5, 6, 1, 20. With
    k=1, Trustworthiness errors are [1, 0, 0, 1, 0] and Continuity errors
    are [0, 1, 0, 1, 1] (ties resolved by index order).
    """
    high_dim = np.array([[0.0], [1.0], [2.0], [3.0], [10.0]])
    low_dim = np.array([[0.0], [5.0], [6.0], [1.0], [20.0]])
    return high_dim, low_dim


@pytest.fixture
def sample_data(random_state: np.random.Generator) -> np.ndarray:
    """Random high-dimensional data of shape (60, 10)."""
    return random_state.standard_normal((60, 10))


@pytest.fixture
def random_projection(random_state: np.random.Generator) -> np.ndarray:
    """Random 2-D points with no relation to sample_data."""
    return random_state.standard_normal((60, 2))


# Markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")
    config.addinivalue_line("markers", "property: marks property-based tests")
