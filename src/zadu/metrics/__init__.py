"""Neighborhood-preservation metrics for dimensionality reduction."""

from zadu.metrics.trustworthiness import (
    trustworthiness,
    trustworthiness_from_distances,
)
from zadu.metrics.continuity import continuity, continuity_from_distances
from zadu.metrics.local import (
    neighborhood_preservation,
    normalize_errors,
    rank_violation_errors,
)

__all__ = [
    # Trustworthiness
    "trustworthiness",
    "trustworthiness_from_distances",
    # Continuity
    "continuity",
    "continuity_from_distances",
    # Shared scoring
    "neighborhood_preservation",
    "normalize_errors",
    "rank_violation_errors",
]
