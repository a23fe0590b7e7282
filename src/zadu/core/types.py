"""Core type definitions for ZADU.

This module defines the value types passed between the distance, neighbor
and metric layers, and the result records returned to callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray


# Type aliases
Dataset = NDArray[np.float64]
DistanceMatrix = NDArray[np.float64]
NeighborIndices = NDArray[np.int64]
RankMatrix = NDArray[np.int64]

DEFAULT_K = 20


@dataclass(frozen=True, slots=True)
class MetricResult:
    """Result of a single neighborhood-preservation metric.

    Attributes:
        score: Global score, 1.0 for a perfect embedding.
        local_scores: Per-point scores of shape (n,).
        k: Neighborhood size used.
        n: Number of samples used.
    """

    score: float
    local_scores: NDArray[np.float64]
    k: int
    n: int

    def __repr__(self) -> str:
        return f"MetricResult(score={self.score:.6f}, k={self.k}, n={self.n})"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "localScores": self.local_scores.tolist(),
            "k": self.k,
            "n": self.n,
        }


@dataclass(frozen=True, slots=True)
class TnCResult:
    """Trustworthiness and Continuity computed on the same inputs."""

    trustworthiness: MetricResult
    continuity: MetricResult

    @property
    def k(self) -> int:
        return self.trustworthiness.k

    @property
    def n(self) -> int:
        return self.trustworthiness.n

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "trustworthiness": self.trustworthiness.to_dict(),
            "continuity": self.continuity.to_dict(),
        }


Result = Union[MetricResult, TnCResult]


@dataclass(frozen=True, slots=True)
class MetricRequest:
    """One entry of a batch measure spec.

    Attributes:
        id: Metric identifier ("trustworthiness", "continuity" or "tnc").
        params: Metric parameters. Only "k" is recognized.
    """

    id: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def k(self) -> int:
        """Neighborhood size, falling back to the default when absent or falsy."""
        return self.params.get("k") or DEFAULT_K

    @classmethod
    def from_obj(cls, obj: MetricRequest | Mapping[str, Any] | str) -> MetricRequest:
        """Build a request from a mapping, a bare identifier or a request."""
        if isinstance(obj, MetricRequest):
            return obj
        if isinstance(obj, str):
            return cls(id=obj)
        params = obj.get("params") or {}
        return cls(id=obj["id"], params=dict(params))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"id": self.id, "params": dict(self.params)}
