"""
ZADU: neighborhood-preservation quality metrics for dimensionality reduction.

Measures how well a low-dimensional projection keeps the local structure of
the original data, using Trustworthiness and Continuity.
"""

from zadu.version import __version__
from zadu.core.types import MetricRequest, MetricResult, TnCResult
from zadu.core.exceptions import (
    DimensionMismatch,
    InvalidParameter,
    UnsupportedMetric,
    ZaduError,
)
from zadu.api import (
    available_metrics,
    continuity,
    measure,
    trustworthiness,
    trustworthiness_and_continuity,
)

__all__ = [
    "__version__",
    # Facade
    "trustworthiness",
    "continuity",
    "trustworthiness_and_continuity",
    "measure",
    "available_metrics",
    # Types
    "MetricRequest",
    "MetricResult",
    "TnCResult",
    # Exceptions
    "ZaduError",
    "InvalidParameter",
    "UnsupportedMetric",
    "DimensionMismatch",
]
