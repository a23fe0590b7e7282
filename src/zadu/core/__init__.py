"""Core abstractions and types for ZADU."""

from zadu.core.types import (
    DEFAULT_K,
    MetricRequest,
    MetricResult,
    Result,
    TnCResult,
)
from zadu.core.exceptions import (
    ConfigurationError,
    DimensionMismatch,
    InvalidParameter,
    UnsupportedMetric,
    ZaduError,
)
from zadu.core.registry import MetricRegistry, Registry, register_metric

__all__ = [
    # Types
    "DEFAULT_K",
    "MetricRequest",
    "MetricResult",
    "Result",
    "TnCResult",
    # Exceptions
    "ZaduError",
    "InvalidParameter",
    "UnsupportedMetric",
    "DimensionMismatch",
    "ConfigurationError",
    # Registry
    "Registry",
    "MetricRegistry",
    "register_metric",
]
