"""Custom exceptions for ZADU.

All ZADU-specific exceptions inherit from ZaduError for easy catching.
"""

from __future__ import annotations

from collections.abc import Iterable


class ZaduError(Exception):
    """Base exception for all ZADU errors."""

    pass


class InvalidParameter(ZaduError, ValueError):
    """A metric parameter is outside its valid range."""

    def __init__(self, name: str, value: object, message: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid parameter {name}={value!r}: {message}")


class UnsupportedMetric(ZaduError, KeyError):
    """A metric identifier does not match any registered metric."""

    def __init__(self, metric_id: str, available: Iterable[str] = ()) -> None:
        self.metric_id = metric_id
        self.available = sorted(available)
        message = f"Unknown metric: {metric_id!r}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class DimensionMismatch(ZaduError, ValueError):
    """Datasets or points have incompatible shapes."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Dimension mismatch: {message}")


class ConfigurationError(ZaduError):
    """Invalid configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Configuration error: {message}")
