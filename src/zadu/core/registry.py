"""Registry of named metrics.

The batch interface resolves metric identifiers through this lookup table,
so adding a metric only requires registering a function under a new name.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from zadu.core.exceptions import UnsupportedMetric

T = TypeVar("T")


class Registry(Generic[T]):
    """Generic name-to-component registry.

    Example usage:
        >>> registry = Registry[Callable]("metrics")
        >>> @registry.register("my_metric")
        ... def my_metric(high_dim, low_dim, k):
        ...     ...
        >>> registry.get("my_metric")
        <function my_metric at ...>
    """

    def __init__(self, name: str) -> None:
        """Initialize registry.

        Args:
            name: Human-readable name for error messages.
        """
        self._name = name
        self._registry: dict[str, T] = {}

    def register(self, name: str) -> Callable[[T], T]:
        """Decorator to register a component.

        Args:
            name: Unique identifier for the component.

        Returns:
            Decorator function.
        """

        def decorator(component: T) -> T:
            if name in self._registry:
                raise ValueError(
                    f"Component '{name}' already registered in {self._name} registry"
                )
            self._registry[name] = component
            return component

        return decorator

    def get(self, name: str) -> T:
        """Get a registered component by name.

        Raises:
            UnsupportedMetric: If no component is registered under name.
        """
        if name not in self._registry:
            raise UnsupportedMetric(name, self._registry.keys())
        return self._registry[name]

    def get_or_none(self, name: str) -> T | None:
        """Get a registered component or None if not found."""
        return self._registry.get(name)

    def list_registered(self) -> list[str]:
        """List all registered component names."""
        return sorted(self._registry.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)


# Signature shared by every registered metric: (high_dim, low_dim, k) -> result
MetricFn = Callable[..., object]

MetricRegistry: Registry[MetricFn] = Registry("metrics")


def register_metric(name: str) -> Callable[[MetricFn], MetricFn]:
    """Convenience decorator to register a metric.

    Example:
        >>> @register_metric("trustworthiness")
        ... def _trustworthiness(high_dim, low_dim, k):
        ...     ...
    """
    return MetricRegistry.register(name)
