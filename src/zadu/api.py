"""Main entry points for measuring projection quality.

Individual metrics can be called directly, or a list of named requests can
be run in one call with :func:`measure`:

    >>> measure(
    ...     [{"id": "tnc", "params": {"k": 10}}, {"id": "trustworthiness"}],
    ...     high_dim,
    ...     low_dim,
    ... )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from numpy.typing import ArrayLike

from zadu.core.registry import MetricRegistry, register_metric
from zadu.core.types import DEFAULT_K, MetricRequest, MetricResult, Result, TnCResult
from zadu.metrics.continuity import continuity as _continuity
from zadu.metrics.continuity import continuity_from_distances
from zadu.metrics.local import prepare_inputs
from zadu.metrics.trustworthiness import trustworthiness as _trustworthiness
from zadu.metrics.trustworthiness import trustworthiness_from_distances
from zadu.neighbors.distance import distance_matrix

logger = logging.getLogger(__name__)


@register_metric("trustworthiness")
def trustworthiness(
    high_dim: ArrayLike, low_dim: ArrayLike, k: int = DEFAULT_K
) -> MetricResult:
    """Calculate the Trustworthiness of low_dim as a projection of high_dim."""
    return _trustworthiness(high_dim, low_dim, k)


@register_metric("continuity")
def continuity(
    high_dim: ArrayLike, low_dim: ArrayLike, k: int = DEFAULT_K
) -> MetricResult:
    """Calculate the Continuity of low_dim as a projection of high_dim."""
    return _continuity(high_dim, low_dim, k)


@register_metric("tnc")
def trustworthiness_and_continuity(
    high_dim: ArrayLike, low_dim: ArrayLike, k: int = DEFAULT_K
) -> TnCResult:
    """Calculate both Trustworthiness and Continuity.

    The distance matrices are built once and shared by both metrics; the
    results are identical to calling each metric on its own.
    """
    high, low, k = prepare_inputs(high_dim, low_dim, k)
    high_dist = distance_matrix(high)
    low_dist = distance_matrix(low)
    return TnCResult(
        trustworthiness=trustworthiness_from_distances(high_dist, low_dist, k),
        continuity=continuity_from_distances(high_dist, low_dist, k),
    )


def available_metrics() -> list[str]:
    """List the metric identifiers accepted by :func:`measure`."""
    return MetricRegistry.list_registered()


def measure(
    spec: Sequence[MetricRequest | Mapping[str, Any] | str],
    high_dim: ArrayLike,
    low_dim: ArrayLike,
) -> list[Result]:
    """Run a list of metric requests against one dataset pair.

    Args:
        spec: Ordered requests, each a MetricRequest or a mapping
            ``{"id": ..., "params": {"k": ...}}``. A missing or falsy k
            falls back to 20.
        high_dim: Original data of shape (n_samples, n_features_high).
        low_dim: Projection of shape (n_samples, n_features_low).

    Returns:
        One result per request, in request order.

    Raises:
        UnsupportedMetric: On the first unknown identifier. Results of
            earlier requests are discarded.
        InvalidParameter: If a request's k is not smaller than n_samples.
    """
    results: list[Result] = []
    for i, entry in enumerate(spec):
        request = MetricRequest.from_obj(entry)
        metric_fn = MetricRegistry.get(request.id)
        logger.debug(f"Request {i}: {request.id} (k={request.k})")
        results.append(metric_fn(high_dim, low_dim, request.k))
    return results
