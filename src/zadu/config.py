"""Loading of measure specs from configuration.

A measure spec lists the metrics to run, in order. It can be written as
YAML:

    k: 20              # optional default for requests without their own k
    metrics:
      - id: tnc
        params:
          k: 10
      - trustworthiness

or passed as an already-composed hydra/OmegaConf node.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from omegaconf import DictConfig, ListConfig, OmegaConf

from zadu.core.exceptions import ConfigurationError
from zadu.core.types import MetricRequest

logger = logging.getLogger(__name__)

RECOGNIZED_PARAMS = frozenset({"k"})


def _parse_entry(entry: Any, position: int, default_k: int | None) -> MetricRequest:
    if isinstance(entry, str):
        entry = {"id": entry}
    if not isinstance(entry, Mapping) or "id" not in entry:
        raise ConfigurationError(
            f"metric entry {position} must be an identifier or a mapping with an 'id'"
        )

    params = entry.get("params") or {}
    if not isinstance(params, Mapping):
        raise ConfigurationError(f"params of metric entry {position} must be a mapping")

    unknown = set(params) - RECOGNIZED_PARAMS
    if unknown:
        logger.warning(
            f"Ignoring unrecognized params for {entry['id']}: {', '.join(sorted(unknown))}"
        )

    params = {key: value for key, value in params.items() if key in RECOGNIZED_PARAMS}
    if not params.get("k") and default_k:
        params["k"] = default_k
    return MetricRequest(id=str(entry["id"]), params=params)


def requests_from_config(
    cfg: DictConfig | ListConfig | Mapping[str, Any] | list,
) -> list[MetricRequest]:
    """Convert a measure spec node into an ordered list of requests.

    Args:
        cfg: Either a mapping with a ``metrics`` list (and optional
            default ``k``) or the list itself.

    Returns:
        Requests in spec order.

    Raises:
        ConfigurationError: If the measure spec is malformed.
    """
    if isinstance(cfg, (DictConfig, ListConfig)):
        cfg = OmegaConf.to_container(cfg, resolve=True)

    default_k = None
    if isinstance(cfg, Mapping):
        default_k = cfg.get("k")
        entries = cfg.get("metrics")
    else:
        entries = cfg

    if not isinstance(entries, list):
        raise ConfigurationError("measure spec must provide a list of metrics")

    return [_parse_entry(entry, i, default_k) for i, entry in enumerate(entries)]


def load_measure_spec(path: str | Path) -> list[MetricRequest]:
    """Load a YAML measure spec from disk.

    Args:
        path: Path to the YAML file.

    Returns:
        Requests in spec order.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"spec file not found: {path}")

    cfg = OmegaConf.load(path)
    logger.debug(f"Loaded measure spec from {path}:\n{OmegaConf.to_yaml(cfg)}")
    return requests_from_config(cfg)
