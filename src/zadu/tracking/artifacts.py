"""Saving and loading of metric results."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from zadu.core.types import Result
from zadu.tracking.reproducibility import RunManifest

logger = logging.getLogger(__name__)


def save_results_json(
    results: Sequence[Result],
    path: Path,
    manifest: RunManifest | None = None,
) -> None:
    """Save metric results to JSON.

    Args:
        results: MetricResult / TnCResult objects, in request order.
        path: Output file path.
        manifest: Optional run manifest stored beside the results.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data: dict = {"results": [result.to_dict() for result in results]}
    if manifest is not None:
        data["manifest"] = manifest.to_dict()

    with open(path, "w") as f:
        json.dump(data, f, indent=2, default=str)

    logger.info(f"Saved {len(results)} results to {path}")


def load_results_json(path: Path) -> list[dict]:
    """Load metric results from JSON.

    Args:
        path: Input file path.

    Returns:
        List of result dictionaries.
    """
    with open(path) as f:
        return json.load(f)["results"]
