"""Projection Quality Experiment.

This script loads a dataset and its projection, runs the configured list of
metrics, and writes the results with a run manifest.

Usage:
    python experiments/run_measure.py data.high_dim=data/x.npy data.low_dim=data/x_umap.npy
    python experiments/run_measure.py data.high_dim=x.npy data.low_dim=y.npy k=10 output_dir=outputs/umap
"""

from __future__ import annotations

import logging
from pathlib import Path

import hydra
from omegaconf import DictConfig, OmegaConf

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@hydra.main(version_base=None, config_path="../configs", config_name="config")
def main(cfg: DictConfig) -> None:
    """Run projection quality experiment."""
    logger.info("Starting ZADU measure experiment")
    logger.info(f"Config:\n{OmegaConf.to_yaml(cfg)}")

    from zadu.api import measure
    from zadu.cli import load_array
    from zadu.config import requests_from_config

    # Paths are relative to the launch directory, not hydra's run directory
    high_dim = load_array(Path(hydra.utils.to_absolute_path(cfg.data.high_dim)))
    low_dim = load_array(Path(hydra.utils.to_absolute_path(cfg.data.low_dim)))
    logger.info(f"Original data: {high_dim.shape}, projection: {low_dim.shape}")

    requests = requests_from_config(cfg)
    results = measure(requests, high_dim, low_dim)

    for request, result in zip(requests, results):
        logger.info(f"{request.id}: {result!r}")

    from zadu.tracking.artifacts import save_results_json
    from zadu.tracking.reproducibility import create_run_manifest

    output_dir = Path(hydra.utils.to_absolute_path(cfg.output_dir))
    manifest = create_run_manifest(
        high_dim, low_dim, [request.to_dict() for request in requests]
    )
    save_results_json(results, output_dir / "results.json", manifest=manifest)


if __name__ == "__main__":
    main()
