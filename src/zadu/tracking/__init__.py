"""Result persistence and reproducibility tracking."""

from zadu.tracking.artifacts import load_results_json, save_results_json
from zadu.tracking.reproducibility import (
    RunManifest,
    create_run_manifest,
    generate_run_id,
    get_package_versions,
    hash_array,
)

__all__ = [
    "save_results_json",
    "load_results_json",
    "RunManifest",
    "create_run_manifest",
    "generate_run_id",
    "get_package_versions",
    "hash_array",
]
