"""Reproducibility infrastructure for ZADU.

This module records what a set of results was computed from:
- Dataset hashes
- Package and interpreter versions
- Run identifiers
"""

from __future__ import annotations

import hashlib
import importlib
import platform
import random
import sys
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

import numpy as np
from numpy.typing import ArrayLike


@dataclass
class RunManifest:
    """Identity of a measure run.

    Captures the inputs and environment needed to reproduce a result file.
    """

    run_id: str
    timestamp: str

    # Inputs
    high_dim_hash: str
    low_dim_hash: str
    n_samples: int
    spec: list[dict]

    # Environment
    zadu_version: str
    python_version: str
    package_versions: dict = field(default_factory=dict)
    platform_info: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def generate_run_id() -> str:
    """Generate a unique run identifier."""
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    random_suffix = hashlib.sha256(str(random.random()).encode()).hexdigest()[:8]
    return f"{timestamp}_{random_suffix}"


def hash_array(data: ArrayLike) -> str:
    """Compute stable hash of a dataset."""
    arr = np.ascontiguousarray(data, dtype=np.float64)
    hasher = hashlib.sha256(str(arr.shape).encode())
    hasher.update(arr.tobytes())
    return hasher.hexdigest()[:16]


def get_package_versions() -> dict[str, str]:
    """Get versions of key packages."""
    packages = ["numpy", "scipy", "omegaconf", "hydra-core", "typer", "rich"]
    versions = {}
    for pkg in packages:
        module_name = "hydra" if pkg == "hydra-core" else pkg
        try:
            mod = importlib.import_module(module_name)
            versions[pkg] = getattr(mod, "__version__", "unknown")
        except ImportError:
            versions[pkg] = "not installed"
    return versions


def create_run_manifest(
    high_dim: ArrayLike,
    low_dim: ArrayLike,
    spec: list[dict],
) -> RunManifest:
    """Create a run manifest for a dataset pair and measure spec.

    Args:
        high_dim: Original data.
        low_dim: Projection.
        spec: Requests as dictionaries.

    Returns:
        Populated RunManifest.
    """
    from zadu import __version__

    return RunManifest(
        run_id=generate_run_id(),
        timestamp=datetime.now(timezone.utc).isoformat(),
        high_dim_hash=hash_array(high_dim),
        low_dim_hash=hash_array(low_dim),
        n_samples=int(np.shape(high_dim)[0]),
        spec=spec,
        zadu_version=__version__,
        python_version=sys.version,
        package_versions=get_package_versions(),
        platform_info=platform.platform(),
    )
