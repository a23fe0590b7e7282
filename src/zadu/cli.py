"""Command-line interface for ZADU.

This module provides the main CLI entry point for measuring the quality of
a projection stored on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import numpy as np
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from zadu.core.exceptions import ZaduError
from zadu.core.types import DEFAULT_K, MetricRequest, MetricResult, TnCResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True)],
)

logger = logging.getLogger(__name__)
console = Console()

app = typer.Typer(
    name="zadu",
    help="Neighborhood-preservation quality metrics for dimensionality reduction",
    add_completion=False,
)


def load_array(path: Path) -> np.ndarray:
    """Load a dataset from .npy, .csv or whitespace-delimited text."""
    path = Path(path)
    if path.suffix == ".npy":
        return np.load(path)
    if path.suffix == ".csv":
        return np.loadtxt(path, delimiter=",", ndmin=2)
    return np.loadtxt(path, ndmin=2)


def _result_rows(request: MetricRequest, result: MetricResult | TnCResult):
    if isinstance(result, TnCResult):
        yield f"{request.id}/trustworthiness", result.trustworthiness
        yield f"{request.id}/continuity", result.continuity
    else:
        yield request.id, result


def _results_table(
    requests: List[MetricRequest], results: List[MetricResult | TnCResult]
) -> Table:
    table = Table(title="Projection quality")
    table.add_column("Metric", style="cyan")
    table.add_column("k", justify="right")
    table.add_column("n", justify="right")
    table.add_column("Score", justify="right", style="bold")
    table.add_column("Min local", justify="right")

    for request, result in zip(requests, results):
        for name, metric in _result_rows(request, result):
            table.add_row(
                name,
                str(metric.k),
                str(metric.n),
                f"{metric.score:.4f}",
                f"{metric.local_scores.min():.4f}" if metric.n else "-",
            )
    return table


@app.command()
def measure(
    high_dim_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Original data (.npy, .csv or text), one point per row",
    ),
    low_dim_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Projection with the same number of rows",
    ),
    metrics: Optional[List[str]] = typer.Option(
        None,
        "--metric", "-m",
        help="Metric identifier (repeatable). Defaults to tnc",
    ),
    k: int = typer.Option(
        DEFAULT_K,
        "--k",
        help="Number of neighbors",
    ),
    spec_path: Optional[Path] = typer.Option(
        None,
        "--spec", "-s",
        help="YAML measure spec (overrides --metric and --k)",
    ),
    output_path: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Write results and run manifest to this JSON file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Measure how well a projection preserves neighborhoods."""
    if verbose:
        logging.getLogger("zadu").setLevel(logging.DEBUG)

    from zadu.api import measure as run_measure
    from zadu.config import load_measure_spec

    try:
        if spec_path is not None:
            requests = load_measure_spec(spec_path)
        else:
            requests = [MetricRequest(id=m, params={"k": k}) for m in metrics or ["tnc"]]

        high_dim = load_array(high_dim_path)
        low_dim = load_array(low_dim_path)
        logger.debug(f"Loaded {high_dim.shape} and {low_dim.shape}")

        results = run_measure(requests, high_dim, low_dim)
    except ZaduError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(_results_table(requests, results))

    if output_path is not None:
        from zadu.tracking.artifacts import save_results_json
        from zadu.tracking.reproducibility import create_run_manifest

        manifest = create_run_manifest(
            high_dim, low_dim, [request.to_dict() for request in requests]
        )
        save_results_json(results, output_path, manifest=manifest)
        console.print(f"Saved to: {output_path}")


@app.command("metrics")
def list_metrics() -> None:
    """List available metric identifiers."""
    from zadu.api import available_metrics

    for name in available_metrics():
        console.print(name)


@app.command()
def info() -> None:
    """Show ZADU version and environment info."""
    from zadu import __version__
    from zadu.tracking.reproducibility import get_package_versions

    console.print(f"[bold]ZADU v{__version__}[/bold]")
    console.print("\n[cyan]Package versions:[/cyan]")

    versions = get_package_versions()
    for pkg, version in versions.items():
        console.print(f"  {pkg}: {version}")


if __name__ == "__main__":
    app()
