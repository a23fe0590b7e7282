"""Unit tests for the command-line interface."""

import json
from pathlib import Path

import numpy as np
import pytest
from typer.testing import CliRunner

from zadu.cli import app, load_array

runner = CliRunner()


@pytest.fixture
def array_files(clustered_pair, tmp_path: Path) -> tuple[Path, Path]:
    high_dim, low_dim = clustered_pair
    high_path = tmp_path / "high.npy"
    low_path = tmp_path / "low.csv"
    np.save(high_path, high_dim)
    np.savetxt(low_path, low_dim, delimiter=",")
    return high_path, low_path


def test_load_array_formats(clustered_pair, array_files) -> None:
    high_dim, low_dim = clustered_pair
    high_path, low_path = array_files
    np.testing.assert_allclose(load_array(high_path), high_dim)
    np.testing.assert_allclose(load_array(low_path), low_dim)


def test_measure_default(array_files) -> None:
    high_path, low_path = array_files
    result = runner.invoke(app, ["measure", str(high_path), str(low_path), "--k", "2"])
    assert result.exit_code == 0, result.output
    assert "tnc/trustworthiness" in result.output
    assert "tnc/continuity" in result.output


def test_measure_identity(tmp_path: Path, unit_square: np.ndarray) -> None:
    path = tmp_path / "square.npy"
    np.save(path, unit_square)
    result = runner.invoke(
        app, ["measure", str(path), str(path), "-m", "trustworthiness", "--k", "2"]
    )
    assert result.exit_code == 0, result.output
    assert "1.0000" in result.output


def test_measure_writes_json(array_files, tmp_path: Path) -> None:
    high_path, low_path = array_files
    output = tmp_path / "out" / "results.json"
    result = runner.invoke(
        app,
        [
            "measure", str(high_path), str(low_path),
            "-m", "trustworthiness", "-m", "continuity",
            "--k", "2", "-o", str(output),
        ],
    )
    assert result.exit_code == 0, result.output

    data = json.loads(output.read_text())
    assert [r["k"] for r in data["results"]] == [2, 2]
    assert data["manifest"]["n_samples"] == 5
    assert data["manifest"]["spec"][0]["id"] == "trustworthiness"


def test_measure_with_spec(array_files, tmp_path: Path) -> None:
    high_path, low_path = array_files
    spec = tmp_path / "spec.yaml"
    spec.write_text("metrics:\n  - id: continuity\n    params:\n      k: 3\n")
    result = runner.invoke(
        app, ["measure", str(high_path), str(low_path), "--spec", str(spec)]
    )
    assert result.exit_code == 0, result.output
    assert "continuity" in result.output


def test_measure_k_too_large(array_files) -> None:
    high_path, low_path = array_files
    result = runner.invoke(app, ["measure", str(high_path), str(low_path), "--k", "100"])
    assert result.exit_code == 1
    assert "Invalid parameter" in result.output


def test_measure_unknown_metric(array_files) -> None:
    high_path, low_path = array_files
    result = runner.invoke(
        app, ["measure", str(high_path), str(low_path), "-m", "stress", "--k", "2"]
    )
    assert result.exit_code == 1
    assert "Unknown metric" in result.output


def test_metrics_command() -> None:
    result = runner.invoke(app, ["metrics"])
    assert result.exit_code == 0
    assert result.output.split() == ["continuity", "tnc", "trustworthiness"]


def test_info_command() -> None:
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "ZADU v" in result.output
