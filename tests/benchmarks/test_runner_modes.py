"""End-to-end tests of the benchmark runner CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from benchmarks import runner

EXPONENTIAL = '[{"name": "exponential", "params": {"lambda_": 2.0}}]'


def _run(tmp_path: Path, *args: str) -> int:
    return runner.main(["--workflow-dir", str(tmp_path), *args])


# =============================================================================
# Tests for argument handling
# =============================================================================


class TestArguments:
    """Tests for parse_args() and build_config()."""

    def test_defaults(self) -> None:
        args = runner.parse_args([])
        assert args.mode == "checks"
        assert args.workflow_dir == "workflow"
        assert args.overrides == []
        assert args.log_level == "WARNING"

    def test_flags_override_file_and_set(self, tmp_path: Path) -> None:
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"generator": "alf", "seed": 1, "samples": 10}))
        args = runner.parse_args(
            ["--config", str(path), "--set", "seed=2", "--set", "draws=7", "--seed", "3", "--generator", "nr3"]
        )
        config = runner.build_config(args)
        assert config["generator"] == "nr3"
        assert config["seed"] == 3
        assert config["samples"] == 10
        assert config["draws"] == 7

    def test_invalid_mode_rejected(self) -> None:
        with pytest.raises(SystemExit):
            runner.parse_args(["--mode", "matrix"])


# =============================================================================
# Tests for the modes
# =============================================================================


class TestModes:
    """Each mode writes its artifacts into a fresh run directory."""

    def test_checks_mode(self, tmp_path: Path) -> None:
        status = _run(
            tmp_path,
            "--generator", "mt19937",
            "--seed", "1",
            "--draws", "500",
            "--samples", "20000",
            "--set", f"distributions={EXPONENTIAL}",
            "--exp-name", "smoke",
            "--description", "Quick check",
        )
        assert status == 0

        run_dir = tmp_path / "run_0000"
        summary = json.loads((run_dir / "artifacts" / "checks.json").read_text())
        assert summary["passed"] is True
        assert summary["num_checks"] == 4
        assert (run_dir / "artifacts" / "checks.md").exists()

        meta = json.loads((run_dir / "meta.json").read_text())
        assert meta["mode"] == "checks"
        assert meta["argv"][0] == "runner"
        assert "numpy" in meta
        config = json.loads((run_dir / "config.json").read_text())
        assert config["generator"] == "mt19937"

        readme = (run_dir / "README.md").read_text()
        assert readme.startswith("# smoke")
        assert "Quick check" in readme
        assert "- Distributions: exponential" in readme

    def test_failed_checks_exit_code(self, tmp_path: Path) -> None:
        """A zero tolerance cannot be met by sampled moments."""
        status = _run(
            tmp_path,
            "--draws", "200",
            "--samples", "1000",
            "--tolerance", "0.0",
            "--set", f"distributions={EXPONENTIAL}",
        )
        assert status == 2
        summary = json.loads((tmp_path / "run_0000" / "artifacts" / "checks.json").read_text())
        assert summary["passed"] is False
        assert summary["num_failed"] >= 1

    def test_timings_mode(self, tmp_path: Path) -> None:
        status = _run(
            tmp_path,
            "--mode", "timings",
            "--draws", "200",
            "--set", 'distributions=[{"name": "normal"}, {"name": "poisson"}]',
        )
        assert status == 0

        artifacts = tmp_path / "run_0000" / "artifacts"
        timings = json.loads((artifacts / "timings.json").read_text())
        assert len(timings) == 8
        assert all(t["draws"] == 200 for t in timings)
        assert (artifacts / "plots" / "timings.png").exists()
        assert "![Throughput](plots/timings.png)" in (artifacts / "timings.md").read_text()

    def test_histogram_mode(self, tmp_path: Path) -> None:
        status = _run(
            tmp_path,
            "--mode", "histogram",
            "--samples", "2000",
            "--set", 'distributions=[{"name": "gamma", "params": {"alpha": 2.0, "theta": 1.0}}, {"name": "cauchy"}]',
        )
        assert status == 0

        artifacts = tmp_path / "run_0000" / "artifacts"
        entries = json.loads((artifacts / "histograms.json").read_text())
        assert [e["plot"] for e in entries] == ["plots/00_gamma.png", "plots/01_cauchy.png"]
        assert entries[0]["expected_mean"] == 2.0
        assert entries[1]["expected_mean"] is None
        assert (artifacts / "plots" / "00_gamma.png").exists()
        assert "Expected mean: undefined" in (artifacts / "histograms.md").read_text()

    def test_runs_are_numbered(self, tmp_path: Path) -> None:
        args = ("--mode", "timings", "--draws", "10", "--set", "distributions=[]")
        assert _run(tmp_path, *args) == 0
        assert _run(tmp_path, *args) == 0
        assert sorted(p.name for p in tmp_path.iterdir()) == ["run_0000", "run_0001"]
