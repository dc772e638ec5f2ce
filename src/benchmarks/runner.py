"""Benchmark runner CLI for generators and distributions.

This module provides a command-line interface for checking and timing the
uniform generators and the distributions built on them.

Supports three modes:
- checks: Run the reproducibility/bounds/boolean/moment check suite
- timings: Measure draws per second of generator and distribution methods
- histogram: Plot sample histograms of the configured distributions

Every run writes to a fresh workflow/run_XXXX directory with meta.json,
config.json, README.md and the mode's artifacts.

Usage:
    python -m benchmarks.runner --mode checks --generator mt19937 --seed 1
    python -m benchmarks.runner --mode timings --draws 20000
    python -m benchmarks.runner --mode histogram --config runs/gamma.json
    python -m benchmarks.runner --set distributions='[{"name": "beta"}]'
"""

from __future__ import annotations

import argparse
import json
import logging
import platform
import sys
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import numpy as np

from benchmarks.checks import run_checks
from benchmarks.config import DEFAULT_CONFIG, build_generator, load_config
from benchmarks.metrics import draw_samples
from benchmarks.plotting import plot_histogram, plot_timings
from benchmarks.registry import get_distribution
from benchmarks.report import (
    render_checks_markdown,
    render_histograms_markdown,
    render_timings_markdown,
)
from benchmarks.timing import time_distributions, time_generator
from benchmarks.workflow import next_run_dir, try_get_git_commit, write_run_files
from core.errors import NotSupportedError
from core.logging import configure_logging

__all__ = [
    "main",
    "cli",
    "parse_args",
    "build_config",
    "run_checks_mode",
    "run_timings_mode",
    "run_histogram_mode",
]

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Check and time pseudo-random generators and distributions",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Mode
    parser.add_argument(
        "--mode",
        type=str,
        choices=["checks", "timings", "histogram"],
        default="checks",
        help="Run mode: check suite, throughput timings or sample histograms",
    )

    # Workflow
    parser.add_argument(
        "--workflow-dir",
        type=str,
        default="workflow",
        help="Directory for run outputs",
    )

    # Config
    parser.add_argument("--config", type=str, default=None, help="JSON run config file")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Dotted config override, value parsed as JSON when possible (repeatable)",
    )

    # Shortcuts for the most common config keys
    parser.add_argument("--generator", type=str, default=None, help="Registered generator name")
    parser.add_argument("--seed", type=int, default=None, help="Generator seed")
    parser.add_argument("--samples", type=int, default=None, help="Samples per distribution")
    parser.add_argument("--draws", type=int, default=None, help="Draws per generator method")
    parser.add_argument("--tolerance", type=float, default=None, help="Relative error tolerance")

    # Logging
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level of the package loggers",
    )

    # Metadata
    parser.add_argument("--exp-name", type=str, default=None, help="Run name")
    parser.add_argument("--description", type=str, default=None, help="Run description")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> dict[str, Any]:
    """Build the run config: defaults, then --config, then --set, then flags."""
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, list(args.overrides))

    for key in ("generator", "seed", "samples", "draws", "tolerance"):
        value = getattr(args, key)
        if value is not None:
            config[key] = value

    return config


# =============================================================================
# Modes
# =============================================================================


def run_checks_mode(config: dict[str, Any], run_dir: Path) -> tuple[dict[str, Any], bool]:
    """Run checks mode: execute the generator and distribution checks.

    Args:
        config: Run configuration.
        run_dir: Run directory.

    Returns:
        Tuple of (checks_summary_dict, all_passed).
    """
    artifacts_dir = run_dir / "artifacts"
    artifacts_dir.mkdir(parents=True, exist_ok=True)

    summary = run_checks(config)

    with (artifacts_dir / "checks.json").open("w", encoding="utf-8") as f:
        json.dump(summary.to_json(), f, indent=2, sort_keys=True)

    with (artifacts_dir / "checks.md").open("w", encoding="utf-8") as f:
        f.write(render_checks_markdown(summary, config))

    return summary.to_json(), summary.passed


def run_timings_mode(config: dict[str, Any], run_dir: Path) -> dict[str, Any]:
    """Run timings mode: time the generator and every configured distribution.

    Args:
        config: Run configuration.
        run_dir: Run directory.

    Returns:
        Summary with the number of timings and the fastest method.
    """
    artifacts_dir = run_dir / "artifacts"
    artifacts_dir.mkdir(parents=True, exist_ok=True)
    draws = int(config.get("draws", DEFAULT_CONFIG["draws"]))

    generator = build_generator(config)
    results = time_generator(generator, draws)
    results.extend(time_distributions(generator, config.get("distributions", []), draws))
    logger.info("Timed %d methods with %d draws each", len(results), draws)

    plot_path = plot_timings(results, artifacts_dir)

    with (artifacts_dir / "timings.json").open("w", encoding="utf-8") as f:
        json.dump([r.to_dict() for r in results], f, indent=2, sort_keys=True)

    with (artifacts_dir / "timings.md").open("w", encoding="utf-8") as f:
        f.write(
            render_timings_markdown(results, config, plot_path=plot_path.relative_to(artifacts_dir))
        )

    fastest = max(results, key=lambda r: r.draws_per_second)
    return {
        "num_timings": len(results),
        "fastest": f"{fastest.subject} {fastest.method}",
        "fastest_draws_per_second": fastest.draws_per_second,
    }


def run_histogram_mode(config: dict[str, Any], run_dir: Path) -> dict[str, Any]:
    """Run histogram mode: plot samples of every configured distribution.

    Args:
        config: Run configuration.
        run_dir: Run directory.

    Returns:
        Summary with the number of plots written.
    """
    artifacts_dir = run_dir / "artifacts"
    artifacts_dir.mkdir(parents=True, exist_ok=True)
    samples_count = int(config.get("samples", DEFAULT_CONFIG["samples"]))
    bins = int(config.get("bins", DEFAULT_CONFIG["bins"]))

    generator = build_generator(config)
    entries: list[dict[str, Any]] = []
    for index, spec in enumerate(config.get("distributions", [])):
        distribution = get_distribution(spec["name"], spec.get("params", {}), generator=generator)
        samples = draw_samples(distribution, samples_count)
        try:
            expected_mean: float | None = distribution.mean
        except NotSupportedError:
            expected_mean = None

        plot_path = plot_histogram(
            samples,
            artifacts_dir,
            name=f"{index:02d}_{spec['name']}",
            title=repr(distribution),
            expected_mean=expected_mean,
            bins=bins,
        )
        entries.append(
            {
                "distribution": repr(distribution),
                "plot": plot_path.relative_to(artifacts_dir).as_posix(),
                "sample_mean": float(samples.mean()) if samples.size else float("nan"),
                "expected_mean": expected_mean,
            }
        )

    with (artifacts_dir / "histograms.json").open("w", encoding="utf-8") as f:
        json.dump(entries, f, indent=2, sort_keys=True)

    with (artifacts_dir / "histograms.md").open("w", encoding="utf-8") as f:
        f.write(render_histograms_markdown(entries, config))

    return {"num_plots": len(entries)}


def generate_readme(run_dir: Path, args: argparse.Namespace, config: dict[str, Any]) -> str:
    """Generate README.md content."""
    run_name = args.exp_name or run_dir.name
    lines = [f"# {run_name}", ""]

    if args.description:
        lines.extend([args.description, ""])

    report_name = {"checks": "checks.md", "timings": "timings.md", "histogram": "histograms.md"}[
        args.mode
    ]
    lines.extend([f"> See `artifacts/{report_name}` for the report.", ""])

    lines.extend(
        [
            "## Configuration",
            "",
            f"- Mode: {args.mode}",
            f"- Generator: {config.get('generator')}",
            f"- Seed: {config.get('seed')}",
            f"- Draws: {config.get('draws')}",
            f"- Samples: {config.get('samples')}",
            f"- Tolerance: {config.get('tolerance')}",
        ]
    )
    names = [spec.get("name", "?") for spec in config.get("distributions", [])]
    if names:
        lines.append(f"- Distributions: {', '.join(names)}")
    lines.append("")

    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the benchmark runner.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 2 for checks failure).
    """
    args = parse_args(argv)
    configure_logging(args.log_level)
    config = build_config(args)

    # Create run directory
    run_dir = next_run_dir(Path(args.workflow_dir))
    print(f"Created run directory: {run_dir}")

    # Run based on mode
    checks_passed = True
    if args.mode == "checks":
        summary, checks_passed = run_checks_mode(config, run_dir)
    elif args.mode == "timings":
        summary = run_timings_mode(config, run_dir)
    else:  # histogram mode
        summary = run_histogram_mode(config, run_dir)

    # Write metadata
    meta: dict[str, Any] = {
        "created_at": datetime.now(UTC).isoformat(),
        "argv": sys.argv if argv is None else ["runner"] + list(argv),
        "mode": args.mode,
        "python": platform.python_version(),
        "numpy": np.__version__,
    }
    git_commit = try_get_git_commit()
    if git_commit:
        meta["git_commit"] = git_commit

    write_run_files(run_dir, meta=meta, config=config, readme_text=generate_readme(run_dir, args, config))

    # Print summary
    artifacts_dir = run_dir / "artifacts"
    if args.mode == "checks":
        status = "✅ PASSED" if checks_passed else "❌ FAILED"
        print(f"Checks completed: {run_dir.name}")
        print(f"  status: {status}")
        print(f"  num_checks: {summary['num_checks']}")
        print(f"  num_passed: {summary['num_passed']}")
        print(f"  num_failed: {summary['num_failed']}")
        print(f"  checks.json: {artifacts_dir / 'checks.json'}")
        print(f"  checks.md: {artifacts_dir / 'checks.md'}")

        # Return exit code 2 if checks failed (for CI)
        if not checks_passed:
            return 2
    elif args.mode == "timings":
        print(f"Timings completed: {run_dir.name}")
        print(f"  num_timings: {summary['num_timings']}")
        print(f"  fastest: {summary['fastest']} ({summary['fastest_draws_per_second']:,.0f}/s)")
        print(f"  report: {artifacts_dir / 'timings.md'}")
    else:
        print(f"Histograms completed: {run_dir.name}")
        print(f"  num_plots: {summary['num_plots']}")
        print(f"  report: {artifacts_dir / 'histograms.md'}")

    return 0


def cli() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
