"""Plotting utilities for benchmark visualization.

This module provides functions for:
- Histogram plots of distribution samples against their closed-form mean
- Bar charts of generator throughput

Uses matplotlib only (no seaborn).
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from benchmarks.metrics import histogram_density  # noqa: E402
from benchmarks.timing import TimingResult  # noqa: E402

__all__ = [
    "plot_histogram",
    "plot_timings",
]


def _ensure_plots_dir(out_dir: Path) -> Path:
    """Ensure the plots directory exists and return its path."""
    plots_dir = out_dir / "plots"
    plots_dir.mkdir(parents=True, exist_ok=True)
    return plots_dir


def plot_histogram(
    samples: np.ndarray,
    out_dir: Path,
    *,
    name: str,
    title: str | None = None,
    expected_mean: float | None = None,
    bins: int = 60,
) -> Path:
    """Plot a density histogram of samples.

    Only the 0.5-99.5 percentile band of the finite samples is shown.

    Args:
        samples: Sample values.
        out_dir: Output directory (plots will be in out_dir/plots/).
        name: File stem of the plot.
        title: Plot title; defaults to name.
        expected_mean: Closed-form mean drawn as a vertical line when given.
        bins: Number of histogram bins.

    Returns:
        Path of the written PNG file.
    """
    plots_dir = _ensure_plots_dir(out_dir)
    finite = samples[np.isfinite(samples)]

    fig, ax = plt.subplots(figsize=(8, 5))
    if finite.size:
        low, high = np.percentile(finite, [0.5, 99.5])
        if low == high:
            low, high = low - 0.5, high + 0.5
        densities, edges = histogram_density(finite, bins=bins, range=(low, high))
        ax.stairs(densities, edges, fill=True, alpha=0.6, label="samples")
        ax.axvline(float(np.mean(finite)), color="C1", linestyle="--", label="sample mean")
    if expected_mean is not None and np.isfinite(expected_mean):
        ax.axvline(expected_mean, color="C2", linestyle=":", label="expected mean")
    ax.set_xlabel("Value")
    ax.set_ylabel("Density")
    ax.set_title(title or name)
    ax.grid(True, alpha=0.3)
    ax.legend()

    path = plots_dir / f"{name}.png"
    fig.savefig(path, dpi=100, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_timings(results: list[TimingResult], out_dir: Path, *, name: str = "timings") -> Path:
    """Plot a horizontal bar chart of draws per second.

    Args:
        results: Timing results, one bar each.
        out_dir: Output directory (plots will be in out_dir/plots/).
        name: File stem of the plot.

    Returns:
        Path of the written PNG file.
    """
    plots_dir = _ensure_plots_dir(out_dir)
    labels = [f"{r.subject} {r.method}" for r in results]
    rates = [r.draws_per_second for r in results]

    fig, ax = plt.subplots(figsize=(9, max(3.0, 0.4 * len(results) + 1.0)))
    ax.barh(range(len(rates)), rates)
    ax.set_yticks(range(len(labels)))
    ax.set_yticklabels(labels, fontsize=8)
    ax.invert_yaxis()
    ax.set_xlabel("Draws per second")
    ax.set_title("Throughput")
    ax.grid(True, axis="x", alpha=0.3)

    path = plots_dir / f"{name}.png"
    fig.savefig(path, dpi=100, bbox_inches="tight")
    plt.close(fig)
    return path
