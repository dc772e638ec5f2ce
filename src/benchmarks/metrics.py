"""Sample statistics for benchmark checks and reports.

This module provides numpy helpers to draw a batch of samples from a
distribution and compare their moments with the closed-form values.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from core.protocols import Distribution
from core.sequences import distributed_doubles

__all__ = [
    "draw_samples",
    "sample_moments",
    "relative_error",
    "histogram_density",
]


def draw_samples(distribution: Distribution, count: int) -> np.ndarray:
    """Draw count values from distribution.next_double() into a float array.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return np.fromiter(distributed_doubles(distribution), dtype=np.float64, count=count)


def sample_moments(samples: np.ndarray) -> dict[str, float]:
    """Compute mean, variance (ddof=0), min and max of a sample.

    Raises:
        ValueError: If samples is empty.
    """
    if samples.size == 0:
        raise ValueError("Cannot compute moments of an empty sample")
    return {
        "mean": float(np.mean(samples)),
        "variance": float(np.var(samples)),
        "min": float(np.min(samples)),
        "max": float(np.max(samples)),
    }


def relative_error(observed: float, expected: float) -> float:
    """Compute |observed - expected| / |expected| (absolute error when expected is 0)."""
    diff = abs(observed - expected)
    if expected == 0:
        return float(diff)
    return float(diff / abs(expected))


def histogram_density(samples: np.ndarray, bins: int = 60, **kwargs: Any) -> tuple[np.ndarray, np.ndarray]:
    """Compute a normalised histogram.

    Args:
        samples: Sample values; non-finite values are dropped.
        bins: Number of equal-width bins.
        **kwargs: Passed through to numpy.histogram (e.g. ``range``).

    Returns:
        Tuple of (densities, bin_edges).
    """
    finite = samples[np.isfinite(samples)]
    densities, edges = np.histogram(finite, bins=bins, density=True, **kwargs)
    return densities, edges
