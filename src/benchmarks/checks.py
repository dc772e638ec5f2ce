"""Generator and distribution check suite.

This module provides a fast, deterministic check suite to verify that:
- Generators replay the same stream after reset()
- Range methods never leave their bounds
- next_boolean() consumes one engine draw per 31 bits
- Distribution sample moments match the closed-form mean and variance

The checks are designed to be run locally or in CI without manual inspection.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from benchmarks.config import DEFAULT_CONFIG, build_generator
from benchmarks.metrics import draw_samples, relative_error, sample_moments
from benchmarks.registry import get_distribution
from core.errors import NotSupportedError

__all__ = [
    "CheckResult",
    "ChecksSummary",
    "check_reset_reproducibility",
    "check_bounds",
    "check_boolean_buffer",
    "check_distribution_moments",
    "run_checks",
]

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Result of a single check.

    Attributes:
        name: Name of the check.
        passed: Whether the check passed.
        details: Additional details (numeric values, thresholds, config).
    """

    name: str
    passed: bool
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "passed": self.passed,
            "details": self.details,
        }


@dataclass
class ChecksSummary:
    """Summary of all checks.

    Attributes:
        passed: Whether all checks passed.
        results: List of individual check results.
    """

    passed: bool
    results: list[CheckResult] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "passed": self.passed,
            "num_checks": len(self.results),
            "num_passed": sum(1 for r in self.results if r.passed),
            "num_failed": sum(1 for r in self.results if not r.passed),
            "results": [r.to_dict() for r in self.results],
        }


def _skipped(name: str, reason: str) -> CheckResult:
    return CheckResult(name=name, passed=True, details={"skipped": True, "reason": reason})


def check_reset_reproducibility(config: dict[str, Any]) -> CheckResult:
    """Check that reset() replays the stream drawn since the last seeding.

    Args:
        config: Configuration with keys: generator, seed.

    Returns:
        CheckResult with pass/fail and details.
    """
    generator = build_generator(config)
    if not generator.can_reset:
        return _skipped("reset_reproducibility", f"{generator!r} cannot reset")

    count = 1000

    def _draw() -> list[float]:
        values: list[float] = []
        for _ in range(count):
            values.append(generator.next(0, 10))
            values.append(generator.next_double())
            values.append(generator.next_uint())
            values.append(float(generator.next_boolean()))
        return values

    first = _draw()
    generator.reset()
    second = _draw()

    mismatches = sum(1 for a, b in zip(first, second, strict=True) if a != b)
    return CheckResult(
        name="reset_reproducibility",
        passed=mismatches == 0,
        details={
            "generator": repr(generator),
            "draws": len(first),
            "mismatches": mismatches,
        },
    )


def check_bounds(config: dict[str, Any]) -> CheckResult:
    """Check that range methods stay inside their half-open intervals.

    Args:
        config: Configuration with keys: generator, seed, draws.

    Returns:
        CheckResult with pass/fail and details.
    """
    generator = build_generator(config)
    draws = int(config.get("draws", DEFAULT_CONFIG["draws"]))

    violations = {
        "next_max": 0,
        "next_min_max": 0,
        "next_double": 0,
        "next_double_max": 0,
        "next_uint_max": 0,
    }
    for _ in range(draws):
        if not 0 <= generator.next(10) < 10:
            violations["next_max"] += 1
        if not -5 <= generator.next(-5, 5) < 5:
            violations["next_min_max"] += 1
        if not 0.0 <= generator.next_double() < 1.0:
            violations["next_double"] += 1
        if not 0.0 <= generator.next_double(2.5) < 2.5:
            violations["next_double_max"] += 1
        if not 0 <= generator.next_uint(7) < 7:
            violations["next_uint_max"] += 1

    total = sum(violations.values())
    return CheckResult(
        name="bounds",
        passed=total == 0,
        details={
            "generator": repr(generator),
            "draws": draws,
            "violations": violations,
            "total_violations": total,
        },
    )


def check_boolean_buffer(config: dict[str, Any]) -> CheckResult:
    """Check that next_boolean() takes exactly one engine draw per 31 calls.

    After reset(), 31 booleans followed by next_uint() must give the second
    word of the stream, and 32 booleans followed by next_uint() the third.
    The share of True values is also compared with 1/2.

    Args:
        config: Configuration with keys: generator, seed, draws.

    Returns:
        CheckResult with pass/fail and details.
    """
    generator = build_generator(config)
    if not generator.can_reset:
        return _skipped("boolean_buffer", f"{generator!r} cannot reset")

    generator.reset()
    words = [generator.next_uint() for _ in range(3)]

    generator.reset()
    for _ in range(31):
        generator.next_boolean()
    after_31 = generator.next_uint()

    generator.reset()
    for _ in range(32):
        generator.next_boolean()
    after_32 = generator.next_uint()

    draws = int(config.get("draws", DEFAULT_CONFIG["draws"]))
    generator.reset()
    trues = sum(1 for _ in range(draws) if generator.next_boolean())
    share = trues / draws if draws else 0.5
    # Four standard deviations of a fair coin
    share_tolerance = 2.0 / math.sqrt(draws) if draws else 0.0

    passed = after_31 == words[1] and after_32 == words[2] and abs(share - 0.5) <= share_tolerance
    return CheckResult(
        name="boolean_buffer",
        passed=passed,
        details={
            "generator": repr(generator),
            "word_after_31_booleans_ok": after_31 == words[1],
            "word_after_32_booleans_ok": after_32 == words[2],
            "true_share": share,
            "share_tolerance": share_tolerance,
        },
    )


def check_distribution_moments(config: dict[str, Any], entry: dict[str, Any]) -> CheckResult:
    """Check sample mean, variance and support of one distribution.

    The mean must be within ``tolerance`` relative error of the closed form,
    the variance within twice that. Statistics the family leaves undefined
    are reported as skipped.

    Args:
        config: Configuration with keys: generator, seed, samples, tolerance.
        entry: {"name": registry name, "params": keyword parameters}.

    Returns:
        CheckResult with pass/fail and details.
    """
    name = entry["name"]
    params = entry.get("params", {})
    check_name = f"moments[{name}]"
    samples_count = int(config.get("samples", DEFAULT_CONFIG["samples"]))
    tolerance = float(config.get("tolerance", DEFAULT_CONFIG["tolerance"]))

    distribution = get_distribution(name, params, generator=build_generator(config))
    samples = draw_samples(distribution, samples_count)
    moments = sample_moments(samples)
    logger.debug("Drew %d samples from %r", samples_count, distribution)

    details: dict[str, Any] = {
        "distribution": repr(distribution),
        "samples": samples_count,
        "tolerance": tolerance,
        "sample_mean": moments["mean"],
        "sample_variance": moments["variance"],
    }
    passed = True

    in_support = bool(
        np.all(samples >= distribution.minimum) and np.all(samples <= distribution.maximum)
    )
    details["in_support"] = in_support
    passed = passed and in_support

    try:
        expected_mean = distribution.mean
    except NotSupportedError:
        details["mean_skipped"] = True
    else:
        mean_error = relative_error(moments["mean"], expected_mean)
        details["expected_mean"] = expected_mean
        details["mean_error"] = mean_error
        passed = passed and mean_error <= tolerance

    try:
        expected_variance = distribution.variance
    except NotSupportedError:
        details["variance_skipped"] = True
    else:
        variance_error = relative_error(moments["variance"], expected_variance)
        details["expected_variance"] = expected_variance
        details["variance_error"] = variance_error
        passed = passed and variance_error <= 2.0 * tolerance

    return CheckResult(name=check_name, passed=passed, details=details)


def run_checks(config: dict[str, Any]) -> ChecksSummary:
    """Run all checks for the given configuration.

    Args:
        config: Configuration dictionary with generator, seed, draws,
            samples, tolerance and distributions.

    Returns:
        ChecksSummary with all check results.
    """
    results: list[CheckResult] = []

    # Generator checks
    results.append(check_reset_reproducibility(config))
    results.append(check_bounds(config))
    results.append(check_boolean_buffer(config))

    # One moment check per configured distribution
    for entry in config.get("distributions", DEFAULT_CONFIG["distributions"]):
        results.append(check_distribution_moments(config, entry))

    # Determine overall pass/fail
    all_passed = all(r.passed for r in results)
    logger.debug("Ran %d checks, passed=%s", len(results), all_passed)

    return ChecksSummary(passed=all_passed, results=results)
