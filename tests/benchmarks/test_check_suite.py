"""Tests for the generator and distribution check suite."""

from __future__ import annotations

from typing import Any

import pytest

import benchmarks.checks as checks
from benchmarks import registry
from benchmarks.checks import (
    CheckResult,
    ChecksSummary,
    check_boolean_buffer,
    check_bounds,
    check_distribution_moments,
    check_reset_reproducibility,
    run_checks,
)
from distributions import ExponentialDistribution
from generators import XorShift128Generator

SMALL_CONFIG: dict[str, Any] = {
    "generator": "xorshift128",
    "seed": 0,
    "draws": 2_000,
    "samples": 20_000,
    "tolerance": 0.05,
    "distributions": [
        {"name": "exponential", "params": {"lambda_": 2.0}},
        {"name": "normal", "params": {"mu": 0.0, "sigma": 1.0}},
        {"name": "gamma", "params": {"alpha": 2.5, "theta": 1.5}},
        {"name": "poisson", "params": {"lambda_": 4.0}},
    ],
}


class FrozenGenerator(XorShift128Generator):
    """Engine that reports it cannot be reset."""

    @property
    def can_reset(self) -> bool:
        return False


class WrongMeanExponential(ExponentialDistribution):
    """Exponential family advertising a wrong mean."""

    @property
    def mean(self) -> float:
        return 10.0 / self.lambda_


# =============================================================================
# Tests for the generator checks
# =============================================================================


class TestGeneratorChecks:
    """Tests for reset, bounds and boolean buffer checks."""

    @pytest.mark.parametrize("name", ["xorshift128", "mt19937", "alf", "nr3", "standard", "pcg64"])
    def test_generator_checks_pass(self, name: str) -> None:
        config = {**SMALL_CONFIG, "generator": name}
        for check in (check_reset_reproducibility, check_bounds, check_boolean_buffer):
            result = check(config)
            assert result.passed, result.details

    def test_bounds_details(self) -> None:
        result = check_bounds(SMALL_CONFIG)
        assert result.name == "bounds"
        assert result.details["draws"] == 2_000
        assert result.details["total_violations"] == 0
        assert set(result.details["violations"]) == {
            "next_max",
            "next_min_max",
            "next_double",
            "next_double_max",
            "next_uint_max",
        }

    def test_non_resettable_generator_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(checks, "build_generator", lambda config, seed=None: FrozenGenerator(seed=1))
        for check in (check_reset_reproducibility, check_boolean_buffer):
            result = check(SMALL_CONFIG)
            assert result.passed is True
            assert result.details["skipped"] is True
            assert "cannot reset" in result.details["reason"]


# =============================================================================
# Tests for the moment checks
# =============================================================================


class TestMomentChecks:
    """Tests for check_distribution_moments()."""

    def test_exponential_passes(self) -> None:
        result = check_distribution_moments(SMALL_CONFIG, {"name": "exponential", "params": {"lambda_": 2.0}})
        assert result.name == "moments[exponential]"
        assert result.passed, result.details
        assert result.details["expected_mean"] == 0.5
        assert result.details["in_support"] is True

    def test_undefined_moments_skipped(self) -> None:
        result = check_distribution_moments(SMALL_CONFIG, {"name": "cauchy", "params": {"alpha": 0.0, "gamma": 1.0}})
        assert result.passed is True
        assert result.details["mean_skipped"] is True
        assert result.details["variance_skipped"] is True

    def test_wrong_mean_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(registry.DISTRIBUTIONS, "wrong_exponential", WrongMeanExponential)
        result = check_distribution_moments(SMALL_CONFIG, {"name": "wrong_exponential", "params": {"lambda_": 2.0}})
        assert result.passed is False
        assert result.details["mean_error"] > 0.05


# =============================================================================
# Tests for the suite
# =============================================================================


class TestRunChecks:
    """Tests for run_checks() and the summary dataclasses."""

    def test_all_checks_pass(self) -> None:
        summary = run_checks(SMALL_CONFIG)
        assert summary.passed, [r.to_dict() for r in summary.results if not r.passed]
        names = [r.name for r in summary.results]
        assert names == [
            "reset_reproducibility",
            "bounds",
            "boolean_buffer",
            "moments[exponential]",
            "moments[normal]",
            "moments[gamma]",
            "moments[poisson]",
        ]

    def test_summary_to_json(self) -> None:
        summary = ChecksSummary(
            passed=False,
            results=[CheckResult("a", True), CheckResult("b", False, {"x": 1})],
        )
        data = summary.to_json()
        assert data["num_checks"] == 2
        assert data["num_passed"] == 1
        assert data["num_failed"] == 1
        assert data["results"][1] == {"name": "b", "passed": False, "details": {"x": 1}}
