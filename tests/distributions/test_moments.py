"""Sampling tests: sample moments against closed-form statistics.

This module tests:
- Sample mean and variance of every family with seeded generators
- Support bounds (minimum/maximum) of drawn samples
- The large-lambda Poisson path (lambda split into steps)
"""

from __future__ import annotations

import math
from itertools import islice

import numpy as np
import pytest

from core.sequences import distributed_doubles
from distributions import (
    BernoulliDistribution,
    BetaDistribution,
    BetaPrimeDistribution,
    BinomialDistribution,
    CategoricalDistribution,
    CauchyDistribution,
    ChiDistribution,
    ChiSquareDistribution,
    ContinuousUniformDistribution,
    DiscreteUniformDistribution,
    ErlangDistribution,
    ExponentialDistribution,
    FisherSnedecorDistribution,
    FisherTippettDistribution,
    GammaDistribution,
    GeometricDistribution,
    LaplaceDistribution,
    LognormalDistribution,
    NormalDistribution,
    ParetoDistribution,
    PoissonDistribution,
    PowerDistribution,
    RayleighDistribution,
    StudentsTDistribution,
    TriangularDistribution,
    WeibullDistribution,
)
from distributions.base import AbstractDistribution
from distributions.continuous.erlang import marsaglia_tsang
from generators import MT19937Generator, XorShift128Generator

SAMPLES = 20_000
MEAN_TOLERANCE = 0.05
VARIANCE_TOLERANCE = 0.10

# (factory, check_variance). Heavy-tailed families only check the mean.
CASES = [
    (lambda g: BernoulliDistribution(0.3, generator=g), True),
    (lambda g: BetaDistribution(2.0, 5.0, generator=g), True),
    (lambda g: BetaPrimeDistribution(3.0, 4.0, generator=g), False),
    (lambda g: BinomialDistribution(0.4, 10, generator=g), True),
    (lambda g: CategoricalDistribution([1.0, 2.0, 3.0, 4.0], generator=g), True),
    (lambda g: ChiDistribution(3, generator=g), True),
    (lambda g: ChiSquareDistribution(4, generator=g), True),
    (lambda g: ContinuousUniformDistribution(-2.0, 3.0, generator=g), True),
    (lambda g: DiscreteUniformDistribution(-3, 6, generator=g), True),
    (lambda g: ErlangDistribution(3, 2.0, generator=g), True),
    (lambda g: ExponentialDistribution(2.0, generator=g), True),
    (lambda g: FisherSnedecorDistribution(5, 10, generator=g), False),
    (lambda g: FisherTippettDistribution(2.0, 1.0, generator=g), True),
    (lambda g: GammaDistribution(2.5, 1.5, generator=g), True),
    (lambda g: GammaDistribution(0.5, 2.0, generator=g), True),
    (lambda g: GammaDistribution(3.0, 1.0, generator=g), True),
    (lambda g: GeometricDistribution(0.25, generator=g), True),
    (lambda g: LaplaceDistribution(1.5, -1.0, generator=g), True),
    (lambda g: LognormalDistribution(0.0, 0.5, generator=g), True),
    (lambda g: NormalDistribution(0.0, 1.0, generator=g), True),
    (lambda g: NormalDistribution(3.0, 2.0, generator=g), True),
    (lambda g: ParetoDistribution(1.0, 3.0, generator=g), False),
    (lambda g: PoissonDistribution(4.0, generator=g), True),
    (lambda g: PowerDistribution(2.0, 1.0, generator=g), True),
    (lambda g: RayleighDistribution(2.0, generator=g), True),
    (lambda g: StudentsTDistribution(5, generator=g), False),
    (lambda g: TriangularDistribution(0.0, 4.0, 1.0, generator=g), True),
    (lambda g: WeibullDistribution(1.5, 2.0, generator=g), True),
]


def _case_id(case: tuple) -> str:
    return repr(case[0](MT19937Generator(seed=1)))


def _draw(dist: AbstractDistribution, count: int) -> np.ndarray:
    return np.fromiter(islice(distributed_doubles(dist), count), dtype=float, count=count)


# =============================================================================
# Tests for sample moments
# =============================================================================


class TestSampleMoments:
    """Sample statistics should match the closed forms within tolerance."""

    @pytest.mark.parametrize("case", CASES, ids=[_case_id(c) for c in CASES])
    def test_mean_variance_and_support(self, case: tuple) -> None:
        factory, check_variance = case
        dist = factory(MT19937Generator(seed=2024))
        samples = _draw(dist, SAMPLES)

        assert np.all(samples >= dist.minimum)
        assert np.all(samples <= dist.maximum)

        # Absolute floor for families centred near zero
        assert samples.mean() == pytest.approx(dist.mean, rel=MEAN_TOLERANCE, abs=0.03)
        if check_variance:
            assert samples.var() == pytest.approx(dist.variance, rel=VARIANCE_TOLERANCE)

    def test_exponential_mean(self) -> None:
        """Exponential(2) should average 0.5 over 10^5 draws."""
        dist = ExponentialDistribution(2.0, seed=12345)
        samples = _draw(dist, 100_000)
        assert samples.mean() == pytest.approx(0.5, rel=0.05)

    def test_marsaglia_tsang_small_shape_mean(self) -> None:
        """Shapes below one go through the boosted path and keep mean alpha."""
        gen = XorShift128Generator(seed=3)
        samples = np.array([marsaglia_tsang(gen, 0.5) for _ in range(50_000)])
        assert np.all(samples >= 0.0)
        assert samples.mean() == pytest.approx(0.5, rel=MEAN_TOLERANCE)
        assert samples.var() == pytest.approx(0.5, rel=VARIANCE_TOLERANCE)

    def test_cauchy_median(self) -> None:
        """The Cauchy sample median should sit at alpha."""
        dist = CauchyDistribution(1.0, 0.5, seed=77)
        samples = _draw(dist, SAMPLES)
        assert float(np.median(samples)) == pytest.approx(dist.median, abs=0.05)

    def test_poisson_large_lambda(self) -> None:
        """Lambda above one step should still give mean and variance lambda."""
        dist = PoissonDistribution(700.0, seed=3)
        samples = _draw(dist, 2_000)
        assert samples.mean() == pytest.approx(700.0, rel=0.01)
        assert samples.var() == pytest.approx(700.0, rel=0.15)

    def test_discrete_samples_are_whole(self) -> None:
        dist = BinomialDistribution(0.5, 7, seed=9)
        values = [dist.next() for _ in range(500)]
        assert all(isinstance(v, int) for v in values)
        assert set(values) <= set(range(8))

    def test_geometric_with_certain_success(self) -> None:
        """alpha = 1 should always need exactly one trial."""
        dist = GeometricDistribution(1.0, seed=4)
        assert {dist.next() for _ in range(100)} == {1}

    def test_lognormal_zero_sigma_is_constant(self) -> None:
        dist = LognormalDistribution(0.5, 0.0, seed=4)
        assert dist.next_double() == pytest.approx(math.exp(0.5))
