"""Tests for the shared distribution base classes.

This module tests:
- Generator resolution (explicit generator, seed, default engine)
- Missing generator handling
- reset() / can_reset delegation to the generator
- next() / next_double() entry points and __repr__
"""

from __future__ import annotations

from itertools import islice

import pytest

from core.errors import InvalidParameterError, MissingGeneratorError
from core.protocols import ContinuousDistribution, DiscreteDistribution, Distribution
from core.sequences import distributed_doubles
from distributions import (
    AbstractDistribution,
    BinomialDistribution,
    ExponentialDistribution,
    GammaDistribution,
    NormalDistribution,
    PoissonDistribution,
    resolve_generator,
)
from generators import MT19937Generator, XorShift128Generator

# =============================================================================
# Tests for generator resolution
# =============================================================================


class TestResolveGenerator:
    """Tests for resolve_generator() and the constructor keywords."""

    def test_explicit_generator_is_shared(self) -> None:
        """A passed generator should be used as is, not copied."""
        gen = MT19937Generator(seed=3)
        assert resolve_generator(gen, None) is gen

        normal = NormalDistribution(0.0, 1.0, generator=gen)
        assert normal.generator is gen

    def test_seed_builds_default_engine(self) -> None:
        """A seed without generator should build a seeded XorShift128Generator."""
        dist = ExponentialDistribution(2.0, seed=99)
        assert isinstance(dist.generator, XorShift128Generator)
        assert dist.generator.seed == 99

    def test_no_arguments_builds_default_engine(self) -> None:
        """No generator and no seed should still give a usable generator."""
        dist = ExponentialDistribution()
        assert isinstance(dist.generator, XorShift128Generator)
        assert dist.next_double() >= 0.0

    def test_generator_and_seed_rejected(self) -> None:
        """Passing both a generator and a seed is ambiguous."""
        with pytest.raises(InvalidParameterError, match="generator"):
            NormalDistribution(generator=XorShift128Generator(seed=1), seed=2)

    def test_missing_generator_on_base(self) -> None:
        """The base constructor should refuse a None generator."""
        dist = object.__new__(NormalDistribution)
        with pytest.raises(MissingGeneratorError):
            AbstractDistribution.__init__(dist, None)

    def test_seeded_distributions_agree(self) -> None:
        """Same seed and parameters should give the same samples."""
        a = GammaDistribution(2.5, 1.5, seed=7)
        b = GammaDistribution(2.5, 1.5, seed=7)
        assert [a.next_double() for _ in range(50)] == [b.next_double() for _ in range(50)]


# =============================================================================
# Tests for reset and sampling entry points
# =============================================================================


class TestResetAndSampling:
    """Tests for reset() delegation and the next()/next_double() methods."""

    def test_reset_replays_samples(self) -> None:
        """reset() on the distribution should replay the generator stream."""
        dist = NormalDistribution(0.0, 1.0, seed=12345)
        assert dist.can_reset is True

        first = list(islice(distributed_doubles(dist), 100))
        assert dist.reset() is True
        second = list(islice(distributed_doubles(dist), 100))
        assert first == second

    def test_shared_generator_advances_for_both(self) -> None:
        """Two distributions on one generator should consume the same stream."""
        gen = XorShift128Generator(seed=5)
        normal = NormalDistribution(0.0, 1.0, generator=gen)
        poisson = PoissonDistribution(3.0, generator=gen)

        paired = [(normal.next_double(), poisson.next()) for _ in range(20)]
        gen.reset()
        replayed = [(normal.next_double(), poisson.next()) for _ in range(20)]
        assert paired == replayed

    def test_discrete_next_returns_int(self) -> None:
        """Discrete families should return ints from next() and floats from next_double()."""
        dist = BinomialDistribution(0.3, 10, seed=1)
        value = dist.next()
        assert isinstance(value, int)
        assert 0 <= value <= 10
        assert isinstance(dist.next_double(), float)

    def test_protocols(self) -> None:
        """Continuous and discrete families should satisfy the runtime protocols."""
        normal = NormalDistribution(seed=1)
        poisson = PoissonDistribution(seed=1)
        assert isinstance(normal, Distribution)
        assert isinstance(normal, ContinuousDistribution)
        assert isinstance(poisson, DiscreteDistribution)

    def test_repr_lists_parameters(self) -> None:
        """__repr__ should use parameter labels, without trailing underscores."""
        assert repr(NormalDistribution(0.5, 2.0, seed=1)) == "NormalDistribution(mu=0.5, sigma=2.0)"
        assert repr(ExponentialDistribution(3.0, seed=1)) == "ExponentialDistribution(lambda=3.0)"
        assert repr(BinomialDistribution(0.25, 4, seed=1)) == (
            "BinomialDistribution(alpha=0.25, beta=4)"
        )
