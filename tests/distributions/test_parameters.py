"""Tests for parameter validation of every distribution family.

This module tests:
- is_valid_<name>() agrees with what the setter accepts
- Setters reject invalid values and keep the previous value
- Constructors report every parameter on joint failure
- Int parameters reject floats and booleans
"""

from __future__ import annotations

import math

import pytest

from core.errors import InvalidParameterError
from core.protocols import HasAlpha, HasBeta, HasLambda, HasMu, HasSigma
from core.types import INT32_MAX
from distributions import (
    BernoulliDistribution,
    BetaDistribution,
    BetaPrimeDistribution,
    BinomialDistribution,
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
from distributions.parameters import Parameter, coerce_param

FAMILIES = [
    BernoulliDistribution,
    BetaDistribution,
    BetaPrimeDistribution,
    BinomialDistribution,
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
]

CANDIDATES = [0, 1, 2, 3, -1, 0.0, -1e-9, 0.5, 1.5, 2.0, math.nan, math.inf, -math.inf]


def _cases() -> list[tuple[type, str]]:
    return [(cls, name) for cls in FAMILIES for name in cls.params]


# =============================================================================
# Tests for is_valid_<name>() versus setters
# =============================================================================


class TestValidityRoundTrip:
    """is_valid_<name>(v) must be True exactly when the setter accepts v."""

    @pytest.mark.parametrize(
        ("cls", "name"), _cases(), ids=lambda v: v.__name__ if isinstance(v, type) else v
    )
    def test_setter_matches_predicate(self, cls: type, name: str) -> None:
        label = getattr(cls, name).label
        for value in CANDIDATES:
            dist = cls(seed=1)
            before = getattr(dist, name)
            valid = getattr(dist, f"is_valid_{label}")(value)
            if valid:
                setattr(dist, name, value)
                stored = getattr(dist, name)
                assert stored == value or (math.isnan(stored) and math.isnan(value))
            else:
                with pytest.raises(InvalidParameterError) as excinfo:
                    setattr(dist, name, value)
                assert excinfo.value.names == (label,)
                assert getattr(dist, name) == before or math.isnan(before)

    @pytest.mark.parametrize("cls", FAMILIES, ids=lambda c: c.__name__)
    def test_defaults_are_valid(self, cls: type) -> None:
        """Every family should construct with its defaults."""
        dist = cls(seed=1)
        values = [getattr(dist, name) for name in cls.params]
        assert cls.are_valid_params(*values)


# =============================================================================
# Tests for individual boundaries
# =============================================================================


class TestBoundaries:
    """Tests for boundary values named in the family docs."""

    def test_exponential_lambda(self) -> None:
        dist = ExponentialDistribution(seed=1)
        assert isinstance(dist, HasLambda)
        assert dist.is_valid_lambda(1e-300)
        assert not dist.is_valid_lambda(0.0)
        assert not dist.is_valid_lambda(-1e-9)
        assert not dist.is_valid_lambda(math.nan)

    def test_normal_mu_and_sigma(self) -> None:
        dist = NormalDistribution(seed=1)
        assert isinstance(dist, HasMu) and isinstance(dist, HasSigma)
        assert dist.is_valid_mu(-1e300)
        assert not dist.is_valid_mu(math.nan)
        assert not dist.is_valid_sigma(0.0)

    def test_lognormal_allows_zero_sigma(self) -> None:
        dist = LognormalDistribution(seed=1)
        assert dist.is_valid_sigma(0.0)
        assert not dist.is_valid_sigma(-1e-9)

    def test_bernoulli_closed_interval(self) -> None:
        dist = BernoulliDistribution(seed=1)
        assert dist.is_valid_alpha(0.0)
        assert dist.is_valid_alpha(1.0)
        assert not dist.is_valid_alpha(1.0 + 1e-9)

    def test_geometric_rejects_above_one(self) -> None:
        """Setting alpha = 1.5 should raise and keep the old value."""
        dist = GeometricDistribution(0.25, seed=1)
        with pytest.raises(InvalidParameterError, match="alpha"):
            dist.alpha = 1.5
        assert dist.alpha == 0.25
        assert not dist.is_valid_alpha(0.0)
        assert dist.is_valid_alpha(1.0)

    def test_discrete_uniform_upper_limit(self) -> None:
        """beta must stay below INT32_MAX so that beta + 1 fits the range."""
        with pytest.raises(InvalidParameterError):
            DiscreteUniformDistribution(50, INT32_MAX)
        dist = DiscreteUniformDistribution(50, INT32_MAX - 1, seed=1)
        assert 50 <= dist.next() <= INT32_MAX - 1

    def test_continuous_uniform_range(self) -> None:
        dist = ContinuousUniformDistribution(0.0, 1.0, seed=1)
        assert isinstance(dist, HasAlpha) and isinstance(dist, HasBeta)
        assert dist.is_valid_beta(0.0)
        assert not dist.is_valid_beta(-0.5)
        assert not dist.is_valid_beta(math.inf)
        with pytest.raises(InvalidParameterError):
            ContinuousUniformDistribution(-1e308, 1e308)

    def test_triangular_mode_inside_range(self) -> None:
        dist = TriangularDistribution(0.0, 1.0, 0.5, seed=1)
        assert dist.is_valid_gamma(0.0)
        assert dist.is_valid_gamma(1.0)
        assert not dist.is_valid_gamma(1.5)
        assert not dist.is_valid_beta(0.0)

    def test_beta_prime_needs_both_above_one(self) -> None:
        dist = BetaPrimeDistribution(seed=1)
        assert not dist.is_valid_alpha(1.0)
        assert dist.is_valid_alpha(1.0 + 1e-9)

    def test_poisson_rejects_infinite_lambda(self) -> None:
        dist = PoissonDistribution(seed=1)
        assert not dist.is_valid_lambda(math.inf)
        assert dist.is_valid_lambda(1e6)


# =============================================================================
# Tests for constructors and coercion
# =============================================================================


class TestConstructorsAndCoercion:
    """Tests for joint validation and value coercion."""

    def test_constructor_names_all_parameters(self) -> None:
        """A failing constructor should report every parameter label."""
        with pytest.raises(InvalidParameterError) as excinfo:
            WeibullDistribution(-1.0, 1.0)
        assert excinfo.value.names == ("alpha", "lambda")
        assert "alpha, lambda" in str(excinfo.value)

    def test_int_parameter_rejects_float(self) -> None:
        """Int parameters should reject floats, even whole ones."""
        dist = ChiSquareDistribution(3, seed=1)
        assert not dist.is_valid_alpha(2.5)
        assert not dist.is_valid_alpha(2.0)
        with pytest.raises(InvalidParameterError):
            dist.alpha = 2.0
        with pytest.raises(InvalidParameterError):
            StudentsTDistribution(1.5)

    def test_booleans_are_not_numbers(self) -> None:
        dist = BernoulliDistribution(seed=1)
        assert not dist.is_valid_alpha(True)
        with pytest.raises(InvalidParameterError):
            ErlangDistribution(True, 1.0)

    def test_float_parameter_accepts_int(self) -> None:
        """Ints are widened to float for float parameters."""
        dist = GammaDistribution(2, 3, seed=1)
        assert dist.alpha == 2.0
        assert isinstance(dist.alpha, float)

    def test_coerce_param(self) -> None:
        assert coerce_param(int, 3, "nu") == 3
        assert coerce_param(float, 3, "sigma") == 3.0
        with pytest.raises(InvalidParameterError, match="nu"):
            coerce_param(int, 3.5, "nu")
        with pytest.raises(InvalidParameterError, match="sigma"):
            coerce_param(float, "1.0", "sigma")

    def test_parameter_kind_checked(self) -> None:
        with pytest.raises(ValueError, match="kind"):
            Parameter(complex)

    def test_class_access_returns_descriptor(self) -> None:
        descriptor = ExponentialDistribution.lambda_
        assert isinstance(descriptor, Parameter)
        assert descriptor.label == "lambda"
        assert descriptor.kind is float

    def test_misc_families_construct(self) -> None:
        """Non-default constructions that sit on a boundary should succeed."""
        CauchyDistribution(0.0, 1e-12, seed=1)
        ChiDistribution(1, seed=1)
        FisherSnedecorDistribution(1, 1, seed=1)
        FisherTippettDistribution(1e-9, -5.0, seed=1)
        LaplaceDistribution(1e-9, 0.0, seed=1)
        ParetoDistribution(1e-9, 1e-9, seed=1)
        PowerDistribution(1e-9, 1e9, seed=1)
        RayleighDistribution(1e-9, seed=1)
        BetaDistribution(1e-3, 1e-3, seed=1)
        BinomialDistribution(0.0, 0, seed=1)
