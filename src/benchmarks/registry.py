"""Registry for generators and distributions.

This module provides the name -> factory layer used by the benchmark runner
and the config files, so engines and families can be referred to by short
names.

Adding a new generator:
1. Implement the Generator protocol (see core.protocols), usually by
   subclassing generators.base.AbstractGenerator
2. Register it here with register_generator(name, factory)
3. It becomes available in CLI via --generator name

Adding a new distribution:
1. Subclass AbstractContinuousDistribution or AbstractDiscreteDistribution
2. Register it here with register_distribution(name, cls)
3. It can be listed under "distributions" in a run config

Example:
    >>> from benchmarks.registry import get_distribution, get_generator
    >>> gen = get_generator("mt19937", seed=42)
    >>> dist = get_distribution("gamma", {"alpha": 2.0, "theta": 1.5}, generator=gen)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from core.protocols import Generator
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
from generators import (
    ALFGenerator,
    MT19937Generator,
    NR3Generator,
    NR3Q1Generator,
    NR3Q2Generator,
    PCG64Generator,
    StandardGenerator,
    XorShift128Generator,
)

__all__ = [
    "GENERATORS",
    "DISTRIBUTIONS",
    "register_generator",
    "get_generator",
    "register_distribution",
    "get_distribution",
]

# Type aliases for factory functions
GeneratorFactory = Callable[[int | None], Generator]
DistributionFactory = Callable[..., AbstractDistribution]

# Global registries
GENERATORS: dict[str, GeneratorFactory] = {}
DISTRIBUTIONS: dict[str, DistributionFactory] = {}


def register_generator(name: str, factory: GeneratorFactory) -> None:
    """Register a generator factory.

    Args:
        name: Unique name for the generator (used in CLI).
        factory: Callable that takes a seed (or None) and returns a Generator.

    Raises:
        ValueError: If name is already registered.
    """
    if name in GENERATORS:
        raise ValueError(f"Generator '{name}' is already registered")
    GENERATORS[name] = factory


def get_generator(name: str, seed: int | None = None) -> Generator:
    """Get a generator instance from the registry.

    Args:
        name: Registered generator name.
        seed: Seed passed to the factory; None asks for a time-derived seed.

    Returns:
        A Generator instance.

    Raises:
        KeyError: If name is not registered.
    """
    if name not in GENERATORS:
        available = ", ".join(sorted(GENERATORS.keys()))
        raise KeyError(f"Unknown generator '{name}'. Available: {available}")
    return GENERATORS[name](seed)


def register_distribution(name: str, factory: DistributionFactory) -> None:
    """Register a distribution class or factory.

    Args:
        name: Unique name for the distribution (used in configs).
        factory: Callable accepting the family parameters as keywords plus
            ``generator=``, returning a distribution.

    Raises:
        ValueError: If name is already registered.
    """
    if name in DISTRIBUTIONS:
        raise ValueError(f"Distribution '{name}' is already registered")
    DISTRIBUTIONS[name] = factory


def get_distribution(
    name: str,
    params: Mapping[str, Any] | None = None,
    *,
    generator: Generator | None = None,
) -> AbstractDistribution:
    """Get a distribution instance from the registry.

    Args:
        name: Registered distribution name.
        params: Family parameters by keyword (``lambda_`` for lambda).
        generator: Generator to draw from; the family default when None.

    Returns:
        A distribution instance.

    Raises:
        KeyError: If name is not registered.
        InvalidParameterError: If params are outside the family domain.
    """
    if name not in DISTRIBUTIONS:
        available = ", ".join(sorted(DISTRIBUTIONS.keys()))
        raise KeyError(f"Unknown distribution '{name}'. Available: {available}")
    return DISTRIBUTIONS[name](**dict(params or {}), generator=generator)


# =============================================================================
# Initial registrations
# =============================================================================

# Register generators
register_generator("xorshift128", XorShift128Generator)
register_generator("alf", ALFGenerator)
register_generator("mt19937", MT19937Generator)
register_generator("nr3", NR3Generator)
register_generator("nr3q1", NR3Q1Generator)
register_generator("nr3q2", NR3Q2Generator)
register_generator("standard", StandardGenerator)
register_generator("pcg64", PCG64Generator)

# Register continuous distributions
register_distribution("beta", BetaDistribution)
register_distribution("beta_prime", BetaPrimeDistribution)
register_distribution("cauchy", CauchyDistribution)
register_distribution("chi", ChiDistribution)
register_distribution("chi_square", ChiSquareDistribution)
register_distribution("continuous_uniform", ContinuousUniformDistribution)
register_distribution("erlang", ErlangDistribution)
register_distribution("exponential", ExponentialDistribution)
register_distribution("fisher_snedecor", FisherSnedecorDistribution)
register_distribution("fisher_tippett", FisherTippettDistribution)
register_distribution("gamma", GammaDistribution)
register_distribution("laplace", LaplaceDistribution)
register_distribution("lognormal", LognormalDistribution)
register_distribution("normal", NormalDistribution)
register_distribution("pareto", ParetoDistribution)
register_distribution("power", PowerDistribution)
register_distribution("rayleigh", RayleighDistribution)
register_distribution("students_t", StudentsTDistribution)
register_distribution("triangular", TriangularDistribution)
register_distribution("weibull", WeibullDistribution)

# Register discrete distributions
register_distribution("bernoulli", BernoulliDistribution)
register_distribution("binomial", BinomialDistribution)
register_distribution("categorical", CategoricalDistribution)
register_distribution("discrete_uniform", DiscreteUniformDistribution)
register_distribution("geometric", GeometricDistribution)
register_distribution("poisson", PoissonDistribution)
