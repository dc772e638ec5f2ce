"""Probability distributions driven by a uniform generator.

- base: AbstractDistribution and the continuous/discrete bases
- parameters: validated Parameter descriptor and capability mixins
- continuous: twenty families over the reals
- discrete: six families over the integers
"""

from __future__ import annotations

from distributions.base import (
    AbstractContinuousDistribution,
    AbstractDiscreteDistribution,
    AbstractDistribution,
    resolve_generator,
)
from distributions.continuous import (
    BetaDistribution,
    BetaPrimeDistribution,
    CauchyDistribution,
    ChiDistribution,
    ChiSquareDistribution,
    ContinuousUniformDistribution,
    ErlangDistribution,
    ExponentialDistribution,
    FisherSnedecorDistribution,
    FisherTippettDistribution,
    GammaDistribution,
    LaplaceDistribution,
    LognormalDistribution,
    NormalDistribution,
    ParetoDistribution,
    PowerDistribution,
    RayleighDistribution,
    StudentsTDistribution,
    TriangularDistribution,
    WeibullDistribution,
)
from distributions.discrete import (
    BernoulliDistribution,
    BinomialDistribution,
    CategoricalDistribution,
    DiscreteUniformDistribution,
    GeometricDistribution,
    PoissonDistribution,
)
from distributions.parameters import Parameter

__all__ = [
    # Base
    "AbstractDistribution",
    "AbstractContinuousDistribution",
    "AbstractDiscreteDistribution",
    "Parameter",
    "resolve_generator",
    # Continuous
    "BetaDistribution",
    "BetaPrimeDistribution",
    "CauchyDistribution",
    "ChiDistribution",
    "ChiSquareDistribution",
    "ContinuousUniformDistribution",
    "ErlangDistribution",
    "ExponentialDistribution",
    "FisherSnedecorDistribution",
    "FisherTippettDistribution",
    "GammaDistribution",
    "LaplaceDistribution",
    "LognormalDistribution",
    "NormalDistribution",
    "ParetoDistribution",
    "PowerDistribution",
    "RayleighDistribution",
    "StudentsTDistribution",
    "TriangularDistribution",
    "WeibullDistribution",
    # Discrete
    "BernoulliDistribution",
    "BinomialDistribution",
    "CategoricalDistribution",
    "DiscreteUniformDistribution",
    "GeometricDistribution",
    "PoissonDistribution",
]
