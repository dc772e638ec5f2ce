"""Distributions over the integers.

Every family derives from AbstractDiscreteDistribution and exposes
``next()`` (int) and ``next_double()``.
"""

from __future__ import annotations

from distributions.discrete.bernoulli import BernoulliDistribution
from distributions.discrete.binomial import BinomialDistribution
from distributions.discrete.categorical import CategoricalDistribution
from distributions.discrete.discrete_uniform import DiscreteUniformDistribution
from distributions.discrete.geometric import GeometricDistribution
from distributions.discrete.poisson import PoissonDistribution

__all__ = [
    "BernoulliDistribution",
    "BinomialDistribution",
    "CategoricalDistribution",
    "DiscreteUniformDistribution",
    "GeometricDistribution",
    "PoissonDistribution",
]
