"""Distributions over the reals.

Every family derives from AbstractContinuousDistribution and exposes
``next_double()`` plus the usual summary statistics.
"""

from __future__ import annotations

from distributions.continuous.beta import BetaDistribution
from distributions.continuous.beta_prime import BetaPrimeDistribution
from distributions.continuous.cauchy import CauchyDistribution
from distributions.continuous.chi import ChiDistribution
from distributions.continuous.chi_square import ChiSquareDistribution
from distributions.continuous.continuous_uniform import ContinuousUniformDistribution
from distributions.continuous.erlang import ErlangDistribution, marsaglia_tsang
from distributions.continuous.exponential import ExponentialDistribution
from distributions.continuous.fisher_snedecor import FisherSnedecorDistribution
from distributions.continuous.fisher_tippett import FisherTippettDistribution
from distributions.continuous.gamma import GammaDistribution
from distributions.continuous.laplace import LaplaceDistribution
from distributions.continuous.lognormal import LognormalDistribution
from distributions.continuous.normal import NormalDistribution
from distributions.continuous.pareto import ParetoDistribution
from distributions.continuous.power import PowerDistribution
from distributions.continuous.rayleigh import RayleighDistribution
from distributions.continuous.students_t import StudentsTDistribution
from distributions.continuous.triangular import TriangularDistribution
from distributions.continuous.weibull import WeibullDistribution

__all__ = [
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
    "marsaglia_tsang",
]
