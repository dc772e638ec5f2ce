"""Log-normal distribution."""

from __future__ import annotations

import math

from core.protocols import Generator
from core.tmath import safe_exp, square
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.continuous.normal import NormalDistribution
from distributions.parameters import MuParam, Parameter, SigmaParam

__all__ = ["LognormalDistribution"]


class LognormalDistribution(AbstractContinuousDistribution, MuParam, SigmaParam):
    """Log-normal distribution: exp(Normal(mu, sigma)).

    Valid parameters: mu is not NaN, sigma >= 0.
    """

    DEFAULT_MU = 1.0
    DEFAULT_SIGMA = 1.0

    params = ("mu", "sigma")
    mu = Parameter(float)
    sigma = Parameter(float)

    def __init__(
        self,
        mu: float = DEFAULT_MU,
        sigma: float = DEFAULT_SIGMA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(mu, sigma)

    @staticmethod
    def are_valid_params(mu: float, sigma: float) -> bool:
        return not math.isnan(mu) and sigma >= 0.0

    @staticmethod
    def sampler(generator: Generator, mu: float, sigma: float) -> float:
        return safe_exp(NormalDistribution.sampler(generator, 0.0, 1.0) * sigma + mu)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return safe_exp(self.mu + 0.5 * square(self.sigma))

    @property
    def median(self) -> float:
        return safe_exp(self.mu)

    @property
    def variance(self) -> float:
        s2 = square(self.sigma)
        return (safe_exp(s2) - 1.0) * safe_exp(2.0 * self.mu + s2)

    @property
    def mode(self) -> Mode:
        return (safe_exp(self.mu - square(self.sigma)),)
