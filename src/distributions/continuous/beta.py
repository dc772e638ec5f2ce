"""Beta distribution sampled from two gamma variates."""

from __future__ import annotations

from core.errors import UNDEFINED_MEDIAN, UNDEFINED_MODE_FOR_PARAMS, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.continuous.gamma import GammaDistribution
from distributions.parameters import AlphaParam, BetaParam, Parameter

__all__ = ["BetaDistribution"]


class BetaDistribution(AbstractContinuousDistribution, AlphaParam, BetaParam):
    """Beta distribution on [0, 1] with shapes alpha and beta (both > 0).

    A sample is x / (x + y) with x ~ Gamma(alpha, 1) and y ~ Gamma(beta, 1).
    """

    DEFAULT_ALPHA = 1.0
    DEFAULT_BETA = 1.0

    params = ("alpha", "beta")
    alpha = Parameter(float)
    beta = Parameter(float)

    def __init__(
        self,
        alpha: float = DEFAULT_ALPHA,
        beta: float = DEFAULT_BETA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(alpha, beta)

    @staticmethod
    def are_valid_params(alpha: float, beta: float) -> bool:
        return alpha > 0.0 and beta > 0.0

    @staticmethod
    def sampler(generator: Generator, alpha: float, beta: float) -> float:
        while True:
            x = GammaDistribution.sampler(generator, alpha, 1.0)
            total = x + GammaDistribution.sampler(generator, beta, 1.0)
            # Both variates underflowed to zero, draw again
            if total != 0.0:
                break
        t = 1.0 / total
        return 1.0 if t == 0.0 else x * t

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return 1.0

    @property
    def mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    @property
    def median(self) -> float:
        raise NotSupportedError(UNDEFINED_MEDIAN)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        return a / (a + b) * (b / (a + b)) / (a + b + 1.0)

    @property
    def mode(self) -> Mode:
        a, b = self.alpha, self.beta
        if a > 1.0 and b > 1.0:
            return ((a - 1.0) / (a + b - 2.0),)
        if a < 1.0 and b < 1.0:
            return (0.0, 1.0)
        if (a < 1.0 and b >= 1.0) or (a == 1.0 and b > 1.0):
            return (0.0,)
        if (a >= 1.0 and b < 1.0) or (a > 1.0 and b == 1.0):
            return (1.0,)
        raise NotSupportedError(UNDEFINED_MODE_FOR_PARAMS)
