"""Triangular distribution sampled by inversion."""

from __future__ import annotations

import math

from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.parameters import AlphaParam, BetaParam, GammaParam, Parameter

__all__ = ["TriangularDistribution"]


class TriangularDistribution(AbstractContinuousDistribution, AlphaParam, BetaParam, GammaParam):
    """Triangular distribution on [alpha, beta] with peak gamma.

    Valid parameters: alpha < beta and alpha <= gamma <= beta.
    """

    DEFAULT_ALPHA = 0.0
    DEFAULT_BETA = 1.0
    DEFAULT_GAMMA = 0.5

    params = ("alpha", "beta", "gamma")
    alpha = Parameter(float)
    beta = Parameter(float)
    gamma = Parameter(float)

    def __init__(
        self,
        alpha: float = DEFAULT_ALPHA,
        beta: float = DEFAULT_BETA,
        gamma: float = DEFAULT_GAMMA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(alpha, beta, gamma)

    @staticmethod
    def are_valid_params(alpha: float, beta: float, gamma: float) -> bool:
        return alpha < beta and alpha <= gamma <= beta

    @staticmethod
    def sampler(generator: Generator, alpha: float, beta: float, gamma: float) -> float:
        u = generator.next_double()
        width = beta - alpha
        if u < (gamma - alpha) / width:
            return alpha + math.sqrt(u * width * (gamma - alpha))
        return beta - math.sqrt((1.0 - u) * width * (beta - gamma))

    @property
    def minimum(self) -> float:
        return self.alpha

    @property
    def maximum(self) -> float:
        return self.beta

    @property
    def mean(self) -> float:
        return (self.alpha + self.beta + self.gamma) / 3.0

    @property
    def median(self) -> float:
        a, b, c = self.alpha, self.beta, self.gamma
        if c >= (a + b) / 2.0:
            return a + math.sqrt((b - a) * (c - a)) / math.sqrt(2.0)
        return b - math.sqrt((b - a) * (b - c)) / math.sqrt(2.0)

    @property
    def variance(self) -> float:
        a, b, c = self.alpha, self.beta, self.gamma
        return (a * a + b * b + c * c - a * b - a * c - b * c) / 18.0

    @property
    def mode(self) -> Mode:
        return (self.gamma,)
