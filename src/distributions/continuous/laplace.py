"""Laplace (double exponential) distribution sampled by inversion."""

from __future__ import annotations

import math

from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.parameters import AlphaParam, MuParam, Parameter

__all__ = ["LaplaceDistribution"]


class LaplaceDistribution(AbstractContinuousDistribution, AlphaParam, MuParam):
    """Laplace distribution with scale alpha (> 0) and location mu (not NaN)."""

    DEFAULT_ALPHA = 1.0
    DEFAULT_MU = 0.0

    params = ("alpha", "mu")
    alpha = Parameter(float)
    mu = Parameter(float)

    def __init__(
        self,
        alpha: float = DEFAULT_ALPHA,
        mu: float = DEFAULT_MU,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(alpha, mu)

    @staticmethod
    def are_valid_params(alpha: float, mu: float) -> bool:
        return alpha > 0.0 and not math.isnan(mu)

    @staticmethod
    def sampler(generator: Generator, alpha: float, mu: float) -> float:
        rand = 0.5 - generator.next_double()
        if rand == 0.0:
            return mu
        return mu - alpha * math.copysign(1.0, rand) * math.log(2.0 * abs(rand))

    @property
    def minimum(self) -> float:
        return -math.inf

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return self.mu

    @property
    def median(self) -> float:
        return self.mu

    @property
    def variance(self) -> float:
        return 2.0 * self.alpha * self.alpha

    @property
    def mode(self) -> Mode:
        return (self.mu,)
