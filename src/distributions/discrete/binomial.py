"""Binomial distribution: successes over beta Bernoulli trials."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MEDIAN, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractDiscreteDistribution, resolve_generator
from distributions.parameters import AlphaParam, BetaParam, Parameter

__all__ = ["BinomialDistribution"]


class BinomialDistribution(AbstractDiscreteDistribution, AlphaParam, BetaParam):
    """Binomial distribution.

    Args:
        alpha: Success probability of each trial, 0 <= alpha <= 1.
        beta: Number of trials, beta >= 0.
    """

    DEFAULT_ALPHA = 0.5
    DEFAULT_BETA = 1

    params = ("alpha", "beta")
    alpha = Parameter(float)
    beta = Parameter(int)

    def __init__(
        self,
        alpha: float = DEFAULT_ALPHA,
        beta: int = DEFAULT_BETA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(alpha, beta)

    @staticmethod
    def are_valid_params(alpha: float, beta: int) -> bool:
        return 0.0 <= alpha <= 1.0 and beta >= 0

    @staticmethod
    def sampler(generator: Generator, alpha: float, beta: int) -> int:
        successes = 0
        for _ in range(beta):
            if generator.next_double() < alpha:
                successes += 1
        return successes

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return float(self.beta)

    @property
    def mean(self) -> float:
        return self.alpha * self.beta

    @property
    def median(self) -> float:
        raise NotSupportedError(UNDEFINED_MEDIAN)

    @property
    def variance(self) -> float:
        return self.alpha * (1.0 - self.alpha) * self.beta

    @property
    def mode(self) -> Mode:
        return (float(math.floor(self.alpha * (self.beta + 1.0))),)
