"""Beta prime distribution, the odds b / (1 - b) of a beta variate."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MEDIAN, UNDEFINED_VARIANCE_FOR_PARAMS, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.continuous.beta import BetaDistribution
from distributions.parameters import AlphaParam, BetaParam, Parameter

__all__ = ["BetaPrimeDistribution"]


class BetaPrimeDistribution(AbstractContinuousDistribution, AlphaParam, BetaParam):
    """Beta prime distribution with shapes alpha and beta (both > 1)."""

    DEFAULT_ALPHA = 2.0
    DEFAULT_BETA = 2.0

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
        return alpha > 1.0 and beta > 1.0

    @staticmethod
    def sampler(generator: Generator, alpha: float, beta: float) -> float:
        b = BetaDistribution.sampler(generator, alpha, beta)
        tail = 1.0 - b
        return math.inf if tail == 0.0 else b / tail

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return self.alpha / (self.beta - 1.0)

    @property
    def median(self) -> float:
        raise NotSupportedError(UNDEFINED_MEDIAN)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        if b > 2.0:
            return a / (b - 1.0) * ((a + b - 1.0) / (b - 1.0)) / (b - 2.0)
        raise NotSupportedError(UNDEFINED_VARIANCE_FOR_PARAMS)

    @property
    def mode(self) -> Mode:
        return ((self.alpha - 1.0) / (self.beta + 1.0),)
