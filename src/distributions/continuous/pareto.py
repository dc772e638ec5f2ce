"""Pareto distribution sampled by inversion."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MEAN_FOR_PARAMS, UNDEFINED_VARIANCE_FOR_PARAMS, NotSupportedError
from core.protocols import Generator
from core.tmath import safe_pow
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.parameters import AlphaParam, BetaParam, Parameter

__all__ = ["ParetoDistribution"]


class ParetoDistribution(AbstractContinuousDistribution, AlphaParam, BetaParam):
    """Pareto distribution with scale alpha and shape beta (both > 0)."""

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
        denominator = (1.0 - generator.next_double()) ** (1.0 / beta)
        if denominator == 0.0:
            return math.inf
        return alpha / denominator

    @property
    def minimum(self) -> float:
        return self.alpha

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        if self.beta > 1.0:
            return self.alpha * self.beta / (self.beta - 1.0)
        raise NotSupportedError(UNDEFINED_MEAN_FOR_PARAMS)

    @property
    def median(self) -> float:
        return self.alpha * safe_pow(2.0, 1.0 / self.beta)

    @property
    def variance(self) -> float:
        if self.beta > 2.0:
            d = self.beta - 1.0
            return self.beta * self.alpha * self.alpha / d / d / (self.beta - 2.0)
        raise NotSupportedError(UNDEFINED_VARIANCE_FOR_PARAMS)

    @property
    def mode(self) -> Mode:
        return (self.alpha,)
