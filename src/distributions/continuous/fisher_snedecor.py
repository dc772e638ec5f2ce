"""Fisher-Snedecor (F) distribution."""

from __future__ import annotations

import math

from core.errors import (
    UNDEFINED_MEAN_FOR_PARAMS,
    UNDEFINED_MEDIAN,
    UNDEFINED_MODE_FOR_PARAMS,
    UNDEFINED_VARIANCE_FOR_PARAMS,
    NotSupportedError,
)
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.continuous.chi_square import ChiSquareDistribution
from distributions.parameters import AlphaParam, BetaParam, Parameter

__all__ = ["FisherSnedecorDistribution"]


class FisherSnedecorDistribution(AbstractContinuousDistribution, AlphaParam, BetaParam):
    """F distribution with alpha and beta degrees of freedom (integers > 0).

    A sample is (A / alpha) / (B / beta) with A, B chi-square variates.
    """

    DEFAULT_ALPHA = 1
    DEFAULT_BETA = 1

    params = ("alpha", "beta")
    alpha = Parameter(int)
    beta = Parameter(int)

    def __init__(
        self,
        alpha: int = DEFAULT_ALPHA,
        beta: int = DEFAULT_BETA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(alpha, beta)

    @staticmethod
    def are_valid_params(alpha: int, beta: int) -> bool:
        return alpha > 0 and beta > 0

    @staticmethod
    def sampler(generator: Generator, alpha: int, beta: int) -> float:
        ratio = beta / alpha
        csa = ChiSquareDistribution.sampler(generator, alpha)
        csb = ChiSquareDistribution.sampler(generator, beta)
        if csb == 0.0:
            return math.inf
        return csa / csb * ratio

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        if self.beta > 2:
            return self.beta / (self.beta - 2.0)
        raise NotSupportedError(UNDEFINED_MEAN_FOR_PARAMS)

    @property
    def median(self) -> float:
        raise NotSupportedError(UNDEFINED_MEDIAN)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        if b > 4:
            return 2.0 * b**2 * (a + b - 2.0) / a / (b - 2.0) ** 2 / (b - 4.0)
        raise NotSupportedError(UNDEFINED_VARIANCE_FOR_PARAMS)

    @property
    def mode(self) -> Mode:
        a, b = self.alpha, self.beta
        if a > 2:
            return ((a - 2.0) / a * b / (b + 2.0),)
        raise NotSupportedError(UNDEFINED_MODE_FOR_PARAMS)
