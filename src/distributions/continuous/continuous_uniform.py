"""Continuous uniform distribution on [alpha, beta)."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MODE, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.parameters import AlphaParam, BetaParam, Parameter

__all__ = ["ContinuousUniformDistribution"]


class ContinuousUniformDistribution(AbstractContinuousDistribution, AlphaParam, BetaParam):
    """Uniform distribution on [alpha, beta).

    Valid parameters: alpha <= beta and beta - alpha is finite.
    """

    DEFAULT_ALPHA = 0.0
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
        return alpha <= beta and not math.isinf(beta - alpha)

    @staticmethod
    def sampler(generator: Generator, alpha: float, beta: float) -> float:
        return generator.next_double(alpha, beta)

    @property
    def minimum(self) -> float:
        return self.alpha

    @property
    def maximum(self) -> float:
        return self.beta

    @property
    def mean(self) -> float:
        return self.alpha / 2.0 + self.beta / 2.0

    @property
    def median(self) -> float:
        return self.alpha / 2.0 + self.beta / 2.0

    @property
    def variance(self) -> float:
        span = self.beta - self.alpha
        return span * span / 12.0

    @property
    def mode(self) -> Mode:
        raise NotSupportedError(UNDEFINED_MODE)
