"""Cauchy (Lorentz) distribution sampled by inversion."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MEAN, UNDEFINED_VARIANCE, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.parameters import AlphaParam, GammaParam, Parameter

__all__ = ["CauchyDistribution"]


class CauchyDistribution(AbstractContinuousDistribution, AlphaParam, GammaParam):
    """Cauchy distribution with location alpha and scale gamma.

    Valid parameters: alpha is not NaN, gamma > 0. Mean and variance are
    undefined for every parameter set.
    """

    DEFAULT_ALPHA = 1.0
    DEFAULT_GAMMA = 1.0

    params = ("alpha", "gamma")
    alpha = Parameter(float)
    gamma = Parameter(float)

    def __init__(
        self,
        alpha: float = DEFAULT_ALPHA,
        gamma: float = DEFAULT_GAMMA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(alpha, gamma)

    @staticmethod
    def are_valid_params(alpha: float, gamma: float) -> bool:
        return not math.isnan(alpha) and gamma > 0.0

    @staticmethod
    def sampler(generator: Generator, alpha: float, gamma: float) -> float:
        return alpha + gamma * math.tan(math.pi * (generator.next_double() - 0.5))

    @property
    def minimum(self) -> float:
        return -math.inf

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        raise NotSupportedError(UNDEFINED_MEAN)

    @property
    def median(self) -> float:
        return self.alpha

    @property
    def variance(self) -> float:
        raise NotSupportedError(UNDEFINED_VARIANCE)

    @property
    def mode(self) -> Mode:
        return (self.alpha,)
