"""Chi-square distribution: the sum of squares of alpha standard normals."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MODE_FOR_PARAMS, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.continuous.normal import NormalDistribution
from distributions.parameters import AlphaParam, Parameter

__all__ = ["ChiSquareDistribution"]


class ChiSquareDistribution(AbstractContinuousDistribution, AlphaParam):
    """Chi-square distribution with alpha degrees of freedom (integer, alpha > 0)."""

    DEFAULT_ALPHA = 1

    params = ("alpha",)
    alpha = Parameter(int)

    def __init__(
        self,
        alpha: int = DEFAULT_ALPHA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(alpha)

    @staticmethod
    def are_valid_params(alpha: int) -> bool:
        return alpha > 0

    @staticmethod
    def sampler(generator: Generator, alpha: int) -> float:
        total = 0.0
        for _ in range(alpha):
            total += NormalDistribution.sampler(generator, 0.0, 1.0) ** 2
        return total

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return float(self.alpha)

    @property
    def median(self) -> float:
        # Wilson-Hilferty approximation
        return self.alpha * (1.0 - 2.0 / (9.0 * self.alpha)) ** 3

    @property
    def variance(self) -> float:
        return 2.0 * self.alpha

    @property
    def mode(self) -> Mode:
        if self.alpha >= 2:
            return (self.alpha - 2.0,)
        raise NotSupportedError(UNDEFINED_MODE_FOR_PARAMS)
