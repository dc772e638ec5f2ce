"""Chi distribution: the norm of alpha independent standard normals."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MEDIAN, NotSupportedError
from core.protocols import Generator
from core.tmath import square
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.continuous.normal import NormalDistribution
from distributions.parameters import AlphaParam, Parameter

__all__ = ["ChiDistribution"]


class ChiDistribution(AbstractContinuousDistribution, AlphaParam):
    """Chi distribution with alpha degrees of freedom (integer, alpha > 0)."""

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
            total += square(NormalDistribution.sampler(generator, 0.0, 1.0))
        return math.sqrt(total)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        # Ratio of gammas through lgamma to stay finite for large alpha
        return math.sqrt(2.0) * math.exp(
            math.lgamma((self.alpha + 1.0) / 2.0) - math.lgamma(self.alpha / 2.0)
        )

    @property
    def median(self) -> float:
        raise NotSupportedError(UNDEFINED_MEDIAN)

    @property
    def variance(self) -> float:
        return self.alpha - square(self.mean)

    @property
    def mode(self) -> Mode:
        return (math.sqrt(self.alpha - 1.0),)
