"""Geometric distribution: number of trials up to the first success."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MEDIAN, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractDiscreteDistribution, resolve_generator
from distributions.parameters import AlphaParam, Parameter

__all__ = ["GeometricDistribution"]


class GeometricDistribution(AbstractDiscreteDistribution, AlphaParam):
    """Geometric distribution on {1, 2, ...} with success probability alpha.

    Valid parameters: 0 < alpha <= 1.
    """

    DEFAULT_ALPHA = 0.5

    params = ("alpha",)
    alpha = Parameter(float)

    def __init__(
        self,
        alpha: float = DEFAULT_ALPHA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(alpha)

    @staticmethod
    def are_valid_params(alpha: float) -> bool:
        return 0.0 < alpha <= 1.0

    @staticmethod
    def sampler(generator: Generator, alpha: float) -> int:
        trials = 1
        while generator.next_double() >= alpha:
            trials += 1
        return trials

    @property
    def minimum(self) -> float:
        return 1.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return 1.0 / self.alpha

    @property
    def median(self) -> float:
        raise NotSupportedError(UNDEFINED_MEDIAN)

    @property
    def variance(self) -> float:
        return (1.0 - self.alpha) / self.alpha / self.alpha

    @property
    def mode(self) -> Mode:
        return (1.0,)
