"""Exponential distribution sampled by inversion."""

from __future__ import annotations

import math

from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.parameters import LambdaParam, Parameter

__all__ = ["ExponentialDistribution"]


class ExponentialDistribution(AbstractContinuousDistribution, LambdaParam):
    """Exponential distribution with rate lambda (valid iff lambda > 0)."""

    DEFAULT_LAMBDA = 1.0

    params = ("lambda_",)
    lambda_ = Parameter(float)

    def __init__(
        self,
        lambda_: float = DEFAULT_LAMBDA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(lambda_)

    @staticmethod
    def are_valid_params(lambda_: float) -> bool:
        return lambda_ > 0.0

    @staticmethod
    def sampler(generator: Generator, lambda_: float) -> float:
        u = generator.next_double()
        while u == 0.0:
            u = generator.next_double()
        return -math.log(u) / lambda_

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return 1.0 / self.lambda_

    @property
    def median(self) -> float:
        return math.log(2.0) / self.lambda_

    @property
    def variance(self) -> float:
        return 1.0 / self.lambda_ / self.lambda_

    @property
    def mode(self) -> Mode:
        return (0.0,)
