"""Poisson distribution sampled with Knuth's product method."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MEDIAN, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractDiscreteDistribution, resolve_generator
from distributions.parameters import LambdaParam, Parameter

__all__ = ["PoissonDistribution"]

# Largest exponent folded into the running product at once; keeps exp() finite.
STEP = 500


class PoissonDistribution(AbstractDiscreteDistribution, LambdaParam):
    """Poisson distribution with rate lambda (valid iff 0 < lambda < inf)."""

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
        return 0.0 < lambda_ < math.inf

    @staticmethod
    def sampler(generator: Generator, lambda_: float) -> int:
        remaining = lambda_
        k = 0
        p = 1.0
        while True:
            k += 1
            r = generator.next_double()
            while r == 0.0:
                r = generator.next_double()
            p *= r
            if p < math.e and remaining > 0.0:
                p *= math.exp(min(remaining, STEP))
                remaining -= STEP
            if p <= 1.0:
                return k - 1

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return self.lambda_

    @property
    def median(self) -> float:
        raise NotSupportedError(UNDEFINED_MEDIAN)

    @property
    def variance(self) -> float:
        return self.lambda_

    @property
    def mode(self) -> Mode:
        if self.lambda_ == math.floor(self.lambda_):
            return (self.lambda_ - 1.0, self.lambda_)
        return (float(math.floor(self.lambda_)),)
