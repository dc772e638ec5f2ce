"""Weibull distribution sampled by inversion."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MODE_FOR_PARAMS, NotSupportedError
from core.protocols import Generator
from core.tmath import safe_gamma, safe_pow
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.parameters import AlphaParam, LambdaParam, Parameter

__all__ = ["WeibullDistribution"]


class WeibullDistribution(AbstractContinuousDistribution, AlphaParam, LambdaParam):
    """Weibull distribution with shape alpha and scale lambda (both > 0)."""

    DEFAULT_ALPHA = 1.0
    DEFAULT_LAMBDA = 1.0

    params = ("alpha", "lambda_")
    alpha = Parameter(float)
    lambda_ = Parameter(float)

    def __init__(
        self,
        alpha: float = DEFAULT_ALPHA,
        lambda_: float = DEFAULT_LAMBDA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(alpha, lambda_)

    @staticmethod
    def are_valid_params(alpha: float, lambda_: float) -> bool:
        return alpha > 0.0 and lambda_ > 0.0

    @staticmethod
    def sampler(generator: Generator, alpha: float, lambda_: float) -> float:
        return lambda_ * safe_pow(-math.log(1.0 - generator.next_double()), 1.0 / alpha)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return self.lambda_ * safe_gamma(1.0 + 1.0 / self.alpha)

    @property
    def median(self) -> float:
        return self.lambda_ * safe_pow(math.log(2.0), 1.0 / self.alpha)

    @property
    def variance(self) -> float:
        a, lam = self.alpha, self.lambda_
        g2 = safe_gamma(1.0 + 2.0 / a)
        if math.isinf(g2):
            return math.inf
        g1 = math.gamma(1.0 + 1.0 / a)
        return lam * lam * (g2 - g1 * g1)

    @property
    def mode(self) -> Mode:
        if self.alpha >= 1.0:
            return (self.lambda_ * safe_pow(1.0 - 1.0 / self.alpha, 1.0 / self.alpha),)
        raise NotSupportedError(UNDEFINED_MODE_FOR_PARAMS)
