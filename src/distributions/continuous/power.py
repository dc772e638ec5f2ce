"""Power-function distribution on [0, 1 / beta]."""

from __future__ import annotations

from core.errors import UNDEFINED_MEDIAN, UNDEFINED_MODE_FOR_PARAMS, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.parameters import AlphaParam, BetaParam, Parameter

__all__ = ["PowerDistribution"]


class PowerDistribution(AbstractContinuousDistribution, AlphaParam, BetaParam):
    """Power distribution with shape alpha and inverse scale beta (both > 0)."""

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
        return generator.next_double() ** (1.0 / alpha) / beta

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return 1.0 / self.beta

    @property
    def mean(self) -> float:
        return self.alpha / self.beta / (self.alpha + 1.0)

    @property
    def median(self) -> float:
        raise NotSupportedError(UNDEFINED_MEDIAN)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        return a / b / b / (a + 1.0) / (a + 1.0) / (a + 2.0)

    @property
    def mode(self) -> Mode:
        if self.alpha > 1.0:
            return (1.0 / self.beta,)
        if self.alpha < 1.0:
            return (0.0,)
        raise NotSupportedError(UNDEFINED_MODE_FOR_PARAMS)
