"""Discrete uniform distribution on the integers alpha..beta."""

from __future__ import annotations

from core.errors import UNDEFINED_MODE, NotSupportedError
from core.protocols import Generator
from core.types import INT32_MAX, INT32_MIN, Mode
from distributions.base import AbstractDiscreteDistribution, resolve_generator
from distributions.parameters import AlphaParam, BetaParam, Parameter

__all__ = ["DiscreteUniformDistribution"]


class DiscreteUniformDistribution(AbstractDiscreteDistribution, AlphaParam, BetaParam):
    """Uniform distribution on [alpha, beta], both ends included.

    Valid parameters: INT32_MIN <= alpha <= beta < INT32_MAX. Sampling asks the
    generator for next(alpha, beta + 1).
    """

    DEFAULT_ALPHA = 0
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
        return INT32_MIN <= alpha <= beta < INT32_MAX

    @staticmethod
    def sampler(generator: Generator, alpha: int, beta: int) -> int:
        return generator.next(alpha, beta + 1)

    @property
    def minimum(self) -> float:
        return float(self.alpha)

    @property
    def maximum(self) -> float:
        return float(self.beta)

    @property
    def mean(self) -> float:
        return self.alpha / 2.0 + self.beta / 2.0

    @property
    def median(self) -> float:
        return self.alpha / 2.0 + self.beta / 2.0

    @property
    def variance(self) -> float:
        return ((self.beta - self.alpha + 1.0) ** 2 - 1.0) / 12.0

    @property
    def mode(self) -> Mode:
        raise NotSupportedError(UNDEFINED_MODE)
