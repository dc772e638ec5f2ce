"""Bernoulli distribution over {0, 1}."""

from __future__ import annotations

from core.errors import UNDEFINED_MEDIAN, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractDiscreteDistribution, resolve_generator
from distributions.parameters import AlphaParam, Parameter

__all__ = ["BernoulliDistribution"]


class BernoulliDistribution(AbstractDiscreteDistribution, AlphaParam):
    """Single trial with success probability alpha (0 <= alpha <= 1)."""

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
        return 0.0 <= alpha <= 1.0

    @staticmethod
    def sampler(generator: Generator, alpha: float) -> int:
        return 1 if generator.next_double() < alpha else 0

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return 1.0

    @property
    def mean(self) -> float:
        return self.alpha

    @property
    def median(self) -> float:
        raise NotSupportedError(UNDEFINED_MEDIAN)

    @property
    def variance(self) -> float:
        return self.alpha * (1.0 - self.alpha)

    @property
    def mode(self) -> Mode:
        failure = 1.0 - self.alpha
        if self.alpha > failure:
            return (1.0,)
        if self.alpha < failure:
            return (0.0,)
        return (0.0, 1.0)
