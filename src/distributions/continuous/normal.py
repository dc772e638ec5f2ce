"""Normal (Gaussian) distribution sampled with Marsaglia's polar method."""

from __future__ import annotations

import math

from core.protocols import Generator
from core.tmath import is_zero, square
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.parameters import MuParam, Parameter, SigmaParam

__all__ = ["NormalDistribution"]


class NormalDistribution(AbstractContinuousDistribution, MuParam, SigmaParam):
    """Normal distribution with location mu and scale sigma.

    Valid parameters: mu is not NaN, sigma > 0.

    The polar method produces two independent normals per accepted pair but
    only one is returned, picked by a coin flip from the generator's boolean
    buffer. Exact draw sequences depend on that choice.
    """

    DEFAULT_MU = 1.0
    DEFAULT_SIGMA = 1.0

    params = ("mu", "sigma")
    mu = Parameter(float)
    sigma = Parameter(float)

    def __init__(
        self,
        mu: float = DEFAULT_MU,
        sigma: float = DEFAULT_SIGMA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(mu, sigma)

    @staticmethod
    def are_valid_params(mu: float, sigma: float) -> bool:
        return not math.isnan(mu) and sigma > 0.0

    @staticmethod
    def sampler(generator: Generator, mu: float, sigma: float) -> float:
        while True:
            v1 = 2.0 * generator.next_double() - 1.0
            v2 = 2.0 * generator.next_double() - 1.0
            w = v1 * v1 + v2 * v2
            if w >= 1.0 or is_zero(w):
                continue
            y = math.sqrt(-2.0 * math.log(w) / w) * sigma
            return v1 * y + mu if generator.next_boolean() else v2 * y + mu

    @property
    def minimum(self) -> float:
        return -math.inf

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return self.mu

    @property
    def median(self) -> float:
        return self.mu

    @property
    def variance(self) -> float:
        return square(self.sigma)

    @property
    def mode(self) -> Mode:
        return (self.mu,)
