"""Rayleigh distribution: the norm of two independent centred normals."""

from __future__ import annotations

import math

from core.protocols import Generator
from core.tmath import square
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.continuous.normal import NormalDistribution
from distributions.parameters import Parameter, SigmaParam

__all__ = ["RayleighDistribution"]


class RayleighDistribution(AbstractContinuousDistribution, SigmaParam):
    """Rayleigh distribution with scale sigma (sigma > 0)."""

    DEFAULT_SIGMA = 1.0

    params = ("sigma",)
    sigma = Parameter(float)

    def __init__(
        self,
        sigma: float = DEFAULT_SIGMA,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(sigma)

    @staticmethod
    def are_valid_params(sigma: float) -> bool:
        return sigma > 0.0

    @staticmethod
    def sampler(generator: Generator, sigma: float) -> float:
        n1 = square(NormalDistribution.sampler(generator, 0.0, sigma))
        n2 = square(NormalDistribution.sampler(generator, 0.0, sigma))
        return math.sqrt(n1 + n2)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        return self.sigma * math.sqrt(math.pi / 2.0)

    @property
    def median(self) -> float:
        return self.sigma * math.sqrt(math.log(4.0))

    @property
    def variance(self) -> float:
        return self.sigma * self.sigma * (4.0 - math.pi) / 2.0

    @property
    def mode(self) -> Mode:
        return (self.sigma,)
