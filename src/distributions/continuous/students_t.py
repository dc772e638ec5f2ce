"""Student's t distribution."""

from __future__ import annotations

import math

from core.errors import UNDEFINED_MEAN_FOR_PARAMS, UNDEFINED_VARIANCE_FOR_PARAMS, NotSupportedError
from core.protocols import Generator
from core.types import Mode
from distributions.base import AbstractContinuousDistribution, resolve_generator
from distributions.continuous.chi_square import ChiSquareDistribution
from distributions.continuous.normal import NormalDistribution
from distributions.parameters import NuParam, Parameter

__all__ = ["StudentsTDistribution"]


class StudentsTDistribution(AbstractContinuousDistribution, NuParam):
    """Student's t distribution with nu degrees of freedom (integer, nu > 0).

    A sample is N / sqrt(C / nu) with N ~ Normal(0, 1), C ~ ChiSquare(nu).
    """

    DEFAULT_NU = 1

    params = ("nu",)
    nu = Parameter(int)

    def __init__(
        self,
        nu: int = DEFAULT_NU,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._set_params(nu)

    @staticmethod
    def are_valid_params(nu: int) -> bool:
        return nu > 0

    @staticmethod
    def sampler(generator: Generator, nu: int) -> float:
        n = NormalDistribution.sampler(generator, 0.0, 1.0)
        c = ChiSquareDistribution.sampler(generator, nu)
        scale = math.sqrt(c / nu)
        if scale == 0.0:
            return math.copysign(math.inf, n)
        return n / scale

    @property
    def minimum(self) -> float:
        return -math.inf

    @property
    def maximum(self) -> float:
        return math.inf

    @property
    def mean(self) -> float:
        if self.nu > 1:
            return 0.0
        raise NotSupportedError(UNDEFINED_MEAN_FOR_PARAMS)

    @property
    def median(self) -> float:
        return 0.0

    @property
    def variance(self) -> float:
        if self.nu > 2:
            return self.nu / (self.nu - 2.0)
        raise NotSupportedError(UNDEFINED_VARIANCE_FOR_PARAMS)

    @property
    def mode(self) -> Mode:
        return (0.0,)
