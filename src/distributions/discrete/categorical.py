"""Categorical distribution over the indices 0..n-1 of a weight vector."""

from __future__ import annotations

import bisect
import itertools
import math
from collections.abc import Sequence
from typing import Any

from core.errors import INVALID_PARAMS, NULL_WEIGHTS, InvalidParameterError
from core.protocols import Generator
from core.tmath import is_real, is_zero
from core.types import Mode
from distributions.base import AbstractDiscreteDistribution, resolve_generator

__all__ = ["CategoricalDistribution"]


class CategoricalDistribution(AbstractDiscreteDistribution):
    """Draws index i with probability weights[i] / sum(weights).

    Weights do not need to be normalized. The ``weights`` property returns
    the normalized vector while the raw weights, their running sum (the
    unnormalized CDF) and the total are kept for sampling.

    Args:
        weights: Non-negative weights, or an int n for n equal weights.
            Defaults to DEFAULT_VALUE_COUNT equal weights.
        generator: Generator to draw from.
        seed: Seed for a new default generator.

    Raises:
        InvalidParameterError: If weights is empty, holds a negative, NaN or
            non-numeric entry, or sums to (almost) zero.
    """

    DEFAULT_VALUE_COUNT = 3

    def __init__(
        self,
        weights: Sequence[float] | int | None = None,
        *,
        generator: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__(resolve_generator(generator, seed))
        self._raw: list[float] = []
        self._cdf: list[float] = []
        self._total = 0.0
        self._store(self._coerce(weights))

    @staticmethod
    def _coerce(weights: Sequence[float] | int | None) -> list[float]:
        if weights is None:
            return [1.0] * CategoricalDistribution.DEFAULT_VALUE_COUNT
        if isinstance(weights, int) and not isinstance(weights, bool):
            if weights <= 0:
                raise InvalidParameterError(INVALID_PARAMS, ("weights",))
            return [1.0] * weights
        if isinstance(weights, (str, bytes)) or not isinstance(weights, Sequence):
            raise InvalidParameterError(INVALID_PARAMS, ("weights",))
        if not all(is_real(w) for w in weights):
            raise InvalidParameterError(INVALID_PARAMS, ("weights",))
        return [float(w) for w in weights]

    def _store(self, weights: list[float]) -> None:
        if not type(self).are_valid_params(weights):
            raise InvalidParameterError(INVALID_PARAMS, ("weights",))
        self._raw = weights
        self._cdf = list(itertools.accumulate(weights))
        self._total = self._cdf[-1]

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    @staticmethod
    def are_valid_params(weights: Sequence[float]) -> bool:
        if len(weights) == 0:
            return False
        total = 0.0
        for w in weights:
            if math.isnan(w) or w < 0.0:
                return False
            total += w
        return math.isfinite(total) and not is_zero(total)

    def are_valid_weights(self, weights: Any) -> bool:
        if weights is None:
            return False
        try:
            return type(self).are_valid_params(self._coerce(weights))
        except InvalidParameterError:
            return False

    @property
    def weights(self) -> list[float]:
        return [w / self._total for w in self._raw]

    @weights.setter
    def weights(self, value: Sequence[float] | int) -> None:
        if value is None:
            raise InvalidParameterError(NULL_WEIGHTS, ("weights",))
        self._store(self._coerce(value))

    def _sampler_args(self) -> tuple[Any, ...]:
        return (self._cdf, self._total)

    @staticmethod
    def sampler(generator: Generator, cdf: Sequence[float], total: float) -> int:
        u = generator.next_double(total)
        # Index of the first cumulative weight strictly above u
        return min(bisect.bisect_right(cdf, u), len(cdf) - 1)

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return float(len(self._raw) - 1)

    @property
    def mean(self) -> float:
        return sum(i * w for i, w in enumerate(self._raw)) / self._total

    @property
    def median(self) -> float:
        half = self._total / 2.0
        for i, c in enumerate(self._cdf):
            if c >= half:
                return float(i)
        return float(len(self._cdf) - 1)

    @property
    def variance(self) -> float:
        mean = self.mean
        return sum(w * (i - mean) ** 2 for i, w in enumerate(self._raw)) / self._total

    @property
    def mode(self) -> Mode:
        return (float(self._raw.index(max(self._raw))),)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(weights={self.weights!r})"
