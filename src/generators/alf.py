"""Additive lagged Fibonacci generator.

The state is a circular buffer of ``long_lag`` unsigned 32-bit words seeded
from an MT19937 generator with the same seed. When the read cursor reaches
the end, the buffer is refilled with ``x[j] += x[j - short_lag]`` (indices
taken modulo ``long_lag``) in two passes so no modulo is needed.
"""

from __future__ import annotations

import operator

import numpy as np

from core.errors import INVALID_PARAMS, InvalidParameterError
from generators.base import AbstractGenerator
from generators.mt19937 import MT19937Generator

__all__ = ["ALFGenerator"]


class ALFGenerator(AbstractGenerator):
    """Additive lagged Fibonacci generator with lags (418, 1279) by default.

    Args:
        seed: Unsigned 32-bit seed (see AbstractGenerator).
        short_lag: Short lag, must be positive.
        long_lag: Long lag, must exceed short_lag.

    Raises:
        InvalidParameterError: If the lags are invalid.
    """

    DEFAULT_SHORT_LAG = 418
    DEFAULT_LONG_LAG = 1279

    def __init__(
        self,
        seed: int | None = None,
        *,
        short_lag: int = DEFAULT_SHORT_LAG,
        long_lag: int = DEFAULT_LONG_LAG,
    ) -> None:
        short_lag = operator.index(short_lag)
        long_lag = operator.index(long_lag)
        if not self.is_valid_short_lag(short_lag):
            raise InvalidParameterError(INVALID_PARAMS, ("short_lag",))
        if long_lag <= short_lag:
            raise InvalidParameterError(INVALID_PARAMS, ("long_lag",))
        self._short_lag = short_lag
        self._long_lag = long_lag
        super().__init__(seed)

    @staticmethod
    def is_valid_short_lag(value: int) -> bool:
        return value > 0

    def is_valid_long_lag(self, value: int) -> bool:
        return value > self._short_lag

    @property
    def short_lag(self) -> int:
        return self._short_lag

    @short_lag.setter
    def short_lag(self, value: int) -> None:
        value = operator.index(value)
        if not self.is_valid_short_lag(value) or value >= self._long_lag:
            raise InvalidParameterError(INVALID_PARAMS, ("short_lag",))
        self._short_lag = value
        self.reset()

    @property
    def long_lag(self) -> int:
        return self._long_lag

    @long_lag.setter
    def long_lag(self, value: int) -> None:
        value = operator.index(value)
        if not self.is_valid_long_lag(value):
            raise InvalidParameterError(INVALID_PARAMS, ("long_lag",))
        self._long_lag = value
        self.reset()

    def _reset_state(self, seed: int) -> None:
        seeder = MT19937Generator(seed)
        self._x = np.fromiter(
            (seeder.next_uint() for _ in range(self._long_lag)),
            dtype=np.uint32,
            count=self._long_lag,
        )
        self._words: list[int] = []
        self._index = self._long_lag

    def _fill(self) -> None:
        x = self._x
        short, long_ = self._short_lag, self._long_lag
        # Reads ahead of the write cursor see the previous generation
        x[:short] += x[long_ - short :]
        # Reads behind the write cursor see the current generation
        for start in range(short, long_, short):
            stop = min(start + short, long_)
            x[start:stop] += x[start - short : stop - short]
        self._words = x.tolist()
        self._index = 0

    def _next_uint32(self) -> int:
        if self._index >= self._long_lag:
            self._fill()
        word = self._words[self._index]
        self._index += 1
        return word
