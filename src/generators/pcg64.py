"""Generator backed by numpy's PCG64 bit generator.

Words are drawn from numpy in blocks and served one at a time, which keeps the
per-draw cost close to the pure-Python engines.
"""

from __future__ import annotations

import operator

import numpy as np

from core.errors import INVALID_PARAMS, InvalidParameterError
from core.types import DOUBLE_53, UINT32_MAX
from generators.base import AbstractGenerator

__all__ = ["PCG64Generator"]


class PCG64Generator(AbstractGenerator):
    """PCG64 engine from :mod:`numpy.random`.

    Args:
        seed: Unsigned 32-bit seed (see AbstractGenerator).
        block_size: Number of 32-bit words fetched from numpy per refill.

    Raises:
        InvalidParameterError: If block_size is not positive.
    """

    DEFAULT_BLOCK_SIZE = 4096

    def __init__(self, seed: int | None = None, *, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        block_size = operator.index(block_size)
        if block_size <= 0:
            raise InvalidParameterError(INVALID_PARAMS, ("block_size",))
        self._block_size = block_size
        super().__init__(seed)

    @property
    def block_size(self) -> int:
        return self._block_size

    def _reset_state(self, seed: int) -> None:
        self._rng = np.random.Generator(np.random.PCG64(seed))
        self._words: list[int] = []
        self._index = 0

    def _next_uint32(self) -> int:
        if self._index >= len(self._words):
            block = self._rng.integers(
                0, UINT32_MAX, size=self._block_size, dtype=np.uint32, endpoint=True
            )
            self._words = block.tolist()
            self._index = 0
        word = self._words[self._index]
        self._index += 1
        return word

    def _next_unit_double(self) -> float:
        high = self._next_uint32() >> 5
        low = self._next_uint32() >> 6
        return (high * 67108864 + low) * DOUBLE_53
