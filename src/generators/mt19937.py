"""Mersenne Twister 19937 generator.

The state is computed here with the reference ``init_genrand`` /
``init_by_array`` routines and then handed to :class:`random.Random`, whose
core is the same MT19937 engine. Outputs therefore match the reference
implementation word for word.
"""

from __future__ import annotations

import operator
import random
from collections.abc import Sequence

from core.errors import EMPTY_SEQUENCE, INVALID_PARAMS, InvalidParameterError
from core.types import UINT32_MAX
from generators.base import AbstractGenerator

__all__ = [
    "MT19937Generator",
    "init_genrand",
    "init_by_array",
]

N = 624
ARRAY_SEED = 19650218


def init_genrand(seed: int) -> list[int]:
    """Initialise the 624-word state from a single 32-bit seed."""
    mt = [0] * N
    mt[0] = seed & UINT32_MAX
    for i in range(1, N):
        prev = mt[i - 1]
        mt[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & UINT32_MAX
    return mt


def init_by_array(key: Sequence[int]) -> list[int]:
    """Initialise the 624-word state from an array of 32-bit words."""
    mt = init_genrand(ARRAY_SEED)
    i, j = 1, 0
    for _ in range(max(N, len(key))):
        prev = mt[i - 1]
        mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1664525)) + key[j] + j) & UINT32_MAX
        i += 1
        j += 1
        if i >= N:
            mt[0] = mt[N - 1]
            i = 1
        if j >= len(key):
            j = 0
    for _ in range(N - 1):
        prev = mt[i - 1]
        mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1566083941)) - i) & UINT32_MAX
        i += 1
        if i >= N:
            mt[0] = mt[N - 1]
            i = 1
    # MSB is 1, assuring a non-zero initial array
    mt[0] = 0x80000000
    return mt


class MT19937Generator(AbstractGenerator):
    """Mersenne Twister with period 2**19937 - 1.

    Args:
        seed: Unsigned 32-bit seed (see AbstractGenerator).
        seed_array: Optional array of 32-bit words; when given the state is
            built with init_by_array and ``seed`` reports 19650218.

    Raises:
        InvalidParameterError: If seed_array is empty or holds values outside
            the unsigned 32-bit range.
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        seed_array: Sequence[int] | None = None,
    ) -> None:
        self._seed_array: tuple[int, ...] | None = None
        if seed_array is not None:
            words = tuple(operator.index(w) for w in seed_array)
            if not words:
                raise InvalidParameterError(EMPTY_SEQUENCE, ("seed_array",))
            if any(w < 0 or w > UINT32_MAX for w in words):
                raise InvalidParameterError(INVALID_PARAMS, ("seed_array",))
            self._seed_array = words
            seed = ARRAY_SEED
        super().__init__(seed)

    @property
    def seed_array(self) -> tuple[int, ...] | None:
        return self._seed_array

    def reset(self, seed: int | None = None) -> bool:
        # An explicit seed switches back to single-seed initialisation
        if seed is not None:
            self._seed_array = None
        return super().reset(seed)

    def _reset_state(self, seed: int) -> None:
        if self._seed_array is not None:
            mt = init_by_array(self._seed_array)
        else:
            mt = init_genrand(seed)
        self._engine = random.Random()
        self._engine.setstate((3, (*mt, N), None))

    def _next_uint32(self) -> int:
        return self._engine.getrandbits(32)

    def _next_unit_double(self) -> float:
        # 53-bit resolution from two words (genrand_res53)
        return self._engine.random()
