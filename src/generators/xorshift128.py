"""XorShift128+ style generator, the default engine of every distribution."""

from __future__ import annotations

from core.types import DOUBLE_53, UINT64_MASK
from generators.base import AbstractGenerator

__all__ = ["XorShift128Generator"]


class XorShift128Generator(AbstractGenerator):
    """Two-word 64-bit xorshift generator (shifts 23/17/26).

    The state words are seeded with ``x = (521288629 << 32) + seed`` and a
    fixed ``y``; each step emits the 64-bit sum of the new and old words.
    """

    SEED_X = 521288629 << 32
    SEED_Y = 4101842887655102017

    def _reset_state(self, seed: int) -> None:
        self._x = (self.SEED_X + seed) & UINT64_MASK
        self._y = self.SEED_Y

    def next_ulong(self) -> int:
        """Advance the state and return a 64-bit word."""
        tx = self._x
        ty = self._y
        self._x = ty
        tx ^= (tx << 23) & UINT64_MASK
        tx ^= tx >> 17
        tx ^= ty ^ (ty >> 26)
        self._y = tx
        return (tx + ty) & UINT64_MASK

    def _next_uint32(self) -> int:
        return self.next_ulong() & 0xFFFFFFFF

    def _next_int31(self) -> int:
        return self.next_ulong() >> 33

    def _next_unit_double(self) -> float:
        return (self.next_ulong() >> 11) * DOUBLE_53
