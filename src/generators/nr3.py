"""Numerical Recipes (3rd edition) generators.

Three engines from chapter 7 of Numerical Recipes:
- NR3Generator: ``Ran``, the combined LCG / xorshift / multiply-with-carry
  generator recommended as the general-purpose choice
- NR3Q1Generator: ``Ranq1``, a single 64-bit xorshift word with a
  multiplicative output stage
- NR3Q2Generator: ``Ranq2``, a xorshift word combined with a
  multiply-with-carry word

All three keep 64-bit state; 32-bit draws use the low word, 31-bit draws the
top 31 bits, and doubles the top 53 bits of a 64-bit output.
"""

from __future__ import annotations

from abc import abstractmethod

from core.types import DOUBLE_53, UINT64_MASK
from generators.base import AbstractGenerator

__all__ = [
    "NR3Generator",
    "NR3Q1Generator",
    "NR3Q2Generator",
]

SEED_V = 4101842887655102017
SEED_W = 1
SEED_U1 = 2862933555777941757
SEED_U2 = 7046029254386353087
SEED_U3 = 4294957665
SEED_Q1 = 2685821657736338717


class _NR3Base(AbstractGenerator):
    """Maps 64-bit outputs of ``next_ulong`` to the derived-value hooks."""

    @abstractmethod
    def next_ulong(self) -> int:
        """Advance the state and return a 64-bit word."""

    def _next_uint32(self) -> int:
        return self.next_ulong() & 0xFFFFFFFF

    def _next_int31(self) -> int:
        return self.next_ulong() >> 33

    def _next_unit_double(self) -> float:
        return (self.next_ulong() >> 11) * DOUBLE_53


class NR3Generator(_NR3Base):
    """Numerical Recipes ``Ran`` generator (period about 3.138e57)."""

    def _reset_state(self, seed: int) -> None:
        self._v = SEED_V
        self._w = SEED_W
        self._u = seed ^ self._v
        self.next_ulong()
        self._v = self._u
        self.next_ulong()
        self._w = self._v
        self.next_ulong()

    def next_ulong(self) -> int:
        """Advance the state and return a 64-bit word."""
        u = (self._u * SEED_U1 + SEED_U2) & UINT64_MASK
        v = self._v
        v ^= v >> 17
        v ^= (v << 31) & UINT64_MASK
        v ^= v >> 8
        w = (SEED_U3 * (self._w & 0xFFFFFFFF) + (self._w >> 32)) & UINT64_MASK
        x = u ^ ((u << 21) & UINT64_MASK)
        x ^= x >> 35
        x ^= (x << 4) & UINT64_MASK
        self._u, self._v, self._w = u, v, w
        return ((x + v) & UINT64_MASK) ^ w


class NR3Q1Generator(_NR3Base):
    """Numerical Recipes ``Ranq1`` generator (period about 1.8e19)."""

    def _reset_state(self, seed: int) -> None:
        self._v = SEED_V ^ seed
        self._v = self.next_ulong()

    def next_ulong(self) -> int:
        """Advance the state and return a 64-bit word."""
        v = self._v
        v ^= v >> 21
        v ^= (v << 35) & UINT64_MASK
        v ^= v >> 4
        self._v = v
        return (v * SEED_Q1) & UINT64_MASK


class NR3Q2Generator(_NR3Base):
    """Numerical Recipes ``Ranq2`` generator (period about 8.5e37)."""

    def _reset_state(self, seed: int) -> None:
        self._v = SEED_V ^ seed
        self._w = SEED_W
        self._w = self.next_ulong()
        self._v = self.next_ulong()

    def next_ulong(self) -> int:
        """Advance the state and return a 64-bit word."""
        v = self._v
        v ^= v >> 17
        v ^= (v << 31) & UINT64_MASK
        v ^= v >> 8
        w = (SEED_U3 * (self._w & 0xFFFFFFFF) + (self._w >> 32)) & UINT64_MASK
        self._v, self._w = v, w
        return v ^ w
