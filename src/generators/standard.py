"""Generator backed by the standard library :class:`random.Random`."""

from __future__ import annotations

import random

from generators.base import AbstractGenerator

__all__ = ["StandardGenerator"]


class StandardGenerator(AbstractGenerator):
    """Adapter exposing :class:`random.Random` through the generator contract.

    Reset re-creates the wrapped engine with the stored seed.
    """

    def _reset_state(self, seed: int) -> None:
        self._engine = random.Random(seed)

    def _next_uint32(self) -> int:
        return self._engine.getrandbits(32)

    def _next_int31(self) -> int:
        return self._engine.getrandbits(31)

    def _next_unit_double(self) -> float:
        return self._engine.random()
