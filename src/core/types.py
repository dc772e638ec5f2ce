"""Core type definitions for the generator and distribution packages.

This module contains:
- Integer range constants shared by every generator
- Multipliers that map unsigned words onto the unit interval
- Type aliases for seeds, bounds and statistical results
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "UINT32_MAX",
    "UINT64_MASK",
    "INT_TO_DOUBLE",
    "UINT_TO_DOUBLE",
    "DOUBLE_53",
    "Seed",
    "Mode",
    "Sampler",
    "Validator",
]

# Signed/unsigned 32-bit limits of the integer API
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1

# Mask used to emulate wrapping 64-bit arithmetic
UINT64_MASK = 2**64 - 1

# Maps a 31-bit integer onto [0, 1)
INT_TO_DOUBLE = 1.0 / 2**31

# Maps a 32-bit unsigned integer onto [0, 1)
UINT_TO_DOUBLE = 1.0 / 2**32

# Maps the top 53 bits of a 64-bit word onto [0, 1)
DOUBLE_53 = 1.0 / 2**53

# Seeds are unsigned 32-bit integers
Seed = int

# Statistical mode: one or more most likely values
Mode = tuple[float, ...]

# (generator, *params) -> sample
Sampler = Callable[..., Any]

# (*params) -> bool
Validator = Callable[..., bool]
