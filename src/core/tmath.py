"""Numeric helpers shared by generators and distributions.

This module contains:
- Tolerance-based float comparisons used by the samplers
- Integer checks for integer-valued shape parameters
- Entropy-based default seed generation
"""

from __future__ import annotations

import itertools
import math
import os
import threading
import time
import uuid
from numbers import Integral, Real
from typing import Any

from core.types import UINT32_MAX

__all__ = [
    "TOLERANCE",
    "is_zero",
    "are_equal",
    "square",
    "is_integer",
    "is_real",
    "safe_exp",
    "safe_pow",
    "safe_gamma",
    "make_seed",
]

# Absolute tolerance for float comparisons
TOLERANCE = 1e-6

_SEED_BASE = 1777771
_SEED_FACTOR = 19
_seed_counter = itertools.count()


def is_zero(value: float) -> bool:
    """Return True if value is within TOLERANCE of zero."""
    return abs(value) < TOLERANCE


def are_equal(a: float, b: float) -> bool:
    """Return True if a and b differ by less than TOLERANCE."""
    return abs(a - b) < TOLERANCE


def square(value: float) -> float:
    """Square value, flushing results of near-zero inputs to exactly zero."""
    if is_zero(value):
        return 0.0
    return value * value


def safe_exp(x: float) -> float:
    """math.exp() returning +inf on overflow, as IEEE arithmetic would."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def safe_pow(x: float, y: float) -> float:
    """x ** y returning +inf on overflow or division by zero."""
    try:
        return x**y
    except (OverflowError, ZeroDivisionError):
        return math.inf


def safe_gamma(x: float) -> float:
    """math.gamma() returning +inf on overflow."""
    try:
        return math.gamma(x)
    except OverflowError:
        return math.inf


def is_integer(value: Any) -> bool:
    """Return True for integral values, excluding booleans."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def is_real(value: Any) -> bool:
    """Return True for real numbers (int or float), excluding booleans."""
    return isinstance(value, Real) and not isinstance(value, bool)


def make_seed() -> int:
    """Build a 32-bit seed from the clock, process, thread and a random UUID.

    Successive calls within the same clock tick still produce different seeds
    thanks to a process-wide counter.

    Returns:
        A seed in [0, UINT32_MAX].
    """
    parts = [
        time.perf_counter_ns(),
        time.time_ns(),
        next(_seed_counter),
        threading.get_ident(),
        os.getpid(),
    ]
    guid = uuid.uuid4().int
    parts.extend((guid >> shift) & UINT32_MAX for shift in range(0, 128, 32))

    seed = _SEED_BASE
    for part in parts:
        seed = (seed * _SEED_FACTOR + part) & UINT32_MAX
    return seed
