"""Engine-independent derived-value layer shared by every generator.

Concrete engines only implement two hooks:
- ``_reset_state(seed)``: rebuild the internal state from a 32-bit seed
- ``_next_uint32()``: advance the state and return one unsigned 32-bit word

They may also override ``_next_int31()`` and ``_next_unit_double()`` when the
engine has a cheaper or higher-resolution native path. Everything else (range
mapping, argument validation, boolean buffering, byte filling) lives here.
"""

from __future__ import annotations

import logging
import math
import operator
from abc import ABC, abstractmethod
from typing import Any

from core.errors import (
    INFINITE_MAX_VALUE,
    INFINITE_RANGE,
    INVALID_PARAMS,
    MIN_GREATER_THAN_MAX,
    NEGATIVE_MAX_VALUE,
    NULL_BUFFER,
    SEED_OUT_OF_RANGE,
    InvalidParameterError,
    RangeTooLargeError,
)
from core.tmath import make_seed
from core.types import (
    INT32_MAX,
    INT32_MIN,
    INT_TO_DOUBLE,
    UINT32_MAX,
    UINT_TO_DOUBLE,
    Seed,
)

__all__ = [
    "AbstractGenerator",
    "normalize_seed",
]

logger = logging.getLogger(__name__)

# Answers served by next_boolean() per 32-bit draw
_BITS_PER_DRAW = 31


def normalize_seed(seed: Any) -> Seed:
    """Turn a user-supplied seed into an unsigned 32-bit seed.

    None draws an entropy-based seed, negative integers are folded with abs().

    Raises:
        TypeError: If seed is not an integer.
        InvalidParameterError: If abs(seed) does not fit in 32 bits.
    """
    if seed is None:
        return make_seed()
    value = abs(operator.index(seed))
    if value > UINT32_MAX:
        raise InvalidParameterError(SEED_OUT_OF_RANGE, ("seed",))
    return value


def _as_int32(value: Any, name: str) -> int:
    value = operator.index(value)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidParameterError(INVALID_PARAMS, (name,))
    return value


def _as_uint32(value: Any, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise InvalidParameterError(NEGATIVE_MAX_VALUE, (name,))
    if value > UINT32_MAX:
        raise InvalidParameterError(INVALID_PARAMS, (name,))
    return value


def _check_arity(method: str, bounds: tuple[Any, ...]) -> None:
    if len(bounds) > 2:
        raise TypeError(f"{method}() takes at most 2 bounds, got {len(bounds)}")


class AbstractGenerator(ABC):
    """Base class for uniform pseudo-random generators.

    Args:
        seed: Unsigned 32-bit seed. None draws an entropy-based seed;
            negative integers are folded with abs().
    """

    def __init__(self, seed: Seed | None = None) -> None:
        self._seed = normalize_seed(seed)
        self._bit_buffer = 0
        self._bit_count = 0
        self._reset_state(self._seed)

    # -------------------------------------------------------------------------
    # Engine hooks
    # -------------------------------------------------------------------------

    @abstractmethod
    def _reset_state(self, seed: int) -> None:
        """Rebuild the engine state from seed."""

    @abstractmethod
    def _next_uint32(self) -> int:
        """Return the next unsigned 32-bit word."""

    def _next_int31(self) -> int:
        return self._next_uint32() >> 1

    def _next_unit_double(self) -> float:
        return self._next_int31() * INT_TO_DOUBLE

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def seed(self) -> Seed:
        return self._seed

    @property
    def can_reset(self) -> bool:
        return True

    def reset(self, seed: Seed | None = None) -> bool:
        """Reset the generator to its initial state.

        Args:
            seed: Optional new seed, stored before resetting.

        Returns:
            True if the generator was reset, False if the engine cannot reset.
        """
        if not self.can_reset:
            return False
        if seed is not None:
            self._seed = normalize_seed(seed)
        self._bit_buffer = 0
        self._bit_count = 0
        self._reset_state(self._seed)
        logger.debug("Reset %s with seed %d", type(self).__name__, self._seed)
        return True

    # -------------------------------------------------------------------------
    # Signed integers
    # -------------------------------------------------------------------------

    def next(self, *bounds: int) -> int:
        """Return a random int.

        next() is in [0, INT32_MAX), next(max_value) in [0, max_value) and
        next(min_value, max_value) in [min_value, max_value). Equal bounds
        return min_value.

        Raises:
            InvalidParameterError: If max_value < 0, max_value < min_value
                or a bound does not fit in a signed 32-bit integer.
        """
        _check_arity("next", bounds)
        if not bounds:
            result = self._next_int31()
            while result == INT32_MAX:
                result = self._next_int31()
            return result

        if len(bounds) == 1:
            max_value = _as_int32(bounds[0], "max_value")
            if max_value < 0:
                raise InvalidParameterError(NEGATIVE_MAX_VALUE, ("max_value",))
            return int(self._next_int31() * INT_TO_DOUBLE * max_value)

        min_value = _as_int32(bounds[0], "min_value")
        max_value = _as_int32(bounds[1], "max_value")
        if max_value < min_value:
            raise InvalidParameterError(MIN_GREATER_THAN_MAX, ("min_value", "max_value"))
        span = max_value - min_value
        if span <= INT32_MAX:
            return min_value + int(self._next_int31() * INT_TO_DOUBLE * span)
        # Span exceeds the signed range, use the full 32-bit word
        return min_value + int(self._next_uint32() * UINT_TO_DOUBLE * span)

    def next_inclusive_max(self) -> int:
        """Return an int in [0, INT32_MAX]."""
        return self._next_int31()

    # -------------------------------------------------------------------------
    # Doubles
    # -------------------------------------------------------------------------

    def next_double(self, *bounds: float) -> float:
        """Return a random float.

        next_double() is in [0, 1), next_double(max_value) in [0, max_value)
        and next_double(min_value, max_value) in [min_value, max_value).

        Raises:
            InvalidParameterError: If a bound is NaN, max_value < 0 or
                max_value < min_value.
            RangeTooLargeError: If the requested span is infinite.
        """
        _check_arity("next_double", bounds)
        if not bounds:
            return self._next_unit_double()

        if len(bounds) == 1:
            max_value = float(bounds[0])
            if math.isnan(max_value) or max_value < 0.0:
                raise InvalidParameterError(NEGATIVE_MAX_VALUE, ("max_value",))
            if math.isinf(max_value):
                raise RangeTooLargeError(INFINITE_MAX_VALUE, ("max_value",))
            result = self._next_unit_double() * max_value
            if result >= max_value > 0.0:
                return math.nextafter(max_value, 0.0)
            return result

        min_value = float(bounds[0])
        max_value = float(bounds[1])
        if math.isnan(min_value) or math.isnan(max_value) or min_value > max_value:
            raise InvalidParameterError(MIN_GREATER_THAN_MAX, ("min_value", "max_value"))
        span = max_value - min_value
        if math.isinf(span):
            raise RangeTooLargeError(INFINITE_RANGE, ("min_value", "max_value"))
        result = min_value + self._next_unit_double() * span
        if result >= max_value > min_value:
            return math.nextafter(max_value, min_value)
        return result

    # -------------------------------------------------------------------------
    # Unsigned integers
    # -------------------------------------------------------------------------

    def next_uint(self, *bounds: int) -> int:
        """Return a random unsigned 32-bit int.

        next_uint() is in [0, UINT32_MAX], next_uint(max_value) in
        [0, max_value) and next_uint(min_value, max_value) in
        [min_value, max_value).

        Raises:
            InvalidParameterError: If a bound is negative, does not fit in
                32 bits, or max_value < min_value.
        """
        _check_arity("next_uint", bounds)
        if not bounds:
            return self._next_uint32()

        if len(bounds) == 1:
            max_value = _as_uint32(bounds[0], "max_value")
            return int(self._next_uint32() * UINT_TO_DOUBLE * max_value)

        min_value = _as_uint32(bounds[0], "min_value")
        max_value = _as_uint32(bounds[1], "max_value")
        if max_value < min_value:
            raise InvalidParameterError(MIN_GREATER_THAN_MAX, ("min_value", "max_value"))
        return min_value + int(self._next_uint32() * UINT_TO_DOUBLE * (max_value - min_value))

    def next_uint_inclusive_max(self) -> int:
        """Return an int in [0, UINT32_MAX]."""
        return self._next_uint32()

    def next_uint_exclusive_max(self) -> int:
        """Return an int in [0, UINT32_MAX)."""
        result = self._next_uint32()
        while result == UINT32_MAX:
            result = self._next_uint32()
        return result

    # -------------------------------------------------------------------------
    # Booleans and bytes
    # -------------------------------------------------------------------------

    def next_boolean(self) -> bool:
        """Return a random boolean.

        One 32-bit draw serves 31 consecutive answers, lowest bit first.
        """
        if self._bit_count == 0:
            self._bit_buffer = self._next_uint32()
            self._bit_count = _BITS_PER_DRAW - 1
            return (self._bit_buffer & 1) == 1
        self._bit_count -= 1
        self._bit_buffer >>= 1
        return (self._bit_buffer & 1) == 1

    def next_bytes(self, buffer: bytearray | memoryview) -> None:
        """Fill a writable buffer with random bytes.

        Bytes come from successive 32-bit draws in little-endian order; a
        trailing partial word uses the low bytes of one extra draw.

        Raises:
            TypeError: If buffer is None or not writable.
        """
        if buffer is None:
            raise TypeError(NULL_BUFFER)
        view = memoryview(buffer).cast("B")
        if view.readonly:
            raise TypeError("Buffer must be writable.")
        size = len(view)
        words = -(-size // 4)
        data = b"".join(self._next_uint32().to_bytes(4, "little") for _ in range(words))
        view[:] = data[:size]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed})"
