"""Infinite lazy streams over generators and distributions.

Each helper validates its arguments immediately and returns an iterator;
nothing is drawn until the first ``next()``. Iterators never stop on their
own, so slice them with itertools.islice or zip them with a finite range.

Example:
    >>> from itertools import islice
    >>> from generators import XorShift128Generator
    >>> gen = XorShift128Generator(seed=7)
    >>> dice = list(islice(integers(gen, 1, 7), 10))
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import Any, TypeVar

from core.errors import (
    EMPTY_SEQUENCE,
    INFINITE_MAX_VALUE,
    INFINITE_RANGE,
    MIN_GREATER_THAN_MAX,
    NEGATIVE_MAX_VALUE,
    NULL_BUFFER,
    NULL_DISTRIBUTION,
    NULL_GENERATOR,
    InvalidParameterError,
    MissingGeneratorError,
    RangeTooLargeError,
)
from core.protocols import DiscreteDistribution, Distribution, Generator

__all__ = [
    "booleans",
    "doubles",
    "integers",
    "unsigned_integers",
    "bytes_stream",
    "distributed_doubles",
    "distributed_integers",
    "choice",
    "choices",
]

T = TypeVar("T")


def _require_generator(generator: Generator | None) -> Generator:
    if generator is None:
        raise MissingGeneratorError(NULL_GENERATOR)
    return generator


def _check_bounds(bounds: tuple[Any, ...], *, floating: bool) -> None:
    """Apply the argument checks of Generator.next / next_double up front."""
    if len(bounds) > 2:
        raise TypeError(f"expected at most 2 bounds, got {len(bounds)}")
    if not bounds:
        return
    if len(bounds) == 1:
        max_value = bounds[0]
        if floating and math.isnan(max_value):
            raise InvalidParameterError(NEGATIVE_MAX_VALUE, ("max_value",))
        if max_value < 0:
            raise InvalidParameterError(NEGATIVE_MAX_VALUE, ("max_value",))
        if floating and math.isinf(max_value):
            raise RangeTooLargeError(INFINITE_MAX_VALUE, ("max_value",))
        return
    min_value, max_value = bounds
    if floating and (math.isnan(min_value) or math.isnan(max_value)):
        raise InvalidParameterError(MIN_GREATER_THAN_MAX, ("min_value", "max_value"))
    if min_value > max_value:
        raise InvalidParameterError(MIN_GREATER_THAN_MAX, ("min_value", "max_value"))
    if floating and math.isinf(max_value - min_value):
        raise RangeTooLargeError(INFINITE_RANGE, ("min_value", "max_value"))


# =============================================================================
# Generator streams
# =============================================================================


def booleans(generator: Generator) -> Iterator[bool]:
    """Endless stream of generator.next_boolean()."""
    generator = _require_generator(generator)

    def _stream() -> Iterator[bool]:
        while True:
            yield generator.next_boolean()

    return _stream()


def doubles(generator: Generator, *bounds: float) -> Iterator[float]:
    """Endless stream of generator.next_double(*bounds).

    Raises:
        InvalidParameterError: If the bounds are rejected by next_double.
    """
    generator = _require_generator(generator)
    _check_bounds(bounds, floating=True)

    def _stream() -> Iterator[float]:
        while True:
            yield generator.next_double(*bounds)

    return _stream()


def integers(generator: Generator, *bounds: int) -> Iterator[int]:
    """Endless stream of generator.next(*bounds)."""
    generator = _require_generator(generator)
    _check_bounds(bounds, floating=False)

    def _stream() -> Iterator[int]:
        while True:
            yield generator.next(*bounds)

    return _stream()


def unsigned_integers(generator: Generator, *bounds: int) -> Iterator[int]:
    """Endless stream of generator.next_uint(*bounds)."""
    generator = _require_generator(generator)
    _check_bounds(bounds, floating=False)

    def _stream() -> Iterator[int]:
        while True:
            yield generator.next_uint(*bounds)

    return _stream()


def bytes_stream(generator: Generator, buffer: bytearray | memoryview) -> Iterator[bool]:
    """Refill buffer with random bytes on every step and yield True.

    Raises:
        TypeError: If buffer is None.
    """
    generator = _require_generator(generator)
    if buffer is None:
        raise TypeError(NULL_BUFFER)

    def _stream() -> Iterator[bool]:
        while True:
            generator.next_bytes(buffer)
            yield True

    return _stream()


# =============================================================================
# Distribution streams
# =============================================================================


def distributed_doubles(distribution: Distribution) -> Iterator[float]:
    """Endless stream of distribution.next_double()."""
    if distribution is None:
        raise MissingGeneratorError(NULL_DISTRIBUTION)

    def _stream() -> Iterator[float]:
        while True:
            yield distribution.next_double()

    return _stream()


def distributed_integers(distribution: DiscreteDistribution) -> Iterator[int]:
    """Endless stream of distribution.next()."""
    if distribution is None:
        raise MissingGeneratorError(NULL_DISTRIBUTION)

    def _stream() -> Iterator[int]:
        while True:
            yield distribution.next()

    return _stream()


# =============================================================================
# Choice
# =============================================================================


def choice(generator: Generator, items: Sequence[T]) -> T:
    """Return one element of items picked uniformly.

    Raises:
        MissingGeneratorError: If generator is None.
        InvalidParameterError: If items is empty.
    """
    generator = _require_generator(generator)
    if len(items) == 0:
        raise InvalidParameterError(EMPTY_SEQUENCE, ("items",))
    return items[generator.next(len(items))]


def choices(generator: Generator, items: Sequence[T]) -> Iterator[T]:
    """Endless stream of uniform picks from items (with replacement)."""
    generator = _require_generator(generator)
    if len(items) == 0:
        raise InvalidParameterError(EMPTY_SEQUENCE, ("items",))
    count = len(items)

    def _stream() -> Iterator[T]:
        while True:
            yield items[generator.next(count)]

    return _stream()
