"""Throughput timing of generator and distribution methods.

Each measurement calls one method ``draws`` times in a tight loop and
reports draws per second from time.perf_counter().
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from benchmarks.registry import get_distribution
from core.protocols import Generator

__all__ = [
    "TimingResult",
    "time_call",
    "time_generator",
    "time_distributions",
]

logger = logging.getLogger(__name__)


@dataclass
class TimingResult:
    """Timing of one method.

    Attributes:
        subject: What was timed (generator or distribution repr).
        method: Method label, e.g. ``next_double`` or ``next(0, 100)``.
        draws: Number of calls.
        seconds: Wall time of all calls.
    """

    subject: str
    method: str
    draws: int
    seconds: float

    @property
    def draws_per_second(self) -> float:
        if self.seconds <= 0.0:
            return float("inf")
        return self.draws / self.seconds

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "subject": self.subject,
            "method": self.method,
            "draws": self.draws,
            "seconds": self.seconds,
            "draws_per_second": self.draws_per_second,
        }


def time_call(subject: str, method: str, fn: Callable[[], Any], draws: int) -> TimingResult:
    """Call fn draws times and return the elapsed time.

    Raises:
        ValueError: If draws is not positive.
    """
    if draws <= 0:
        raise ValueError(f"draws must be positive, got {draws}")
    start = time.perf_counter()
    for _ in range(draws):
        fn()
    elapsed = time.perf_counter() - start
    logger.debug("%s.%s: %d draws in %.4fs", subject, method, draws, elapsed)
    return TimingResult(subject=subject, method=method, draws=draws, seconds=elapsed)


def time_generator(generator: Generator, draws: int) -> list[TimingResult]:
    """Time the main methods of a generator."""
    subject = repr(generator)
    methods: list[tuple[str, Callable[[], Any]]] = [
        ("next()", generator.next),
        ("next(0, 100)", lambda: generator.next(0, 100)),
        ("next_double()", generator.next_double),
        ("next_double(0.5, 2.5)", lambda: generator.next_double(0.5, 2.5)),
        ("next_uint()", generator.next_uint),
        ("next_boolean()", generator.next_boolean),
    ]
    return [time_call(subject, label, fn, draws) for label, fn in methods]


def time_distributions(
    generator: Generator,
    entries: list[dict[str, Any]],
    draws: int,
) -> list[TimingResult]:
    """Time next_double() of each configured distribution on a shared generator."""
    results: list[TimingResult] = []
    for entry in entries:
        distribution = get_distribution(entry["name"], entry.get("params", {}), generator=generator)
        results.append(time_call(repr(distribution), "next_double()", distribution.next_double, draws))
    return results
