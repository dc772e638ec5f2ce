"""Protocol definitions for generators and distributions.

This module contains Protocol classes defining interfaces for:
- Generators: uniform bit-stream engines with reset/reseed semantics
- Distributions: samplers that draw from a generator and expose statistics
- Capability protocols: one per named shape parameter (alpha, beta, ...)

Capability protocols let tooling operate on "any distribution with an alpha
parameter" without knowing the concrete family.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from core.types import Mode

__all__ = [
    "Generator",
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    "HasAlpha",
    "HasBeta",
    "HasGamma",
    "HasLambda",
    "HasMu",
    "HasNu",
    "HasSigma",
    "HasTheta",
    "HasWeights",
]


@runtime_checkable
class Generator(Protocol):
    """Protocol for uniform pseudo-random generators.

    A Generator produces uniformly distributed integers, unsigned integers,
    doubles, booleans and bytes from a 32-bit seed. Two generators of the same
    engine built from the same seed yield identical sequences.

    Methods taking optional bounds follow the range() convention: one
    argument is the exclusive maximum, two are (minimum, exclusive maximum).
    """

    @property
    def seed(self) -> int:
        """The seed used to initialise the generator."""
        ...

    @property
    def can_reset(self) -> bool:
        """Whether the generator can be reset to its initial state."""
        ...

    def reset(self, seed: int | None = None) -> bool:
        """Reset the generator, optionally storing a new seed first.

        Returns:
            True if the generator was reset, False otherwise.
        """
        ...

    def next(self, *bounds: int) -> int:
        """Return a non-negative int below INT32_MAX, or within the given bounds."""
        ...

    def next_inclusive_max(self) -> int:
        """Return an int in [0, INT32_MAX]."""
        ...

    def next_double(self, *bounds: float) -> float:
        """Return a float in [0, 1), or within the given bounds."""
        ...

    def next_uint(self, *bounds: int) -> int:
        """Return an unsigned 32-bit int, or one within the given bounds."""
        ...

    def next_uint_inclusive_max(self) -> int:
        """Return an int in [0, UINT32_MAX]."""
        ...

    def next_uint_exclusive_max(self) -> int:
        """Return an int in [0, UINT32_MAX)."""
        ...

    def next_boolean(self) -> bool:
        """Return a random boolean."""
        ...

    def next_bytes(self, buffer: bytearray | memoryview) -> None:
        """Fill a writable buffer with random bytes."""
        ...


@runtime_checkable
class Distribution(Protocol):
    """Protocol shared by continuous and discrete distributions."""

    @property
    def generator(self) -> Generator:
        """The generator random values are drawn from."""
        ...

    @property
    def can_reset(self) -> bool:
        """Whether the underlying generator can be reset."""
        ...

    def reset(self) -> bool:
        """Reset the underlying generator."""
        ...

    @property
    def minimum(self) -> float: ...

    @property
    def maximum(self) -> float: ...

    @property
    def mean(self) -> float: ...

    @property
    def median(self) -> float: ...

    @property
    def variance(self) -> float: ...

    @property
    def mode(self) -> Mode: ...

    def next_double(self) -> float:
        """Draw the next sample as a float."""
        ...


@runtime_checkable
class ContinuousDistribution(Distribution, Protocol):
    """Protocol for distributions over the reals."""


@runtime_checkable
class DiscreteDistribution(Distribution, Protocol):
    """Protocol for distributions over the integers."""

    def next(self) -> int:
        """Draw the next sample as an int."""
        ...


# =============================================================================
# Capability protocols
# =============================================================================


@runtime_checkable
class HasAlpha(Protocol):
    alpha: float

    def is_valid_alpha(self, value: float) -> bool: ...


@runtime_checkable
class HasBeta(Protocol):
    beta: float

    def is_valid_beta(self, value: float) -> bool: ...


@runtime_checkable
class HasGamma(Protocol):
    gamma: float

    def is_valid_gamma(self, value: float) -> bool: ...


@runtime_checkable
class HasLambda(Protocol):
    lambda_: float

    def is_valid_lambda(self, value: float) -> bool: ...


@runtime_checkable
class HasMu(Protocol):
    mu: float

    def is_valid_mu(self, value: float) -> bool: ...


@runtime_checkable
class HasNu(Protocol):
    nu: int

    def is_valid_nu(self, value: int) -> bool: ...


@runtime_checkable
class HasSigma(Protocol):
    sigma: float

    def is_valid_sigma(self, value: float) -> bool: ...


@runtime_checkable
class HasTheta(Protocol):
    theta: float

    def is_valid_theta(self, value: float) -> bool: ...


@runtime_checkable
class HasWeights(Protocol):
    weights: Sequence[float]

    def are_valid_weights(self, values: Sequence[float]) -> bool: ...
