"""Base classes shared by every distribution.

This module contains:
- resolve_generator(): the default-generator policy of distribution constructors
- AbstractDistribution: generator handling, joint parameter validation and
  the swappable class-level ``sampler`` / ``are_valid_params`` callables
- AbstractContinuousDistribution / AbstractDiscreteDistribution: the
  ``next_double()`` / ``next()`` entry points

Each concrete family declares:
- ``params``: attribute names of its shape parameters, in sampler order
- one Parameter descriptor per name
- ``are_valid_params(*values)`` and ``sampler(generator, *values)`` as
  staticmethods; override() swaps them for the whole class and
  restore_defaults() puts the originals back
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from core.errors import (
    INVALID_PARAMS,
    NULL_GENERATOR,
    InvalidParameterError,
    MissingGeneratorError,
)
from core.protocols import Generator
from core.types import Mode, Sampler, Validator
from distributions.parameters import Parameter
from generators.xorshift128 import XorShift128Generator

__all__ = [
    "resolve_generator",
    "AbstractDistribution",
    "AbstractContinuousDistribution",
    "AbstractDiscreteDistribution",
]

logger = logging.getLogger(__name__)


def resolve_generator(generator: Generator | None, seed: int | None) -> Generator:
    """Return the generator a distribution should draw from.

    Args:
        generator: Explicit generator, shared with the caller.
        seed: Seed for a new XorShift128Generator when no generator is given.

    Returns:
        generator itself, or a new XorShift128Generator(seed).

    Raises:
        InvalidParameterError: If both generator and seed are given.
    """
    if generator is not None:
        if seed is not None:
            raise InvalidParameterError(
                "Pass either a generator or a seed, not both.", ("generator", "seed")
            )
        return generator
    return XorShift128Generator(seed)


class AbstractDistribution(ABC):
    """Base class of continuous and discrete distributions.

    Args:
        generator: Generator random values are drawn from.

    Raises:
        MissingGeneratorError: If generator is None.
    """

    params: ClassVar[tuple[str, ...]] = ()

    _default_sampler: ClassVar[Sampler | None] = None
    _default_validator: ClassVar[Validator | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "sampler" in cls.__dict__:
            cls._default_sampler = _unwrap(cls.__dict__["sampler"])
        if "are_valid_params" in cls.__dict__:
            cls._default_validator = _unwrap(cls.__dict__["are_valid_params"])

    def __init__(self, generator: Generator | None) -> None:
        if generator is None:
            raise MissingGeneratorError(NULL_GENERATOR)
        self._generator = generator

    # -------------------------------------------------------------------------
    # Swappable class-level callables
    # -------------------------------------------------------------------------

    @staticmethod
    def are_valid_params(*values: Any) -> bool:
        return True

    @staticmethod
    def sampler(generator: Generator, *values: Any) -> Any:
        raise NotImplementedError

    @classmethod
    def override(
        cls,
        *,
        sampler: Sampler | None = None,
        validator: Validator | None = None,
    ) -> None:
        """Replace the sampling function and/or validity predicate of this class.

        The replacement applies to every instance, and to every other family
        whose sampler builds on this one.
        """
        if sampler is not None:
            cls.sampler = staticmethod(sampler)  # type: ignore[method-assign]
            logger.debug("Overrode sampler of %s", cls.__name__)
        if validator is not None:
            cls.are_valid_params = staticmethod(validator)  # type: ignore[method-assign]
            logger.debug("Overrode validator of %s", cls.__name__)

    @classmethod
    def restore_defaults(cls) -> None:
        """Put back the sampling function and validity predicate of this class."""
        if cls._default_sampler is not None:
            cls.sampler = staticmethod(cls._default_sampler)  # type: ignore[method-assign]
        if cls._default_validator is not None:
            cls.are_valid_params = staticmethod(cls._default_validator)  # type: ignore[method-assign]
        logger.debug("Restored defaults of %s", cls.__name__)

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    def _descriptor(self, name: str) -> Parameter:
        descriptor = getattr(type(self), name)
        if not isinstance(descriptor, Parameter):
            raise AttributeError(f"{type(self).__name__} has no parameter '{name}'")
        return descriptor

    def _set_params(self, *values: Any) -> None:
        """Validate and store all parameters at once (constructor path)."""
        descriptors = [self._descriptor(name) for name in self.params]
        coerced = [d.coerce(v) for d, v in zip(descriptors, values, strict=True)]
        if not type(self).are_valid_params(*coerced):
            raise InvalidParameterError(INVALID_PARAMS, tuple(d.label for d in descriptors))
        for descriptor, value in zip(descriptors, coerced, strict=True):
            setattr(self, descriptor.attr, value)
        self._on_params_changed()

    def _is_valid_param(self, name: str, value: Any) -> bool:
        """Check a candidate value for one parameter, the others held fixed."""
        descriptor = self._descriptor(name)
        try:
            value = descriptor.coerce(value)
        except InvalidParameterError:
            return False
        values = [value if p == name else getattr(self, p) for p in self.params]
        return bool(type(self).are_valid_params(*values))

    def _on_params_changed(self) -> None:
        """Hook for families caching values derived from their parameters."""

    def _sampler_args(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.params)

    # -------------------------------------------------------------------------
    # Generator
    # -------------------------------------------------------------------------

    @property
    def generator(self) -> Generator:
        return self._generator

    @property
    def can_reset(self) -> bool:
        return self._generator.can_reset

    def reset(self) -> bool:
        """Reset the underlying generator."""
        return self._generator.reset()

    # -------------------------------------------------------------------------
    # Sampling and statistics
    # -------------------------------------------------------------------------

    def sample(self) -> Any:
        """Draw one value using the current class-level sampler."""
        return type(self).sampler(self._generator, *self._sampler_args())

    @abstractmethod
    def next_double(self) -> float: ...

    @property
    @abstractmethod
    def minimum(self) -> float: ...

    @property
    @abstractmethod
    def maximum(self) -> float: ...

    @property
    @abstractmethod
    def mean(self) -> float: ...

    @property
    @abstractmethod
    def median(self) -> float: ...

    @property
    @abstractmethod
    def variance(self) -> float: ...

    @property
    @abstractmethod
    def mode(self) -> Mode: ...

    def __repr__(self) -> str:
        args = ", ".join(f"{self._descriptor(n).label}={getattr(self, n)!r}" for n in self.params)
        return f"{type(self).__name__}({args})"


class AbstractContinuousDistribution(AbstractDistribution):
    """Base class of distributions over the reals."""

    def next_double(self) -> float:
        return float(self.sample())


class AbstractDiscreteDistribution(AbstractDistribution):
    """Base class of distributions over the integers."""

    def next(self) -> int:
        return int(self.sample())

    def next_double(self) -> float:
        return float(self.sample())


def _unwrap(member: Any) -> Sampler:
    if isinstance(member, staticmethod):
        return member.__func__
    return member
