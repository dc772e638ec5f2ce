"""Exception types and error messages shared by generators and distributions.

Three failure kinds exist:
- InvalidParameterError: a parameter or range argument is outside its domain
- NotSupportedError: a statistic is undefined for a family or its parameters
- MissingGeneratorError: a required generator/distribution reference is None
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "InvalidParameterError",
    "RangeTooLargeError",
    "NotSupportedError",
    "MissingGeneratorError",
    "EMPTY_SEQUENCE",
    "INVALID_PARAMS",
    "MIN_GREATER_THAN_MAX",
    "NEGATIVE_MAX_VALUE",
    "INFINITE_MAX_VALUE",
    "INFINITE_RANGE",
    "NULL_BUFFER",
    "NULL_DISTRIBUTION",
    "NULL_GENERATOR",
    "NULL_WEIGHTS",
    "SEED_OUT_OF_RANGE",
    "UNDEFINED_MEAN",
    "UNDEFINED_MEAN_FOR_PARAMS",
    "UNDEFINED_MEDIAN",
    "UNDEFINED_MODE",
    "UNDEFINED_MODE_FOR_PARAMS",
    "UNDEFINED_VARIANCE",
    "UNDEFINED_VARIANCE_FOR_PARAMS",
]

EMPTY_SEQUENCE = "Sequence must not be empty."
INVALID_PARAMS = "Given parameter (or parameters) are not valid."
MIN_GREATER_THAN_MAX = "min_value must be less than or equal to max_value."
NEGATIVE_MAX_VALUE = "max_value must be greater than or equal to zero."
INFINITE_MAX_VALUE = "max_value cannot be positive infinity."
INFINITE_RANGE = "The difference between max_value and min_value cannot be positive infinity."
NULL_BUFFER = "Buffer must not be None."
NULL_DISTRIBUTION = "Distribution must not be None."
NULL_GENERATOR = "Generator must not be None."
NULL_WEIGHTS = "Weights must not be None."
SEED_OUT_OF_RANGE = "Seed must fit in an unsigned 32-bit integer."
UNDEFINED_MEAN = "Mean is undefined for given distribution."
UNDEFINED_MEAN_FOR_PARAMS = "Mean is undefined for given distribution and parameters."
UNDEFINED_MEDIAN = "Median is undefined for given distribution."
UNDEFINED_MODE = "Mode is undefined for given distribution."
UNDEFINED_MODE_FOR_PARAMS = "Mode is undefined for given distribution and parameters."
UNDEFINED_VARIANCE = "Variance is undefined for given distribution."
UNDEFINED_VARIANCE_FOR_PARAMS = "Variance is undefined for given distribution and parameters."


class InvalidParameterError(ValueError):
    """Raised when a parameter or range argument is outside its valid domain.

    Attributes:
        names: Names of the offending parameters (may be empty).
    """

    def __init__(self, message: str = INVALID_PARAMS, names: Iterable[str] = ()) -> None:
        self.names: tuple[str, ...] = tuple(names)
        if self.names:
            message = f"{message} ({', '.join(self.names)})"
        super().__init__(message)


class RangeTooLargeError(InvalidParameterError):
    """Raised when a floating-point span overflows to infinity."""


class NotSupportedError(NotImplementedError):
    """Raised when a statistic is undefined for a family or its current parameters."""


class MissingGeneratorError(TypeError):
    """Raised when a required generator or distribution reference is None."""

    def __init__(self, message: str = NULL_GENERATOR) -> None:
        super().__init__(message)
