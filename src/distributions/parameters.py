"""Validated shape parameters and per-parameter capability mixins.

A Parameter is a data descriptor: reading returns the stored value, writing
coerces the value to the parameter kind and runs the owning distribution's
joint validity predicate with the other parameters held fixed. Invalid values
are rejected before anything is stored, so a distribution never holds an
invalid parameter set.

The mixins add the ``is_valid_<name>`` check matching the protocols in
core.protocols (HasAlpha, HasBeta, ...).
"""

from __future__ import annotations

from typing import Any

from core.errors import INVALID_PARAMS, InvalidParameterError
from core.tmath import is_integer, is_real

__all__ = [
    "Parameter",
    "coerce_param",
    "AlphaParam",
    "BetaParam",
    "GammaParam",
    "LambdaParam",
    "MuParam",
    "NuParam",
    "SigmaParam",
    "ThetaParam",
]


def coerce_param(kind: type, value: Any, label: str) -> Any:
    """Convert value to kind (int or float).

    Raises:
        InvalidParameterError: If value is not a number of the right kind.
    """
    if kind is int:
        if not is_integer(value):
            raise InvalidParameterError(INVALID_PARAMS, (label,))
        return int(value)
    if not is_real(value):
        raise InvalidParameterError(INVALID_PARAMS, (label,))
    return float(value)


class Parameter:
    """Descriptor for a validated numeric shape parameter.

    Args:
        kind: int or float.
        label: Name reported in errors; defaults to the attribute name
            without a trailing underscore (``lambda_`` -> ``lambda``).
    """

    def __init__(self, kind: type = float, *, label: str | None = None) -> None:
        if kind not in (int, float):
            raise ValueError(f"kind must be int or float, got {kind!r}")
        self.kind = kind
        self._label = label
        self.name = ""
        self.attr = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.attr = f"_{name}"
        if self._label is None:
            self._label = name.rstrip("_")

    @property
    def label(self) -> str:
        return self._label or self.name

    def coerce(self, value: Any) -> Any:
        return coerce_param(self.kind, value, self.label)

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return getattr(obj, self.attr)

    def __set__(self, obj: Any, value: Any) -> None:
        value = self.coerce(value)
        if not obj._is_valid_param(self.name, value):
            raise InvalidParameterError(INVALID_PARAMS, (self.label,))
        setattr(obj, self.attr, value)
        obj._on_params_changed()


# =============================================================================
# Capability mixins
# =============================================================================


class AlphaParam:
    """Adds is_valid_alpha()."""

    def is_valid_alpha(self, value: Any) -> bool:
        return self._is_valid_param("alpha", value)  # type: ignore[attr-defined]


class BetaParam:
    """Adds is_valid_beta()."""

    def is_valid_beta(self, value: Any) -> bool:
        return self._is_valid_param("beta", value)  # type: ignore[attr-defined]


class GammaParam:
    """Adds is_valid_gamma()."""

    def is_valid_gamma(self, value: Any) -> bool:
        return self._is_valid_param("gamma", value)  # type: ignore[attr-defined]


class LambdaParam:
    """Adds is_valid_lambda() for the ``lambda_`` attribute."""

    def is_valid_lambda(self, value: Any) -> bool:
        return self._is_valid_param("lambda_", value)  # type: ignore[attr-defined]


class MuParam:
    """Adds is_valid_mu()."""

    def is_valid_mu(self, value: Any) -> bool:
        return self._is_valid_param("mu", value)  # type: ignore[attr-defined]


class NuParam:
    """Adds is_valid_nu()."""

    def is_valid_nu(self, value: Any) -> bool:
        return self._is_valid_param("nu", value)  # type: ignore[attr-defined]


class SigmaParam:
    """Adds is_valid_sigma()."""

    def is_valid_sigma(self, value: Any) -> bool:
        return self._is_valid_param("sigma", value)  # type: ignore[attr-defined]


class ThetaParam:
    """Adds is_valid_theta()."""

    def is_valid_theta(self, value: Any) -> bool:
        return self._is_valid_param("theta", value)  # type: ignore[attr-defined]
