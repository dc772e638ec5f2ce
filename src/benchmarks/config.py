"""Run configuration: JSON loading, overrides and dynamic instantiation.

A run config is a JSON object. Recognised keys and their defaults live in
DEFAULT_CONFIG; anything else is carried through to config.json untouched.
Objects of the form ``{"class": "module:Class", "params": {...}}`` are
instantiated by resolve_spec().
"""

from __future__ import annotations

import copy
import importlib
import json
from pathlib import Path
from typing import Any

from benchmarks.registry import get_generator

__all__ = [
    "DEFAULT_CONFIG",
    "load_json",
    "import_class",
    "resolve_spec",
    "resolve_values",
    "apply_overrides",
    "load_config",
    "build_generator",
]

DEFAULT_CONFIG: dict[str, Any] = {
    "generator": "xorshift128",
    "seed": 0,
    "samples": 100_000,
    "draws": 100_000,
    "tolerance": 0.05,
    "bins": 60,
    "distributions": [
        {"name": "exponential", "params": {"lambda_": 2.0}},
        {"name": "normal", "params": {"mu": 0.0, "sigma": 1.0}},
        {"name": "gamma", "params": {"alpha": 2.5, "theta": 1.5}},
        {"name": "poisson", "params": {"lambda_": 4.0}},
    ],
}


def load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def import_class(path: str) -> type[Any]:
    if ":" in path:
        module_name, class_name = path.split(":", 1)
    else:
        module_name, class_name = path.rsplit(".", 1)
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def resolve_spec(spec: Any, **extra_kwargs: Any) -> Any:
    """Instantiate an object from a {class, params} spec or return spec as-is."""
    if isinstance(spec, dict) and "class" in spec:
        cls = import_class(spec["class"])
        params = spec.get("params", {})
        resolved = resolve_values(params)
        resolved.update(extra_kwargs)
        return cls(**resolved)
    return resolve_values(spec)


def resolve_values(value: Any, *, skip_keys: set[str] | None = None) -> Any:
    if isinstance(value, dict):
        if "class" in value:
            return resolve_spec(value)
        resolved: dict[str, Any] = {}
        for key, val in value.items():
            if skip_keys and key in skip_keys:
                resolved[key] = val
            else:
                resolved[key] = resolve_values(val, skip_keys=skip_keys)
        return resolved
    if isinstance(value, list):
        return [resolve_values(v, skip_keys=skip_keys) for v in value]
    return value


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def apply_overrides(config: dict[str, Any], overrides: list[str]) -> dict[str, Any]:
    """Return a copy of config with dotted ``key=value`` overrides applied.

    Values are parsed as JSON literals when possible and kept as strings
    otherwise (``seed=3`` -> 3, ``generator=mt19937`` -> "mt19937").

    Raises:
        ValueError: If an override has no ``=``.
    """
    result = json.loads(json.dumps(config))
    for item in overrides:
        if "=" not in item:
            raise ValueError(f"Override must be key=value, got: {item}")
        path, raw_val = item.split("=", 1)
        keys = path.split(".")
        target = result
        for key in keys[:-1]:
            if key not in target or not isinstance(target[key], dict):
                target[key] = {}
            target = target[key]
        target[keys[-1]] = _parse_value(raw_val)
    return result


def load_config(path: Path | None = None, overrides: list[str] | None = None) -> dict[str, Any]:
    """Build a run config from DEFAULT_CONFIG, an optional file and overrides.

    Args:
        path: JSON file whose top-level keys replace the defaults.
        overrides: Dotted ``key=value`` strings applied last.

    Returns:
        The merged configuration dictionary.

    Raises:
        ValueError: If the file does not hold a JSON object.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is not None:
        loaded = load_json(path)
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must contain a JSON object: {path}")
        config.update(loaded)
    if overrides:
        config = apply_overrides(config, overrides)
    return config


def build_generator(config: dict[str, Any], seed: int | None = None) -> Any:
    """Create the generator named (or specified) by config["generator"].

    Args:
        config: Run configuration. ``generator`` is a registry name or a
            {class, params} spec; ``seed`` seeds registry generators.
        seed: Overrides config["seed"] when given.

    Raises:
        KeyError: If a generator name is not registered.
    """
    spec = config.get("generator", DEFAULT_CONFIG["generator"])
    if isinstance(spec, dict):
        return resolve_spec(spec)
    return get_generator(spec, config.get("seed") if seed is None else seed)
