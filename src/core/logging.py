"""Logging configuration for the library and the benchmark runner.

Library modules create their own logger with ``logging.getLogger(__name__)``
and only emit DEBUG records (generator resets, sampler overrides). The runner
calls configure_logging() once to attach a stream handler.
"""

from __future__ import annotations

import logging
import sys

__all__ = [
    "LOG_FORMAT",
    "get_logger",
    "configure_logging",
]

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_PACKAGE_LOGGERS = ("core", "generators", "distributions", "benchmarks")


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module name."""
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach a single stream handler to every package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.

    Args:
        level: Logging level name or number applied to the package loggers.
    """
    if isinstance(level, str):
        level = level.upper()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name("prng-workbench")

    for name in _PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            if existing.get_name() == "prng-workbench":
                logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
