"""Tests for configure_logging()."""

from __future__ import annotations

import logging

from core.logging import configure_logging, get_logger
from generators import XorShift128Generator


class TestConfigureLogging:
    """configure_logging() attaches one handler per package logger."""

    def test_idempotent_handler(self) -> None:
        configure_logging("DEBUG")
        configure_logging(logging.INFO)
        logger = logging.getLogger("generators")
        named = [h for h in logger.handlers if h.get_name() == "prng-workbench"]
        assert len(named) == 1
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_reset_logged_at_debug(self, caplog) -> None:  # type: ignore[no-untyped-def]
        configure_logging("DEBUG")
        logging.getLogger("generators").propagate = True
        try:
            with caplog.at_level(logging.DEBUG, logger="generators.base"):
                XorShift128Generator(seed=3).reset()
            assert any("Reset XorShift128Generator" in r.getMessage() for r in caplog.records)
        finally:
            logging.getLogger("generators").propagate = False

    def test_get_logger(self) -> None:
        assert get_logger("core.sequences").name == "core.sequences"
