"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import _resolve_level, get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_named_and_default_loggers(self) -> None:
        assert get_logger("cli").name == "cli"
        assert get_logger().name == "design-export"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "level, expected",
        [
            (logging.WARNING, logging.WARNING),
            ("debug", logging.DEBUG),
            ("ERROR", logging.ERROR),
            ("not-a-level", logging.INFO),
        ],
    )
    def test_resolve_level(self, level, expected) -> None:
        assert _resolve_level(level) == expected

    @pytest.mark.unit
    def test_transport_loggers_are_quieted(self) -> None:
        setup_logging("info", stream=StringIO())
        assert logging.getLogger("httpx").level == logging.WARNING

        setup_logging("debug", stream=StringIO())
        assert logging.getLogger("httpx").level == logging.DEBUG
