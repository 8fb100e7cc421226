"""Pytest configuration and fixtures."""

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import LogCapture

from bcmath.calculator import Calculator, set_default_calculator
from bcmath.config import EngineConfig
from bcmath.number import DecimalNumber, parse_number


@pytest.fixture
def calc() -> Calculator:
    """A strict calculator with default scale 0."""
    return Calculator(EngineConfig())


@pytest.fixture
def legacy_calc() -> Calculator:
    """A calculator in legacy mode: malformed floor/ceil/round input yields "0"."""
    return Calculator(EngineConfig(strict=False))


@pytest.fixture(autouse=True)
def isolated_default_calculator(monkeypatch) -> Iterator[None]:
    """Give every test a fresh default calculator unaffected by the host environment."""
    for key in (
        "BCMATH_SCALE",
        "BCMATH_STRICT",
        "BCMATH_FLOAT_ROUNDING",
        "BCMATH_MAX_POWER_BITS",
        "BCMATH_MAX_SQRT_SCALE",
        "BCMATH_MAX_ROUND_PRECISION",
    ):
        monkeypatch.delenv(key, raising=False)
    set_default_calculator(None)
    yield
    set_default_calculator(None)


@pytest.fixture
def log_output() -> LogCapture:
    """Captured structlog events of the current test."""
    return LogCapture()


@pytest.fixture(autouse=True)
def configure_structlog(log_output) -> Iterator[None]:
    """Route all structlog events, debug included, into log_output."""
    structlog.configure(
        processors=[log_output],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )
    yield
    structlog.reset_defaults()


def num(text: str) -> DecimalNumber:
    """Parse a numeric string for engine-level tests."""
    return parse_number(text)


@pytest.fixture
def n():
    """Shortcut to parse numeric strings into DecimalNumber."""
    return num
