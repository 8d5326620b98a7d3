"""Shared fixtures for erroror tests."""

import pytest

from erroror.errors import Error
from erroror.foundation.config import clear_settings_cache
from erroror.monads import ErrorOr, lift
from erroror.observability import configure_logging


@pytest.fixture(autouse=True)
def clean_environment() -> object:
    """Reset cached settings and silence logging around each test."""
    clear_settings_cache()
    configure_logging("none")
    yield
    clear_settings_cache()
    configure_logging("none")


@pytest.fixture
def parse_int() -> object:
    def _parse(s: str) -> ErrorOr[int]:
        try:
            return lift(int(s))
        except ValueError:
            return lift(Error.validation("Parse.NotInt", f"{s!r} is not an integer"))
    return _parse
