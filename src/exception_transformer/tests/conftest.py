"""
Core pytest configuration for the test suite.

Domain fixtures (payloads, transformers, callback recorder) live in
tests/test_fixtures/payload_fixtures.py and are re-exported at the bottom of this
module so every test module can use them without importing.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# -------------------------------
# Early logging tuning
# -------------------------------
# Silence noisy third-party loggers before they are imported by fixtures.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Path patching
# -------------------------------
# Ensure 'src' on sys.path so `import exception_transformer` works without an install
SRC = Path(__file__).resolve().parents[2]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest

from exception_transformer.config.settings import Settings, get_settings
from exception_transformer.core.logging.builder import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Install the library's logging configuration for the whole session, in text
    format on the console so failures are readable.
    """
    setup_logging(Settings(LOG_FORMAT="text", LOG_LEVEL="DEBUG", LOG_TO_STDOUT=True))
    yield


@pytest.fixture
def clear_settings_cache():
    """
    get_settings() is lru_cached; tests that change the environment need a fresh read.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Payload / transformer fixtures
from .test_fixtures.payload_fixtures import (  # noqa: E402,F401
    fake,
    validation_error,
    nested_validation_error,
    events,
    transformer,
    silent_transformer,
)
