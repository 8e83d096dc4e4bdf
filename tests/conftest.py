"""Pytest configuration and shared fixtures."""

from typing import Iterator

import pytest
import structlog

from value_checks.config import settings as settings_module


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    """Drop the cached global settings so each test reads its own environment."""
    settings_module._settings = None
    yield
    settings_module._settings = None


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test performs."""
    yield
    structlog.reset_defaults()
