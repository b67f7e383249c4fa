"""Shared fixtures for the whole test suite."""

import pytest
import structlog

from infrastructure.services.providers import get_i18n, get_settings


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear cached provider singletons and logging context around each test."""
    get_settings.cache_clear()
    get_i18n.cache_clear()
    structlog.contextvars.clear_contextvars()
    yield
    get_settings.cache_clear()
    get_i18n.cache_clear()
    structlog.contextvars.clear_contextvars()
