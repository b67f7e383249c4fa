"""Unit tests for infrastructure.logging.setup module."""

import logging
from unittest.mock import patch

import pytest
import structlog

from infrastructure.logging.setup import configure_logging, get_module_logger


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_test_environment_silences_output(self):
        """Under pytest the root logger sits above CRITICAL."""
        configure_logging()

        assert logging.root.level == logging.CRITICAL + 1

    def test_console_renderer_in_development(self, mock_settings):
        with patch("infrastructure.logging.setup._is_test_environment", return_value=False):
            configure_logging(settings=mock_settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        configure_logging()

    def test_json_renderer_in_production(self, mock_settings):
        with patch("infrastructure.logging.setup._is_test_environment", return_value=False):
            configure_logging(settings=mock_settings, is_production=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        configure_logging()

    def test_settings_loaded_when_not_given(self, mock_settings):
        with patch(
            "infrastructure.logging.setup._is_test_environment", return_value=False
        ), patch(
            "infrastructure.services.providers.get_settings", return_value=mock_settings
        ) as get_settings:
            configure_logging(log_level="DEBUG")

        get_settings.assert_called_once()
        configure_logging()


@pytest.mark.unit
def test_get_module_logger_binds_module_path():
    logger = get_module_logger()

    context = logger._context

    assert context["module_path"] == __name__
    assert context["component"] == __name__.split(".")[-1]
