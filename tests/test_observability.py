"""Tests for configuration and observability setup."""

import logging
from unittest.mock import patch

from fs_tools.core.config import Settings
from fs_tools.core.observability import (
    LOGGER_NAME,
    get_logger,
    get_tracer,
    setup_logging,
    setup_tracing,
)


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        """Test default observability settings."""
        config = Settings()
        assert config.log_format == "json"
        assert config.otel_enabled is False
        assert config.otel_service_name == "fs-tools"

    def test_env_prefix(self, monkeypatch):
        """Test that settings are read from FS_TOOLS_ variables."""
        monkeypatch.setenv("FS_TOOLS_LOG_LEVEL", "debug")
        monkeypatch.setenv("FS_TOOLS_OTEL_ENABLED", "true")

        config = Settings()

        assert config.log_level == "debug"
        assert config.otel_enabled is True


class TestObservability:
    """Test logger and tracer helpers."""

    @patch("fs_tools.core.observability.trace.set_tracer_provider")
    def test_tracing_disabled(self, mock_set_provider):
        """Test that no provider is installed when tracing is off."""
        setup_tracing(Settings(otel_enabled=False))

        mock_set_provider.assert_not_called()

    @patch("fs_tools.core.observability.trace.set_tracer_provider")
    def test_tracing_enabled(self, mock_set_provider):
        """Test that a provider is installed when tracing is on."""
        setup_tracing(Settings(otel_enabled=True))

        mock_set_provider.assert_called_once()

    def test_span_without_provider(self):
        """Test that spans work with the default no-op provider."""
        with get_tracer(__name__).start_as_current_span("test") as span:
            span.set_attribute("fs.path", "/tmp")

    def test_get_logger(self):
        """Test that a bound logger is returned."""
        logger = get_logger(__name__)
        logger.debug("test event", key="value")

    def test_library_logger_has_null_handler(self):
        """Test that only the package logger is configured."""
        package_logger = logging.getLogger(LOGGER_NAME)
        try:
            setup_logging(Settings(log_level="ERROR"))

            assert package_logger.level == logging.ERROR
            assert any(
                isinstance(h, logging.NullHandler) for h in package_logger.handlers
            )
        finally:
            setup_logging(Settings())

    @patch("fs_tools.core.observability.logging.basicConfig")
    def test_root_logger_left_alone(self, mock_basic_config):
        """Test that setup never installs handlers on the root logger."""
        root_handlers = list(logging.getLogger().handlers)

        setup_logging(Settings())

        mock_basic_config.assert_not_called()
        assert logging.getLogger().handlers == root_handlers

    def test_repeated_setup_adds_one_handler(self):
        """Test that calling setup twice does not stack handlers."""
        setup_logging(Settings())
        setup_logging(Settings())

        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert sum(isinstance(h, logging.NullHandler) for h in handlers) == 1
