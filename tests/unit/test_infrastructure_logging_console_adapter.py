"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error and critical
- Context binding
- Renderer and level selection

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.fixture
def mock_structlog():
    with patch(
        "src.infrastructure.logging.console_adapter.structlog"
    ) as mock_structlog:
        mock_structlog.get_logger.return_value = MagicMock()
        yield mock_structlog


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_info_logs_message_with_context(self, mock_structlog):
        """Test info() logs message with structured context."""
        mock_logger = mock_structlog.get_logger.return_value

        adapter = ConsoleAdapter()
        adapter.info("Login rejected", outcome="invalid_code", email="b@x.com")

        mock_logger.info.assert_called_once_with(
            "Login rejected",
            outcome="invalid_code",
            email="b@x.com",
        )

    def test_debug_and_warning_forwarded(self, mock_structlog):
        mock_logger = mock_structlog.get_logger.return_value

        adapter = ConsoleAdapter()
        adapter.debug("debug message", step=1)
        adapter.warning("warning message", step=2)

        mock_logger.debug.assert_called_once_with("debug message", step=1)
        mock_logger.warning.assert_called_once_with("warning message", step=2)

    def test_error_with_exception_adds_error_fields(self, mock_structlog):
        """Test error() flattens the exception into error_type and error_message."""
        mock_logger = mock_structlog.get_logger.return_value

        adapter = ConsoleAdapter()
        adapter.error("Login failed unexpectedly", error=ConnectionError("db down"))

        mock_logger.error.assert_called_once_with(
            "Login failed unexpectedly",
            error_type="ConnectionError",
            error_message="db down",
        )

    def test_error_without_exception(self, mock_structlog):
        mock_logger = mock_structlog.get_logger.return_value

        adapter = ConsoleAdapter()
        adapter.error("Something happened", request_id="r1")

        mock_logger.error.assert_called_once_with(
            "Something happened", request_id="r1"
        )

    def test_critical_with_exception(self, mock_structlog):
        mock_logger = mock_structlog.get_logger.return_value

        adapter = ConsoleAdapter()
        adapter.critical("Store unavailable", error=RuntimeError("boom"))

        mock_logger.critical.assert_called_once_with(
            "Store unavailable",
            error_type="RuntimeError",
            error_message="boom",
        )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self, mock_structlog):
        """Test bind() wraps the bound structlog logger."""
        mock_logger = mock_structlog.get_logger.return_value
        bound_logger = MagicMock()
        mock_logger.bind.return_value = bound_logger

        adapter = ConsoleAdapter()
        bound = adapter.bind(handler="login_user")
        bound.info("Login succeeded")

        assert bound is not adapter
        mock_logger.bind.assert_called_once_with(handler="login_user")
        bound_logger.info.assert_called_once_with("Login succeeded")

    def test_with_context_is_bind(self, mock_structlog):
        mock_logger = mock_structlog.get_logger.return_value

        ConsoleAdapter().with_context(trace_id="t1")

        mock_logger.bind.assert_called_once_with(trace_id="t1")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_selected(self, mock_structlog):
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer_selected(self, mock_structlog):
        ConsoleAdapter(use_json=False)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_level_passed_to_filtering_logger(self, mock_structlog):
        """Test the level name is resolved to its numeric value."""
        ConsoleAdapter(level="warning")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(30)

    def test_unknown_level_rejected(self, mock_structlog):
        with pytest.raises(ValueError, match="Unknown log level"):
            ConsoleAdapter(level="LOUD")
