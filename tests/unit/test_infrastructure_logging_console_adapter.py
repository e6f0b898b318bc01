"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Context binding
- Level selection and renderer selection

Architecture:
- Unit tests with mocked structlog
- NO real logging dependencies
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def mock_structlog():
    """Patch structlog inside the adapter module."""
    with patch(STRUCTLOG) as mocked:
        mocked.get_logger.return_value = MagicMock()
        yield mocked


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, mock_structlog, level):
        """Test simple levels forward message and context."""
        adapter = ConsoleAdapter()
        getattr(adapter, level)("Validation rejected", rule="handle", reason="too_short")

        getattr(mock_structlog.get_logger.return_value, level).assert_called_once_with(
            "Validation rejected", rule="handle", reason="too_short"
        )

    def test_error_includes_exception_details(self, mock_structlog):
        """Test error() adds error_type and error_message."""
        adapter = ConsoleAdapter()
        adapter.error("Failed", error=ValueError("boom"), rule="handle")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "Failed", rule="handle", error_type="ValueError", error_message="boom"
        )

    def test_critical_without_exception(self, mock_structlog):
        """Test critical() without error passes context through."""
        adapter = ConsoleAdapter()
        adapter.critical("Down", component="registry")

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "Down", component="registry"
        )


@pytest.mark.unit
class TestConsoleAdapterContextBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter_with_bound_context(self, mock_structlog):
        """Test bind() wraps the bound structlog logger."""
        base_logger = mock_structlog.get_logger.return_value
        bound_logger = MagicMock()
        base_logger.bind.return_value = bound_logger

        adapter = ConsoleAdapter()
        bound = adapter.bind(app="validation")
        bound.info("hello")

        assert bound is not adapter
        base_logger.bind.assert_called_once_with(app="validation")
        bound_logger.info.assert_called_once_with("hello")

    def test_with_context_is_bind_alias(self, mock_structlog):
        """Test with_context() delegates to bind()."""
        base_logger = mock_structlog.get_logger.return_value

        ConsoleAdapter().with_context(rule="handle")

        base_logger.bind.assert_called_once_with(rule="handle")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("bogus", logging.INFO),
        ],
    )
    def test_level_selects_filtering_logger(self, mock_structlog, level, expected):
        """Test the level name maps to the filtering bound logger level."""
        ConsoleAdapter(level=level)

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(expected)

    def test_json_renderer(self, mock_structlog):
        """Test use_json selects the JSON renderer."""
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert mock_structlog.processors.JSONRenderer.return_value in processors
        mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer(self, mock_structlog):
        """Test the default is the human-readable console renderer."""
        ConsoleAdapter()

        mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
