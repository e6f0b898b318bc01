"""Unit tests for the composition root."""

import os
from unittest.mock import patch

import pytest

from src.application.services.validation_service import ValidationService
from src.core.container import get_logger, get_validation_service

ADAPTER = "src.infrastructure.logging.console_adapter.ConsoleAdapter"


@pytest.mark.unit
class TestGetLogger:
    """Test adapter selection."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            ("development", False),
            ("testing", True),
            ("ci", True),
            ("production", True),
        ],
    )
    def test_renderer_follows_environment(self, clear_caches, environment, use_json):
        """Test JSON output everywhere except development."""
        with patch.dict(os.environ, {"ENVIRONMENT": environment}, clear=True):
            with patch(ADAPTER) as adapter_cls:
                get_logger()

        adapter_cls.assert_called_once_with(use_json=use_json, level="INFO")

    def test_binds_application_context(self, clear_caches):
        """Test app name, version and environment are bound."""
        env = {"ENVIRONMENT": "testing", "APP_VERSION": "9.9.9"}
        with patch.dict(os.environ, env, clear=True):
            with patch(ADAPTER) as adapter_cls:
                logger = get_logger()

        adapter_cls.return_value.bind.assert_called_once_with(
            app="Reputator Validation", version="9.9.9", environment="testing"
        )
        assert logger is adapter_cls.return_value.bind.return_value

    def test_debug_sets_debug_level(self, clear_caches):
        """Test DEBUG=true configures the adapter at DEBUG."""
        with patch.dict(os.environ, {"DEBUG": "1"}, clear=True):
            with patch(ADAPTER) as adapter_cls:
                get_logger()

        assert adapter_cls.call_args.kwargs["level"] == "DEBUG"


@pytest.mark.unit
class TestGetValidationService:
    """Test service wiring."""

    def test_returns_singleton_service(self, clear_caches):
        """Test the service is built once with the application logger."""
        with patch.dict(os.environ, {"ENVIRONMENT": "testing"}, clear=True):
            with patch(ADAPTER):
                service = get_validation_service()

                assert isinstance(service, ValidationService)
                assert get_validation_service() is service
