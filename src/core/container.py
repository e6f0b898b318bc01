"""Composition root.

Centralizes adapter selection so application code depends only on
protocols.

Usage:
    from src.core.container import get_logger, get_validation_service

    service = get_validation_service()
    result = service.validate("handle", "alice_01")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.application.services.validation_service import ValidationService
    from src.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger with app name, version and environment bound.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    adapter = ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.effective_log_level,
    )
    return adapter.bind(
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )


@lru_cache
def get_validation_service() -> "ValidationService":
    """Return the validation service wired with the application logger."""
    from src.application.services.validation_service import ValidationService

    return ValidationService(logger=get_logger())
