"""Pytest configuration.

Validators are pure functions, so most tests need no fixtures. The fixtures
here cover the two pieces of process state: the cached settings/container
singletons and the wall clock.
"""

import pytest

from src.core.config import get_settings
from src.core.container import get_logger, get_validation_service

# 2025-06-15T12:00:00Z, well after the ULID timestamp epoch
FIXED_NOW_MS = 1_749_988_800_000


@pytest.fixture
def now_ms() -> int:
    """Reference 'now' for timestamp validation tests."""
    return FIXED_NOW_MS


@pytest.fixture
def clear_caches():
    """Clear cached settings and container singletons around a test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_validation_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_validation_service.cache_clear()
