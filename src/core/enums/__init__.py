"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from src.core.enums import ErrorCode, Environment, ValidationReason
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode
from src.core.enums.validation_reason import ValidationReason

__all__ = ["ErrorCode", "Environment", "ValidationReason"]
