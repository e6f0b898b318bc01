"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Error classes returned (never raised) by validators
- Generic validation helpers and constants

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode, ValidationReason
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
    "ValidationReason",
]
