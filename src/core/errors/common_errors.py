"""Validation error returned by every validator.

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode, ValidationReason
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_FORMAT,
        message="Handle must be at least 3 characters",
        field="handle",
        reason=ValidationReason.TOO_SHORT,
    ))
"""

from dataclasses import dataclass

from src.core.enums import ValidationReason
from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum (INVALID_FORMAT, INVALID_RANGE, ...).
        message: Human-readable message.
        field: Input or component that failed (e.g. 'handle', 'month').
        reason: Specific rule that was violated.
        details: Additional context.
    """

    field: str | None = None
    reason: ValidationReason | None = None
