"""Reusable validation building blocks.

Small checks shared by the domain validators. All helpers return Result
types for consistent error handling, and every Failure names the field
and the violated rule.

Usage:
    from src.core.validation import validate_is_str, validate_min_length
    from src.core.result import Success, Failure

    result = validate_min_length("ab", 3, "handle")
    match result:
        case Success(value=value):
            pass
        case Failure(error=error):
            print(error.reason)  # ValidationReason.TOO_SHORT
"""

from typing import Any

from src.core.enums import ErrorCode, ValidationReason
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success


def validate_is_str(value: Any, field_name: str) -> Result[str, ValidationError]:
    """Validate that a value is a string.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if it is a str, Failure with ValidationError otherwise.
    """
    if not isinstance(value, str):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message=f"{field_name} must be a string, got {type(value).__name__}",
                field=field_name,
                reason=ValidationReason.WRONG_TYPE,
            )
        )
    return Success(value=value)


def validate_min_length(
    value: str, min_length: int, field_name: str
) -> Result[str, ValidationError]:
    """Validate minimum string length.

    Args:
        value: String to validate.
        min_length: Minimum required length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if len(value) < min_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message=f"{field_name} must be at least {min_length} characters",
                field=field_name,
                reason=ValidationReason.TOO_SHORT,
            )
        )
    return Success(value=value)


def validate_max_length(
    value: str, max_length: int, field_name: str
) -> Result[str, ValidationError]:
    """Validate maximum string length.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if len(value) > max_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message=f"{field_name} must be at most {max_length} characters",
                field=field_name,
                reason=ValidationReason.TOO_LONG,
            )
        )
    return Success(value=value)


def validate_int_in_range(
    value: Any,
    low: int,
    high: int,
    field_name: str,
    reason: ValidationReason,
) -> Result[int, ValidationError]:
    """Validate that an integer lies within [low, high].

    Booleans are rejected even though bool subclasses int.

    Args:
        value: Value to validate.
        low: Inclusive lower bound.
        high: Inclusive upper bound.
        field_name: Name of the component being validated.
        reason: Reason reported when the value is out of bounds.

    Returns:
        Success with value if valid. Failure with INVALID_FORMAT for a
        non-integer, INVALID_RANGE for an out-of-bounds integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message=f"{field_name} must be an integer, got {type(value).__name__}",
                field=field_name,
                reason=ValidationReason.WRONG_TYPE,
            )
        )
    if not low <= value <= high:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_RANGE,
                message=f"{field_name} must be between {low} and {high}, got {value}",
                field=field_name,
                reason=reason,
            )
        )
    return Success(value=value)
