"""Handle (username) validation.

A handle is the short, URL-safe name a user is addressed by. Rules, checked
in this order so the first violated one is reported:

1. Must be a string
2. At least HANDLE_MIN_LENGTH characters
3. At most HANDLE_MAX_LENGTH characters
4. Only ASCII letters, digits, '_' and '-'
5. Starts and ends with a letter or digit
6. Not a reserved word (case-insensitive)
"""

from typing import Any

from src.core.constants import (
    HANDLE_ALLOWED_CHARACTERS,
    HANDLE_MAX_LENGTH,
    HANDLE_MIN_LENGTH,
    RESERVED_HANDLES,
)
from src.core.enums import ErrorCode, ValidationReason
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import (
    validate_is_str,
    validate_max_length,
    validate_min_length,
)

FIELD = "handle"


def _illegal(message: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_FORMAT,
            message=message,
            field=FIELD,
            reason=ValidationReason.ILLEGAL_CHARACTER,
        )
    )


def validate_handle(handle: Any) -> Result[str, ValidationError]:
    """Validate a handle against length, character-set and reserved-word rules.

    Args:
        handle: Candidate handle.

    Returns:
        Success with the handle unchanged, or Failure with an INVALID_FORMAT
        ValidationError whose reason names the violated rule.

    Example:
        >>> validate_handle("alice_01")
        Success(value='alice_01')
        >>> validate_handle("al").error.reason
        <ValidationReason.TOO_SHORT: 'too_short'>
    """
    for check in (
        lambda v: validate_is_str(v, FIELD),
        lambda v: validate_min_length(v, HANDLE_MIN_LENGTH, FIELD),
        lambda v: validate_max_length(v, HANDLE_MAX_LENGTH, FIELD),
    ):
        result = check(handle)
        if isinstance(result, Failure):
            return result

    for position, char in enumerate(handle):
        if char not in HANDLE_ALLOWED_CHARACTERS:
            return _illegal(
                f"handle contains illegal character {char!r} at position {position}"
            )

    if not (handle[0].isalnum() and handle[-1].isalnum()):
        return _illegal("handle must start and end with a letter or digit")

    if handle.lower() in RESERVED_HANDLES:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message=f"handle '{handle}' is reserved",
                field=FIELD,
                reason=ValidationReason.RESERVED_WORD,
            )
        )

    return Success(value=handle)
