"""Display name validation.

Display names are shown next to a handle and are far more permissive: any
printable Unicode is allowed, but invisible control and format characters
are not, and the name cannot be whitespace only.
"""

import unicodedata
from typing import Any

from src.core.constants import DISPLAY_NAME_MAX_LENGTH, DISPLAY_NAME_MIN_LENGTH
from src.core.enums import ErrorCode, ValidationReason
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import (
    validate_is_str,
    validate_max_length,
    validate_min_length,
)

FIELD = "display_name"

# Cc: control characters, Cf: format characters (zero-width, bidi marks)
_FORBIDDEN_CATEGORIES = frozenset({"Cc", "Cf"})


def validate_display_name(name: Any) -> Result[str, ValidationError]:
    """Validate a display name.

    Args:
        name: Candidate display name.

    Returns:
        Success with the name unchanged, or Failure with an INVALID_FORMAT
        ValidationError (TOO_SHORT, TOO_LONG, BLANK or CONTROL_CHARACTER).
    """
    for check in (
        lambda v: validate_is_str(v, FIELD),
        lambda v: validate_min_length(v, DISPLAY_NAME_MIN_LENGTH, FIELD),
        lambda v: validate_max_length(v, DISPLAY_NAME_MAX_LENGTH, FIELD),
    ):
        result = check(name)
        if isinstance(result, Failure):
            return result

    if not name.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message="display_name cannot be blank",
                field=FIELD,
                reason=ValidationReason.BLANK,
            )
        )

    for position, char in enumerate(name):
        if unicodedata.category(char) in _FORBIDDEN_CATEGORIES:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_FORMAT,
                    message=(
                        f"display_name contains control character "
                        f"U+{ord(char):04X} at position {position}"
                    ),
                    field=FIELD,
                    reason=ValidationReason.CONTROL_CHARACTER,
                )
            )

    return Success(value=name)
