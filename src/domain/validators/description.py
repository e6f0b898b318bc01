"""Free-text description validation."""

import unicodedata
from typing import Any

from src.core.constants import (
    BIDI_OVERRIDE_CHARACTERS,
    DESCRIPTION_ALLOWED_CONTROL_CHARACTERS,
    DESCRIPTION_MAX_LENGTH,
)
from src.core.enums import ErrorCode, ValidationReason
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import validate_is_str, validate_max_length

FIELD = "description"


def validate_description(text: Any) -> Result[str, ValidationError]:
    """Validate a description.

    Empty descriptions are accepted. Newlines and tabs are allowed; other
    control characters and bidirectional override characters are not.

    Args:
        text: Candidate description.

    Returns:
        Success with the text unchanged, or Failure with an INVALID_FORMAT
        ValidationError (TOO_LONG, CONTROL_CHARACTER or DISALLOWED_CONTENT).
    """
    result = validate_is_str(text, FIELD)
    if isinstance(result, Failure):
        return result
    result = validate_max_length(text, DESCRIPTION_MAX_LENGTH, FIELD)
    if isinstance(result, Failure):
        return result

    for position, char in enumerate(text):
        if (
            unicodedata.category(char) == "Cc"
            and char not in DESCRIPTION_ALLOWED_CONTROL_CHARACTERS
        ):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_FORMAT,
                    message=(
                        f"description contains control character "
                        f"U+{ord(char):04X} at position {position}"
                    ),
                    field=FIELD,
                    reason=ValidationReason.CONTROL_CHARACTER,
                )
            )
        if char in BIDI_OVERRIDE_CHARACTERS:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_FORMAT,
                    message=(
                        f"description contains bidirectional override "
                        f"U+{ord(char):04X} at position {position}"
                    ),
                    field=FIELD,
                    reason=ValidationReason.DISALLOWED_CONTENT,
                )
            )

    return Success(value=text)
