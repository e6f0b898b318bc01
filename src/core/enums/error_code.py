"""Validation error codes (machine-readable).

Codes group rejections into the broad taxonomy callers branch on. The
specific rule that failed is carried separately by ValidationReason.

Categories:
- INVALID_FORMAT: character set, length and content violations
- INVALID_RANGE: calendrical bounds of a tag date
- OUT_OF_RANGE: decoded timestamp outside the accepted window
- DECODE_ERROR: malformed encoded timestamp segment
- VALIDATION_FAILED: generic fallback (e.g. unknown rule)
"""

from enum import Enum


class ErrorCode(Enum):
    """Validation error codes (machine-readable)."""

    INVALID_FORMAT = "invalid_format"
    INVALID_RANGE = "invalid_range"
    OUT_OF_RANGE = "out_of_range"
    DECODE_ERROR = "decode_error"
    VALIDATION_FAILED = "validation_failed"
