"""Specific validation rules that can be violated.

Where ErrorCode says what kind of failure happened, ValidationReason names
the exact rule, so API layers can map it to a precise user-facing message.
"""

from enum import Enum


class ValidationReason(str, Enum):
    """The specific rule a rejected input violated."""

    # Shared
    WRONG_TYPE = "wrong_type"
    UNKNOWN_RULE = "unknown_rule"
    MALFORMED = "malformed"

    # Length and character set
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    ILLEGAL_CHARACTER = "illegal_character"
    RESERVED_WORD = "reserved_word"
    BLANK = "blank"
    CONTROL_CHARACTER = "control_character"
    DISALLOWED_CONTENT = "disallowed_content"

    # Tag dates
    YEAR_OUT_OF_RANGE = "year_out_of_range"
    MONTH_OUT_OF_RANGE = "month_out_of_range"
    DAY_OUT_OF_RANGE = "day_out_of_range"

    # Encoded timestamps
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTER = "invalid_character"
    OVERFLOW = "overflow"
    BEFORE_EPOCH = "before_epoch"
    TOO_FAR_IN_FUTURE = "too_far_in_future"
