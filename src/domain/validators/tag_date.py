"""Tag date validation.

Checks each component of a TagDate against its calendrical bounds, in the
order year, month, day, and reports the first component that fails. The day
bound depends on both month and year (leap years), so 2024-02-29 is valid
and 2023-02-29 is not.
"""

import calendar
import re
from typing import Any

from src.core.constants import TAG_DATE_MAX_YEAR, TAG_DATE_MIN_YEAR
from src.core.enums import ErrorCode, ValidationReason
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import validate_int_in_range
from src.domain.value_objects.tag_date import TagDate

_TAG_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})(?:-(\d{2}))?", re.ASCII)


def validate_tag_date(tag_date: Any) -> Result[TagDate, ValidationError]:
    """Validate a TagDate.

    Args:
        tag_date: Candidate tag date.

    Returns:
        Success with the TagDate, or Failure with a ValidationError:
        INVALID_FORMAT when the value or a component has the wrong type,
        INVALID_RANGE (field = 'year' | 'month' | 'day') when a component is
        outside its bounds.

    Example:
        >>> validate_tag_date(TagDate(year=2024, month=13)).error.field
        'month'
    """
    if not isinstance(tag_date, TagDate):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message=f"tag_date must be a TagDate, got {type(tag_date).__name__}",
                field="tag_date",
                reason=ValidationReason.WRONG_TYPE,
            )
        )

    year = validate_int_in_range(
        tag_date.year,
        TAG_DATE_MIN_YEAR,
        TAG_DATE_MAX_YEAR,
        "year",
        ValidationReason.YEAR_OUT_OF_RANGE,
    )
    if isinstance(year, Failure):
        return year

    month = validate_int_in_range(
        tag_date.month, 1, 12, "month", ValidationReason.MONTH_OUT_OF_RANGE
    )
    if isinstance(month, Failure):
        return month

    if tag_date.day is not None:
        _, days_in_month = calendar.monthrange(tag_date.year, tag_date.month)
        day = validate_int_in_range(
            tag_date.day, 1, days_in_month, "day", ValidationReason.DAY_OUT_OF_RANGE
        )
        if isinstance(day, Failure):
            return day

    return Success(value=tag_date)


def parse_tag_date(text: Any) -> Result[TagDate, ValidationError]:
    """Parse 'YYYY-MM' or 'YYYY-MM-DD' into a validated TagDate.

    Args:
        text: String form of the tag date.

    Returns:
        Success with the TagDate, Failure with INVALID_FORMAT when the text
        does not have either shape, or the failure from validate_tag_date.
    """
    match = _TAG_DATE_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message="tag_date must be formatted as YYYY-MM or YYYY-MM-DD",
                field="tag_date",
                reason=ValidationReason.MALFORMED,
            )
        )

    year, month, day = match.groups()
    return validate_tag_date(
        TagDate(
            year=int(year),
            month=int(month),
            day=int(day) if day is not None else None,
        )
    )
