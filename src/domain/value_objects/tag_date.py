"""TagDate value object.

A tag date is the calendar period a tag is filed under: a year and month,
optionally narrowed to a single day.

Construction does not validate. Tag dates usually arrive from untrusted
input, so they are checked with `validate_tag_date`, which returns a Result
instead of raising.

Usage:
    from src.domain.value_objects import TagDate

    period = TagDate(year=2024, month=2)
    day = TagDate(year=2024, month=2, day=29)
    str(day)  # '2024-02-29'
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class TagDate:
    """Calendar period used as a categorization label.

    Attributes:
        year: Four-digit year.
        month: Month of year (1-12).
        day: Optional day of month.
    """

    year: int
    month: int
    day: int | None = None

    @property
    def is_monthly(self) -> bool:
        """True when the tag date covers a whole month."""
        return self.day is None

    def __str__(self) -> str:
        """Render as YYYY-MM or YYYY-MM-DD."""
        if self.day is None:
            return f"{self.year:04d}-{self.month:02d}"
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
