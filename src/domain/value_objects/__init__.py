"""Domain value objects.

Immutable value objects checked by the domain validators.
"""

from src.domain.value_objects.tag_date import TagDate

__all__ = [
    "TagDate",
]
