"""Pydantic after-validators (DRY principle).

The Result-returning validators are the single source of truth. Pydantic's
AfterValidator contract expects a function that returns the value or raises
ValueError, so these thin adapters unwrap a Success or raise with the
Failure's message.

Reference:
    - src/domain/types.py (Annotated types that use these adapters)
"""

from typing import TypeVar

from src.core.errors import ValidationError
from src.core.result import Failure, Result
from src.domain.validators.description import validate_description
from src.domain.validators.display_name import validate_display_name
from src.domain.validators.handle import validate_handle
from src.domain.validators.ulid_timestamp import validate_timestamp_component

T = TypeVar("T")


def unwrap_or_raise(result: Result[T, ValidationError]) -> T:
    """Return the Success value or raise ValueError with the Failure message.

    Args:
        result: Result from a validator.

    Returns:
        The validated value.

    Raises:
        ValueError: If the result is a Failure.
    """
    if isinstance(result, Failure):
        raise ValueError(result.error.message)
    return result.value


def check_handle(v: str) -> str:
    """Validate handle format.

    Args:
        v: Handle to validate.

    Returns:
        Handle unchanged (validation only).

    Raises:
        ValueError: If the handle breaks a handle rule.

    Example:
        >>> check_handle("alice_01")
        'alice_01'
        >>> check_handle("al")
        ValueError: handle must be at least 3 characters
    """
    return unwrap_or_raise(validate_handle(v))


def check_display_name(v: str) -> str:
    """Validate display name.

    Raises:
        ValueError: If the name is blank or contains control characters.
    """
    return unwrap_or_raise(validate_display_name(v))


def check_description(v: str) -> str:
    """Validate description content.

    Raises:
        ValueError: If the text contains disallowed control sequences.
    """
    return unwrap_or_raise(validate_description(v))


def check_timestamp_component(v: str) -> str:
    """Validate a ULID timestamp segment, returning the segment itself.

    Args:
        v: 10-character encoded timestamp.

    Returns:
        Segment unchanged (the decoded milliseconds are discarded).

    Raises:
        ValueError: If the segment does not decode or is implausible.
    """
    unwrap_or_raise(validate_timestamp_component(v))
    return v
