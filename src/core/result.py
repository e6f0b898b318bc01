"""Result types for railway-oriented programming.

Validators never raise. They return a Result so callers branch on the
outcome explicitly and rejection reasons travel as data.

Usage:
    from src.domain.validators import validate_handle

    result = validate_handle("alice_01")
    match result:
        case Success(value=handle):
            print(f"Accepted: {handle}")
        case Failure(error=error):
            print(f"Rejected: {error.reason} ({error.message})")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents an accepted input.

    Attributes:
        value: The validated (or decoded) value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a rejected input.

    Attributes:
        error: The error describing the violated rule.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
