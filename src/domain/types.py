"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere. Field constraints come from the
validation registry so JSON schema and runtime checks never drift, and the
AfterValidator runs the full Result-returning validator.

Usage:
    from pydantic import BaseModel
    from src.domain.types import Description, DisplayName, Handle

    class ProfileUpdate(BaseModel):
        handle: Handle
        display_name: DisplayName
        description: Description = ""
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    VALIDATION_RULES_REGISTRY,
    check_description,
    check_display_name,
    check_handle,
    check_timestamp_component,
)

_HANDLE = VALIDATION_RULES_REGISTRY["handle"]
_DISPLAY_NAME = VALIDATION_RULES_REGISTRY["display_name"]
_DESCRIPTION = VALIDATION_RULES_REGISTRY["description"]
_TIMESTAMP = VALIDATION_RULES_REGISTRY["timestamp_component"]

# ============================================================================
# Identity Types
# ============================================================================

Handle = Annotated[
    str,
    Field(
        min_length=_HANDLE.field_constraints["min_length"],
        max_length=_HANDLE.field_constraints["max_length"],
        description=_HANDLE.description,
        examples=_HANDLE.examples,
    ),
    AfterValidator(check_handle),
]
"""Username handle.

Validation:
- 3-30 characters: ASCII letters, digits, '_' and '-'
- Starts and ends with a letter or digit
- Not a reserved word (admin, root, ...)

Examples:
    >>> from pydantic import BaseModel
    >>> class Signup(BaseModel):
    ...     handle: Handle
    >>> Signup(handle="alice_01").handle
    'alice_01'
"""

DisplayName = Annotated[
    str,
    Field(
        min_length=_DISPLAY_NAME.field_constraints["min_length"],
        max_length=_DISPLAY_NAME.field_constraints["max_length"],
        description=_DISPLAY_NAME.description,
        examples=_DISPLAY_NAME.examples,
    ),
    AfterValidator(check_display_name),
]
"""Human-facing display name (any printable Unicode, not blank)."""

# ============================================================================
# Content Types
# ============================================================================

Description = Annotated[
    str,
    Field(
        max_length=_DESCRIPTION.field_constraints["max_length"],
        description=_DESCRIPTION.description,
        examples=_DESCRIPTION.examples,
    ),
    AfterValidator(check_description),
]
"""Free-text description; newlines and tabs allowed."""

# ============================================================================
# Temporal Types
# ============================================================================

TimestampComponent = Annotated[
    str,
    Field(
        min_length=_TIMESTAMP.field_constraints["min_length"],
        max_length=_TIMESTAMP.field_constraints["max_length"],
        description=_TIMESTAMP.description,
        examples=_TIMESTAMP.examples,
    ),
    AfterValidator(check_timestamp_component),
]
"""Leading 10-character timestamp segment of a ULID.

Validation:
- Crockford base32, case-insensitive, fits in 48 bits
- Decodes to a time on or after 2024-01-01 and at most 5 minutes ahead
"""
