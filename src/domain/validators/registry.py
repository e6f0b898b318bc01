"""Validation Rules Registry.

Single source of truth for all validation rules with self-enforcing
compliance tests (tests/unit/test_validation_registry_compliance.py).

Every rule is registered with its validator, the Pydantic Field constraints
that mirror it, a description, and examples that must validate.

Pattern: Registry Pattern with metadata catalog and helper functions.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.core.constants import (
    DESCRIPTION_MAX_LENGTH,
    DISPLAY_NAME_MAX_LENGTH,
    DISPLAY_NAME_MIN_LENGTH,
    HANDLE_MAX_LENGTH,
    HANDLE_MIN_LENGTH,
    ULID_TIMESTAMP_LENGTH,
)
from src.core.errors import ValidationError
from src.core.result import Result
from src.domain.validators.description import validate_description
from src.domain.validators.display_name import validate_display_name
from src.domain.validators.handle import validate_handle
from src.domain.validators.tag_date import parse_tag_date
from src.domain.validators.ulid_timestamp import validate_timestamp_component


class ValidationCategory(str, Enum):
    """Categories for validation rules.

    Used to group validators by their domain purpose.
    """

    IDENTITY = "identity"  # Handles, display names
    CONTENT = "content"  # Free text
    TEMPORAL = "temporal"  # Tag dates, identifier timestamps


@dataclass(frozen=True, kw_only=True)
class ValidationRuleMetadata:
    """Metadata for a single validation rule.

    Attributes:
        rule_name: Unique identifier for the rule (e.g., 'handle').
        validator_function: Pure callable returning Result[value, ValidationError].
        field_constraints: Pydantic Field constraints (min_length, max_length, pattern).
        description: Human-readable description of validation requirements.
        examples: List of valid example values.
        category: Category for grouping.

    Example:
        >>> metadata = ValidationRuleMetadata(
        ...     rule_name="handle",
        ...     validator_function=validate_handle,
        ...     field_constraints={"min_length": 3, "max_length": 30},
        ...     description="Username handle",
        ...     examples=["alice_01"],
        ...     category=ValidationCategory.IDENTITY,
        ... )
    """

    rule_name: str
    validator_function: Callable[[Any], Result[Any, ValidationError]]
    field_constraints: dict[str, int | str]
    description: str
    examples: list[str]
    category: ValidationCategory


# =============================================================================
# Validation Rules Registry
# =============================================================================

VALIDATION_RULES_REGISTRY: dict[str, ValidationRuleMetadata] = {
    "handle": ValidationRuleMetadata(
        rule_name="handle",
        validator_function=validate_handle,
        field_constraints={
            "min_length": HANDLE_MIN_LENGTH,
            "max_length": HANDLE_MAX_LENGTH,
            "pattern": r"^[A-Za-z0-9](?:[A-Za-z0-9_-]*[A-Za-z0-9])?$",
        },
        description=(
            "Handle: 3-30 ASCII letters, digits, '_' or '-', starting and "
            "ending with a letter or digit, not a reserved word"
        ),
        examples=["alice_01", "bob-smith", "Zed99"],
        category=ValidationCategory.IDENTITY,
    ),
    "display_name": ValidationRuleMetadata(
        rule_name="display_name",
        validator_function=validate_display_name,
        field_constraints={
            "min_length": DISPLAY_NAME_MIN_LENGTH,
            "max_length": DISPLAY_NAME_MAX_LENGTH,
        },
        description="Display name: 1-50 printable characters, not blank",
        examples=["Alice Liddell", "Zoë 🚀", "李小龙"],
        category=ValidationCategory.IDENTITY,
    ),
    "description": ValidationRuleMetadata(
        rule_name="description",
        validator_function=validate_description,
        field_constraints={
            "max_length": DESCRIPTION_MAX_LENGTH,
        },
        description=(
            "Description: up to 1024 characters, newlines and tabs allowed, "
            "no other control characters or bidi overrides"
        ),
        examples=["Reviews Rust crates.\nMostly async runtimes.", ""],
        category=ValidationCategory.CONTENT,
    ),
    "tag_date": ValidationRuleMetadata(
        rule_name="tag_date",
        validator_function=parse_tag_date,
        field_constraints={
            "pattern": r"^\d{4}-\d{2}(?:-\d{2})?$",
        },
        description="Tag date: YYYY-MM or YYYY-MM-DD within calendrical bounds",
        examples=["2024-02", "2024-02-29", "1999-12-31"],
        category=ValidationCategory.TEMPORAL,
    ),
    "timestamp_component": ValidationRuleMetadata(
        rule_name="timestamp_component",
        validator_function=validate_timestamp_component,
        field_constraints={
            "min_length": ULID_TIMESTAMP_LENGTH,
            "max_length": ULID_TIMESTAMP_LENGTH,
            "pattern": r"^[0-7][0-9A-HJKMNP-TV-Za-hjkmnp-tv-z]{9}$",
        },
        description=(
            "ULID timestamp segment: 10 Crockford base32 characters decoding "
            "to a time between 2024-01-01 and now plus 5 minutes"
        ),
        examples=["01HK153X00", "01HNZX8J3A"],
        category=ValidationCategory.TEMPORAL,
    ),
}


# =============================================================================
# Helper Functions
# =============================================================================


def get_validation_rule(rule_name: str) -> ValidationRuleMetadata | None:
    """Get validation rule metadata by name.

    Args:
        rule_name: Name of the validation rule (e.g., 'handle', 'tag_date').

    Returns:
        ValidationRuleMetadata if found, None otherwise.
    """
    return VALIDATION_RULES_REGISTRY.get(rule_name)


def get_all_validation_rules() -> list[ValidationRuleMetadata]:
    """Get all validation rules in the registry."""
    return list(VALIDATION_RULES_REGISTRY.values())


def get_rules_by_category(category: ValidationCategory) -> list[ValidationRuleMetadata]:
    """Get all validation rules in a specific category.

    Args:
        category: Category to filter by.

    Returns:
        List of ValidationRuleMetadata objects in the category.
    """
    return [
        rule for rule in VALIDATION_RULES_REGISTRY.values() if rule.category == category
    ]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dictionary with:
        - total_rules: Total number of rules
        - by_category: Count of rules per category
    """
    rules = list(VALIDATION_RULES_REGISTRY.values())
    category_counts: dict[str, int] = {}

    for rule in rules:
        category_key = rule.category.value
        category_counts[category_key] = category_counts.get(category_key, 0) + 1

    return {
        "total_rules": len(rules),
        "by_category": category_counts,
    }
