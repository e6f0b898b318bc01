"""Validators package exports.

Exports:
    - Result-returning validators (one module per input kind)
    - Pydantic after-validator adapters (from functions.py)
    - Registry components (from registry.py)
"""

from src.domain.validators.description import validate_description
from src.domain.validators.display_name import validate_display_name
from src.domain.validators.functions import (
    check_description,
    check_display_name,
    check_handle,
    check_timestamp_component,
    unwrap_or_raise,
)
from src.domain.validators.handle import validate_handle
from src.domain.validators.registry import (
    VALIDATION_RULES_REGISTRY,
    ValidationCategory,
    ValidationRuleMetadata,
    get_all_validation_rules,
    get_rules_by_category,
    get_statistics,
    get_validation_rule,
)
from src.domain.validators.tag_date import parse_tag_date, validate_tag_date
from src.domain.validators.ulid_timestamp import (
    decode_timestamp_component,
    extract_timestamp_component,
    validate_timestamp_component,
    validate_ulid_timestamp,
)

__all__ = [
    # Validators
    "validate_handle",
    "validate_display_name",
    "validate_description",
    "validate_tag_date",
    "parse_tag_date",
    "decode_timestamp_component",
    "validate_timestamp_component",
    "extract_timestamp_component",
    "validate_ulid_timestamp",
    # Pydantic adapters
    "check_handle",
    "check_display_name",
    "check_description",
    "check_timestamp_component",
    "unwrap_or_raise",
    # Registry
    "VALIDATION_RULES_REGISTRY",
    "ValidationRuleMetadata",
    "ValidationCategory",
    "get_validation_rule",
    "get_all_validation_rules",
    "get_rules_by_category",
    "get_statistics",
]
