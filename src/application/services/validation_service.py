"""Validation service.

Runs a registered validation rule by name and records the outcome in the
structured log. Validators themselves stay pure; this is the one place that
has a side effect (logging), so callers that want an audit trail of
rejected input go through here.

Architecture:
    - Application service (domain validators + LoggerProtocol port)
    - Returns the validator's Result unchanged
    - Never logs the raw value, only rule, code, reason and field

Usage:
    service = ValidationService(logger=get_logger())

    result = service.validate("handle", payload["handle"])
    if isinstance(result, Failure):
        return error_response(result.error)
"""

from typing import Any

from src.core.enums import ErrorCode, ValidationReason
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.validators.registry import get_validation_rule


class ValidationService:
    """Dispatches to registered validation rules with structured logging.

    Dependencies (injected via constructor):
        - LoggerProtocol: For validation outcome events

    Example:
        >>> service = ValidationService(logger=logger)
        >>> result = service.validate("tag_date", "2024-02-29")
        >>> if isinstance(result, Success):
        ...     tag_date = result.value
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize validation service.

        Args:
            logger: Structured logger.
        """
        self._logger = logger

    def validate(self, rule_name: str, value: Any) -> Result[Any, ValidationError]:
        """Validate a value with the named rule.

        Args:
            rule_name: Registry key (e.g. 'handle', 'tag_date').
            value: Input to validate.

        Returns:
            Success(value): Result of the rule's validator.
            Failure(ValidationError): The validator's rejection, or
                VALIDATION_FAILED / UNKNOWN_RULE when no rule has that name.
        """
        rule = get_validation_rule(rule_name)
        if rule is None:
            self._logger.warning("Unknown validation rule", rule=rule_name)
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=f"Unknown validation rule: {rule_name}",
                    field=rule_name,
                    reason=ValidationReason.UNKNOWN_RULE,
                )
            )

        result = rule.validator_function(value)

        match result:
            case Success():
                self._logger.debug(
                    "Validation passed",
                    rule=rule_name,
                    category=rule.category.value,
                )
            case Failure(error=error):
                self._logger.info(
                    "Validation rejected",
                    rule=rule_name,
                    category=rule.category.value,
                    code=error.code.value,
                    reason=error.reason.value if error.reason else None,
                    field=error.field,
                )

        return result
