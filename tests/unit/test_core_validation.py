"""Unit tests for core validation helpers.

Tests cover:
- validate_is_str: str vs other types
- validate_min_length / validate_max_length: boundary cases
- validate_int_in_range: bounds, non-int and bool rejection
- Result type returns (Success/Failure) with code, field and reason
"""

import pytest

from src.core.enums import ErrorCode, ValidationReason
from src.core.result import Failure, Success
from src.core.validation import (
    validate_int_in_range,
    validate_is_str,
    validate_max_length,
    validate_min_length,
)


@pytest.mark.unit
class TestValidateIsStr:
    """Test validate_is_str function."""

    def test_passes_with_string(self):
        """Test validation passes with a string (including empty)."""
        assert validate_is_str("", "field") == Success(value="")

    @pytest.mark.parametrize("value", [None, 42, b"bytes", ["a"]])
    def test_fails_with_non_string(self, value):
        """Test validation fails with non-string values."""
        result = validate_is_str(value, "field")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_FORMAT
        assert result.error.reason == ValidationReason.WRONG_TYPE
        assert result.error.field == "field"


@pytest.mark.unit
class TestValidateMinLength:
    """Test validate_min_length function."""

    def test_passes_exact_length(self):
        """Test validation passes with exact minimum length."""
        result = validate_min_length("abc", 3, "handle")

        assert isinstance(result, Success)
        assert result.value == "abc"

    def test_fails_shorter(self):
        """Test validation fails with shorter than minimum."""
        result = validate_min_length("ab", 3, "handle")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_FORMAT
        assert result.error.reason == ValidationReason.TOO_SHORT
        assert "handle must be at least 3 characters" in result.error.message


@pytest.mark.unit
class TestValidateMaxLength:
    """Test validate_max_length function."""

    def test_passes_exact_length(self):
        """Test validation passes with exact maximum length."""
        assert isinstance(validate_max_length("hello", 5, "name"), Success)

    def test_passes_empty_string(self):
        """Test validation passes with empty string (zero length)."""
        assert isinstance(validate_max_length("", 10, "name"), Success)

    def test_fails_longer(self):
        """Test validation fails with longer than maximum."""
        result = validate_max_length("hello world", 5, "name")

        assert isinstance(result, Failure)
        assert result.error.reason == ValidationReason.TOO_LONG
        assert "name must be at most 5 characters" in result.error.message


@pytest.mark.unit
class TestValidateIntInRange:
    """Test validate_int_in_range function."""

    def test_passes_on_bounds(self):
        """Test both inclusive bounds are accepted."""
        reason = ValidationReason.MONTH_OUT_OF_RANGE
        assert validate_int_in_range(1, 1, 12, "month", reason) == Success(value=1)
        assert validate_int_in_range(12, 1, 12, "month", reason) == Success(value=12)

    @pytest.mark.parametrize("value", [0, 13, -1])
    def test_fails_outside_bounds(self, value):
        """Test out-of-bounds values fail with INVALID_RANGE and given reason."""
        result = validate_int_in_range(
            value, 1, 12, "month", ValidationReason.MONTH_OUT_OF_RANGE
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_RANGE
        assert result.error.reason == ValidationReason.MONTH_OUT_OF_RANGE
        assert result.error.field == "month"

    @pytest.mark.parametrize("value", [True, 1.0, "1", None])
    def test_fails_with_non_int(self, value):
        """Test bools, floats and strings fail with INVALID_FORMAT."""
        result = validate_int_in_range(
            value, 0, 12, "month", ValidationReason.MONTH_OUT_OF_RANGE
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_FORMAT
        assert result.error.reason == ValidationReason.WRONG_TYPE
