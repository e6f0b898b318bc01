"""Unit tests for the description validator."""

import pytest

from src.core.constants import DESCRIPTION_MAX_LENGTH
from src.core.enums import ErrorCode, ValidationReason
from src.core.result import Failure, Success
from src.domain.validators import validate_description


@pytest.mark.unit
class TestValidateDescription:
    """Test validate_description function."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "Reviews Rust crates.",
            "Line one\nLine two\r\n\tindented",
            "d" * DESCRIPTION_MAX_LENGTH,
            "Émojis welcome 🎉",
        ],
    )
    def test_accepts_valid_descriptions(self, text):
        """Test valid descriptions are accepted unchanged."""
        assert validate_description(text) == Success(value=text)

    @pytest.mark.parametrize("extra", [1, 10, 5000])
    def test_rejects_over_max_length(self, extra):
        """Test any description longer than the maximum is rejected."""
        result = validate_description("d" * (DESCRIPTION_MAX_LENGTH + extra))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_FORMAT
        assert result.error.field == "description"
        assert result.error.reason == ValidationReason.TOO_LONG

    @pytest.mark.parametrize("char", ["\x00", "\x07", "\x1b", "\x7f", "\x85"])
    def test_rejects_control_characters(self, char):
        """Test control characters other than newline/CR/tab are rejected."""
        result = validate_description(f"before{char}after")

        assert isinstance(result, Failure)
        assert result.error.reason == ValidationReason.CONTROL_CHARACTER

    @pytest.mark.parametrize("char", ["\u202a", "\u202e", "\u2066", "\u2069"])
    def test_rejects_bidi_overrides(self, char):
        """Test bidirectional override characters are disallowed content."""
        result = validate_description(f"total {char}cost")

        assert isinstance(result, Failure)
        assert result.error.reason == ValidationReason.DISALLOWED_CONTENT
        assert f"U+{ord(char):04X}" in result.error.message

    def test_length_checked_before_content(self):
        """Test an over-long description reports TOO_LONG even with bad content."""
        result = validate_description("\x00" * (DESCRIPTION_MAX_LENGTH + 1))

        assert result.error.reason == ValidationReason.TOO_LONG

    def test_rejects_non_string(self):
        """Test non-string input is rejected rather than raising."""
        result = validate_description(42)

        assert isinstance(result, Failure)
        assert result.error.reason == ValidationReason.WRONG_TYPE
