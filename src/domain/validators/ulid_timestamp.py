"""ULID timestamp component validation.

A ULID is 26 Crockford base32 characters. The first 10 encode a 48-bit
Unix timestamp in milliseconds, which makes ULIDs sortable by creation
time. Identifiers arriving from clients are checked here so a forged or
corrupted identifier cannot claim a creation time before the service
existed or far in the future.

Decoding and plausibility are separate steps:
- decode_timestamp_component: shape only (DECODE_ERROR)
- validate_timestamp_component: decode + time window (OUT_OF_RANGE)

Reference:
    - https://github.com/ulid/spec
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from src.core.constants import (
    CROCKFORD_BASE32_ALPHABET,
    TIMESTAMP_EPOCH_MS,
    TIMESTAMP_MAX_FUTURE_SKEW_MS,
    ULID_LENGTH,
    ULID_MAX_TIMESTAMP_MS,
    ULID_TIMESTAMP_LENGTH,
)
from src.core.enums import ErrorCode, ValidationReason
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

FIELD = "timestamp_component"

_DECODE_TABLE: dict[str, int] = {
    char: index for index, char in enumerate(CROCKFORD_BASE32_ALPHABET)
}


def _decode_error(
    message: str, reason: ValidationReason, field: str = FIELD
) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.DECODE_ERROR,
            message=message,
            field=field,
            reason=reason,
        )
    )


# 9999-12-31T23:59:59.999Z, the last instant datetime can represent
_LATEST_RENDERABLE_MS = 253_402_300_799_999

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _format_ms(ms: int) -> str:
    if ms > _LATEST_RENDERABLE_MS:
        return f"{ms} ms"
    return (_UNIX_EPOCH + timedelta(milliseconds=ms)).isoformat()


def decode_timestamp_component(segment: Any) -> Result[int, ValidationError]:
    """Decode a 10-character Crockford base32 timestamp segment.

    Decoding is case-insensitive. The letters I, L, O and U are not part of
    the alphabet and are rejected.

    Args:
        segment: Encoded timestamp segment.

    Returns:
        Success with Unix milliseconds, or Failure with a DECODE_ERROR
        ValidationError (WRONG_TYPE, INVALID_LENGTH, INVALID_CHARACTER or
        OVERFLOW).

    Example:
        >>> decode_timestamp_component("01HNZX8J3A").value
        1707246635114
    """
    if not isinstance(segment, str):
        return _decode_error(
            f"timestamp component must be a string, got {type(segment).__name__}",
            ValidationReason.WRONG_TYPE,
        )
    if len(segment) != ULID_TIMESTAMP_LENGTH:
        return _decode_error(
            f"timestamp component must be {ULID_TIMESTAMP_LENGTH} characters, "
            f"got {len(segment)}",
            ValidationReason.INVALID_LENGTH,
        )

    value = 0
    for position, char in enumerate(segment):
        digit = _DECODE_TABLE.get(char.upper())
        if digit is None:
            return _decode_error(
                f"timestamp component contains invalid character {char!r} "
                f"at position {position}",
                ValidationReason.INVALID_CHARACTER,
            )
        value = (value << 5) | digit

    # 10 base32 digits hold 50 bits, only 48 are valid
    if value > ULID_MAX_TIMESTAMP_MS:
        return _decode_error(
            "timestamp component exceeds 48 bits",
            ValidationReason.OVERFLOW,
        )

    return Success(value=value)


def validate_timestamp_component(
    segment: Any, *, now_ms: int | None = None
) -> Result[int, ValidationError]:
    """Validate that a timestamp segment decodes to a plausible time.

    Accepted window: [TIMESTAMP_EPOCH_MS, now_ms + TIMESTAMP_MAX_FUTURE_SKEW_MS].

    Args:
        segment: Encoded timestamp segment.
        now_ms: Reference "now" in Unix milliseconds. Defaults to the
            current UTC time; pass it explicitly for reproducible results.

    Returns:
        Success with Unix milliseconds. Failure with the decode error, or
        with OUT_OF_RANGE (BEFORE_EPOCH or TOO_FAR_IN_FUTURE).
    """
    decoded = decode_timestamp_component(segment)
    if isinstance(decoded, Failure):
        return decoded
    timestamp_ms = decoded.value

    if timestamp_ms < TIMESTAMP_EPOCH_MS:
        return Failure(
            error=ValidationError(
                code=ErrorCode.OUT_OF_RANGE,
                message=(
                    f"timestamp {_format_ms(timestamp_ms)} is before the epoch "
                    f"{_format_ms(TIMESTAMP_EPOCH_MS)}"
                ),
                field=FIELD,
                reason=ValidationReason.BEFORE_EPOCH,
            )
        )

    if now_ms is None:
        now_ms = int(datetime.now(UTC).timestamp() * 1000)
    latest_ms = now_ms + TIMESTAMP_MAX_FUTURE_SKEW_MS
    if timestamp_ms > latest_ms:
        return Failure(
            error=ValidationError(
                code=ErrorCode.OUT_OF_RANGE,
                message=(
                    f"timestamp {_format_ms(timestamp_ms)} is later than "
                    f"{_format_ms(latest_ms)}"
                ),
                field=FIELD,
                reason=ValidationReason.TOO_FAR_IN_FUTURE,
                details={"skew_ms": str(timestamp_ms - now_ms)},
            )
        )

    return Success(value=timestamp_ms)


def extract_timestamp_component(ulid: Any) -> Result[str, ValidationError]:
    """Return the 10-character timestamp segment of a 26-character ULID.

    Only the length is checked here; the characters are checked when the
    segment is decoded.

    Args:
        ulid: Full ULID string.

    Returns:
        Success with the leading segment, or Failure with DECODE_ERROR.
    """
    if not isinstance(ulid, str):
        return _decode_error(
            f"ulid must be a string, got {type(ulid).__name__}",
            ValidationReason.WRONG_TYPE,
            field="ulid",
        )
    if len(ulid) != ULID_LENGTH:
        return _decode_error(
            f"ulid must be {ULID_LENGTH} characters, got {len(ulid)}",
            ValidationReason.INVALID_LENGTH,
            field="ulid",
        )
    return Success(value=ulid[:ULID_TIMESTAMP_LENGTH])


def validate_ulid_timestamp(
    ulid: Any, *, now_ms: int | None = None
) -> Result[int, ValidationError]:
    """Extract and validate the timestamp of a full ULID.

    Args:
        ulid: Full ULID string.
        now_ms: Reference "now" in Unix milliseconds (see
            validate_timestamp_component).

    Returns:
        Success with Unix milliseconds, or the first Failure encountered.
    """
    segment = extract_timestamp_component(ulid)
    if isinstance(segment, Failure):
        return segment
    return validate_timestamp_component(segment.value, now_ms=now_ms)
