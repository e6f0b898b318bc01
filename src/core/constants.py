"""Centralized validation constants.

These are fixed rules of the data model, NOT environment-specific
configuration. Changing them changes which stored values are valid, so they
are deliberately kept out of `src/core/config.py`.

Categories:
- Handles: length bounds, character set, reserved words
- Display names and descriptions: length bounds, forbidden code points
- Tag dates: year bounds
- ULID timestamps: encoding alphabet, epoch and future skew

Example:
    >>> from src.core.constants import HANDLE_MIN_LENGTH, HANDLE_MAX_LENGTH
    >>> HANDLE_MIN_LENGTH <= len("alice") <= HANDLE_MAX_LENGTH
    True
"""

# =============================================================================
# Handles
# =============================================================================

HANDLE_MIN_LENGTH: int = 3
"""Minimum handle length in characters."""

HANDLE_MAX_LENGTH: int = 30
"""Maximum handle length in characters."""

HANDLE_ALLOWED_CHARACTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-"
)
"""ASCII letters, digits, underscore and hyphen."""

RESERVED_HANDLES: frozenset[str] = frozenset(
    {
        "admin",
        "administrator",
        "anonymous",
        "api",
        "help",
        "me",
        "mod",
        "moderator",
        "null",
        "reputator",
        "root",
        "settings",
        "staff",
        "support",
        "system",
        "undefined",
    }
)
"""Handles that cannot be claimed (compared case-insensitively)."""


# =============================================================================
# Display Names and Descriptions
# =============================================================================

DISPLAY_NAME_MIN_LENGTH: int = 1
"""Minimum display name length in characters."""

DISPLAY_NAME_MAX_LENGTH: int = 50
"""Maximum display name length in characters."""

DESCRIPTION_MAX_LENGTH: int = 1024
"""Maximum description length in characters (empty is allowed)."""

DESCRIPTION_ALLOWED_CONTROL_CHARACTERS: frozenset[str] = frozenset("\n\r\t")
"""Control characters that are still permitted in multi-line descriptions."""

BIDI_OVERRIDE_CHARACTERS: frozenset[str] = frozenset(
    "\u202a\u202b\u202c\u202d\u202e\u2066\u2067\u2068\u2069"
)
"""Bidirectional embedding/override/isolate code points (spoofing vectors)."""


# =============================================================================
# Tag Dates
# =============================================================================

TAG_DATE_MIN_YEAR: int = 1970
"""Earliest year accepted in a tag date."""

TAG_DATE_MAX_YEAR: int = 9999
"""Latest year accepted in a tag date."""


# =============================================================================
# ULID Timestamps
# =============================================================================

ULID_LENGTH: int = 26
"""Length of a canonical ULID string."""

ULID_TIMESTAMP_LENGTH: int = 10
"""Leading characters of a ULID that encode the 48-bit millisecond timestamp."""

CROCKFORD_BASE32_ALPHABET: str = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
"""Crockford base32 alphabet used by ULIDs (no I, L, O, U)."""

ULID_MAX_TIMESTAMP_MS: int = (1 << 48) - 1
"""Largest timestamp representable in a ULID (10889-08-02T05:31:50.655Z)."""

TIMESTAMP_EPOCH_MS: int = 1_704_067_200_000
"""Earliest accepted identifier timestamp (2024-01-01T00:00:00Z)."""

TIMESTAMP_MAX_FUTURE_SKEW_MS: int = 5 * 60 * 1000
"""Clock skew tolerated for identifiers minted slightly in the future."""
