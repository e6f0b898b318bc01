"""Utility functions for testing.

Provides helpers for generating test data, including encoding ULID
timestamp segments (the package only decodes them).
"""

import random
import string

CROCKFORD = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"


def random_lower_string(length: int = 32) -> str:
    """Generate a random lowercase string.

    Args:
        length: Length of the string to generate

    Returns:
        Random lowercase string
    """
    return "".join(random.choices(string.ascii_lowercase, k=length))


def random_handle(length: int = 12) -> str:
    """Generate a random valid handle (letters and digits only).

    Args:
        length: Handle length (within handle bounds, at least 2)

    Returns:
        Random handle starting with a letter and ending with a digit, so it
        can never collide with a reserved word
    """
    middle = random.choices(string.ascii_letters + string.digits, k=length - 2)
    return (
        random.choice(string.ascii_lowercase)
        + "".join(middle)
        + random.choice(string.digits)
    )


def encode_timestamp_component(ms: int) -> str:
    """Encode Unix milliseconds as a 10-character Crockford base32 segment.

    Args:
        ms: Unix timestamp in milliseconds (0 <= ms < 2**50)

    Returns:
        Upper-case encoded segment
    """
    chars = []
    for _ in range(10):
        chars.append(CROCKFORD[ms % 32])
        ms //= 32
    return "".join(reversed(chars))


def make_ulid(ms: int) -> str:
    """Build a 26-character ULID with the given timestamp and random tail."""
    return encode_timestamp_component(ms) + "".join(random.choices(CROCKFORD, k=16))
