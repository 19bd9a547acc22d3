"""
Digest encoding for generated constraint names.

`hashed_name` maps any string to a short token over ``[0-9a-y]``:

1. MD5 over the UTF-8 bytes of the input.
2. The 16-byte digest read as one unsigned big-endian integer.
3. That integer rendered in base 35 without padding or sign.

A 128-bit value needs at most 25 base-35 digits, which leaves room for a short
prefix under the 30-character identifier limit some dialects enforce. The
scheme is fixed; any change alters every name generated by earlier runs.
"""

from __future__ import annotations

import hashlib

from src.constants import (
    DIGEST_ALGORITHM,
    DIGITS,
    HASH_INPUT_ENCODING,
    MAX_RADIX,
    MIN_RADIX,
    NAME_RADIX,
)
from src.logger import LOGGER


class HashingUnavailableError(RuntimeError):
    """The digest primitive required for name generation cannot be used."""


def _new_digest():
    try:
        return hashlib.new(DIGEST_ALGORITHM, usedforsecurity=False)
    except ValueError as error:
        LOGGER.error("Digest algorithm %s is unavailable: %s", DIGEST_ALGORITHM, error)
        raise HashingUnavailableError("Unable to generate a hashed name!") from error


def ensure_digest_available() -> None:
    """
    Fail fast if the digest primitive is missing (e.g. a FIPS-restricted build).

    Call once at application startup to surface the fault before any name is
    requested.

    Raises:
        HashingUnavailableError: if the digest cannot be constructed.
    """
    _new_digest()


def to_radix(value: int, radix: int) -> str:
    """
    Render a non-negative integer in `radix` using digits ``0-9`` then ``a-z``.

    No sign, prefix or padding is emitted; zero renders as ``"0"``.

    Raises:
        ValueError: if `value` is negative or `radix` is outside 2..36.
    """
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ValueError(f"Radix must be between {MIN_RADIX} and {MAX_RADIX}, got: {radix}")
    if value < 0:
        raise ValueError(f"Value must be non-negative, got: {value}")
    if value == 0:
        return DIGITS[0]

    digits: list[str] = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits))


def hashed_name(raw: str) -> str:
    """Hash `raw` and encode the digest in base 35."""
    digest = _new_digest()
    digest.update(raw.encode(HASH_INPUT_ENCODING))
    return to_radix(int.from_bytes(digest.digest(), byteorder="big", signed=False), NAME_RADIX)
