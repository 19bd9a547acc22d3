"""
Fixed values of the constraint-name hashing scheme.

None of these are configurable: changing any of them changes every generated
name and breaks compatibility with schemas created by earlier runs.
"""

from typing import Final

DIGEST_ALGORITHM: Final[str] = "md5"
HASH_INPUT_ENCODING: Final[str] = "utf-8"

DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = len(DIGITS)
NAME_RADIX: Final[int] = 35  # 0-9a-y, 'z' is never emitted

# ceil(128 / log2(35)): longest base-35 rendering of a 128-bit digest
MAX_ENCODED_LENGTH: Final[int] = 25

TABLE_LABEL: Final[str] = "table"
REFERENCES_LABEL: Final[str] = "references"
COLUMN_LABEL: Final[str] = "column"
KEY_DELIMITER: Final[str] = "`"
