"""
Public entry points for generating constraint names.

Two operations cover constraints that were not given an explicit name:

- `hashed_foreign_key_name`: keyed on table, referenced table and columns.
- `hashed_constraint_name`: keyed on table and columns (unique keys, checks,
  indexes).

Both build a canonical key (see `canonical`) and hash it (see `encoding`); the
result is ``prefix + encoded digest``. Everything here is a pure function: the
same inputs always give the same name, in any process.

The ``implicit_*`` helpers apply the conventional ``FK``/``UK``/``IDX``
prefixes and return an explicit name untouched when one is supplied.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.constraint_naming.canonical import build_canonical_key
from src.constraint_naming.encoding import hashed_name
from src.constraint_naming.types import IdentifierLike
from src.enums import ConstraintPrefix
from src.logger import LOGGER

__all__ = [
    "hashed_constraint_name",
    "hashed_foreign_key_name",
    "hashed_name",
    "implicit_foreign_key_name",
    "implicit_index_name",
    "implicit_unique_key_name",
]


def _prefixed_hash(prefix: str, canonical_key: str) -> str:
    name = f"{prefix}{hashed_name(canonical_key)}"
    LOGGER.debug("Generated constraint name %s from key %s", name, canonical_key)
    return name


def hashed_foreign_key_name(
    prefix: str,
    table: IdentifierLike,
    referenced_table: IdentifierLike,
    columns: Iterable[IdentifierLike] | None,
) -> str:
    """
    Generate a name for an unnamed foreign key on `table` referencing
    `referenced_table` through `columns`.

    Column order does not matter; `columns` may be a sequence or a set.

    Raises:
        ValueError: if `table` or `referenced_table` is None.
        HashingUnavailableError: if MD5 is unavailable in this runtime.
    """
    if referenced_table is None:
        raise ValueError("Referenced table identifier must not be None.")
    key = build_canonical_key(table, columns, referenced_table=referenced_table)
    return _prefixed_hash(prefix, key)


def hashed_constraint_name(
    prefix: str,
    table: IdentifierLike,
    columns: Iterable[IdentifierLike] | None,
) -> str:
    """
    Generate a name for an unnamed constraint on `table` over `columns`.

    An empty column collection is accepted and hashes the table segment alone.

    Raises:
        ValueError: if `table` is None.
        HashingUnavailableError: if MD5 is unavailable in this runtime.
    """
    return _prefixed_hash(prefix, build_canonical_key(table, columns))


def _explicit(name: str | None) -> str | None:
    if name is None or not name.strip():
        return None
    return name


def implicit_foreign_key_name(
    table: IdentifierLike,
    referenced_table: IdentifierLike,
    columns: Iterable[IdentifierLike] | None,
    explicit_name: str | None = None,
) -> str:
    """Foreign-key name: `explicit_name` if given, else ``FK`` + hash."""
    return _explicit(explicit_name) or hashed_foreign_key_name(
        ConstraintPrefix.FOREIGN_KEY, table, referenced_table, columns
    )


def implicit_unique_key_name(
    table: IdentifierLike,
    columns: Iterable[IdentifierLike] | None,
    explicit_name: str | None = None,
) -> str:
    """Unique-key name: `explicit_name` if given, else ``UK`` + hash."""
    return _explicit(explicit_name) or hashed_constraint_name(
        ConstraintPrefix.UNIQUE_KEY, table, columns
    )


def implicit_index_name(
    table: IdentifierLike,
    columns: Iterable[IdentifierLike] | None,
    explicit_name: str | None = None,
) -> str:
    """Index name: `explicit_name` if given, else ``IDX`` + hash."""
    return _explicit(explicit_name) or hashed_constraint_name(
        ConstraintPrefix.INDEX, table, columns
    )
