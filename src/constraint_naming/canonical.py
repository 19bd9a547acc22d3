"""
Canonical keys for constraint identity.

A canonical key is the string that gets hashed into a constraint name. It is
built from labelled, backtick-delimited segments:

    table`<table>`[references`<referenced table>`]column`<col1>`column`<col2>`...

Design guarantees
-----------------
- **Order-independent:** columns are sorted by canonical name, so the order in
  which they were bound has no effect on the key.
- **Unambiguous:** the `table`/`references`/`column` labels keep a table named
  ``x`` apart from a column named ``x``.
- **Non-mutating:** the caller's column collection is copied, never sorted in
  place.
- **Not deduplicated:** a column passed twice contributes two segments.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.constants import COLUMN_LABEL, KEY_DELIMITER, REFERENCES_LABEL, TABLE_LABEL
from src.constraint_naming.identifiers import as_identifier
from src.constraint_naming.types import IdentifierLike


def _segment(label: str, name: str) -> str:
    return f"{label}{KEY_DELIMITER}{name}{KEY_DELIMITER}"


def _sorted_column_names(columns: Iterable[IdentifierLike] | None) -> list[str]:
    if columns is None:
        return []
    if isinstance(columns, str):
        raise TypeError(f"Columns must be a collection of identifiers, not a single str: {columns!r}")
    return sorted(as_identifier(column).canonical_name for column in columns)


def build_canonical_key(
    table: IdentifierLike,
    columns: Iterable[IdentifierLike] | None,
    referenced_table: IdentifierLike | None = None,
) -> str:
    """
    Build the canonical key for a constraint on `table` over `columns`.

    When `referenced_table` is given the key describes a foreign key and gains
    a ``references`` segment. `columns` may be any iterable, including a set;
    None is treated as no columns.

    Raises:
        ValueError: if `table` is None or blank.
        TypeError: if `columns` is a single str rather than a collection.
    """
    if table is None:
        raise ValueError("Table identifier must not be None.")

    segments = [_segment(TABLE_LABEL, as_identifier(table).canonical_name)]
    if referenced_table is not None:
        segments.append(_segment(REFERENCES_LABEL, as_identifier(referenced_table).canonical_name))
    segments.extend(_segment(COLUMN_LABEL, name) for name in _sorted_column_names(columns))
    return "".join(segments)
