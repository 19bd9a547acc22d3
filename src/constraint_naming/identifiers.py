"""
Identifier model for constraint naming.

This module defines:
- Identifier: a database object name with a quoted flag and a canonical form.
- A helper to coerce plain strings into Identifiers.

Conventions:
- Unquoted identifiers are case-insensitive; their canonical form is lowercased.
- Quoted identifiers keep their exact text as the canonical form.
- Equality, hashing and ordering are all defined on the canonical form.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from src.constraint_naming.types import HasCanonicalName, IdentifierLike

_QUOTE_PAIRS = (("`", "`"), ('"', '"'))


def _unquote(text: str) -> tuple[str, bool]:
    for opening, closing in _QUOTE_PAIRS:
        if len(text) >= 2 and text.startswith(opening) and text.endswith(closing):
            return text[1:-1], True
    return text, False


@total_ordering
@dataclass(frozen=True, eq=False)
class Identifier:
    """A database object name (table, column, constraint)."""

    text: str
    quoted: bool = False

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise ValueError(f"Identifier text must not be blank, got: {self.text!r}")

    @classmethod
    def to_identifier(cls, text: str | None, quote: bool = False) -> Identifier | None:
        """
        Build an Identifier from raw text.

        Surrounding backticks or double quotes mark the identifier as quoted and
        are stripped. None, blank text or empty quotes yield None.
        """
        if text is None or not text.strip():
            return None
        trimmed, was_quoted = _unquote(text.strip())
        if not trimmed.strip():
            return None
        return cls(trimmed, quoted=quote or was_quoted)

    @property
    def canonical_name(self) -> str:
        return self.text if self.quoted else self.text.lower()

    def render(self) -> str:
        return f"`{self.text}`" if self.quoted else self.text

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.canonical_name == other.canonical_name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.canonical_name < other.canonical_name

    def __hash__(self) -> int:
        return hash(self.canonical_name)


def as_identifier(value: IdentifierLike | None) -> HasCanonicalName:
    """
    Coerce `value` into something exposing `canonical_name`.

    Plain strings are parsed with `Identifier.to_identifier`; identifier-like
    objects are returned unchanged.

    Raises:
        ValueError: if `value` is None or a blank string.
        TypeError: if `value` has no `canonical_name`.
    """
    if value is None:
        raise ValueError("Identifier must not be None.")
    if isinstance(value, str):
        identifier = Identifier.to_identifier(value)
        if identifier is None:
            raise ValueError(f"Identifier text must not be blank, got: {value!r}")
        return identifier
    if not isinstance(getattr(value, "canonical_name", None), str):
        raise TypeError(
            f"Expected a str or an object with a 'canonical_name', got: {type(value).__name__}"
        )
    return value
