from typing import Protocol, TypeAlias


class HasCanonicalName(Protocol):
    """Protocol for identifier objects that expose a canonical textual form."""

    @property
    def canonical_name(self) -> str: ...


IdentifierLike: TypeAlias = HasCanonicalName | str
