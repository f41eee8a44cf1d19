"""Type catalog protocol.

The catalog is the read-only index of all types, their metadata and
their reference graph. How it gets populated (AST parsing, a manifest,
runtime introspection) is up to the implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from archfinder.domain.model.type_info import TypeInfo


class TypeCatalogProtocol(Protocol):
    """Contract for type catalogs.

    Absence is a valid outcome: unknown names give None or an empty set,
    never an exception. Implementations that hit a real resolution
    failure raise UnresolvedTypeWarning, which callers contain.

    Example:
        class ManifestCatalog:
            def __init__(self, manifest: dict[str, TypeInfo]) -> None:
                self._types = manifest

            def lookup(self, fqn: str) -> TypeInfo | None:
                return self._types.get(fqn)
            ...
    """

    def lookup(self, fqn: str) -> TypeInfo | None:
        """Get metadata for a type.

        Args:
            fqn: Fully qualified type name

        Returns:
            TypeInfo, or None if the type is unknown
        """
        ...

    def find_by_tag(self, tag: str) -> frozenset[str]:
        """Get FQNs of all types declaring a tag.

        Args:
            tag: Tag (decorator) name, bare or fully qualified

        Returns:
            Matching type FQNs (empty if none)
        """
        ...

    def referenced_types(self, fqn: str) -> frozenset[str]:
        """Get FQNs referenced by a type.

        Args:
            fqn: Fully qualified type name

        Returns:
            Referenced type FQNs (empty if type unknown)
        """
        ...

    def all_types(self) -> tuple[TypeInfo, ...]:
        """All known types, sorted by FQN."""
        ...
