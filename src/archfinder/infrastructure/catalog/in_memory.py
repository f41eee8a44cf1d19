"""In-memory type catalog."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from archfinder.domain.model.type_info import TypeInfo


class InMemoryTypeCatalog:
    """Type catalog over a fixed set of TypeInfo values.

    Immutable after construction. Implements TypeCatalogProtocol.
    Unknown names give None or empty sets, never an exception.

    Example:
        catalog = InMemoryTypeCatalog([
            TypeInfo("shop.Order", tags=frozenset({"Service"})),
            TypeInfo("shop.OrderRepository", tags=frozenset({"Repository"})),
        ])
    """

    def __init__(self, types: Iterable[TypeInfo]) -> None:
        """Initialize catalog.

        Args:
            types: Type metadata, one per FQN

        Raises:
            TypeError: If types is None
            ValueError: If an FQN appears twice (FAIL-FIRST)
        """
        if types is None:
            raise TypeError("types must not be None")

        by_fqn: dict[str, TypeInfo] = {}
        by_tag: dict[str, set[str]] = {}

        for info in types:
            if info.fqn in by_fqn:
                raise ValueError(f"type '{info.fqn}' appears twice in catalog")
            by_fqn[info.fqn] = info
            for tag in info.tags:
                by_tag.setdefault(tag, set()).add(info.fqn)

        self._types: Mapping[str, TypeInfo] = MappingProxyType(by_fqn)
        self._by_tag: Mapping[str, frozenset[str]] = MappingProxyType(
            {tag: frozenset(fqns) for tag, fqns in by_tag.items()}
        )
        self._sorted = tuple(by_fqn[fqn] for fqn in sorted(by_fqn))

    def lookup(self, fqn: str) -> TypeInfo | None:
        return self._types.get(fqn)

    def find_by_tag(self, tag: str) -> frozenset[str]:
        return self._by_tag.get(tag, frozenset())

    def referenced_types(self, fqn: str) -> frozenset[str]:
        info = self._types.get(fqn)
        return info.references if info is not None else frozenset()

    def all_types(self) -> tuple[TypeInfo, ...]:
        return self._sorted

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, fqn: object) -> bool:
        return fqn in self._types
