"""Supporting types referenced by the component's primary type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archfinder.application.catalog_access import lookup_or_none, references_or_empty

if TYPE_CHECKING:
    from archfinder.domain.model.component import Component
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol


class ReferencedTypesSupportingStrategy:
    """Types the primary type references that the catalog knows.

    Nested types and the primary type itself are excluded. With
    include_indirect the walk continues through every type found,
    terminating on cycles. Component types are filtered by the engine.
    A reference the catalog fails on is dropped on its own.
    """

    def __init__(self, *, include_indirect: bool = False) -> None:
        self.include_indirect = include_indirect

    def find_supporting_types(
        self,
        component: Component,
        catalog: TypeCatalogProtocol,
    ) -> frozenset[str]:
        if not component.type_name:
            return frozenset()

        found: set[str] = set()
        visited: set[str] = {component.type_name}
        stack: list[str] = [component.type_name]

        while stack:
            current = stack.pop()
            for referenced in references_or_empty(catalog, current):
                if referenced in visited:
                    continue
                visited.add(referenced)

                info = lookup_or_none(catalog, referenced)
                if info is None or info.is_nested:
                    continue

                found.add(referenced)
                if self.include_indirect:
                    stack.append(referenced)

        return frozenset(found)

    def __repr__(self) -> str:
        return f"ReferencedTypesSupportingStrategy(include_indirect={self.include_indirect})"
