"""Supporting types declared next to the component's primary type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archfinder.application.catalog_access import lookup_or_none

if TYPE_CHECKING:
    from archfinder.domain.model.component import Component
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol


class SameModuleSupportingStrategy:
    """All non-nested catalog types in the primary type's module.

    Purely syntactic: compares the namespace part of the FQNs.
    """

    def find_supporting_types(
        self,
        component: Component,
        catalog: TypeCatalogProtocol,
    ) -> frozenset[str]:
        primary = lookup_or_none(catalog, component.type_name) if component.type_name else None
        if primary is None or not primary.module:
            return frozenset()

        return frozenset(
            info.fqn
            for info in catalog.all_types()
            if info.module == primary.module and not info.is_nested and info.fqn != primary.fqn
        )

    def __repr__(self) -> str:
        return "SameModuleSupportingStrategy()"
