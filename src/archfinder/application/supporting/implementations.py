"""Supporting types implementing the component's interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archfinder.application.catalog_access import lookup_or_none

from archfinder.domain.model.enums import TypeCategory

if TYPE_CHECKING:
    from archfinder.domain.model.component import Component
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol


class ImplementationsSupportingStrategy:
    """Implementation classes behind an interface component.

    Applies only when the primary type is an INTERFACE. Implementations
    are catalog types listing the interface as a direct supertype; with
    first_only just the first of them in FQN order.
    """

    def __init__(self, *, first_only: bool = False) -> None:
        self.first_only = first_only

    def find_supporting_types(
        self,
        component: Component,
        catalog: TypeCatalogProtocol,
    ) -> frozenset[str]:
        interface = lookup_or_none(catalog, component.type_name) if component.type_name else None
        if interface is None or interface.category is not TypeCategory.INTERFACE:
            return frozenset()

        implementations = sorted(
            info.fqn
            for info in catalog.all_types()
            if interface.fqn in info.supertypes
            and info.category is not TypeCategory.INTERFACE
            and not info.is_nested
        )

        if self.first_only:
            return frozenset(implementations[:1])
        return frozenset(implementations)

    def __repr__(self) -> str:
        return f"ImplementationsSupportingStrategy(first_only={self.first_only})"
