"""Discovery strategy protocols.

Users extend archfinder by implementing these Protocols.
No base class needed: any object with the right method works.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from archfinder.domain.model.candidate import ComponentCandidate
    from archfinder.domain.model.component import Component
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol


class ComponentMatchStrategy(Protocol):
    """Contract for component match strategies.

    Pure function of the catalog: must not mutate it. Results of all
    configured strategies are unioned and ordered by the engine.

    Example:
        class ControllerSuffix:
            def find_candidates(self, catalog):
                return frozenset(
                    ComponentCandidate(t.fqn, technology="Flask")
                    for t in catalog.all_types()
                    if t.name.endswith("Controller")
                )
    """

    def find_candidates(self, catalog: TypeCatalogProtocol) -> frozenset[ComponentCandidate]:
        """Find types that should become components.

        Args:
            catalog: Type catalog to inspect

        Returns:
            Candidates (empty if none)
        """
        ...


class SupportingTypeStrategy(Protocol):
    """Contract for supporting type strategies.

    Called once per registered component, after all components exist.
    Should not return nested types. The engine filters out types already
    claimed by a component, so strategies need not check that.
    """

    def find_supporting_types(
        self,
        component: Component,
        catalog: TypeCatalogProtocol,
    ) -> frozenset[str]:
        """Find types that belong to a component.

        Args:
            component: Registered component
            catalog: Type catalog to inspect

        Returns:
            Type FQNs (empty if none)
        """
        ...
