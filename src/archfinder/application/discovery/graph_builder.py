"""Component dependency graph builder.

Turns type references into component-to-component "uses" edges by
walking through non-component (plumbing) types until a component
boundary is reached.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archfinder.domain.model.component import Component
    from archfinder.domain.model.dependency import Dependency
    from archfinder.domain.model.registry import ComponentRegistry
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Builds efferent dependencies between the components of a registry.

    For every code element of every component a depth-first walk starts
    at the element's type:
    - a referenced type backing a component (by type, else by name)
      yields an edge and stops the walk on that branch;
    - any other type is walked through, once per walk;
    - nested types are skipped.

    The visited set is fresh for every code element. Edges are
    idempotent and self edges are never recorded, so running build()
    twice gives the same graph.

    Stateless - no state between build() calls.
    """

    def build(
        self,
        registry: ComponentRegistry,
        catalog: TypeCatalogProtocol,
    ) -> tuple[Dependency, ...]:
        """Add dependency edges to registry components.

        Args:
            registry: Registry whose components get edges
            catalog: Type catalog providing references

        Returns:
            Edges added by this call (empty on a repeated run)

        Raises:
            TypeError: If registry or catalog is None (FAIL-FIRST)
            ConfigurationError: If a type and a name point at two components
        """
        if registry is None:
            raise TypeError("registry must not be None")
        if catalog is None:
            raise TypeError("catalog must not be None")

        added: list[Dependency] = []

        for component in registry.components:
            for element in component.code_elements:
                added.extend(self._resolve(registry, catalog, component, element.type_name))

        logger.debug("Added %d dependency edge(s) in %r", len(added), registry.name)
        return tuple(added)

    def _resolve(
        self,
        registry: ComponentRegistry,
        catalog: TypeCatalogProtocol,
        component: Component,
        start: str,
    ) -> list[Dependency]:
        """Walk references from one code element.

        Args:
            registry: Registry for component lookup
            catalog: Type catalog
            component: Component the walk belongs to
            start: Type the walk starts at

        Returns:
            Newly recorded edges
        """
        added: list[Dependency] = []
        visited: set[str] = {start}
        stack: list[str] = [start]

        while stack:
            current = stack.pop()

            for referenced in sorted(self._references(catalog, current)):
                if not referenced or self._is_nested(catalog, referenced):
                    continue

                destination = registry.find_component(referenced)
                if destination is not None:
                    dependency = component.uses(destination)
                    if dependency is not None:
                        added.append(dependency)
                elif referenced not in visited:
                    visited.add(referenced)
                    stack.append(referenced)

        return added

    def _references(self, catalog: TypeCatalogProtocol, fqn: str) -> frozenset[str]:
        """References of a type; failures contribute nothing."""
        try:
            return catalog.referenced_types(fqn)
        except Exception as e:  # one bad type must not stop the graph
            logger.warning("Cannot read references of %r: %s", fqn, e)
            return frozenset()

    def _is_nested(self, catalog: TypeCatalogProtocol, fqn: str) -> bool:
        """Nested check; a failed lookup skips the reference."""
        try:
            info = catalog.lookup(fqn)
        except Exception as e:  # treated as "contributes nothing further"
            logger.warning("Cannot resolve referenced type %r: %s", fqn, e)
            return True
        return info is not None and info.is_nested
