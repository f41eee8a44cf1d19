"""Match by implementing or extending a marker type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archfinder.application.catalog_access import lookup_or_none
from archfinder.application.matching._base import BaseMatchStrategy

if TYPE_CHECKING:
    from archfinder.domain.model.type_info import TypeInfo
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol


class ImplementsTypeMatchStrategy(BaseMatchStrategy):
    """Proposes types that have a marker type among their supertypes.

    Supertypes are followed transitively through the catalog, so
    `class SqlRepo(BaseRepo)` with `class BaseRepo(Repository)` matches
    marker `Repository`. The marker itself is never proposed.
    Supertypes the catalog does not know, or fails to resolve, end the
    walk on that branch.
    """

    def __init__(self, marker: str, technology: str = "", description: str = "") -> None:
        """Initialize strategy.

        Args:
            marker: FQN of the marker type (interface or base class)
            technology: Technology label for proposed components
            description: Description for proposed components

        Raises:
            ValueError: If marker is empty
        """
        if not marker:
            raise ValueError("marker must not be empty")
        super().__init__(technology, description)
        self.marker = marker

    def matches(self, info: TypeInfo, catalog: TypeCatalogProtocol) -> bool:
        """True if marker is reachable through supertypes."""
        if info.fqn == self.marker:
            return False

        visited: set[str] = {info.fqn}
        stack: list[str] = list(info.supertypes)

        while stack:
            supertype = stack.pop()
            if supertype == self.marker:
                return True
            if supertype in visited:
                continue
            visited.add(supertype)

            parent = lookup_or_none(catalog, supertype)
            if parent is not None:
                stack.extend(parent.supertypes)

        return False

    def __repr__(self) -> str:
        return f"ImplementsTypeMatchStrategy({self.marker!r})"
