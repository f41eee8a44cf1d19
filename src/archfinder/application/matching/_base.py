"""Base match strategy class.

Provides default implementation of ComponentMatchStrategy.
Concrete strategies inherit from this and implement matches().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from archfinder.domain.model.candidate import ComponentCandidate

if TYPE_CHECKING:
    from archfinder.domain.model.type_info import TypeInfo
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol


class BaseMatchStrategy(ABC):
    """Base class for strategies implementing ComponentMatchStrategy.

    Carries the description and technology copied onto every candidate.
    Walks catalog.all_types() and proposes every non-nested type for
    which matches() is True.

    Example:
        class ControllerStrategy(BaseMatchStrategy):
            def matches(self, info: TypeInfo, catalog: TypeCatalogProtocol) -> bool:
                return info.name.endswith("Controller")
    """

    def __init__(self, technology: str = "", description: str = "") -> None:
        """Initialize strategy.

        Args:
            technology: Technology label for proposed components
            description: Description for proposed components

        Raises:
            TypeError: If a label is None
        """
        if technology is None:
            raise TypeError("technology must not be None")
        if description is None:
            raise TypeError("description must not be None")

        self.technology = technology
        self.description = description

    def find_candidates(self, catalog: TypeCatalogProtocol) -> frozenset[ComponentCandidate]:
        """Propose every non-nested catalog type accepted by matches()."""
        return frozenset(
            self.candidate_for(info)
            for info in catalog.all_types()
            if not info.is_nested and self.matches(info, catalog)
        )

    def candidate_for(self, info: TypeInfo) -> ComponentCandidate:
        """Build the candidate proposed for a matched type."""
        return ComponentCandidate(
            type_name=info.fqn,
            name=info.name,
            description=self.description,
            technology=self.technology,
        )

    @abstractmethod
    def matches(self, info: TypeInfo, catalog: TypeCatalogProtocol) -> bool:
        """Decide whether a type should become a component.

        Args:
            info: Candidate type metadata
            catalog: Type catalog, for strategies that look further

        Returns:
            True to propose the type
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(technology={self.technology!r})"
