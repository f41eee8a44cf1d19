"""Component registry aggregate root."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from archfinder.domain.exceptions.configuration import ConfigurationError
from archfinder.domain.model.component import Component

if TYPE_CHECKING:
    from archfinder.domain.model.dependency import Dependency
    from archfinder.domain.ports.duplicate_policy import DuplicatePolicyProtocol


@dataclass(slots=True)
class ComponentRegistry:
    """Components of one architectural boundary (a container).

    The only mutable aggregate in the domain model.
    Owns all Component instances, their code elements and dependencies.

    Attributes:
        name: Boundary name (e.g. container name)
        description: Boundary description
        technology: Boundary technology label
    """

    name: str
    description: str = ""
    technology: str = ""
    _components: dict[str, Component] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("registry name must not be empty")

    # =========================================================================
    # Creation
    # =========================================================================

    def add_component(
        self,
        name: str,
        type_name: str = "",
        description: str = "",
        technology: str = "",
        policy: DuplicatePolicyProtocol | None = None,
    ) -> Component:
        """Create a component, routing name collisions through a policy.

        Two different names for the same type are not a collision.

        Args:
            name: Component name
            type_name: Primary type FQN
            description: Component description
            technology: Technology label
            policy: Duplicate policy. None = name collisions raise ValueError.

        Returns:
            The new component, or whatever the policy returns on collision

        Raises:
            ValueError: If name is empty, or it collides and no policy given
            DuplicateComponentError: If the policy fails fast
        """
        if not name:
            raise ValueError("component name must not be empty")

        existing = self._components.get(name)
        if existing is None:
            component = Component(
                name=name,
                type_name=type_name,
                description=description,
                technology=technology,
            )
            self._components[name] = component
            return component

        if policy is None:
            raise ValueError(f"component '{name}' already exists in registry '{self.name}'")

        return policy.on_duplicate(existing, name, type_name, description, technology)

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_component_with_name(self, name: str) -> Component | None:
        """Get component by exact name. Returns None if not found."""
        return self._components.get(name)

    def get_component_of_type(self, type_name: str) -> Component | None:
        """Get first registered component whose primary type is type_name."""
        if not type_name:
            return None
        for component in self._components.values():
            if component.type_name == type_name:
                return component
        return None

    def find_component(self, type_name: str) -> Component | None:
        """Find component by type identity, falling back to name identity.

        Raises:
            ConfigurationError: If the type and the name point at two
                different components
        """
        by_type = self.get_component_of_type(type_name)
        by_name = self._components.get(type_name)
        if by_type is not None and by_name is not None and by_type is not by_name:
            raise ConfigurationError(
                "components",
                f"'{type_name}' is the type of '{by_type.name}' "
                f"and the name of another component",
            )
        return by_type if by_type is not None else by_name

    def owner_of(self, type_name: str) -> Component | None:
        """Get component holding type_name as any code element."""
        if not type_name:
            return None
        for component in self._components.values():
            if component.has_type(type_name):
                return component
        return None

    def is_claimed(self, type_name: str) -> bool:
        """Check if type belongs to a component, by type or by name."""
        return self.owner_of(type_name) is not None or type_name in self._components

    # =========================================================================
    # Views
    # =========================================================================

    @property
    def components(self) -> tuple[Component, ...]:
        """All components sorted by name."""
        return tuple(self._components[key] for key in sorted(self._components))

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        """All edges sorted by (source, destination)."""
        return tuple(dep for component in self.components for dep in component.dependencies)

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, name: object) -> bool:
        return name in self._components

    # =========================================================================
    # Rollback
    # =========================================================================

    def checkpoint(self) -> dict[str, Component]:
        """Deep copy of current components, for restore()."""
        return copy.deepcopy(self._components)

    def restore(self, state: dict[str, Component]) -> None:
        """Replace components with a checkpoint taken earlier."""
        self._components = state
