"""Component entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from archfinder.domain.model.code_element import CodeElement
from archfinder.domain.model.dependency import Dependency
from archfinder.domain.model.enums import CodeElementRole

if TYPE_CHECKING:
    from archfinder.domain.model.enums import TypeCategory, Visibility


@dataclass(eq=False, slots=True)
class Component:
    """Discovered architectural building block.

    Mutable, owned by exactly one ComponentRegistry.
    Compared by identity: two components with equal fields are still
    different components.

    Attributes:
        name: Name, unique within the owning registry
        type_name: Primary type FQN (empty for manually added components)
        description: Free text description
        technology: Technology label
    """

    name: str
    type_name: str = ""
    description: str = ""
    technology: str = ""
    _code: dict[str, CodeElement] = field(default_factory=dict, repr=False)
    _uses: dict[str, Dependency] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants and register primary type. FAIL-FIRST."""
        if not self.name:
            raise ValueError("component name must not be empty")

        if self.type_name:
            self._code[self.type_name] = CodeElement(self.type_name, CodeElementRole.PRIMARY)

    @property
    def code_elements(self) -> tuple[CodeElement, ...]:
        """Code elements, primary first, then supporting in insertion order."""
        primary = [e for e in self._code.values() if e.is_primary]
        supporting = [e for e in self._code.values() if not e.is_primary]
        return (*primary, *supporting)

    @property
    def primary_element(self) -> CodeElement | None:
        """Primary code element, None for components without a type."""
        if not self.type_name:
            return None
        return self._code.get(self.type_name)

    @property
    def supporting_types(self) -> frozenset[str]:
        """FQNs of supporting code elements."""
        return frozenset(e.type_name for e in self._code.values() if not e.is_primary)

    @property
    def visibility(self) -> Visibility | None:
        """Visibility of the primary type."""
        primary = self.primary_element
        return primary.visibility if primary is not None else None

    @property
    def category(self) -> TypeCategory | None:
        """Category of the primary type."""
        primary = self.primary_element
        return primary.category if primary is not None else None

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        """Outgoing edges sorted by destination name."""
        return tuple(self._uses[key] for key in sorted(self._uses))

    def has_type(self, type_name: str) -> bool:
        """Check if type is one of this component's code elements."""
        return type_name in self._code

    def set_primary_type(self, type_name: str) -> None:
        """Replace the primary type.

        Previous primary element is dropped. An existing supporting element
        for the new type is promoted to primary.
        """
        if self.type_name:
            self._code.pop(self.type_name, None)
        self.type_name = type_name
        if type_name:
            self._code[type_name] = CodeElement(type_name, CodeElementRole.PRIMARY)

    def add_supporting_type(self, type_name: str) -> CodeElement:
        """Attach a supporting type.

        Returns:
            The new code element, or the existing one if type already present

        Raises:
            ValueError: If type_name is empty
        """
        if not type_name:
            raise ValueError("type_name must not be empty")

        existing = self._code.get(type_name)
        if existing is not None:
            return existing

        element = CodeElement(type_name, CodeElementRole.SUPPORTING)
        self._code[type_name] = element
        return element

    def uses(self, destination: Component, description: str = "") -> Dependency | None:
        """Record an efferent dependency on another component.

        Idempotent: an existing edge to the same destination is kept as is.

        Args:
            destination: Component depended upon
            description: Edge description

        Returns:
            The new edge, or None for self edges and already known edges

        Raises:
            TypeError: If destination is None
        """
        if destination is None:
            raise TypeError("destination must not be None")

        if destination is self or destination.name == self.name:
            return None

        if destination.name in self._uses:
            return None

        dependency = Dependency(self.name, destination.name, description)
        self._uses[destination.name] = dependency
        return dependency

    def depends_on(self, name: str) -> bool:
        """Check if an edge to the named component exists."""
        return name in self._uses

    def __str__(self) -> str:
        """Format as name [type_name]."""
        if self.type_name:
            return f"{self.name} [{self.type_name}]"
        return self.name
