"""Component candidate proposed by a match strategy."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ComponentCandidate:
    """A type that a match strategy wants promoted to a component.

    Attributes:
        type_name: Fully qualified name of the backing type
        name: Component name (defaults to simple type name)
        description: Component description
        technology: Technology label
    """

    type_name: str
    name: str = field(default="")
    description: str = ""
    technology: str = ""

    def __post_init__(self) -> None:
        """Validate invariants and derive name. FAIL-FIRST."""
        if not self.type_name:
            raise ValueError("type_name must not be empty")

        if not self.name:
            object.__setattr__(self, "name", self.type_name.rsplit(".", 1)[-1])

    @property
    def sort_key(self) -> tuple[str, str, str, str]:
        """Deterministic ordering key."""
        return (self.name, self.type_name, self.technology, self.description)
