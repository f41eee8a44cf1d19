"""Type metadata supplied by a type catalog."""

from dataclasses import dataclass

from archfinder.domain.model.enums import TypeCategory, Visibility


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """Immutable facts about one type.

    Immutable value object with FAIL-FIRST validation.
    The discovery core reads these, it never mutates them.

    Attributes:
        fqn: Fully qualified type name (module.ClassName, module.Outer.Inner)
        category: CLASS/ABSTRACT_CLASS/INTERFACE/ENUM/UNKNOWN
        visibility: PUBLIC/PROTECTED/PRIVATE
        tags: Declared tags (decorators), as written and as resolved FQNs
        supertypes: Direct base type FQNs
        references: Type FQNs referenced by this type (may include itself)
        is_nested: True for types declared inside another type
        docstring: Type docstring
    """

    fqn: str
    category: TypeCategory = TypeCategory.CLASS
    visibility: Visibility = Visibility.PUBLIC
    tags: frozenset[str] = frozenset()
    supertypes: tuple[str, ...] = ()
    references: frozenset[str] = frozenset()
    is_nested: bool = False
    docstring: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.fqn:
            raise ValueError("fqn must not be empty")

        if self.fqn.startswith(".") or self.fqn.endswith("."):
            raise ValueError(f"fqn '{self.fqn}' must not start or end with a dot")

        if self.is_nested and "." not in self.fqn:
            raise ValueError(f"nested type '{self.fqn}' must have an enclosing name")

    @property
    def name(self) -> str:
        """Simple type name (last fqn segment)."""
        return self.fqn.rsplit(".", 1)[-1]

    @property
    def module(self) -> str:
        """Namespace part of the fqn, empty string for top-level names.

        For nested types this is the enclosing type's fqn.
        """
        parts = self.fqn.rsplit(".", 1)
        return parts[0] if len(parts) == 2 else ""

    def has_tag(self, tag: str) -> bool:
        """Check if type declares given tag."""
        return tag in self.tags

    def __str__(self) -> str:
        """Format as fqn (category)."""
        return f"{self.fqn} ({self.category.name.lower()})"
