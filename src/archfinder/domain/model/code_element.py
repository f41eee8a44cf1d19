"""Code element attached to a component."""

from __future__ import annotations

from dataclasses import dataclass

from archfinder.domain.model.enums import CodeElementRole, TypeCategory, Visibility


@dataclass(slots=True)
class CodeElement:
    """A type that makes up (part of) a component.

    Mutable: visibility and category are filled in during classification.

    Attributes:
        type_name: Fully qualified type name
        role: PRIMARY or SUPPORTING
        visibility: Classified visibility (None until classified)
        category: Classified category (None until classified)
    """

    type_name: str
    role: CodeElementRole
    visibility: Visibility | None = None
    category: TypeCategory | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type_name:
            raise ValueError("type_name must not be empty")

    @property
    def is_primary(self) -> bool:
        """True for the component's primary type."""
        return self.role is CodeElementRole.PRIMARY

    @property
    def name(self) -> str:
        """Simple type name."""
        return self.type_name.rsplit(".", 1)[-1]
