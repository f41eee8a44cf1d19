"""Duplicate component policy protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from archfinder.domain.model.component import Component


class DuplicatePolicyProtocol(Protocol):
    """Contract for deciding what happens on a component name collision.

    Consulted only for name collisions, never for two names that share
    a type.
    """

    def on_duplicate(
        self,
        existing: Component,
        name: str,
        type_name: str,
        description: str,
        technology: str,
    ) -> Component:
        """Resolve a collision.

        Args:
            existing: Component already registered under name
            name: Proposed name (equal to existing.name)
            type_name: Proposed primary type
            description: Proposed description
            technology: Proposed technology

        Returns:
            Component that stands for the proposal

        Raises:
            DuplicateComponentError: To abort discovery
        """
        ...
