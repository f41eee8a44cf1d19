"""Duplicate component exceptions."""

from archfinder.domain.exceptions.base import ArchFinderError


class DuplicateComponentError(ArchFinderError):
    """Two discovery results collided on component name.

    Raised only by the fail-fast duplicate policy. Fatal for the run.

    Attributes:
        name: Component name proposed twice
        existing_type: Type backing the already registered component
        proposed_type: Type backing the rejected proposal
    """

    def __init__(self, name: str, existing_type: str, proposed_type: str) -> None:
        if not name:
            raise ValueError("name must not be empty")

        self.name = name
        self.existing_type = existing_type
        self.proposed_type = proposed_type
        super().__init__(
            f"A component named '{name}' already exists "
            f"(existing type '{existing_type}', proposed type '{proposed_type}')"
        )
