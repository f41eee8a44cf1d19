"""Component dependency edge."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Dependency:
    """Efferent "uses" edge between two components of one registry.

    Attributes:
        source: Name of the component that depends
        destination: Name of the component depended upon
        description: Optional edge description
    """

    source: str
    destination: str
    description: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("source must not be empty")
        if not self.destination:
            raise ValueError("destination must not be empty")
        if self.source == self.destination:
            raise ValueError(f"self dependency on '{self.source}' is not allowed")

    def __str__(self) -> str:
        """Format as source -> destination."""
        return f"{self.source} -> {self.destination}"
