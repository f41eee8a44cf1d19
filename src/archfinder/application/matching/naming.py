"""Match by naming convention."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archfinder.application.matching._base import BaseMatchStrategy
from archfinder.application.matching.patterns import compile_type_pattern

if TYPE_CHECKING:
    from archfinder.domain.model.type_info import TypeInfo
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol


class NamePatternMatchStrategy(BaseMatchStrategy):
    """Proposes types whose FQN matches a dotted glob.

    Example:
        NamePatternMatchStrategy("myapp.services.*", technology="Service")
        NamePatternMatchStrategy("**.*Controller")
    """

    def __init__(self, pattern: str, technology: str = "", description: str = "") -> None:
        """Initialize strategy.

        Raises:
            ValueError: If pattern is empty or invalid
        """
        super().__init__(technology, description)
        self.pattern = compile_type_pattern(pattern)

    def matches(self, info: TypeInfo, catalog: TypeCatalogProtocol) -> bool:
        return self.pattern.match(info.fqn)

    def __repr__(self) -> str:
        return f"NamePatternMatchStrategy({self.pattern.original!r})"


class NameSuffixMatchStrategy(BaseMatchStrategy):
    """Proposes types whose simple name ends with a suffix.

    The suffix alone is not a match: a class named exactly `Repository`
    is the convention's vocabulary, not one of its instances.
    """

    def __init__(self, suffix: str, technology: str = "", description: str = "") -> None:
        """Initialize strategy.

        Raises:
            ValueError: If suffix is empty
        """
        if not suffix:
            raise ValueError("suffix must not be empty")
        super().__init__(technology, description)
        self.suffix = suffix

    def matches(self, info: TypeInfo, catalog: TypeCatalogProtocol) -> bool:
        return info.name.endswith(self.suffix) and info.name != self.suffix

    def __repr__(self) -> str:
        return f"NameSuffixMatchStrategy({self.suffix!r})"
