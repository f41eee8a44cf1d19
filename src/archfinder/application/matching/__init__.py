"""Component match strategies."""

from archfinder.application.matching._base import BaseMatchStrategy
from archfinder.application.matching.implements import ImplementsTypeMatchStrategy
from archfinder.application.matching.naming import (
    NamePatternMatchStrategy,
    NameSuffixMatchStrategy,
)
from archfinder.application.matching.patterns import TypePattern, compile_type_pattern
from archfinder.application.matching.tagged import TaggedTypeMatchStrategy

__all__ = [
    "BaseMatchStrategy",
    "ImplementsTypeMatchStrategy",
    "NamePatternMatchStrategy",
    "NameSuffixMatchStrategy",
    "TaggedTypeMatchStrategy",
    "TypePattern",
    "compile_type_pattern",
]
