"""Domain ports (protocols)."""

from archfinder.domain.ports.duplicate_policy import DuplicatePolicyProtocol
from archfinder.domain.ports.strategies import ComponentMatchStrategy, SupportingTypeStrategy
from archfinder.domain.ports.type_catalog import TypeCatalogProtocol

__all__ = [
    "ComponentMatchStrategy",
    "DuplicatePolicyProtocol",
    "SupportingTypeStrategy",
    "TypeCatalogProtocol",
]
