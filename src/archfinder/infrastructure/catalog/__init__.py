"""Type catalog adapters."""

from archfinder.infrastructure.catalog.ast_catalog import AstTypeCatalog
from archfinder.infrastructure.catalog.in_memory import InMemoryTypeCatalog

__all__ = ["AstTypeCatalog", "InMemoryTypeCatalog"]
