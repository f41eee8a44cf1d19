"""Catalog reads with failures contained per type.

Catalogs built over partial sources fail on odd names. A failed read
is logged at WARNING and answered as if the catalog knew nothing about
the type, so one bad type never stops the others.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archfinder.domain.model.type_info import TypeInfo
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol

logger = logging.getLogger(__name__)


def lookup_or_none(catalog: TypeCatalogProtocol, fqn: str) -> TypeInfo | None:
    """catalog.lookup(), None on failure."""
    try:
        return catalog.lookup(fqn)
    except Exception as e:  # any catalog error counts as unresolved
        logger.warning("Cannot resolve type %r: %s", fqn, e)
        return None


def references_or_empty(catalog: TypeCatalogProtocol, fqn: str) -> frozenset[str]:
    """catalog.referenced_types(), empty on failure."""
    try:
        return catalog.referenced_types(fqn)
    except Exception as e:  # any catalog error counts as unresolved
        logger.warning("Cannot read references of %r: %s", fqn, e)
        return frozenset()


def tagged_or_empty(catalog: TypeCatalogProtocol, tag: str) -> frozenset[str]:
    """catalog.find_by_tag(), empty on failure."""
    try:
        return catalog.find_by_tag(tag)
    except Exception as e:  # any catalog error counts as unresolved
        logger.warning("Cannot find types tagged %r: %s", tag, e)
        return frozenset()
