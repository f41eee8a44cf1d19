"""Type classification for code elements.

Maps catalog metadata to visibility and category:
- visibility: PUBLIC/PROTECTED/PRIVATE as recorded by the catalog
- category: CLASS/ABSTRACT_CLASS/INTERFACE/ENUM/UNKNOWN

Lookup failures are contained: a type the catalog cannot resolve is
left unclassified and a warning is logged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archfinder.application.catalog_access import lookup_or_none

if TYPE_CHECKING:
    from archfinder.domain.model.code_element import CodeElement
    from archfinder.domain.model.enums import TypeCategory, Visibility
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol


def get_visibility(catalog: TypeCatalogProtocol, fqn: str) -> Visibility | None:
    """Visibility of a type, None if the catalog does not know it."""
    info = lookup_or_none(catalog, fqn)
    return info.visibility if info is not None else None


def get_category(catalog: TypeCatalogProtocol, fqn: str) -> TypeCategory | None:
    """Category of a type, None if the catalog does not know it."""
    info = lookup_or_none(catalog, fqn)
    return info.category if info is not None else None


def classify_code_element(catalog: TypeCatalogProtocol, element: CodeElement) -> bool:
    """Set visibility and category of a code element from the catalog.

    Args:
        catalog: Type catalog
        element: Code element to annotate in place

    Returns:
        True if the type was found and the element classified
    """
    info = lookup_or_none(catalog, element.type_name)
    if info is None:
        return False

    element.visibility = info.visibility
    element.category = info.category
    return True
