"""Match by declared tag (decorator)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archfinder.application.catalog_access import lookup_or_none, tagged_or_empty
from archfinder.application.matching._base import BaseMatchStrategy

if TYPE_CHECKING:
    from archfinder.domain.model.candidate import ComponentCandidate
    from archfinder.domain.model.type_info import TypeInfo
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol

logger = logging.getLogger(__name__)


class TaggedTypeMatchStrategy(BaseMatchStrategy):
    """Proposes types that declare a given tag.

    Uses catalog.find_by_tag() rather than a full scan.
    Tagged types the catalog cannot look up, or fails on, are skipped
    with a warning.
    """

    def __init__(
        self,
        tag: str,
        technology: str = "",
        description: str = "",
        *,
        public_only: bool = False,
    ) -> None:
        """Initialize strategy.

        Args:
            tag: Tag to match (bare decorator name or fully qualified)
            technology: Technology label for proposed components
            description: Description for proposed components
            public_only: Only propose PUBLIC types

        Raises:
            ValueError: If tag is empty
        """
        if not tag:
            raise ValueError("tag must not be empty")
        super().__init__(technology, description)
        self.tag = tag
        self.public_only = public_only

    def find_candidates(self, catalog: TypeCatalogProtocol) -> frozenset[ComponentCandidate]:
        """Propose tagged types known to the catalog."""
        candidates: set[ComponentCandidate] = set()

        for fqn in sorted(tagged_or_empty(catalog, self.tag)):
            info = lookup_or_none(catalog, fqn)
            if info is None:
                logger.warning("Type %r tagged %r is not in the catalog", fqn, self.tag)
                continue
            if not info.is_nested and self.matches(info, catalog):
                candidates.add(self.candidate_for(info))

        logger.debug("Tag %r matched %d type(s)", self.tag, len(candidates))
        return frozenset(candidates)

    def matches(self, info: TypeInfo, catalog: TypeCatalogProtocol) -> bool:
        """Tag present and, when public_only, PUBLIC visibility."""
        if not info.has_tag(self.tag):
            return False
        return not self.public_only or info.visibility.is_public

    def __repr__(self) -> str:
        return f"TaggedTypeMatchStrategy({self.tag!r}, public_only={self.public_only})"
