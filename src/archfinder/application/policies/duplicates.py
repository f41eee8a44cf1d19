"""Duplicate component policies.

Decide what a name collision during discovery means:
- FailFastDuplicatePolicy: abort the run (default)
- FirstWinsDuplicatePolicy: keep the existing component, drop the proposal
- OverwriteDuplicatePolicy: update the existing component with the proposal
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archfinder.domain.exceptions.duplicate import DuplicateComponentError

if TYPE_CHECKING:
    from archfinder.domain.model.component import Component

logger = logging.getLogger(__name__)


class FailFastDuplicatePolicy:
    """Raise DuplicateComponentError on any name collision."""

    def on_duplicate(
        self,
        existing: Component,
        name: str,
        type_name: str,
        description: str,
        technology: str,
    ) -> Component:
        raise DuplicateComponentError(name, existing.type_name, type_name)


class FirstWinsDuplicatePolicy:
    """Keep the component registered first."""

    def on_duplicate(
        self,
        existing: Component,
        name: str,
        type_name: str,
        description: str,
        technology: str,
    ) -> Component:
        logger.debug("Duplicate component %r ignored (type %r)", name, type_name)
        return existing


class OverwriteDuplicatePolicy:
    """Last proposal wins: existing component is updated in place.

    Code elements other than the primary type and edges are kept.
    """

    def on_duplicate(
        self,
        existing: Component,
        name: str,
        type_name: str,
        description: str,
        technology: str,
    ) -> Component:
        logger.debug(
            "Duplicate component %r overwritten (type %r -> %r)",
            name,
            existing.type_name,
            type_name,
        )
        if type_name != existing.type_name:
            existing.set_primary_type(type_name)
        existing.description = description
        existing.technology = technology
        return existing
