"""Type resolution exceptions.

Catalog failures are expected on incomplete sources (third-party types,
partial trees). Callers contain them per reference and keep going.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archfinder.domain.exceptions.base import ArchFinderError

if TYPE_CHECKING:
    from pathlib import Path


class UnresolvedTypeWarning(ArchFinderError):
    """Type metadata could not be resolved by the catalog.

    Non-fatal: logged and treated as "no further information".

    Attributes:
        type_name: Name that failed to resolve
        reason: Why resolution failed
    """

    def __init__(self, type_name: str, reason: str) -> None:
        if not type_name:
            raise ValueError("type_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Cannot resolve type '{type_name}': {reason}")


class ParsingError(ArchFinderError):
    """Error while reading source code into a type catalog.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")
