"""Domain exceptions."""

from archfinder.domain.exceptions.base import ArchFinderError
from archfinder.domain.exceptions.configuration import ConfigurationError
from archfinder.domain.exceptions.duplicate import DuplicateComponentError
from archfinder.domain.exceptions.resolution import ParsingError, UnresolvedTypeWarning

__all__ = [
    "ArchFinderError",
    "ConfigurationError",
    "DuplicateComponentError",
    "UnresolvedTypeWarning",
    "ParsingError",
]
