"""Domain model: type metadata, components and their registry."""

from archfinder.domain.model.candidate import ComponentCandidate
from archfinder.domain.model.code_element import CodeElement
from archfinder.domain.model.component import Component
from archfinder.domain.model.configuration import DiscoveryConfig
from archfinder.domain.model.dependency import Dependency
from archfinder.domain.model.enums import CodeElementRole, TypeCategory, Visibility
from archfinder.domain.model.registry import ComponentRegistry
from archfinder.domain.model.type_info import TypeInfo

__all__ = [
    "CodeElement",
    "CodeElementRole",
    "Component",
    "ComponentCandidate",
    "ComponentRegistry",
    "Dependency",
    "DiscoveryConfig",
    "TypeCategory",
    "TypeInfo",
    "Visibility",
]
