"""archfinder - component discovery and dependency graphs for Python codebases."""

__version__ = "0.1.0"

from archfinder.application.discovery import (
    ComponentDiscoveryEngine,
    DependencyGraphBuilder,
    discover_components,
)
from archfinder.domain.model import ComponentRegistry, DiscoveryConfig

__all__ = [
    "ComponentDiscoveryEngine",
    "ComponentRegistry",
    "DependencyGraphBuilder",
    "DiscoveryConfig",
    "__version__",
    "discover_components",
]
