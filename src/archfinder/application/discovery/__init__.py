"""Component discovery and dependency graph construction."""

from archfinder.application.discovery.engine import ComponentDiscoveryEngine, discover_components
from archfinder.application.discovery.graph_builder import DependencyGraphBuilder

__all__ = ["ComponentDiscoveryEngine", "DependencyGraphBuilder", "discover_components"]
