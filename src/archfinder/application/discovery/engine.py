"""Component discovery engine.

Runs one discovery over one registry in three phases, each finished
before the next starts:
1. Discovery: match strategies propose candidates, the registry creates
   components, the duplicate policy settles name collisions
2. Classification: code elements get visibility/category, supporting
   type strategies attach extra code elements
3. Dependencies: DependencyGraphBuilder adds "uses" edges
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from archfinder.application.catalog_access import lookup_or_none
from archfinder.application.classification.classifier import classify_code_element
from archfinder.application.discovery.graph_builder import DependencyGraphBuilder
from archfinder.application.policies.duplicates import FailFastDuplicatePolicy
from archfinder.domain.exceptions.configuration import ConfigurationError
from archfinder.domain.model.configuration import DiscoveryConfig

if TYPE_CHECKING:
    from archfinder.domain.model.candidate import ComponentCandidate
    from archfinder.domain.model.component import Component
    from archfinder.domain.model.registry import ComponentRegistry
    from archfinder.domain.ports.duplicate_policy import DuplicatePolicyProtocol
    from archfinder.domain.ports.strategies import ComponentMatchStrategy, SupportingTypeStrategy
    from archfinder.domain.ports.type_catalog import TypeCatalogProtocol

logger = logging.getLogger(__name__)


class ComponentDiscoveryEngine:
    """Orchestrates component discovery for one registry at a time.

    Single-threaded batch computation. The catalog is only read.
    A failed run leaves the registry as it was before the run.

    Attributes:
        catalog: Type catalog to inspect
        config: Strategies and duplicate policy
    """

    def __init__(
        self,
        catalog: TypeCatalogProtocol,
        config: DiscoveryConfig,
        graph_builder: DependencyGraphBuilder | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            catalog: Type catalog
            config: Discovery configuration
            graph_builder: Dependency graph builder. None = default builder.

        Raises:
            ConfigurationError: If catalog or config is missing
        """
        if catalog is None:
            raise ConfigurationError("catalog", "must not be None")
        if config is None:
            raise ConfigurationError("config", "must not be None")

        self.catalog = catalog
        self.config = config
        self._policy: DuplicatePolicyProtocol = (
            config.duplicate_policy
            if config.duplicate_policy is not None
            else FailFastDuplicatePolicy()
        )
        self._graph_builder = graph_builder or DependencyGraphBuilder()

    def discover(self, registry: ComponentRegistry) -> tuple[Component, ...]:
        """Run all three phases against a registry.

        A failed run restores the registry to its state before the call.

        Args:
            registry: Registry that receives components and edges

        Returns:
            Components produced by this run, sorted by name

        Raises:
            ConfigurationError: If registry is None, or a type and a name
                point at two different components
            DuplicateComponentError: If the fail-fast policy sees a name twice
        """
        if registry is None:
            raise ConfigurationError("registry", "must not be None")

        checkpoint = registry.checkpoint()
        try:
            components = self._discover(registry)
            self._classify(registry, components)
            edges = self._graph_builder.build(registry, self.catalog)
        except Exception:
            registry.restore(checkpoint)
            raise

        logger.info(
            "Discovered %d component(s) and %d dependency edge(s) in %r",
            len(components),
            len(edges),
            registry.name,
        )
        return components

    # =========================================================================
    # Phase 1: discovery
    # =========================================================================

    def _discover(self, registry: ComponentRegistry) -> tuple[Component, ...]:
        """Register candidates of all match strategies."""
        found: dict[str, Component] = {}

        for candidate in self._collect_candidates():
            component = registry.add_component(
                candidate.name,
                candidate.type_name,
                candidate.description,
                candidate.technology,
                policy=self._policy,
            )
            found[component.name] = component

        return tuple(found[name] for name in sorted(found))

    def _collect_candidates(self) -> list[ComponentCandidate]:
        """Union of all strategies' candidates.

        Strategy order is kept, each strategy's candidates are sorted.
        Identical candidates collapse, nested types are dropped.
        """
        collected: dict[ComponentCandidate, None] = {}

        for strategy in self.config.strategies:
            candidates = strategy.find_candidates(self.catalog)
            logger.debug("%r proposed %d candidate(s)", strategy, len(candidates))

            for candidate in sorted(candidates, key=lambda c: c.sort_key):
                if self._is_nested(candidate.type_name):
                    logger.debug("Skipping nested type %r", candidate.type_name)
                    continue
                collected.setdefault(candidate, None)

        return list(collected)

    # =========================================================================
    # Phase 2: classification and supporting types
    # =========================================================================

    def _classify(self, registry: ComponentRegistry, components: tuple[Component, ...]) -> None:
        """Classify code elements, then attach supporting types."""
        for component in components:
            for element in component.code_elements:
                classify_code_element(self.catalog, element)

        for strategy in self.config.supporting_strategies:
            for component in components:
                for type_name in self._supporting_candidates(strategy, component):
                    if self._is_nested(type_name):
                        continue
                    # find_component raises on type/name disagreement
                    if registry.find_component(type_name) is not None:
                        continue
                    if registry.is_claimed(type_name):
                        continue

                    element = component.add_supporting_type(type_name)
                    classify_code_element(self.catalog, element)
                    logger.debug("Supporting type %r added to %r", type_name, component.name)

    def _supporting_candidates(
        self,
        strategy: SupportingTypeStrategy,
        component: Component,
    ) -> list[str]:
        """Sorted supporting types of one strategy; a failing strategy gives none."""
        try:
            return sorted(strategy.find_supporting_types(component, self.catalog))
        except Exception as e:  # catalog failures stay local to this component
            logger.warning("%r skipped for %r: %s", strategy, component.name, e)
            return []

    def _is_nested(self, fqn: str) -> bool:
        """Nested check; unknown or unresolvable types count as not nested."""
        info = lookup_or_none(self.catalog, fqn)
        return info is not None and info.is_nested


def discover_components(
    registry: ComponentRegistry,
    catalog: TypeCatalogProtocol,
    strategies: Iterable[ComponentMatchStrategy],
    supporting_strategies: Iterable[SupportingTypeStrategy] = (),
    duplicate_policy: DuplicatePolicyProtocol | None = None,
) -> tuple[Component, ...]:
    """Discover components of one registry.

    Single entry point: builds a DiscoveryConfig and runs the engine.

    Args:
        registry: Registry that receives components and edges
        catalog: Type catalog
        strategies: Match strategies, at least one
        supporting_strategies: Supporting type strategies
        duplicate_policy: Name collision policy. None = fail fast.

    Returns:
        Components produced by this run, sorted by name

    Raises:
        ConfigurationError: If an argument is missing or invalid
        DuplicateComponentError: If the fail-fast policy sees a name twice

    Example:
        registry = ComponentRegistry("api")
        discover_components(
            registry,
            AstTypeCatalog.from_directory(Path("src/myapp")),
            [TaggedTypeMatchStrategy("service", technology="Python")],
            [ReferencedTypesSupportingStrategy()],
        )
    """
    if strategies is None:
        raise ConfigurationError("strategies", "must not be None")
    if supporting_strategies is None:
        raise ConfigurationError("supporting_strategies", "must not be None")

    config = DiscoveryConfig(
        strategies=tuple(strategies),
        supporting_strategies=tuple(supporting_strategies),
        duplicate_policy=duplicate_policy,
    )
    return ComponentDiscoveryEngine(catalog, config).discover(registry)
