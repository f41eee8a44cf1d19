"""pytest fixtures for component discovery.

User overrides arch_discovery_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from archfinder.application.discovery.engine import ComponentDiscoveryEngine
from archfinder.domain.exceptions.configuration import ConfigurationError
from archfinder.domain.model.configuration import DiscoveryConfig
from archfinder.domain.model.registry import ComponentRegistry
from archfinder.infrastructure.catalog.ast_catalog import AstTypeCatalog


def _ini(config: pytest.Config, name: str, default: str) -> str:
    """String ini option, default when unset or blank."""
    return str(config.getini(name) or default)


@pytest.fixture(scope="session")
def arch_catalog(request: pytest.FixtureRequest) -> AstTypeCatalog:
    """Type catalog of the configured source package.

    Reads arch_source_dir and arch_package from pytest.ini.
    Defaults: arch_source_dir="src", arch_package=only package in it.

    Returns:
        AstTypeCatalog over the package

    Raises:
        ConfigurationError: If the source dir is missing or the package is ambiguous
    """
    source_path = Path(request.config.rootpath) / _ini(request.config, "arch_source_dir", "src")
    if not source_path.is_dir():
        raise ConfigurationError(
            "arch_source_dir", f"'{source_path}' does not exist or is not a directory"
        )

    package = _ini(request.config, "arch_package", "")
    if not package:
        packages = sorted(p.name for p in source_path.iterdir() if (p / "__init__.py").exists())
        if len(packages) != 1:
            raise ConfigurationError(
                "arch_package",
                f"cannot pick a package from {packages} in '{source_path}', set arch_package",
            )
        package = packages[0]

    return AstTypeCatalog.from_directory(source_path / package, root_path=source_path)


@pytest.fixture(scope="session")
def arch_discovery_config() -> DiscoveryConfig:
    """Discovery configuration.

    User overrides this fixture in their conftest.py.

    Raises:
        ConfigurationError: Always, until overridden
    """
    raise ConfigurationError(
        "arch_discovery_config",
        "override this fixture in conftest.py with your match strategies",
    )


@pytest.fixture(scope="session")
def arch_components(
    request: pytest.FixtureRequest,
    arch_catalog: AstTypeCatalog,
    arch_discovery_config: DiscoveryConfig,
) -> ComponentRegistry:
    """Registry filled by running discovery over arch_catalog.

    Registry name is the arch_package ini value, or "application".

    Returns:
        ComponentRegistry with components and dependencies
    """
    name = _ini(request.config, "arch_package", "application")
    registry = ComponentRegistry(name)
    ComponentDiscoveryEngine(arch_catalog, arch_discovery_config).discover(registry)
    return registry
