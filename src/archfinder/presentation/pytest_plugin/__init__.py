"""pytest plugin for archfinder.

Provides fixtures for component discovery in tests:
    arch_catalog: AstTypeCatalog of the source package
    arch_discovery_config: Discovery configuration (override in conftest.py)
    arch_components: ComponentRegistry after discovery

Configuration (pytest.ini or pyproject.toml):
    arch_source_dir: Source directory to analyze (default: "src")
    arch_package: Root package name (default: the only package in it)
"""

from __future__ import annotations

import pytest

from archfinder.presentation.pytest_plugin.fixtures import (
    arch_catalog,
    arch_components,
    arch_discovery_config,
)

__all__ = [
    "arch_catalog",
    "arch_components",
    "arch_discovery_config",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("arch_source_dir", "Source directory to analyze", default="src")
    parser.addini("arch_package", "Root package name", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "arch: mark test as architecture test",
    )
