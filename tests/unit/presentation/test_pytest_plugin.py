"""Tests for the pytest plugin (fixtures, ini options, marker)."""

import pytest

CONFTEST = """
import pytest

from archfinder import DiscoveryConfig
from archfinder.application.matching.naming import NameSuffixMatchStrategy


@pytest.fixture(scope="session")
def arch_discovery_config():
    return DiscoveryConfig(strategies=(NameSuffixMatchStrategy("Service", "Python"),))
"""

SERVICES = """
from shop.repository import OrderRepository


class OrderService:
    repository: OrderRepository


class Helper:
    pass
"""

REPOSITORY = """
class OrderRepository:
    pass
"""


@pytest.fixture
def project(pytester: pytest.Pytester) -> pytest.Pytester:
    """Project with a single package under src/."""
    pytester.makeini("[pytest]\narch_source_dir = src\n")
    package = pytester.mkdir("src") / "shop"
    package.mkdir()
    (package / "__init__.py").write_text("")
    (package / "services.py").write_text(SERVICES)
    (package / "repository.py").write_text(REPOSITORY)
    return pytester


class TestFixtures:
    def test_discovery_with_overridden_config(self, project: pytest.Pytester) -> None:
        project.makeconftest(CONFTEST)
        project.makepyfile(
            """
            def test_components(arch_components):
                assert arch_components.name == "application"
                assert [c.name for c in arch_components.components] == ["OrderService"]
                assert arch_components.components[0].technology == "Python"

            def test_catalog(arch_catalog):
                assert "shop.services.Helper" in arch_catalog
                assert arch_catalog.referenced_types("shop.services.OrderService") == {
                    "shop.repository.OrderRepository"
                }
            """
        )

        result = project.runpytest()

        result.assert_outcomes(passed=2)

    def test_config_not_overridden(self, project: pytest.Pytester) -> None:
        project.makepyfile(
            """
            def test_components(arch_components):
                pass
            """
        )

        result = project.runpytest()

        result.assert_outcomes(errors=1)
        result.stdout.fnmatch_lines(["*override this fixture*"])

    def test_registry_named_after_package(self, project: pytest.Pytester) -> None:
        project.makeini("[pytest]\narch_source_dir = src\narch_package = shop\n")
        project.makeconftest(CONFTEST)
        project.makepyfile(
            """
            def test_name(arch_components):
                assert arch_components.name == "shop"
            """
        )

        result = project.runpytest()

        result.assert_outcomes(passed=1)

    def test_ambiguous_package(self, project: pytest.Pytester) -> None:
        other = project.path / "src" / "billing"
        other.mkdir()
        (other / "__init__.py").write_text("")
        project.makepyfile(
            """
            def test_catalog(arch_catalog):
                pass
            """
        )

        result = project.runpytest()

        result.assert_outcomes(errors=1)
        result.stdout.fnmatch_lines(["*set arch_package*"])

    def test_missing_source_dir(self, pytester: pytest.Pytester) -> None:
        pytester.makeini("[pytest]\narch_source_dir = nowhere\n")
        pytester.makepyfile(
            """
            def test_catalog(arch_catalog):
                pass
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(errors=1)
        result.stdout.fnmatch_lines(["*does not exist*"])


class TestMarker:
    def test_arch_marker_registered(self, pytester: pytest.Pytester) -> None:
        result = pytester.runpytest("--markers")

        result.stdout.fnmatch_lines(["@pytest.mark.arch:*architecture test*"])
