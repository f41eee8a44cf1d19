"""Discovery configuration for architecture tests of archfinder itself."""

import pytest

from archfinder import DiscoveryConfig
from archfinder.application.matching.naming import NameSuffixMatchStrategy
from archfinder.application.supporting.referenced import ReferencedTypesSupportingStrategy


@pytest.fixture(scope="session")
def arch_discovery_config() -> DiscoveryConfig:
    return DiscoveryConfig(
        strategies=(
            NameSuffixMatchStrategy("Engine", "Python", "Runs discovery phases"),
            NameSuffixMatchStrategy("Builder", "Python", "Builds the dependency graph"),
            NameSuffixMatchStrategy("Reporter", "Python", "Renders results"),
        ),
        supporting_strategies=(ReferencedTypesSupportingStrategy(),),
    )
