"""Discovery configuration.

This is the user-provided configuration of one discovery run:
which match strategies, which supporting type strategies and which
duplicate policy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from archfinder.domain.exceptions.configuration import ConfigurationError

if TYPE_CHECKING:
    from archfinder.domain.ports.duplicate_policy import DuplicatePolicyProtocol
    from archfinder.domain.ports.strategies import ComponentMatchStrategy, SupportingTypeStrategy


@dataclass(frozen=True, slots=True)
class DiscoveryConfig:
    """Discovery configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        strategies: Match strategies, at least one
        supporting_strategies: Supporting type strategies, may be empty
        duplicate_policy: Name collision policy. None = fail fast.
    """

    strategies: tuple[ComponentMatchStrategy, ...]
    supporting_strategies: tuple[SupportingTypeStrategy, ...] = field(default=())
    duplicate_policy: DuplicatePolicyProtocol | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.strategies is None:
            raise ConfigurationError("strategies", "must not be None")
        if self.supporting_strategies is None:
            raise ConfigurationError("supporting_strategies", "must not be None")

        # Accept any iterable, store tuples
        object.__setattr__(self, "strategies", tuple(self.strategies))
        object.__setattr__(self, "supporting_strategies", tuple(self.supporting_strategies))

        if not self.strategies:
            raise ConfigurationError("strategies", "at least one match strategy is required")

        for index, strategy in enumerate(self.strategies):
            if strategy is None:
                raise ConfigurationError(f"strategies[{index}]", "must not be None")
            if not callable(getattr(strategy, "find_candidates", None)):
                raise ConfigurationError(
                    f"strategies[{index}]",
                    f"{type(strategy).__name__} has no find_candidates()",
                )

        for index, strategy in enumerate(self.supporting_strategies):
            if strategy is None:
                raise ConfigurationError(f"supporting_strategies[{index}]", "must not be None")
            if not callable(getattr(strategy, "find_supporting_types", None)):
                raise ConfigurationError(
                    f"supporting_strategies[{index}]",
                    f"{type(strategy).__name__} has no find_supporting_types()",
                )

        if self.duplicate_policy is not None and not callable(
            getattr(self.duplicate_policy, "on_duplicate", None)
        ):
            raise ConfigurationError(
                "duplicate_policy",
                f"{type(self.duplicate_policy).__name__} has no on_duplicate()",
            )
