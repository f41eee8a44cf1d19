"""Configuration exceptions."""

from archfinder.domain.exceptions.base import ArchFinderError


class ConfigurationError(ArchFinderError):
    """Error in discovery setup.

    Raised when a required strategy or policy is missing or invalid.
    FAIL-FIRST: raised before any registry mutation.

    Attributes:
        parameter: Name of the offending parameter (must not be empty)
        reason: Why the configuration is invalid (must not be empty)
    """

    def __init__(self, parameter: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not parameter:
            raise ValueError("parameter must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid configuration '{parameter}': {reason}")
