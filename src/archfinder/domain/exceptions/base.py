"""Base exceptions for archfinder domain."""


class ArchFinderError(Exception):
    """Root exception for all archfinder errors.

    All domain exceptions inherit from this.
    Allows catching all archfinder-specific errors.
    """
