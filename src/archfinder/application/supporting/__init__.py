"""Supporting type strategies."""

from archfinder.application.supporting.implementations import ImplementationsSupportingStrategy
from archfinder.application.supporting.referenced import ReferencedTypesSupportingStrategy
from archfinder.application.supporting.same_module import SameModuleSupportingStrategy

__all__ = [
    "ImplementationsSupportingStrategy",
    "ReferencedTypesSupportingStrategy",
    "SameModuleSupportingStrategy",
]
