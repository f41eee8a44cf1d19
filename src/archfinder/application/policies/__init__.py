"""Duplicate component policies."""

from archfinder.application.policies.duplicates import (
    FailFastDuplicatePolicy,
    FirstWinsDuplicatePolicy,
    OverwriteDuplicatePolicy,
)

__all__ = [
    "FailFastDuplicatePolicy",
    "FirstWinsDuplicatePolicy",
    "OverwriteDuplicatePolicy",
]
