"""Type classification."""

from archfinder.application.classification.classifier import (
    classify_code_element,
    get_category,
    get_visibility,
)

__all__ = ["classify_code_element", "get_category", "get_visibility"]
