"""Domain enumerations."""

from enum import Enum, auto


class Visibility(Enum):
    """Type visibility by naming convention."""

    PUBLIC = auto()  # no underscore
    PROTECTED = auto()  # _name
    PRIVATE = auto()  # __name

    @property
    def is_public(self) -> bool:
        """True only for PUBLIC."""
        return self is Visibility.PUBLIC


class TypeCategory(Enum):
    """Kind of type as seen by the catalog."""

    CLASS = auto()
    ABSTRACT_CLASS = auto()  # has abstract methods, not a pure interface
    INTERFACE = auto()  # Protocol / ABC
    ENUM = auto()
    UNKNOWN = auto()


class CodeElementRole(Enum):
    """Role of a code element inside its component."""

    PRIMARY = auto()  # the type the component represents
    SUPPORTING = auto()  # belongs to the component, not a component itself
