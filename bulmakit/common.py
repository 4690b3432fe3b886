"""Alignment and size modifiers shared by many components."""

from enum import Enum


class Alignment(Enum):
    """Common alignment classes."""

    LEFT = "is-left"
    CENTERED = "is-centered"
    RIGHT = "is-right"

    def __str__(self) -> str:
        return self.value


class Size(Enum):
    """Common size classes."""

    SMALL = "is-small"
    NORMAL = "is-normal"
    MEDIUM = "is-medium"
    LARGE = "is-large"

    def __str__(self) -> str:
        return self.value