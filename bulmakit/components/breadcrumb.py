"""Breadcrumb navigation."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from ..common import Alignment
from ..markup import Classes, Element


class BreadcrumbSize(Enum):
    """The three sizes available for a breadcrumb."""

    SMALL = "are-small"
    MEDIUM = "are-medium"
    LARGE = "are-large"

    def __str__(self) -> str:
        return self.value


class BreadcrumbSeparator(Enum):
    """The alternative separators for a breadcrumb."""

    ARROW = "has-arrow-separator"
    BULLET = "has-bullet-separator"
    DOT = "has-dot-separator"
    SUCCEEDS = "has-succeeds-separator"

    def __str__(self) -> str:
        return self.value


def breadcrumb(
    *,
    children: Any = None,
    classes: Any = None,
    size: Optional[BreadcrumbSize] = None,
    alignment: Optional[Alignment] = None,
    separator: Optional[BreadcrumbSeparator] = None,
) -> Element:
    """A breadcrumb trail; ``children`` are its ``li`` elements."""
    class_ = Classes("breadcrumb", classes, size, alignment, separator)
    return Element(
        "nav",
        Element("ul", children),
        {"class": class_, "aria-label": "breadcrumbs"},
    )