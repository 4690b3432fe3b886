"""Page sections."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from ..markup import Classes, Element


class SectionSize(Enum):
    """The two sizes available for sections, controlling spacing."""

    MEDIUM = "is-medium"
    LARGE = "is-large"

    def __str__(self) -> str:
        return self.value


def section(
    *,
    children: Any = None,
    classes: Any = None,
    size: Optional[SectionSize] = None,
) -> Element:
    """A simple container dividing a page into sections."""
    return Element("section", children, {"class": Classes("section", classes, size)})