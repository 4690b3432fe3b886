"""Titles and subtitles."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from ..markup import Classes, Element


class HeaderSize(Enum):
    """The six sizes available for titles and subtitles."""

    IS_1 = "is-1"
    IS_2 = "is-2"
    IS_3 = "is-3"
    IS_4 = "is-4"
    IS_5 = "is-5"
    IS_6 = "is-6"

    def __str__(self) -> str:
        return self.value


def title(
    *,
    children: Any = None,
    classes: Any = None,
    tag: str = "h3",
    is_spaced: bool = False,
    size: Optional[HeaderSize] = None,
) -> Element:
    """A simple heading."""
    class_ = Classes("title", classes, size, "is-spaced" if is_spaced else None)
    return Element(tag, children, {"class": class_})


def subtitle(
    *,
    children: Any = None,
    classes: Any = None,
    tag: str = "h3",
    size: Optional[HeaderSize] = None,
) -> Element:
    """A simple subheading."""
    return Element(tag, children, {"class": Classes("subtitle", classes, size)})