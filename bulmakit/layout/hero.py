"""Hero banners."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from ..markup import Classes, Element


class HeroSize(Enum):
    """The four sizes available for heroes."""

    MEDIUM = "is-medium"
    LARGE = "is-large"
    FULLHEIGHT = "is-fullheight"
    FULLHEIGHT_WITH_NAVBAR = "is-fullheight-with-navbar"

    def __str__(self) -> str:
        return self.value


def hero(
    *,
    body: Any,
    classes: Any = None,
    head: Any = None,
    head_classes: Any = None,
    body_classes: Any = None,
    foot: Any = None,
    foot_classes: Any = None,
    fixed_nav: bool = False,
    bold: bool = False,
    size: Optional[HeroSize] = None,
) -> Element:
    """An imposing hero banner with optional head and foot sections."""
    class_ = Classes(
        "hero",
        classes,
        "is-fullheight-with-navbar" if fixed_nav else None,
        "is-bold" if bold else None,
        size,
    )
    head_el = None
    if head is not None:
        head_el = Element("div", head, {"class": Classes("hero-head", head_classes)})
    foot_el = None
    if foot is not None:
        foot_el = Element("div", foot, {"class": Classes("hero-foot", foot_classes)})
    body_el = Element("div", body, {"class": Classes("hero-body", body_classes)})
    return Element("section", [head_el, body_el, foot_el], {"class": class_})