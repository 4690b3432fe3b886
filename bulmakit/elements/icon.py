"""Icon and image containers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from ..common import Alignment, Size
from ..markup import Classes, Element


def icon(
    *,
    children: Any = None,
    classes: Any = None,
    onclick: Optional[Callable[..., Any]] = None,
    size: Optional[Size] = None,
    alignment: Optional[Alignment] = None,
) -> Element:
    """A container for any type of icon font."""
    class_ = Classes("icon", classes, size, alignment)
    return Element("span", children, {"class": class_}, {"click": onclick})


class ImageSize(Enum):
    """Placeholder sizes for figures."""

    IS_16X16 = "is-16x16"
    IS_24X24 = "is-24x24"
    IS_32X32 = "is-32x32"
    IS_48X48 = "is-48x48"
    IS_64X64 = "is-64x64"
    IS_96X96 = "is-96x96"
    IS_128X128 = "is-128x128"
    IS_SQUARE = "is-square"
    IS_1BY1 = "is-1by1"
    IS_5BY4 = "is-5by4"
    IS_4BY3 = "is-4by3"
    IS_3BY2 = "is-3by2"
    IS_5BY3 = "is-5by3"
    IS_16BY9 = "is-16by9"
    IS_2BY1 = "is-2by1"
    IS_3BY1 = "is-3by1"
    IS_4BY5 = "is-4by5"
    IS_3BY4 = "is-3by4"
    IS_2BY3 = "is-2by3"
    IS_3BY5 = "is-3by5"
    IS_9BY16 = "is-9by16"
    IS_1BY2 = "is-1by2"
    IS_1BY3 = "is-1by3"

    def __str__(self) -> str:
        return self.value


def image(
    *, children: Any = None, classes: Any = None, size: Optional[ImageSize] = None
) -> Element:
    """A container for responsive images."""
    return Element("figure", children, {"class": Classes("image", classes, size)})