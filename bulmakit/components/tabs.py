"""Horizontal navigation tabs."""

from __future__ import annotations

from typing import Any, Optional

from ..common import Alignment, Size
from ..markup import Classes, Element


def tabs(
    *,
    children: Any = None,
    classes: Any = None,
    alignment: Optional[Alignment] = None,
    size: Optional[Size] = None,
    boxed: bool = False,
    toggle: bool = False,
    rounded: bool = False,
    fullwidth: bool = False,
) -> Element:
    """Responsive horizontal navigation tabs; ``children`` are ``li`` elements."""
    class_ = Classes(
        "tabs",
        classes,
        alignment,
        size,
        "is-boxed" if boxed else None,
        "is-toggle" if toggle else None,
        "is-rounded" if rounded else None,
        "is-fullwidth" if fullwidth else None,
    )
    return Element("div", Element("ul", children), {"class": class_})