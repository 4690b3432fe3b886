"""Page container and footer."""

from __future__ import annotations

from typing import Any

from ..markup import Classes, Element


def container(*, children: Any = None, classes: Any = None, fluid: bool = False) -> Element:
    """A simple container to center content horizontally."""
    class_ = Classes("container", classes, "is-fluid" if fluid else None)
    return Element("div", children, {"class": class_})


def footer(*, children: Any = None, classes: Any = None) -> Element:
    """A simple responsive footer which can include anything."""
    return Element("footer", children, {"class": Classes("footer", classes)})