"""HTML table element."""

from __future__ import annotations

from typing import Any

from ..markup import Classes, Element


def table(
    *,
    children: Any = None,
    classes: Any = None,
    bordered: bool = False,
    striped: bool = False,
    narrow: bool = False,
    hoverable: bool = False,
    fullwidth: bool = False,
    scrollable: bool = False,
) -> Element:
    """An HTML table; ``scrollable`` wraps it in ``div.table-container``."""
    class_ = Classes(
        "table",
        classes,
        "is-bordered" if bordered else None,
        "is-striped" if striped else None,
        "is-narrow" if narrow else None,
        "is-hoverable" if hoverable else None,
        "is-fullwidth" if fullwidth else None,
    )
    inner = Element("table", children, {"class": class_})
    if scrollable:
        return Element("div", inner, {"class": "table-container"})
    return inner