"""Responsive flexbox columns."""

from __future__ import annotations

from typing import Any

from .markup import Classes, Element


def columns(
    *,
    children: Any = None,
    classes: Any = None,
    vcentered: bool = False,
    multiline: bool = False,
    centered: bool = False,
) -> Element:
    """The container for a set of responsive columns."""
    class_ = Classes(
        "columns",
        classes,
        "is-vcentered" if vcentered else None,
        "is-multiline" if multiline else None,
        "is-centered" if centered else None,
    )
    return Element("div", children, {"class": class_})


def column(*, children: Any = None, classes: Any = None) -> Element:
    """A single flexbox-based responsive column."""
    return Element("div", children, {"class": Classes("column", classes)})