"""Simple Bulma elements: block, box, content, delete, notification, progress."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Callable, Optional

from ..markup import Classes, Element


def block(*, children: Any = None, classes: Any = None) -> Element:
    """The most basic spacer block."""
    return Element("div", children, {"class": Classes("block", classes)})


def box(*, children: Any = None, classes: Any = None) -> Element:
    """A white box to contain other elements."""
    return Element("div", children, {"class": Classes("box", classes)})


def content(*, children: Any = None, classes: Any = None, tag: str = "div") -> Element:
    """A wrapper for generated content where only HTML tags are available."""
    return Element(tag, children, {"class": Classes("content", classes)})


def delete(
    *,
    children: Any = None,
    classes: Any = None,
    tag: str = "button",
    onclick: Optional[Callable[..., Any]] = None,
) -> Element:
    """A versatile delete cross."""
    return Element(
        tag, children, {"class": Classes("delete", classes)}, {"click": onclick}
    )


def notification(*, children: Any = None, classes: Any = None) -> Element:
    """Bold notification block, to alert users of something."""
    return Element("div", children, {"class": Classes("notification", classes)})


def _format_number(value: float) -> str:
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


def progress(*, classes: Any = None, max: float = 1.0, value: float = 0.0) -> Element:
    """A native HTML progress bar."""
    max_text = _format_number(max)
    value_text = _format_number(value)
    return Element(
        "progress",
        f"{value_text}%",
        {"class": Classes("progress", classes), "max": max_text, "value": value_text},
    )