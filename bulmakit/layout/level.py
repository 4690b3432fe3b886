"""Horizontal levels and their sections."""

from __future__ import annotations

from typing import Any

from ..markup import Classes, Element


def level(*, children: Any = None, classes: Any = None, tag: str = "nav") -> Element:
    """A multi-purpose horizontal level."""
    return Element(tag, children, {"class": Classes("level", classes)})


def level_left(*, children: Any = None, classes: Any = None, tag: str = "div") -> Element:
    """Level elements grouped to the left of the container."""
    return Element(tag, children, {"class": Classes("level-left", classes)})


def level_right(*, children: Any = None, classes: Any = None, tag: str = "div") -> Element:
    """Level elements grouped to the right of the container."""
    return Element(tag, children, {"class": Classes("level-right", classes)})


def level_item(*, children: Any = None, classes: Any = None, tag: str = "div") -> Element:
    """An individual element of a level container."""
    return Element(tag, children, {"class": Classes("level-item", classes)})