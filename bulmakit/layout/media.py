"""Media objects for repeatable and nestable content."""

from __future__ import annotations

from typing import Any

from ..markup import Classes, Element


def media(*, children: Any = None, classes: Any = None, tag: str = "div") -> Element:
    """A media object container."""
    return Element(tag, children, {"class": Classes("media", classes)})


def media_left(*, children: Any = None, classes: Any = None, tag: str = "div") -> Element:
    """Elements grouped to the left of the media container."""
    return Element(tag, children, {"class": Classes("media-left", classes)})


def media_right(*, children: Any = None, classes: Any = None, tag: str = "div") -> Element:
    """Elements grouped to the right of the media container."""
    return Element(tag, children, {"class": Classes("media-right", classes)})


def media_content(*, children: Any = None, classes: Any = None, tag: str = "div") -> Element:
    """Elements forming the center body of the media container."""
    return Element(tag, children, {"class": Classes("media-content", classes)})