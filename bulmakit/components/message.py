"""Colored message blocks."""

from __future__ import annotations

from typing import Any

from ..markup import Classes, Element


def message(*, children: Any = None, classes: Any = None) -> Element:
    """A colored message block to emphasize part of a page."""
    return Element("article", children, {"class": Classes("message", classes)})


def message_header(*, children: Any = None, classes: Any = None) -> Element:
    """An optional message header holding a title and a delete element."""
    return Element("div", children, {"class": Classes("message-header", classes)})


def message_body(*, children: Any = None, classes: Any = None) -> Element:
    """A container for the body of a message."""
    return Element("div", children, {"class": Classes("message-body", classes)})