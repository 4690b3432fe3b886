"""Card container and its sections."""

from __future__ import annotations

from typing import Any

from ..markup import Classes, Element


def card(*, children: Any = None, classes: Any = None) -> Element:
    """A flexible, composable card container."""
    return Element("div", children, {"class": Classes("card", classes)})


def card_header(*, children: Any = None, classes: Any = None) -> Element:
    """A container for card header content."""
    return Element("header", children, {"class": Classes("card-header", classes)})


def card_image(*, children: Any = None, classes: Any = None) -> Element:
    """A fullwidth container for a responsive image."""
    return Element("div", children, {"class": Classes("card-image", classes)})


def card_content(*, children: Any = None, classes: Any = None) -> Element:
    """A container for the body of the card."""
    return Element("div", children, {"class": Classes("card-content", classes)})


def card_footer(*, children: Any = None, classes: Any = None) -> Element:
    """A container for card footer controls."""
    return Element("footer", children, {"class": Classes("card-footer", classes)})