"""Vertical navigation menu."""

from __future__ import annotations

from typing import Any

from ..markup import Classes, Element


def menu(*, children: Any = None, classes: Any = None) -> Element:
    """A simple menu for vertical navigation."""
    return Element("aside", children, {"class": Classes("menu", classes)})


def menu_list(*, children: Any = None, classes: Any = None) -> Element:
    """A container for menu list ``li`` elements."""
    return Element("ul", children, {"class": Classes("menu-list", classes)})


def menu_label(*, classes: Any = None, text: str = "") -> Element:
    """A label for a section of the menu."""
    return Element("p", text, {"class": Classes("menu-label", classes)})