"""An interactive dropdown menu."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..elements.button import button
from ..markup import Classes, Element

OVERLAY_STYLE = (
    "z-index:10;background-color:rgba(0,0,0,0);position:fixed;"
    "top:0;bottom:0;left:0;right:0;"
)


class DropdownMsg(Enum):
    """Dropdown actions."""

    OPEN = "open"
    CLOSE = "close"


class Dropdown:
    """An interactive dropdown menu for discoverable content."""

    def __init__(
        self,
        *,
        children: Any = None,
        classes: Any = None,
        hoverable: bool = False,
        button_classes: Any = None,
        button_html: Any = None,
    ) -> None:
        self.children = children
        self.classes = classes
        self.hoverable = hoverable
        self.button_classes = button_classes
        self.button_html = button_html
        self.is_menu_active = False

    def update(self, msg: DropdownMsg) -> bool:
        """Apply a message; return whether the view should be redrawn."""
        if self.hoverable:
            return False
        self.is_menu_active = msg is DropdownMsg.OPEN
        return True

    def view(self) -> Element:
        """Build the current markup of this dropdown."""
        class_ = Classes("dropdown", self.classes)
        if self.hoverable:
            class_.push("is-hoverable")
            opencb = None
        else:
            opencb = lambda *_: self.update(DropdownMsg.OPEN)  # noqa: E731

        overlay = None
        if self.is_menu_active:
            class_.push("is-active")
            overlay = Element(
                "div",
                None,
                {"style": OVERLAY_STYLE},
                {"click": lambda *_: self.update(DropdownMsg.CLOSE)},
            )

        trigger = Element(
            "div",
            button(classes=self.button_classes, onclick=opencb, children=self.button_html),
            {"class": "dropdown-trigger"},
        )
        menu = Element(
            "div",
            Element("div", self.children, {"class": "dropdown-content"}),
            {"class": "dropdown-menu", "role": "menu"},
        )
        return Element("div", [overlay, trigger, menu], {"class": class_})