"""A responsive navbar with items, dividers and dropdowns."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Union

from ..markup import Classes, Element, Fragment
from .dropdown import OVERLAY_STYLE, DropdownMsg


class NavbarMsg(Enum):
    """The message type used by the ``Navbar`` component."""

    TOGGLE_MENU = "toggle-menu"


class NavbarFixed(Enum):
    """The two fixed positions available for a navbar.

    The root ``html`` or ``body`` element must carry the matching
    ``has-navbar-fixed-top`` or ``has-navbar-fixed-bottom`` class.
    """

    TOP = "is-fixed-top"
    BOTTOM = "is-fixed-bottom"

    def __str__(self) -> str:
        return self.value


class NavbarItemTag(Enum):
    """The two HTML tags allowed for a navbar item."""

    A = "a"
    DIV = "div"

    def __str__(self) -> str:
        return self.value


class Navbar:
    """A responsive horizontal navbar with brand, start and end sections."""

    def __init__(
        self,
        *,
        children: Any = None,
        classes: Any = None,
        fixed: Optional[NavbarFixed] = None,
        transparent: bool = False,
        spaced: bool = False,
        padded: bool = False,
        navbrand: Any = None,
        navstart: Any = None,
        navend: Any = None,
        navburger: bool = True,
        navburger_classes: Any = None,
    ) -> None:
        self.children = children
        self.classes = classes
        self.fixed = fixed
        self.transparent = transparent
        self.spaced = spaced
        self.padded = padded
        self.navbrand = navbrand
        self.navstart = navstart
        self.navend = navend
        self.navburger = navburger
        self.navburger_classes = navburger_classes
        self.is_menu_open = False

    def update(self, msg: NavbarMsg) -> bool:
        """Apply a message; return whether the view should be redrawn."""
        if msg is NavbarMsg.TOGGLE_MENU:
            self.is_menu_open = not self.is_menu_open
        return True

    def _burger(self, burger_classes: Classes) -> Element:
        spans = [Element("span", None, {"aria-hidden": "true"}) for _ in range(3)]
        return Element(
            "a",
            spans,
            {
                "class": burger_classes,
                "role": "button",
                "aria-label": "menu",
                "aria-expanded": "true" if self.is_menu_open else "false",
            },
            {"click": lambda *_: self.update(NavbarMsg.TOGGLE_MENU)},
        )

    def view(self) -> Element:
        """Build the current markup of this navbar."""
        class_ = Classes("navbar", self.classes, self.fixed)

        nav_classes = Classes("navbar-menu")
        burger_classes = Classes("navbar-burger", self.navburger_classes)
        if self.is_menu_open:
            nav_classes.push("is-active")
            burger_classes.push("is-active")

        navbrand = None
        if self.navbrand is not None:
            burger = self._burger(burger_classes) if self.navburger else None
            navbrand = Element("div", [self.navbrand, burger], {"class": "navbar-brand"})

        navstart = None
        if self.navstart is not None:
            navstart = Element("div", self.navstart, {"class": "navbar-start"})

        navend = None
        if self.navend is not None:
            navend = Element("div", self.navend, {"class": "navbar-end"})

        contents = Fragment(
            [navbrand, Element("div", [navstart, navend], {"class": nav_classes})]
        )
        attrs = {"class": class_, "role": "navigation", "aria-label": "main navigation"}
        if self.padded:
            return Element("nav", Element("div", contents, {"class": "container"}), attrs)
        return Element("nav", contents, attrs)


def navbar_item(
    *,
    children: Any = None,
    classes: Any = None,
    tag: Union[NavbarItemTag, str] = NavbarItemTag.DIV,
    has_dropdown: bool = False,
    expanded: bool = False,
    tab: bool = False,
    active: bool = False,
    href: Optional[str] = None,
    rel: Optional[str] = None,
    target: Optional[str] = None,
) -> Element:
    """A single element of the navbar, rendered as an ``a`` or a ``div``."""
    tag = NavbarItemTag(tag)
    class_ = Classes(
        "navbar-item",
        classes,
        "has-dropdown" if has_dropdown else None,
        "is-expanded" if expanded else None,
        "is-tab" if tab else None,
        "is-active" if active else None,
    )
    if tag is NavbarItemTag.A:
        return Element(
            "a",
            children,
            {
                "class": class_,
                "href": href or "",
                "rel": rel or "",
                "target": target or "",
            },
        )
    return Element("div", children, {"class": class_})


def navbar_divider(*, classes: Any = None) -> Element:
    """A horizontal rule inside a navbar dropdown."""
    return Element("hr", None, {"class": Classes("navbar-divider", classes)})


class NavbarDropdown:
    """A navbar dropdown menu holding navbar items and dividers."""

    def __init__(
        self,
        *,
        navlink: Any,
        children: Any = None,
        classes: Any = None,
        hoverable: bool = False,
        dropup: bool = False,
        right: bool = False,
        arrowless: bool = False,
        boxed: bool = False,
    ) -> None:
        self.navlink = navlink
        self.children = children
        self.classes = classes
        self.hoverable = hoverable
        self.dropup = dropup
        self.right = right
        self.arrowless = arrowless
        self.boxed = boxed
        self.is_menu_active = False

    def update(self, msg: DropdownMsg) -> bool:
        """Apply a message; return whether the view should be redrawn."""
        if self.hoverable:
            return False
        self.is_menu_active = msg is DropdownMsg.OPEN
        return True

    def view(self) -> Element:
        """Build the current markup of this dropdown."""
        class_ = Classes(
            "navbar-item has-dropdown",
            self.classes,
            "has-dropdown-up" if self.dropup else None,
        )
        drop_classes = Classes(
            "navbar-dropdown",
            "is-right" if self.right else None,
            "is-boxed" if self.boxed else None,
        )
        link_classes = Classes("navbar-link", "is-arrowless" if self.arrowless else None)

        opencb: Optional[Callable[..., Any]]
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

        link = Element("a", self.navlink, {"class": link_classes}, {"click": opencb})
        dropdown = Element("div", self.children, {"class": drop_classes})
        return Element("div", [overlay, link, dropdown], {"class": class_})