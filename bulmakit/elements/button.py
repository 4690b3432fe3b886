"""Buttons, button groups and button-styled anchors and inputs."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from ..markup import Classes, Element


class ButtonGroupSize(Enum):
    """The three sizes available for a button group."""

    SMALL = "are-small"
    MEDIUM = "are-medium"
    LARGE = "are-large"

    def __str__(self) -> str:
        return self.value


def buttons(
    *,
    children: Any = None,
    classes: Any = None,
    size: Optional[ButtonGroupSize] = None,
) -> Element:
    """A container for a group of buttons."""
    return Element("div", children, {"class": Classes("buttons", classes, size)})


def _button_classes(classes: Any, loading: bool, static: bool) -> Classes:
    return Classes(
        "button",
        classes,
        "is-loading" if loading else None,
        "is-static" if static else None,
    )


def button(
    *,
    children: Any = None,
    classes: Any = None,
    onclick: Optional[Callable[..., Any]] = None,
    loading: bool = False,
    static: bool = False,
    disabled: bool = False,
) -> Element:
    """A button element."""
    return Element(
        "button",
        children,
        {"class": _button_classes(classes, loading, static), "disabled": disabled},
        {"click": onclick},
    )


def button_anchor(
    *,
    children: Any = None,
    classes: Any = None,
    href: str = "",
    onclick: Optional[Callable[..., Any]] = None,
    loading: bool = False,
    static: bool = False,
    disabled: bool = False,
    rel: Optional[str] = None,
    target: Optional[str] = None,
) -> Element:
    """An anchor element styled as a button."""
    return Element(
        "a",
        children,
        {
            "class": _button_classes(classes, loading, static),
            "href": href,
            "rel": rel or "",
            "target": target or "",
            "disabled": disabled,
        },
        {"click": onclick},
    )


def button_input_submit(
    *,
    classes: Any = None,
    onsubmit: Optional[Callable[..., Any]] = None,
    loading: bool = False,
    static: bool = False,
    disabled: bool = False,
) -> Element:
    """An input element with ``type="submit"`` styled as a button."""
    return Element(
        "input",
        None,
        {
            "type": "submit",
            "class": _button_classes(classes, loading, static),
            "disabled": disabled,
        },
        {"submit": onsubmit},
    )


def button_input_reset(
    *,
    classes: Any = None,
    onreset: Optional[Callable[..., Any]] = None,
    loading: bool = False,
    static: bool = False,
    disabled: bool = False,
) -> Element:
    """An input element with ``type="reset"`` styled as a button."""
    return Element(
        "input",
        None,
        {
            "type": "reset",
            "class": _button_classes(classes, loading, static),
            "disabled": disabled,
        },
        {"reset": onreset},
    )