"""Checkboxes and radio buttons."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..markup import Classes, Element


def checkbox(
    *,
    name: str,
    checked: bool,
    update: Callable[[bool], Any],
    children: Any = None,
    classes: Any = None,
    disabled: bool = False,
) -> Element:
    """A two-state checkbox; clicking the input calls ``update`` with the toggled state."""
    box = Element(
        "input",
        None,
        {"type": "checkbox", "checked": checked, "name": name, "disabled": disabled},
        {"click": lambda *_: update(not checked)},
    )
    return Element(
        "label",
        [box, children],
        {"class": Classes("checkbox", classes), "disabled": disabled},
    )


def radio(
    *,
    name: str,
    value: str,
    checked_value: Optional[str],
    update: Callable[[str], Any],
    children: Any = None,
    classes: Any = None,
    disabled: bool = False,
) -> Element:
    """A radio button; it is checked when ``checked_value`` equals ``value``.

    Firing ``input`` on the radio calls ``update`` with its ``value``.
    """
    button = Element(
        "input",
        None,
        {
            "type": "radio",
            "name": name,
            "value": value,
            "checked": checked_value is not None and checked_value == value,
            "disabled": disabled,
        },
        {"input": lambda *_: update(value)},
    )
    return Element(
        "label",
        [button, children],
        {"class": Classes("radio", classes), "disabled": disabled},
    )