"""Form fields, with optional label and help text, and control wrappers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from ..markup import Classes, Element, Fragment


class AddonsAlign(Enum):
    """The two alignment options available for field addons."""

    CENTERED = "has-addons-centered"
    RIGHT = "has-addons-right"

    def __str__(self) -> str:
        return self.value


class GroupedAlign(Enum):
    """The two alignment options available for grouped field controls."""

    CENTERED = "is-grouped-centered"
    RIGHT = "is-grouped-right"

    def __str__(self) -> str:
        return self.value


class LabelSize(Enum):
    """The three sizes available for horizontal field labels."""

    SMALL = "is-small"
    MEDIUM = "is-medium"
    LARGE = "is-large"

    def __str__(self) -> str:
        return self.value


def _label(text: str, label_classes: Classes, horizontal: bool) -> Element:
    if not label_classes:
        inner = Element("label", text, {"class": "label"})
        if horizontal:
            return Element("div", inner, {"class": "field-label"})
        return inner
    if horizontal:
        return Element(
            "div",
            Element("label", text, {"class": "label"}),
            {"class": Classes(label_classes, "field-label")},
        )
    return Element("label", text, {"class": Classes(label_classes, "label")})


def field(
    *,
    children: Any = None,
    classes: Any = None,
    label: Optional[str] = None,
    label_classes: Any = None,
    help: Optional[str] = None,
    help_classes: Any = None,
    help_has_error: bool = False,
    icons_left: bool = False,
    icons_right: bool = False,
    addons: bool = False,
    addons_align: Optional[AddonsAlign] = None,
    grouped: bool = False,
    grouped_align: Optional[GroupedAlign] = None,
    multiline: bool = False,
    horizontal: bool = False,
) -> Element:
    """A container for form controls with an optional label and help message."""
    class_ = Classes(
        "field",
        classes,
        "has-icons-left" if icons_left else None,
        "has-icons-right" if icons_right else None,
        "has-addons" if addons else None,
        "is-grouped" if grouped else None,
        "is-multiline" if multiline else None,
        addons_align,
        grouped_align,
    )

    label_el = None
    if label is not None:
        label_el = _label(label, Classes(label_classes), horizontal)

    help_el = None
    if help is not None:
        help_class = Classes("help", help_classes, "is-danger" if help_has_error else None)
        help_el = Element("label", help, {"class": help_class})

    if horizontal:
        body: Any = Element("div", children, {"class": "field-body"})
    else:
        body = Fragment(children)

    return Element("div", [label_el, body, help_el], {"class": class_})


def control(
    *,
    children: Any = None,
    classes: Any = None,
    tag: str = "div",
    expanded: bool = False,
) -> Element:
    """A container wrapping form controls."""
    class_ = Classes("control", classes, "is-expanded" if expanded else None)
    return Element(tag, children, {"class": class_})