"""Single and multiple select boxes."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from ..common import Size
from ..markup import Classes, Element, Fragment


def _text_content(node: Any) -> str:
    if isinstance(node, str):
        return node
    if isinstance(node, (Element, Fragment)):
        return "".join(_text_content(child) for child in node.children)
    return ""


def _option_value(option: Any) -> str:
    """The value of an option: its ``value`` attribute, else its text."""
    if isinstance(option, Element):
        value = option.attrs.get("value")
        if value is not None:
            return str(value)
        return _text_content(option)
    return str(option)


def select(
    *,
    name: str,
    value: str,
    update: Callable[[str], Any],
    children: Any = None,
    classes: Any = None,
    size: Optional[Size] = None,
    loading: bool = False,
    disabled: bool = False,
) -> Element:
    """A controlled ``select``; firing ``change`` with the chosen option calls ``update``."""
    class_ = Classes("select", classes, size, "is-loading" if loading else None)
    inner = Element(
        "select",
        children,
        {"name": name, "value": value, "disabled": disabled},
        {"change": lambda option: update(_option_value(option))},
    )
    return Element("div", inner, {"class": class_})


def multi_select(
    *,
    name: str,
    value: Iterable[str],
    update: Callable[[list], Any],
    children: Any = None,
    classes: Any = None,
    size: Optional[Size] = None,
    list_size: int = 4,
    loading: bool = False,
    disabled: bool = False,
) -> Element:
    """A controlled multiple ``select``.

    Firing ``change`` with the selected options calls ``update`` with their
    values as a list.
    """
    class_ = Classes(
        "select", "is-multiple", classes, size, "is-loading" if loading else None
    )
    inner = Element(
        "select",
        children,
        {
            "multiple": True,
            "size": str(list_size),
            "name": name,
            "value": ",".join(value),
            "disabled": disabled,
        },
        {"change": lambda options: update([_option_value(opt) for opt in options])},
    )
    return Element("div", inner, {"class": class_})