"""A multiline textarea component."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..common import Size
from ..markup import Classes, Element


def textarea(
    *,
    name: str,
    value: str,
    update: Callable[[str], Any],
    classes: Any = None,
    placeholder: str = "",
    rows: int = 0,
    size: Optional[Size] = None,
    fixed_size: bool = False,
    loading: bool = False,
    disabled: bool = False,
    readonly: bool = False,
    static: bool = False,
) -> Element:
    """A controlled textarea; firing ``input`` with a new value calls ``update``."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    class_ = Classes(
        "textarea",
        classes,
        size,
        "is-loading" if loading else None,
        "is-static" if static else None,
        "has-fixed-size" if fixed_size else None,
    )
    return Element(
        "textarea",
        None,
        {
            "name": name,
            "value": value,
            "class": class_,
            "rows": str(rows),
            "placeholder": placeholder,
            "disabled": disabled,
            "readonly": readonly,
        },
        {"input": lambda new_value: update(str(new_value))},
    )