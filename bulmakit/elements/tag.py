"""Tag labels and tag lists."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..common import Size
from ..markup import Classes, Element


def tag(
    *,
    children: Any = None,
    classes: Any = None,
    tag: str = "span",
    onclick: Optional[Callable[..., Any]] = None,
    rounded: bool = False,
    delete: bool = False,
    size: Optional[Size] = None,
) -> Element:
    """A small tag label to insert anywhere."""
    class_ = Classes(
        "tag",
        classes,
        "is-rounded" if rounded else None,
        "is-delete" if delete else None,
        size,
    )
    return Element(tag, children, {"class": class_}, {"click": onclick})


def tags(*, children: Any = None, classes: Any = None, has_addons: bool = False) -> Element:
    """A container for a list of tags."""
    class_ = Classes("tags", classes, "has-addons" if has_addons else None)
    return Element("div", children, {"class": class_})