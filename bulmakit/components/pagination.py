"""Pagination controls."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from ..common import Alignment, Size
from ..markup import Classes, Element


class PaginationItemType(Enum):
    """A pagination item type."""

    LINK = "pagination-link"
    NEXT = "pagination-next"
    PREVIOUS = "pagination-previous"

    def __str__(self) -> str:
        return self.value


def pagination(
    *,
    previous: Any,
    next: Any,
    children: Any = None,
    classes: Any = None,
    size: Optional[Size] = None,
    alignment: Optional[Alignment] = None,
    rounded: bool = False,
) -> Element:
    """A pagination bar; ``children`` go inside ``ul.pagination-list``."""
    class_ = Classes(
        "pagination", classes, size, alignment, "is-rounded" if rounded else None
    )
    return Element(
        "nav",
        [previous, next, Element("ul", children, {"class": "pagination-list"})],
        {"class": class_, "role": "navigation", "aria-label": "pagination"},
    )


def pagination_item(
    *,
    children: Any = None,
    item_type: PaginationItemType,
    label: str = "",
    onclick: Optional[Callable[..., Any]] = None,
) -> Element:
    """A link to a page number, the previous page or the next page."""
    item_type = PaginationItemType(item_type)
    return Element(
        "a",
        children,
        {"class": item_type.value, "aria-label": label},
        {"click": onclick},
    )


def pagination_ellipsis(*, character: str = "\u2026") -> Element:
    """A horizontal ellipsis separating pagination ranges."""
    return Element("span", character, {"class": "pagination-ellipsis"})