"""Tiles for building two-dimensional grids."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from ..markup import Classes, Element


class TileCtx(Enum):
    """Tile context modifiers."""

    ANCESTOR = "is-ancestor"
    PARENT = "is-parent"
    CHILD = "is-child"

    def __str__(self) -> str:
        return self.value


class TileSize(Enum):
    """Tile size modifiers."""

    ONE = "is-1"
    TWO = "is-2"
    THREE = "is-3"
    FOUR = "is-4"
    FIVE = "is-5"
    SIX = "is-6"
    SEVEN = "is-7"
    EIGHT = "is-8"
    NINE = "is-9"
    TEN = "is-10"
    ELEVEN = "is-11"
    TWELVE = "is-12"

    def __str__(self) -> str:
        return self.value


def tile(
    *,
    children: Any = None,
    classes: Any = None,
    tag: str = "div",
    ctx: Optional[TileCtx] = None,
    vertical: bool = False,
    size: Optional[TileSize] = None,
) -> Element:
    """A single tile element."""
    class_ = Classes("tile", classes, ctx, "is-vertical" if vertical else None, size)
    return Element(tag, children, {"class": class_})