"""Composable panels for compact controls."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..markup import Classes, Element


def panel(*, children: Any = None, classes: Any = None, heading: Any = None) -> Element:
    """A panel; ``heading`` is wrapped in ``p.panel-heading``."""
    return Element(
        "nav",
        [Element("p", heading, {"class": "panel-heading"}), children],
        {"class": Classes("panel", classes)},
    )


def panel_tabs(*, children: Any = None) -> Element:
    """A container for the navigation tabs of a panel."""
    return Element("p", children, {"class": "panel-tabs"})


def panel_block(
    *,
    children: Any = None,
    tag: str = "div",
    active: bool = False,
    onclick: Optional[Callable[..., Any]] = None,
) -> Element:
    """An individual element of the panel."""
    class_ = Classes("panel-block", "is-active" if active else None)
    return Element(tag, children, {"class": class_}, {"click": onclick})