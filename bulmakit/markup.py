"""A small HTML node tree: class lists, elements, fragments and rendering."""

from __future__ import annotations

import html
from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import Enum
from typing import Any, Optional, Union

VOID_TAGS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "source", "track", "wbr",
    }
)


class Classes:
    """An ordered set of CSS class names.

    Accepts strings (split on whitespace), enum members (their value),
    other ``Classes``, iterables of any of these, and ``None``/``False``
    which are ignored. Duplicates keep their first position.
    """

    __slots__ = ("_names",)

    def __init__(self, *args: Any) -> None:
        self._names: dict[str, None] = {}
        self.push(*args)

    def push(self, *args: Any) -> "Classes":
        """Append class names, skipping ones already present."""
        for arg in args:
            self._add(arg)
        return self

    def _add(self, arg: Any) -> None:
        if arg is None or arg is False:
            return
        if isinstance(arg, Enum):
            arg = arg.value
        if isinstance(arg, str):
            for name in arg.split():
                self._names.setdefault(name, None)
        elif isinstance(arg, Classes):
            for name in arg:
                self._names.setdefault(name, None)
        elif isinstance(arg, Iterable):
            for item in arg:
                self._add(item)
        else:
            raise TypeError(f"cannot use {type(arg).__name__} as a class name")

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __bool__(self) -> bool:
        return bool(self._names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Classes):
            return list(self) == list(other)
        return NotImplemented

    def __str__(self) -> str:
        return " ".join(self._names)

    def __repr__(self) -> str:
        return f"Classes({str(self)!r})"


def _flatten(children: Any) -> tuple:
    if children is None or children is False:
        return ()
    if isinstance(children, (str, Element, Fragment)):
        return (children,)
    if isinstance(children, Iterable):
        flat: list = []
        for child in children:
            flat.extend(_flatten(child))
        return tuple(flat)
    return (str(children),)


def _render_attr(name: str, value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return f" {name}"
    if isinstance(value, Classes):
        if not value:
            return ""
        value = str(value)
    elif isinstance(value, Enum):
        value = value.value
    return f' {name}="{html.escape(str(value), quote=True)}"'


def _render_node(node: Any) -> str:
    if isinstance(node, str):
        return html.escape(node, quote=False)
    return node.render()


class Element:
    """An HTML element with attributes, children and event handlers."""

    def __init__(
        self,
        tag: str,
        children: Any = None,
        attrs: Optional[Mapping[str, Any]] = None,
        events: Optional[Mapping[str, Optional[Callable[..., Any]]]] = None,
    ) -> None:
        if not tag:
            raise ValueError("element tag must not be empty")
        self.tag = tag
        self.children = _flatten(children)
        if tag in VOID_TAGS and self.children:
            raise ValueError(f"<{tag}> is a void element and cannot have children")
        self.attrs: dict[str, Any] = dict(attrs or {})
        self.events: dict[str, Optional[Callable[..., Any]]] = dict(events or {})

    def render(self) -> str:
        """Render this element and its children as HTML text."""
        opening = f"<{self.tag}" + "".join(
            _render_attr(name, value) for name, value in self.attrs.items()
        ) + ">"
        if self.tag in VOID_TAGS:
            return opening
        inner = "".join(_render_node(child) for child in self.children)
        return f"{opening}{inner}</{self.tag}>"

    def iter(self) -> Iterator["Element"]:
        """Yield this element and every descendant element, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, (Element, Fragment)):
                yield from child.iter()

    def fire(self, event: str, *args: Any) -> Any:
        """Call the handler bound to ``event`` and return its result.

        A handler bound as ``None`` does nothing; an unbound event raises
        ``KeyError``.
        """
        try:
            handler = self.events[event]
        except KeyError:
            raise KeyError(f"<{self.tag}> has no {event!r} handler") from None
        if handler is None:
            return None
        return handler(*args)

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, attrs={self.attrs!r}, children={len(self.children)})"


class Fragment:
    """A sequence of sibling nodes without a wrapping element."""

    def __init__(self, children: Any = None) -> None:
        self.children = _flatten(children)

    def render(self) -> str:
        """Render every child in order."""
        return "".join(_render_node(child) for child in self.children)

    def iter(self) -> Iterator[Element]:
        """Yield every descendant element, depth first."""
        for child in self.children:
            if isinstance(child, (Element, Fragment)):
                yield from child.iter()

    def __repr__(self) -> str:
        return f"Fragment(children={len(self.children)})"


Node = Union[Element, Fragment, str, None]


def render(node: Any) -> str:
    """Render a node, a string, ``None`` or an iterable of nodes as HTML."""
    return "".join(_render_node(child) for child in _flatten(node))