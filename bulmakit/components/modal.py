"""Modal overlays and an agent that closes them by ID."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from ..markup import Classes, Element, Fragment


class ModalMsg(Enum):
    """Modal actions."""

    OPEN = "open"
    CLOSE = "close"


@dataclass(frozen=True)
class ModalCloseMsg:
    """A request to close the modal whose ID matches ``id``.

    Modals with any other ID ignore the request.
    """

    id: str


class ModalCloser:
    """Forwards close requests to every connected modal.

    Connect a modal's ``update`` method, then ``send`` a ``ModalCloseMsg``
    from anywhere in the application to close the modal with that ID.
    """

    def __init__(self) -> None:
        self._subscribers: dict[int, Callable[[ModalCloseMsg], Any]] = {}
        self._ids = itertools.count()

    def connect(self, handler: Callable[[ModalCloseMsg], Any]) -> int:
        """Register a handler and return a handle for disconnecting it."""
        handle = next(self._ids)
        self._subscribers[handle] = handler
        return handle

    def disconnect(self, handle: int) -> None:
        """Remove a handler; unknown handles are ignored."""
        self._subscribers.pop(handle, None)

    def send(self, msg: ModalCloseMsg) -> None:
        """Forward ``msg`` to every connected handler."""
        for handler in list(self._subscribers.values()):
            handler(msg)

    def __len__(self) -> int:
        return len(self._subscribers)


class _ModalState:
    id: str
    classes: Any
    trigger: Any

    def _init_state(self) -> None:
        self.is_active = False
        self._opencb: Optional[Callable[..., Any]] = None

    def _apply(self, msg: Union[ModalMsg, ModalCloseMsg]) -> bool:
        if isinstance(msg, ModalCloseMsg):
            if msg.id != self.id:
                return False
            self.is_active = False
            return True
        if msg is ModalMsg.OPEN:
            self.is_active = True
        elif msg is ModalMsg.CLOSE:
            self.is_active = False
        else:
            raise TypeError(f"unsupported modal message: {msg!r}")
        return True

    def _callbacks(
        self,
    ) -> tuple[Classes, Optional[Callable[..., Any]], Optional[Callable[..., Any]]]:
        class_ = Classes("modal", self.classes)
        if self.is_active:
            class_.push("is-active")
            return class_, None, lambda *_: self._apply(ModalMsg.CLOSE)
        return class_, lambda *_: self._apply(ModalMsg.OPEN), None

    def _wrap(self, class_: Classes, closecb: Any, inner: Element) -> Fragment:
        trigger = Element("div", self.trigger, None, {"click": self._opencb})
        body = Element(
            "div",
            [
                Element("div", None, {"class": "modal-background"}, {"click": closecb}),
                inner,
                Element(
                    "button",
                    None,
                    {"class": "modal-close is-large", "aria-label": "close"},
                    {"click": closecb},
                ),
            ],
            {"id": self.id, "class": class_},
        )
        return Fragment([trigger, body])


class Modal(_ModalState):
    """A classic modal overlay holding any content."""

    def __init__(
        self,
        *,
        id: str,
        children: Any = None,
        trigger: Any = None,
        classes: Any = None,
    ) -> None:
        self.id = id
        self.children = children
        self.trigger = trigger
        self.classes = classes
        self._init_state()

    def update(self, msg: Union[ModalMsg, ModalCloseMsg]) -> bool:
        """Apply a message; return whether the view should be redrawn."""
        return self._apply(msg)

    def view(self) -> Fragment:
        """Build the trigger and the modal markup."""
        class_, self._opencb, closecb = self._callbacks()
        inner = Element("div", self.children, {"class": "modal-content"})
        return self._wrap(class_, closecb, inner)


class ModalCard(_ModalState):
    """A modal with a header, body and footer section."""

    def __init__(
        self,
        *,
        id: str,
        title: str,
        body: Any = None,
        footer: Any = None,
        trigger: Any = None,
        classes: Any = None,
    ) -> None:
        self.id = id
        self.title = title
        self.body = body
        self.footer = footer
        self.trigger = trigger
        self.classes = classes
        self._init_state()

    def update(self, msg: Union[ModalMsg, ModalCloseMsg]) -> bool:
        """Apply a message; return whether the view should be redrawn."""
        return self._apply(msg)

    def view(self) -> Fragment:
        """Build the trigger and the modal card markup."""
        class_, self._opencb, closecb = self._callbacks()
        head = Element(
            "header",
            [
                Element("p", self.title, {"class": "modal-card-title"}),
                Element(
                    "button",
                    None,
                    {"class": "delete", "aria-label": "close"},
                    {"click": closecb},
                ),
            ],
            {"class": "modal-card-head"},
        )
        inner = Element(
            "div",
            [
                head,
                Element("section", self.body, {"class": "modal-card-body"}),
                Element("footer", self.footer, {"class": "modal-card-foot"}),
            ],
            {"class": "modal-card"},
        )
        return self._wrap(class_, closecb, inner)