"""A custom file upload input."""

from __future__ import annotations

import os
from typing import Any, Callable, Iterable, Optional

from ..common import Alignment, Size
from ..markup import Classes, Element


def _file_name(item: Any) -> str:
    name = getattr(item, "name", None)
    if name is not None:
        return str(name)
    return os.path.basename(os.fspath(item))


def file(
    *,
    name: str,
    files: Iterable[Any],
    update: Callable[[list], Any],
    selector_label: str = "Choose a file...",
    selector_icon: Any = None,
    classes: Any = None,
    has_name: Optional[str] = None,
    right: bool = False,
    fullwidth: bool = False,
    boxed: bool = False,
    multiple: bool = False,
    size: Optional[Size] = None,
    alignment: Optional[Alignment] = None,
) -> Element:
    """A file upload input.

    ``files`` is the controlled selection; each item is shown by its ``name``
    attribute, or by its base name for paths. Firing ``change`` on the input
    with the newly selected files calls ``update`` with them as a list.
    """
    class_ = Classes(
        "file",
        classes,
        "has-name" if has_name is not None else None,
        "is-right" if right else None,
        "is-fullwidth" if fullwidth else None,
        "is-boxed" if boxed else None,
        size,
        alignment,
    )
    filenames = [
        Element("span", _file_name(item), {"class": "file-name"}) for item in files
    ]
    file_input = Element(
        "input",
        None,
        {"type": "file", "class": "file-input", "name": name, "multiple": multiple},
        {"change": lambda selected: update(list(selected))},
    )
    cta = Element(
        "span",
        [
            Element("span", selector_icon, {"class": "file-icon"}),
            Element("span", selector_label, {"class": "file-label"}),
        ],
        {"class": "file-cta"},
    )
    label = Element("label", [file_input, cta, filenames], {"class": "file-label"})
    return Element("div", label, {"class": class_})