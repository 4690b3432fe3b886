"""A text input element."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Union

from ..common import Size
from ..markup import Classes, Element


class InputType(Enum):
    """The four allowed types for an input component."""

    TEXT = "text"
    PASSWORD = "password"
    EMAIL = "email"
    TEL = "tel"

    def __str__(self) -> str:
        return self.value


def text_input(
    *,
    name: str,
    value: str,
    update: Callable[[str], Any],
    classes: Any = None,
    type: Union[InputType, str] = InputType.TEXT,
    placeholder: str = "",
    size: Optional[Size] = None,
    rounded: bool = False,
    loading: bool = False,
    disabled: bool = False,
    readonly: bool = False,
    static: bool = False,
) -> Element:
    """A controlled text input; firing ``input`` with a new value calls ``update``."""
    input_type = InputType(type)
    class_ = Classes(
        "input",
        classes,
        size,
        "is-rounded" if rounded else None,
        "is-loading" if loading else None,
        "is-static" if static else None,
    )
    return Element(
        "input",
        None,
        {
            "name": name,
            "value": value,
            "class": class_,
            "type": input_type.value,
            "placeholder": placeholder,
            "disabled": disabled,
            "readonly": readonly,
        },
        {"input": lambda new_value: update(str(new_value))},
    )