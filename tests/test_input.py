import pytest

from bulmakit.common import Size
from bulmakit.form.input import InputType, text_input
from bulmakit.markup import render


def _noop(_value):
    return None


def test_defaults():
    el = text_input(name="user", value="", update=_noop)
    assert el.tag == "input"
    assert el.attrs["type"] == "text"
    assert list(el.attrs["class"]) == ["input"]
    assert el.attrs["disabled"] is False
    assert el.attrs["readonly"] is False


def test_class_order():
    el = text_input(
        name="user",
        value="",
        update=_noop,
        classes="is-primary",
        size=Size.SMALL,
        rounded=True,
        loading=True,
        static=True,
    )
    assert list(el.attrs["class"]) == [
        "input",
        "is-primary",
        "is-small",
        "is-rounded",
        "is-loading",
        "is-static",
    ]


@pytest.mark.parametrize("kind", list(InputType))
def test_input_types(kind):
    el = text_input(name="n", value="", update=_noop, type=kind)
    assert el.attrs["type"] == kind.value
    assert InputType(str(kind)) is kind


def test_type_from_string():
    el = text_input(name="n", value="", update=_noop, type="email")
    assert el.attrs["type"] == InputType.EMAIL.value


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        text_input(name="n", value="", update=_noop, type="number")


def test_input_event_calls_update():
    received = []
    el = text_input(name="user", value="old", update=received.append)
    el.fire("input", "new")
    assert received == ["new"]


def test_render_attributes():
    el = text_input(
        name="user", value="a&b", update=_noop, placeholder="Name", disabled=True, readonly=True
    )
    html = render(el)
    assert 'value="a&amp;b"' in html
    assert 'placeholder="Name"' in html
    assert " disabled" in html and " readonly" in html
    assert "</input>" not in html