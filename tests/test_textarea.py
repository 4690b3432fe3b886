import pytest

from bulmakit.common import Size
from bulmakit.form.textarea import textarea
from bulmakit.markup import Classes


def _noop(_value):
    return None


def test_default_attributes():
    el = textarea(name="bio", value="hello", update=_noop)
    assert el.tag == "textarea"
    assert el.attrs["name"] == "bio"
    assert el.attrs["value"] == "hello"
    assert el.attrs["rows"] == "0"
    assert el.attrs["placeholder"] == ""
    assert el.attrs["disabled"] is False
    assert el.attrs["readonly"] is False
    assert list(el.attrs["class"]) == ["textarea"]


def test_class_order_with_all_modifiers():
    el = textarea(
        name="bio",
        value="",
        update=_noop,
        classes="extra",
        size=Size.SMALL,
        loading=True,
        static=True,
        fixed_size=True,
    )
    assert list(el.attrs["class"]) == [
        "textarea",
        "extra",
        "is-small",
        "is-loading",
        "is-static",
        "has-fixed-size",
    ]


def test_input_event_calls_update():
    seen = []
    el = textarea(name="bio", value="", update=seen.append)
    el.fire("input", "new text")
    assert seen == ["new text"]


def test_rows_and_flags_render():
    el = textarea(
        name="n", value="v", update=_noop, rows=5, disabled=True, readonly=True,
        placeholder="write here",
    )
    html = el.render()
    assert 'rows="5"' in html
    assert " disabled" in html
    assert " readonly" in html
    assert 'placeholder="write here"' in html
    assert html.endswith("</textarea>")


def test_negative_rows_rejected():
    with pytest.raises(ValueError):
        textarea(name="n", value="", update=_noop, rows=-1)


def test_classes_object_accepted():
    el = textarea(name="n", value="", update=_noop, classes=Classes("a b"))
    assert list(el.attrs["class"]) == ["textarea", "a", "b"]