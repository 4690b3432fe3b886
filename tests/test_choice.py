from bulmakit.form.choice import checkbox, radio
from bulmakit.markup import render


def _input(el):
    return next(node for node in el.iter() if node.tag == "input")


def test_checkbox_structure():
    el = checkbox(name="agree", checked=True, update=lambda v: v, children="I agree")
    assert el.tag == "label"
    assert list(el.attrs["class"]) == ["checkbox"]
    inp = _input(el)
    assert inp.attrs["type"] == "checkbox"
    assert inp.attrs["checked"] is True
    assert inp.attrs["name"] == "agree"
    assert el.children[1] == "I agree"


def test_checkbox_click_toggles():
    received = []
    checkbox(name="a", checked=False, update=received.append)
    el_on = checkbox(name="a", checked=True, update=received.append)
    el_off = checkbox(name="a", checked=False, update=received.append)
    _input(el_on).fire("click")
    _input(el_off).fire("click")
    assert received == [False, True]


def test_checkbox_disabled():
    el = checkbox(name="a", checked=False, update=print, disabled=True, classes="big")
    assert el.attrs["disabled"] is True
    assert _input(el).attrs["disabled"] is True
    assert list(el.attrs["class"]) == ["checkbox", "big"]


def test_radio_checked_when_values_match():
    el = radio(name="g", value="yes", checked_value="yes", update=print)
    assert _input(el).attrs["checked"] is True
    assert ' checked' in render(el)


def test_radio_unchecked():
    other = radio(name="g", value="yes", checked_value="no", update=print)
    none = radio(name="g", value="yes", checked_value=None, update=print)
    assert _input(other).attrs["checked"] is False
    assert _input(none).attrs["checked"] is False


def test_radio_input_sends_value():
    received = []
    el = radio(name="g", value="yes", checked_value=None, update=received.append)
    _input(el).fire("input", object())
    assert received == ["yes"]


def test_radio_structure():
    el = radio(name="g", value="v", checked_value=None, update=print, children="V")
    assert list(el.attrs["class"]) == ["radio"]
    inp = _input(el)
    assert inp.attrs["type"] == "radio"
    assert inp.attrs["name"] == "g"
    assert inp.attrs["value"] == "v"
    assert el.children[-1] == "V"