from bulmakit.common import Size
from bulmakit.form.select import multi_select, select
from bulmakit.markup import Element, render


def _select_el(el):
    return next(node for node in el.iter() if node.tag == "select")


def _options():
    return [Element("option", "One", {"value": "1"}), Element("option", "Two")]


def test_select_classes():
    el = select(
        name="s", value="", update=print, classes="is-info", size=Size.SMALL, loading=True
    )
    assert el.tag == "div"
    assert list(el.attrs["class"]) == ["select", "is-info", "is-small", "is-loading"]


def test_select_attributes_and_children():
    opts = _options()
    el = select(name="s", value="1", update=print, children=opts, disabled=True)
    inner = _select_el(el)
    assert inner.attrs["name"] == "s"
    assert inner.attrs["value"] == "1"
    assert inner.attrs["disabled"] is True
    assert inner.children == tuple(opts)


def test_select_change_with_option_element():
    received = []
    el = select(name="s", value="", update=received.append)
    opts = _options()
    _select_el(el).fire("change", opts[0])
    _select_el(el).fire("change", opts[1])
    _select_el(el).fire("change", "raw")
    assert received == ["1", "Two", "raw"]


def test_multi_select_classes():
    el = multi_select(name="m", value=[], update=print, classes="x", size=Size.LARGE)
    assert list(el.attrs["class"]) == ["select", "is-multiple", "x", "is-large"]


def test_multi_select_attributes():
    el = multi_select(name="m", value=["a", "b"], update=print)
    inner = _select_el(el)
    assert inner.attrs["multiple"] is True
    assert inner.attrs["size"] == "4"
    assert inner.attrs["value"] == "a,b"
    assert 'size="4"' in render(el)


def test_multi_select_list_size():
    el = multi_select(name="m", value=[], update=print, list_size=7)
    assert _select_el(el).attrs["size"] == str(7)


def test_multi_select_change_collects_values():
    received = []
    el = multi_select(name="m", value=[], update=received.append)
    nested = Element("option", [Element("b", "Bold"), " text"])
    _select_el(el).fire("change", _options() + [nested])
    assert received == [["1", "Two", "Bold text"]]


def test_multi_select_change_empty():
    received = []
    el = multi_select(name="m", value=[], update=received.append)
    _select_el(el).fire("change", [])
    assert received == [[]]