from bulmakit.components.dropdown import Dropdown, DropdownMsg


def find(root, cls):
    for el in root.iter():
        cls_attr = el.attrs.get("class")
        if cls_attr is not None and cls in str(cls_attr).split():
            return el
    raise AssertionError(f"no element with class {cls}")


def find_tag(root, tag):
    return [el for el in root.iter() if el.tag == tag]


def test_initial_view_is_closed():
    dd = Dropdown(children="item", classes="extra")
    view = dd.view()
    assert list(view.attrs["class"]) == ["dropdown", "extra"]
    assert dd.is_menu_active is False
    assert not [el for el in view.iter() if "style" in el.attrs]


def test_children_go_into_dropdown_content():
    view = Dropdown(children=["a", "b"]).view()
    content = find(view, "dropdown-content")
    assert content.children == ("a", "b")
    menu = find(view, "dropdown-menu")
    assert menu.attrs["role"] == "menu"


def test_button_gets_classes_and_html():
    view = Dropdown(button_classes="is-info", button_html="Open").view()
    (btn,) = find_tag(view, "button")
    assert list(btn.attrs["class"]) == ["button", "is-info"]
    assert btn.children == ("Open",)


def test_click_opens_and_overlay_closes():
    dd = Dropdown()
    (btn,) = find_tag(dd.view(), "button")
    assert btn.fire("click", None) is True
    assert dd.is_menu_active is True

    opened = dd.view()
    assert "is-active" in opened.attrs["class"]
    overlays = [el for el in opened.iter() if "style" in el.attrs]
    assert len(overlays) == 1
    assert overlays[0].fire("click", None) is True
    assert dd.is_menu_active is False
    assert "is-active" not in dd.view().attrs["class"]


def test_update_messages():
    dd = Dropdown()
    assert dd.update(DropdownMsg.OPEN) is True
    assert dd.is_menu_active is True
    assert dd.update(DropdownMsg.CLOSE) is True
    assert dd.is_menu_active is False


def test_hoverable_ignores_messages():
    dd = Dropdown(hoverable=True)
    view = dd.view()
    assert "is-hoverable" in view.attrs["class"]
    (btn,) = find_tag(view, "button")
    assert btn.fire("click", None) is None
    assert dd.update(DropdownMsg.OPEN) is False
    assert dd.is_menu_active is False