import pytest

from bulmakit.components.dropdown import DropdownMsg
from bulmakit.components.navbar import (
    Navbar,
    NavbarDropdown,
    NavbarFixed,
    NavbarItemTag,
    NavbarMsg,
    navbar_divider,
    navbar_item,
)
from bulmakit.markup import Classes, render


def find(root, name):
    return [e for e in root.iter() if name in Classes(e.attrs.get("class"))]


def classes_of(el):
    return Classes(el.attrs.get("class"))


def test_navbar_root_attributes():
    el = Navbar(classes="is-success", fixed=NavbarFixed.TOP).view()
    assert el.tag == "nav"
    assert list(classes_of(el)) == ["navbar", "is-success", "is-fixed-top"]
    assert el.attrs["role"] == "navigation"
    assert el.attrs["aria-label"] == "main navigation"


def test_navbar_fixed_bottom():
    el = Navbar(fixed=NavbarFixed.BOTTOM).view()
    assert "is-fixed-bottom" in classes_of(el)


def test_navbar_without_brand_has_no_brand_or_burger():
    el = Navbar().view()
    assert find(el, "navbar-brand") == []
    assert find(el, "navbar-burger") == []
    assert len(find(el, "navbar-menu")) == 1


def test_navbar_brand_has_burger_by_default():
    el = Navbar(navbrand="Brand", navburger_classes="extra").view()
    brand = find(el, "navbar-brand")
    assert len(brand) == 1
    assert "Brand" in brand[0].children
    burger = find(el, "navbar-burger")[0]
    assert "extra" in classes_of(burger)
    assert burger.attrs["aria-expanded"] == "false"
    assert len([c for c in burger.children if c.tag == "span"]) == 3


def test_navbar_burger_can_be_disabled():
    el = Navbar(navbrand="Brand", navburger=False).view()
    assert len(find(el, "navbar-brand")) == 1
    assert find(el, "navbar-burger") == []


def test_navbar_toggle_via_update():
    nb = Navbar(navbrand="Brand")
    assert nb.update(NavbarMsg.TOGGLE_MENU) is True
    assert nb.is_menu_open is True
    el = nb.view()
    assert "is-active" in classes_of(find(el, "navbar-menu")[0])
    burger = find(el, "navbar-burger")[0]
    assert "is-active" in classes_of(burger)
    assert burger.attrs["aria-expanded"] == "true"
    nb.update(NavbarMsg.TOGGLE_MENU)
    assert nb.is_menu_open is False


def test_navbar_toggle_via_burger_click():
    nb = Navbar(navbrand="Brand")
    burger = find(nb.view(), "navbar-burger")[0]
    burger.fire("click")
    assert nb.is_menu_open is True
    assert "is-active" not in classes_of(burger)
    assert "is-active" in classes_of(find(nb.view(), "navbar-menu")[0])


def test_navbar_start_and_end_sections():
    el = Navbar(navstart="S", navend="E").view()
    menu = find(el, "navbar-menu")[0]
    assert [classes_of(c) for c in menu.children] == [
        Classes("navbar-start"),
        Classes("navbar-end"),
    ]
    assert find(el, "navbar-start")[0].children == ("S",)


def test_navbar_padded_wraps_in_container():
    el = Navbar(padded=True).view()
    assert len(el.children) == 1
    assert el.children[0].attrs["class"] == "container"
    plain = Navbar().view()
    assert find(plain, "container") == []


def test_navbar_item_defaults_to_div():
    el = navbar_item(children="x")
    assert el.tag == "div"
    assert list(classes_of(el)) == ["navbar-item"]
    assert "href" not in el.attrs


def test_navbar_item_anchor_attributes():
    el = navbar_item(tag=NavbarItemTag.A, href="/home", rel="noopener", target="_blank")
    assert el.tag == "a"
    assert el.attrs["href"] == "/home"
    assert el.attrs["rel"] == "noopener"
    assert el.attrs["target"] == "_blank"


def test_navbar_item_anchor_defaults_empty_strings():
    el = navbar_item(tag="a")
    assert (el.attrs["href"], el.attrs["rel"], el.attrs["target"]) == ("", "", "")


def test_navbar_item_modifiers():
    el = navbar_item(classes="c", has_dropdown=True, expanded=True, tab=True, active=True)
    assert list(classes_of(el)) == [
        "navbar-item",
        "c",
        "has-dropdown",
        "is-expanded",
        "is-tab",
        "is-active",
    ]


def test_navbar_item_rejects_unknown_tag():
    with pytest.raises(ValueError):
        navbar_item(tag="span")


def test_navbar_divider_renders():
    assert render(navbar_divider()) == '<hr class="navbar-divider">'
    assert "x" in classes_of(navbar_divider(classes="x"))


def test_navbar_dropdown_structure():
    dd = NavbarDropdown(navlink="More", children="item", classes="c")
    el = dd.view()
    assert list(classes_of(el)) == ["navbar-item", "has-dropdown", "c"]
    link = find(el, "navbar-link")[0]
    assert link.tag == "a"
    assert link.children == ("More",)
    assert find(el, "navbar-dropdown")[0].children == ("item",)


def test_navbar_dropdown_modifiers():
    el = NavbarDropdown(navlink="L", dropup=True, right=True, boxed=True, arrowless=True).view()
    assert "has-dropdown-up" in classes_of(el)
    drop = classes_of(find(el, "navbar-dropdown")[0])
    assert "is-right" in drop and "is-boxed" in drop
    assert "is-arrowless" in classes_of(find(el, "navbar-link")[0])


def test_navbar_dropdown_opens_and_closes():
    dd = NavbarDropdown(navlink="L")
    find(dd.view(), "navbar-link")[0].fire("click")
    assert dd.is_menu_active is True
    el = dd.view()
    assert "is-active" in classes_of(el)
    overlay = el.children[0]
    assert "style" in overlay.attrs
    overlay.fire("click")
    assert dd.is_menu_active is False
    assert "is-active" not in classes_of(dd.view())


def test_navbar_dropdown_hoverable_ignores_messages():
    dd = NavbarDropdown(navlink="L", hoverable=True)
    assert dd.update(DropdownMsg.OPEN) is False
    assert dd.is_menu_active is False
    el = dd.view()
    assert "is-hoverable" in classes_of(el)
    assert find(el, "navbar-link")[0].fire("click") is None