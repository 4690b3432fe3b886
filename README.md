# bulmakit

Build pages from Bulma CSS components in plain Python.

Every component is a function (or, for the interactive ones, a small class)
that returns a tree of markup nodes from `bulmakit.markup`. The tree can be
rendered to an HTML string, walked with `iter()`, and have its event
handlers called with `fire()`, so what a page contains can be checked
without a browser.

bulmakit has no runtime dependencies.

## Installation

```
pip install bulmakit
```

## Building markup

Components take keyword arguments only. `children` holds nested nodes,
plain strings or lists of them, and `classes` adds your own CSS classes on
top of the ones the component needs.

```python
from bulmakit.columns import column, columns
from bulmakit.elements.title import title
from bulmakit.markup import render

page = columns(
    centered=True,
    children=[
        column(children=[title(children=["Left"])]),
        column(classes="is-half", children=["Right"]),
    ],
)

print(render(page))
```

The building blocks in `bulmakit.markup` are:

- `Classes`: an ordered set of class names. It accepts strings (split on
  whitespace), enum members (their value), other `Classes` and iterables of
  these; `None` and `False` are skipped, and a name that is already present
  keeps its first position. Anything else raises `TypeError`.
- `Element(tag, children, attrs, events)`: an HTML element. Attributes set
  to `None` or `False` are left out, `True` renders a bare attribute, and
  text is HTML-escaped. Void tags such as `input` and `hr` reject children
  with `ValueError`.
- `Fragment(children)`: sibling nodes without a wrapping element.
- `render(node)`: renders a node, a string, `None` or an iterable of nodes.

`Element.fire(event, *args)` calls the handler bound to that event and
returns its result; a handler bound as `None` does nothing, and an event
with no binding raises `KeyError`. Click handlers are bound under
`"click"`, form inputs under `"input"` or `"change"`.

## What is included

- `bulmakit.columns`: `columns`, `column`
- `bulmakit.elements.basic`: `block`, `box`, `content`, `delete`,
  `notification`, `progress`
- `bulmakit.elements.button`: `buttons`, `button`, `button_anchor`,
  `button_input_submit`, `button_input_reset`, `ButtonGroupSize`
- `bulmakit.elements.icon`: `icon`, `image`, `ImageSize`
- `bulmakit.elements.table`: `table`
- `bulmakit.elements.tag`: `tag`, `tags`
- `bulmakit.elements.title`: `title`, `subtitle`, `HeaderSize`
- `bulmakit.components.breadcrumb`: `breadcrumb`, `BreadcrumbSize`,
  `BreadcrumbSeparator`
- `bulmakit.components.card`: `card`, `card_header`, `card_image`,
  `card_content`, `card_footer`
- `bulmakit.components.dropdown`: `Dropdown`, `DropdownMsg`
- `bulmakit.components.menu`: `menu`, `menu_list`, `menu_label`
- `bulmakit.components.message`: `message`, `message_header`,
  `message_body`
- `bulmakit.components.modal`: `Modal`, `ModalCard`, `ModalMsg`,
  `ModalCloseMsg`, `ModalCloser`
- `bulmakit.components.navbar`: `Navbar`, `NavbarMsg`, `NavbarFixed`,
  `navbar_item`, `NavbarItemTag`, `navbar_divider`, `NavbarDropdown`
- `bulmakit.components.pagination`: `pagination`, `pagination_item`,
  `PaginationItemType`, `pagination_ellipsis`
- `bulmakit.components.panel`: `panel`, `panel_tabs`, `panel_block`
- `bulmakit.components.tabs`: `tabs`
- `bulmakit.form.field`: `field`, `control`, `AddonsAlign`,
  `GroupedAlign`, `LabelSize`
- `bulmakit.form.file`: `file`
- `bulmakit.form.input`: `text_input`, `InputType`
- `bulmakit.form.choice`: `checkbox`, `radio`
- `bulmakit.form.select`: `select`, `multi_select`
- `bulmakit.form.textarea`: `textarea`
- `bulmakit.layout.container`: `container`, `footer`
- `bulmakit.layout.hero`: `hero`, `HeroSize`
- `bulmakit.layout.level`: `level`, `level_left`, `level_right`,
  `level_item`
- `bulmakit.layout.media`: `media`, `media_left`, `media_right`,
  `media_content`
- `bulmakit.layout.section`: `section`, `SectionSize`
- `bulmakit.layout.tile`: `tile`, `TileCtx`, `TileSize`

Shared modifiers live in `bulmakit.common` as `Size` and `Alignment`. Every
modifier enum's value, and its `str()`, is the matching Bulma class name,
for example `Size.LARGE` is `"is-large"` and `TileSize.TWELVE` is
`"is-12"`.

## Form controls

Form controls are controlled: you pass in the current value and an
`update` callback, and firing the control's event calls `update` with the
new value.

```python
from bulmakit.form.input import text_input

seen = []
field = text_input(name="email", value="", update=seen.append)
field.fire("input", "user@example.com")
assert seen == ["user@example.com"]
```

`checkbox` calls `update` with the toggled state when clicked, `radio`
with its own `value`, `select` with the chosen option's `value` attribute
(or its text), `multi_select` with a list of those, and `file` with a list
of the selected files. `textarea` raises `ValueError` for negative `rows`.

## Interactive components

`Dropdown`, `NavbarDropdown`, `Navbar`, `Modal` and `ModalCard` keep a
little state, such as whether a menu is open. Call `view()` to get the
current markup and `update(msg)` to apply one of the component's messages;
`update` returns whether the view changed. The handlers attached to the
rendered nodes send those same messages, so firing an event on the markup
changes what the next `view()` shows. Hoverable dropdowns ignore messages.

`ModalCloser` lets any part of an application close a modal by its id:

```python
from bulmakit.components.modal import Modal, ModalCloseMsg, ModalCloser, ModalMsg

closer = ModalCloser()
modal = Modal(id="modal-0", children="Hello")
handle = closer.connect(modal.update)

modal.update(ModalMsg.OPEN)
closer.send(ModalCloseMsg("modal-0"))
assert not modal.is_active

closer.disconnect(handle)
```

A `ModalCloseMsg` with another id is ignored.

## Demo

```
bulmakit-demo
bulmakit-demo --output page.html
```

renders a sample page made from a navbar, a hero and a grid of tiles, to
standard output or to the given file.

## What it does not do

bulmakit builds and renders HTML text on the server side. It does not run
in a browser, ship Bulma's stylesheet, or wire events to a live page:
handlers are only called through `Element.fire`. There are no router-aware
link or button components.

## Running the tests

```
pip install "bulmakit[test]"
pytest
```