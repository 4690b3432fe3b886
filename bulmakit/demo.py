"""A small demo page built from the components."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .common import Size
from .components.navbar import Navbar, navbar_item
from .elements.button import button_anchor
from .elements.icon import icon
from .elements.title import HeaderSize, subtitle, title
from .layout.container import container
from .layout.hero import HeroSize, hero
from .layout.tile import TileCtx, TileSize, tile
from .markup import Element, Fragment, render

_LINKS = (
    ("Markup", "https://example.com/markup"),
    ("Components", "https://example.com/components"),
    ("bulmakit", "https://example.com/bulmakit"),
)

_CARDS = (
    ("Markup", "A small HTML node tree that renders to text.", None),
    (
        "Components",
        "Navbars, heroes, tiles, forms and more, built as plain functions.",
        "logo.svg",
    ),
    ("bulmakit", "A component library based on the Bulma CSS framework.", None),
)


def _nav_link(label: str, href: str) -> Element:
    return navbar_item(
        children=button_anchor(
            classes=["is-black", "is-outlined"],
            rel="noopener noreferrer",
            target="_blank",
            href=href,
            children=label,
        )
    )


def _card(heading: str, text: str, logo: Optional[str]) -> Element:
    logo_icon = None
    if logo is not None:
        logo_icon = icon(
            size=Size.LARGE,
            classes="is-pulled-right",
            children=Element("img", None, {"src": logo}),
        )
    return tile(
        ctx=TileCtx.PARENT,
        children=tile(
            ctx=TileCtx.CHILD,
            classes=["notification", "is-success"],
            children=[
                logo_icon,
                subtitle(size=HeaderSize.IS_3, classes="has-text-white", children=heading),
                Element("p", text),
            ],
        ),
    )


def app() -> Fragment:
    """Build the demo page: a navbar above a full-height hero of tiles."""
    navbar = Navbar(
        classes="is-success",
        padded=True,
        navbrand=navbar_item(
            children=title(
                classes="has-text-white",
                size=HeaderSize.IS_4,
                children="Markup | Components | bulmakit",
            )
        ),
        navstart=Fragment(),
        navend=Fragment([_nav_link(label, href) for label, href in _LINKS]),
    )
    body = container(
        classes="is-centered",
        children=tile(
            ctx=TileCtx.ANCESTOR,
            children=tile(
                ctx=TileCtx.PARENT,
                size=TileSize.TWELVE,
                children=[_card(*card) for card in _CARDS],
            ),
        ),
    )
    page_hero = hero(
        classes="is-light",
        size=HeroSize.FULLHEIGHT_WITH_NAVBAR,
        body=body,
    )
    return Fragment([navbar.view(), page_hero])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the demo page as HTML to standard output or a file."""
    parser = argparse.ArgumentParser(description="Render the demo page as HTML.")
    parser.add_argument("-o", "--output", help="write the HTML to this file")
    args = parser.parse_args(argv)
    page = render(app()) + "\n"
    if args.output:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(page)
    else:
        sys.stdout.write(page)
    return 0


if __name__ == "__main__":
    sys.exit(main())