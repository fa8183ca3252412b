"""Assemble the shared page shell around a page's body content.

Every page on the site shares the same ``<head>`` (metadata, font preloads,
REPL prefetch, stylesheets, favicon) and the same top bar and footer; only
the title, description, and ``<main>`` content vary. :func:`build_page`
returns the whole document as a :mod:`roc_www.dom` tree ready for
:func:`roc_www.dom.render_document`.
"""

from __future__ import annotations

import collections.abc as cabc
from html import escape

from roc_www._constants import (
    FAVICON_PATH,
    FONT_PRELOADS,
    HOMEPAGE,
    HOMEPAGE_BODY_ID,
    HOSTING_PROVIDER,
    HOSTING_PROVIDER_URL,
    MASK_ICON_COLOR,
    NO_JS_SCRIPT,
    REPL_SCRIPT_PATH,
    STYLESHEETS,
)
from roc_www.config import DEFAULT_REGISTRY, PageRegistry
from roc_www.dom import Element, Node, element, text

from .navbar import build_navbar


def preload_woff2(url: str) -> Element:
    """Return a ``<link rel="preload">`` hint for a woff2 font."""
    # Font preloads need crossorigin even for same-origin requests.
    return element(
        "link",
        {
            "rel": "preload",
            "as": "font",
            "type": "font/woff2",
            "href": url,
            "crossorigin": "anonymous",
        },
    )


def build_head(page_name: str, registry: PageRegistry = DEFAULT_REGISTRY) -> Element:
    """Return the ``<head>`` element for ``page_name``."""
    metadata = registry.lookup(page_name)
    # Text nodes are emitted verbatim; titles are plain strings.
    return element(
        "head",
        None,
        element("meta", {"charset": "utf-8"}),
        element("title", None, text(escape(metadata.title, quote=False))),
        element("meta", {"name": "description", "content": metadata.description}),
        element("meta", {"name": "viewport", "content": "width=device-width"}),
        element("link", {"rel": "icon", "href": FAVICON_PATH}),
        *(preload_woff2(url) for url in FONT_PRELOADS),
        element("link", {"rel": "prefetch", "href": REPL_SCRIPT_PATH}),
        *(element("link", {"rel": "stylesheet", "href": href}) for href in STYLESHEETS),
        # Safari only honours mask-icon and needs a literal colour here.
        element(
            "link",
            {"rel": "mask-icon", "href": FAVICON_PATH, "color": MASK_ICON_COLOR},
        ),
        element("script", None, text(NO_JS_SCRIPT)),
    )


def build_footer() -> Element:
    """Return the site footer crediting the hosting provider."""
    return element(
        "footer",
        None,
        element(
            "p",
            None,
            text("powered by "),
            element("a", {"href": HOSTING_PROVIDER_URL}, text(HOSTING_PROVIDER)),
        ),
    )


def build_page(
    page_name: str,
    body_nodes: cabc.Iterable[Node],
    *,
    registry: PageRegistry = DEFAULT_REGISTRY,
) -> Element:
    """Wrap ``body_nodes`` in the full page shell.

    Parameters
    ----------
    page_name : str
        Output filename of the page, e.g. ``"community.html"``. Selects the
        title and description and toggles the homepage-only body id and
        navbar behaviour.
    body_nodes : Iterable[Node]
        Content placed inside ``<main>`` in order.
    registry : PageRegistry, optional
        Metadata source; defaults to the built-in registry.

    Returns
    -------
    Element
        The ``<html lang="en" class="no-js">`` root element.
    """
    body_attrs = {"id": HOMEPAGE_BODY_ID} if page_name == HOMEPAGE else None
    return element(
        "html",
        {"lang": "en", "class": "no-js"},
        build_head(page_name, registry),
        element(
            "body",
            body_attrs,
            build_navbar(page_name),
            element("main", None, *body_nodes),
            build_footer(),
        ),
    )


__all__ = ["build_footer", "build_head", "build_page", "preload_woff2"]
