"""Top bar navigation and the Roc logo."""

from __future__ import annotations

from roc_www._constants import HOMEPAGE, NAV_PREFIX
from roc_www.dom import Element, element, text

LOGO_POINTS = (
    "0,0 23.8834,3.21052 37.2438,19.0101 45.9665,16.6324 50.5,22 45,22 "
    "44.0315,26.3689 26.4673,39.3424 27.4527,45.2132 17.655,53 23.6751,22.7086"
)

LINK_GROUPS: tuple[tuple[str, ...], ...] = (
    ("tutorial", "install", "examples"),
    ("community", "docs", "donate"),
)


def build_logo() -> Element:
    """Return the inline SVG Roc logo."""
    return element(
        "svg",
        {
            "id": "logo-svg",
            "viewBox": "0 -6 51 58",
            "xmlns": "http://www.w3.org/2000/svg",
            "aria-labelledby": "logo-svg-title",
        },
        element("title", {"id": "logo-svg-title"}, text("The Roc logo")),
        element("polygon", {"role": "presentation", "points": LOGO_POINTS}),
    )


def build_navbar(page_name: str) -> Element:
    """Return the ``<header id="top-bar">`` navigation for ``page_name``.

    On the homepage the home link is hidden from assistive technology since
    it would only point back at the current page.
    """
    home_attrs = {
        "id": "nav-home-link",
        "href": NAV_PREFIX,
        "title": "The Roc Programming Language Homepage",
    }
    if page_name == HOMEPAGE:
        home_attrs["aria-hidden"] = "true"

    groups = [
        element(
            "span",
            {"class": "link-group"},
            *(element("a", {"href": f"{NAV_PREFIX}{slug}"}, text(slug)) for slug in group),
        )
        for group in LINK_GROUPS
    ]
    return element(
        "header",
        {"id": "top-bar"},
        element(
            "nav",
            {"aria-label": "primary"},
            element(
                "a",
                home_attrs,
                build_logo(),
                element("span", {"class": "home-link-text"}, text("Roc")),
            ),
            element("div", {"id": "top-bar-links"}, *groups),
        ),
    )


__all__ = ["LINK_GROUPS", "LOGO_POINTS", "build_logo", "build_navbar"]
