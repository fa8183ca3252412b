"""Tests for the navbar, logo, footer, and page metadata lookups."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

import roc_www
from roc_www import metadata
from roc_www.config import DEFAULT_PAGES, DEFAULT_REGISTRY, PageMetadata
from roc_www.dom import render
from roc_www.shell import build_footer, build_logo, build_navbar
from roc_www.shell.navbar import LOGO_POINTS


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


@pytest.mark.parametrize(
    ("page_name", "expected"),
    [
        ("community.html", PageMetadata("Community", "The Roc community")),
        (
            "index.html",
            PageMetadata(
                "The Roc Programming Language", "A fast, friendly, functional language"
            ),
        ),
        (
            "donate.html",
            PageMetadata(
                "Donate to Roc",
                "Support the Roc programming language by donating or sponsoring",
            ),
        ),
        ("tutorial.html", PageMetadata("Roc Tutorial", "Learn the Roc programming language")),
    ],
)
def test_lookup_registered_pages(page_name: str, expected: PageMetadata) -> None:
    """Registered pages resolve to their configured metadata."""
    assert metadata.lookup(page_name) == expected, f"wrong metadata for {page_name}"
    assert metadata.title(page_name) == expected.title, "title should match lookup"
    assert metadata.description(page_name) == expected.description, (
        "description should match lookup"
    )


@pytest.mark.parametrize("page_name", ["", "about.html", "INDEX.HTML", "index"])
def test_lookup_unregistered_pages(page_name: str) -> None:
    """Anything else falls back to empty metadata."""
    assert metadata.lookup(page_name) == PageMetadata("", ""), (
        f"{page_name!r} should fall back to empty metadata"
    )


def test_registry_covers_site_pages() -> None:
    """The built-in registry holds exactly the six site pages."""
    assert set(DEFAULT_REGISTRY) == {
        "community.html",
        "docs.html",
        "index.html",
        "install.html",
        "donate.html",
        "tutorial.html",
    }, "registry should list the six site pages"
    assert dict(DEFAULT_REGISTRY) == DEFAULT_PAGES, "registry should mirror the defaults"


def test_registry_is_read_only() -> None:
    """The registry exposes no mutation API."""
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY["new.html"] = PageMetadata("x", "y")  # type: ignore[index]


def test_navbar_is_deterministic() -> None:
    """Rendering the homepage navbar twice yields identical markup."""
    first = render(build_navbar("index.html"))
    assert first == render(build_navbar("index.html")), "navbar markup should be stable"


@pytest.mark.parametrize(
    ("page_name", "hidden"),
    [("index.html", "true"), ("community.html", None), ("", None)],
)
def test_home_link_hidden_only_on_homepage(page_name: str, hidden: str | None) -> None:
    """Only the homepage hides its self-referencing home link."""
    home = _soup(render(build_navbar(page_name))).find(id="nav-home-link")
    assert home.get("aria-hidden") == hidden, f"unexpected aria-hidden on {page_name!r}"
    assert home["href"] == "/wip/", "home link should point at the site root"


def test_navbar_link_groups() -> None:
    """Links are grouped into two clusters under the /wip/ prefix."""
    soup = _soup(render(build_navbar("docs.html")))
    groups = soup.select("#top-bar-links .link-group")
    assert [[a["href"] for a in group.find_all("a")] for group in groups] == [
        ["/wip/tutorial", "/wip/install", "/wip/examples"],
        ["/wip/community", "/wip/docs", "/wip/donate"],
    ], "unexpected navbar link groups"
    assert soup.nav["aria-label"] == "primary", "nav should be labelled primary"


def test_logo_svg() -> None:
    """The logo is a titled SVG polygon."""
    svg = _soup(render(build_logo())).svg
    assert svg["viewbox"] == "0 -6 51 58", "unexpected logo viewBox"
    assert svg.title.string == "The Roc logo", "logo needs an accessible title"
    assert svg.polygon["points"] == LOGO_POINTS, "unexpected logo outline"


def test_footer_credits_hosting() -> None:
    """The footer links to the hosting provider."""
    footer = _soup(render(build_footer())).footer
    link = footer.find("a")
    assert link["href"] == "https://www.netlify.com", "footer should link to Netlify"
    assert footer.get_text() == "powered by Netlify", "unexpected footer text"


def test_metadata_lookups_exported_from_package() -> None:
    """The package root exposes the registry lookups."""
    assert roc_www.lookup is metadata.lookup, "lookup should be re-exported"
    assert roc_www.title("docs.html") == "Documentation", "title should be re-exported"
    assert roc_www.description("missing.html") == "", (
        "description should fall back to an empty string"
    )
