"""Rewrite relative Markdown links to the HTML pages the build emits."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit, urlunsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "tel:", "data:", "javascript:")


class MarkdownLinkExtension(Extension):
    """Point links at sibling ``.md`` sources to their generated ``.html`` pages.

    Source pages link to each other by filename (``[tutorial](tutorial.md)``)
    so they stay navigable when browsed as Markdown; the built site serves
    ``tutorial.html`` instead.
    """

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the link treeprocessor on the Markdown instance."""
        md.treeprocessors.register(MarkdownLinkTreeprocessor(md), "roc_md_links", 15)


class MarkdownLinkTreeprocessor(Treeprocessor):
    """Swap the ``.md`` suffix of relative anchor targets for ``.html``."""

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed markdown tree."""
        for element in root.iter("a"):
            rewritten = rewrite_link(element.get("href"))
            if rewritten:
                element.set("href", rewritten)
        return root


def rewrite_link(target: str | None) -> str | None:
    """Return ``target`` with a ``.md`` path renamed to ``.html``, if relative.

    Examples
    --------
    >>> rewrite_link("tutorial.md#records")
    'tutorial.html#records'
    >>> rewrite_link("https://example.com/readme.md") is None
    True
    """
    if not target:
        return None
    if target.lower().startswith(EXTERNAL_PREFIXES) or target.startswith(("#", "//")):
        return None
    parsed = urlsplit(target)
    if parsed.scheme or parsed.netloc:
        return None
    stem, ext = posixpath.splitext(parsed.path)
    if ext.lower() != ".md":
        return None
    return urlunsplit(("", "", f"{stem}.html", parsed.query, parsed.fragment))


__all__ = ["MarkdownLinkExtension", "MarkdownLinkTreeprocessor", "rewrite_link"]
