"""Markdown rendering and the site build pipeline."""

from .link_rewriter import MarkdownLinkExtension
from .renderer import MarkdownRenderer
from .site_builder import BuildResult, SiteBuilder

__all__ = [
    "BuildResult",
    "MarkdownLinkExtension",
    "MarkdownRenderer",
    "SiteBuilder",
]
