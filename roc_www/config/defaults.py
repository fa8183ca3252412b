"""Built-in page metadata for the Roc website."""

from __future__ import annotations

from .models import PageMetadata, PageRegistry

DEFAULT_PAGES: dict[str, PageMetadata] = {
    "community.html": PageMetadata(
        title="Community",
        description="The Roc community",
    ),
    "docs.html": PageMetadata(
        title="Documentation",
        description="Learn the Roc programming language",
    ),
    "index.html": PageMetadata(
        title="The Roc Programming Language",
        description="A fast, friendly, functional language",
    ),
    "install.html": PageMetadata(
        title="Install Roc",
        description="Install the Roc programming language",
    ),
    "donate.html": PageMetadata(
        title="Donate to Roc",
        description="Support the Roc programming language by donating or sponsoring",
    ),
    "tutorial.html": PageMetadata(
        title="Roc Tutorial",
        description="Learn the Roc programming language",
    ),
}

DEFAULT_REGISTRY = PageRegistry(DEFAULT_PAGES)

__all__ = ["DEFAULT_PAGES", "DEFAULT_REGISTRY"]
