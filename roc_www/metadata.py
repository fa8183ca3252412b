"""Page metadata lookups bound to the built-in registry.

>>> from roc_www import metadata
>>> metadata.title("install.html")
'Install Roc'
>>> metadata.description("unknown.html")
''
"""

from __future__ import annotations

from .config import DEFAULT_REGISTRY, PageMetadata


def lookup(page_name: str) -> PageMetadata:
    """Return the registered metadata for ``page_name`` or the empty fallback."""
    return DEFAULT_REGISTRY.lookup(page_name)


def title(page_name: str) -> str:
    """Return the ``<title>`` text for ``page_name``."""
    return lookup(page_name).title


def description(page_name: str) -> str:
    """Return the description meta content for ``page_name``."""
    return lookup(page_name).description


__all__ = ["description", "lookup", "title"]
