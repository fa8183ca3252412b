"""Typed models describing Roc website configuration structures."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import types
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class PageMetadata:
    """Title and description rendered into a page's ``<head>``."""

    title: str = ""
    description: str = ""


EMPTY_METADATA = PageMetadata()


class PageRegistry(cabc.Mapping[str, PageMetadata]):
    """Read-only mapping from output filename to :class:`PageMetadata`.

    Lookups are total: names missing from the registry resolve to
    :data:`EMPTY_METADATA` rather than raising, so a page the registry does
    not know about still renders with an empty title and description.

    Examples
    --------
    >>> registry = PageRegistry({"docs.html": PageMetadata("Docs", "Read me")})
    >>> registry.title("docs.html")
    'Docs'
    >>> registry.lookup("missing.html")
    PageMetadata(title='', description='')
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: cabc.Mapping[str, PageMetadata] | None = None) -> None:
        self._entries: cabc.Mapping[str, PageMetadata] = types.MappingProxyType(
            dict(entries or {})
        )

    def __getitem__(self, key: str) -> PageMetadata:
        return self._entries[key]

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PageRegistry({dict(self._entries)!r})"

    def lookup(self, page_name: str) -> PageMetadata:
        """Return metadata for ``page_name`` or the empty fallback."""
        return self._entries.get(page_name, EMPTY_METADATA)

    def title(self, page_name: str) -> str:
        """Return the ``<title>`` text for ``page_name``."""
        return self.lookup(page_name).title

    def description(self, page_name: str) -> str:
        """Return the description meta content for ``page_name``."""
        return self.lookup(page_name).description

    def merged(self, overrides: cabc.Mapping[str, PageMetadata]) -> PageRegistry:
        """Return a new registry with ``overrides`` layered over this one."""
        combined: dict[str, PageMetadata] = dict(self._entries)
        combined.update(overrides)
        return PageRegistry(combined)


@dc.dataclass(slots=True)
class SiteConfig:
    """Resolved settings for a full site build."""

    registry: PageRegistry
    input_dir: Path = Path("content")
    output_dir: Path = Path("build")
    pygments_style: str = "monokai"


__all__ = [
    "EMPTY_METADATA",
    "PageMetadata",
    "PageRegistry",
    "SiteConfig",
    "SiteConfigError",
]
