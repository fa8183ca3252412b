"""Utility helpers shared by the roc_www configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import PageMetadata, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None, default: Path) -> Path:
    """Return ``value`` as a Path, or ``default`` when unset."""
    text = _optional_str(value)
    return Path(text) if text else default


def _require_text(page_name: str, field: str, value: object | None) -> str:
    """Return ``value`` when it is a string (or unset), otherwise raise."""
    match value:
        case None:
            return ""
        case str() as text:
            return text.strip()
        case _:
            msg = f"Page '{page_name}' field '{field}' must be a string."
            raise SiteConfigError(msg)


def _build_page_metadata(
    pages: typ.Mapping[str, typ.Any] | None,
) -> dict[str, PageMetadata]:
    """Build page metadata entries from the ``pages`` mapping of the config."""
    entries: dict[str, PageMetadata] = {}
    match pages:
        case None:
            return entries
        case dict() as items:
            pass
        case _:
            msg = "The 'pages' section must be a mapping of filenames to metadata."
            raise SiteConfigError(msg)
    for page_name, payload in items.items():
        match payload:
            case dict() as data:
                pass
            case _:
                msg = f"Page '{page_name}' must be a mapping with title/description."
                raise SiteConfigError(msg)
        entries[str(page_name)] = PageMetadata(
            title=_require_text(page_name, "title", data.get("title")),
            description=_require_text(
                page_name, "description", data.get("description")
            ),
        )
    return entries


__all__ = [
    "_build_page_metadata",
    "_optional_path",
    "_optional_str",
    "_require_text",
]
