"""Load site configuration YAML into typed models."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .defaults import DEFAULT_REGISTRY
from .helpers import _build_page_metadata, _optional_path, _optional_str
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path | None = None) -> SiteConfig:
    """Load the YAML configuration layered over the built-in page registry.

    Parameters
    ----------
    path : Path, optional
        Filesystem path to the YAML configuration file. When ``None`` the
        built-in registry and default directories are returned unchanged.

    Returns
    -------
    SiteConfig
        Resolved configuration with the merged page registry, input and
        output directories, and Pygments style.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    SiteConfigError
        If the top-level YAML structure or a page entry is not a mapping, or
        a title/description is not a string.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from roc_www.config import load_site_config
    >>> config = load_site_config()
    >>> config.registry.title("community.html")
    'Community'
    """
    if path is None:
        return SiteConfig(registry=DEFAULT_REGISTRY)
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = SiteConfig(registry=DEFAULT_REGISTRY)
    overrides = _build_page_metadata(raw.get("pages"))
    return SiteConfig(
        registry=DEFAULT_REGISTRY.merged(overrides),
        input_dir=_optional_path(raw.get("input_dir"), defaults.input_dir),
        output_dir=_optional_path(raw.get("output_dir"), defaults.output_dir),
        pygments_style=_optional_str(raw.get("pygments_style"))
        or defaults.pygments_style,
    )


__all__ = ["load_site_config"]
