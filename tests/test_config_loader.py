"""Tests for loading ``site.yaml`` over the built-in page registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from roc_www.config import (
    DEFAULT_REGISTRY,
    PageMetadata,
    SiteConfigError,
    load_site_config,
)


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_no_config_uses_defaults() -> None:
    """Without a file the built-in registry and directories are used."""
    config = load_site_config()
    assert config.registry is DEFAULT_REGISTRY, "defaults should reuse the built-in registry"
    assert config.input_dir == Path("content"), "default input dir is content/"
    assert config.output_dir == Path("build"), "default output dir is build/"
    assert config.pygments_style == "monokai", "default style is monokai"


def test_pages_merge_over_defaults(tmp_path: Path) -> None:
    """YAML pages override and extend the built-in table."""
    path = _write(
        tmp_path,
        """
input_dir: www/content
output_dir: www/build
pygments_style: friendly
pages:
  community.html:
    title: Roc Community
  blog.html:
    title: Blog
    description: News from the Roc team
""",
    )
    config = load_site_config(path)
    assert config.registry.lookup("community.html") == PageMetadata(
        "Roc Community", ""
    ), "override should replace the community entry"
    assert config.registry.lookup("blog.html") == PageMetadata(
        "Blog", "News from the Roc team"
    ), "new pages should be added"
    assert config.registry.title("install.html") == "Install Roc", (
        "untouched pages keep their defaults"
    )
    assert config.input_dir == Path("www/content"), "input dir should be overridden"
    assert config.output_dir == Path("www/build"), "output dir should be overridden"
    assert config.pygments_style == "friendly", "style should be overridden"
    assert DEFAULT_REGISTRY.title("community.html") == "Community", (
        "merging must not modify the built-in registry"
    )


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    """An empty YAML document is equivalent to no overrides."""
    config = load_site_config(_write(tmp_path, ""))
    assert dict(config.registry) == dict(DEFAULT_REGISTRY), (
        "an empty file should keep the defaults"
    )


def test_missing_file(tmp_path: Path) -> None:
    """A path that does not exist is reported before parsing."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("- just\n- a list", "mapping"),
        ("pages:\n  - index.html", "'pages' section"),
        ("pages:\n  index.html: Home", "Page 'index.html'"),
        ("pages:\n  index.html:\n    title: 42", "field 'title'"),
    ],
)
def test_invalid_shapes_rejected(tmp_path: Path, body: str, message: str) -> None:
    """Malformed configuration raises SiteConfigError with a pointed message."""
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(_write(tmp_path, body))
