"""Cyclopts CLI entrypoint for building the Roc website.

The ``roc-www`` console script renders the site: ``roc-www build`` walks the
content directory and writes every page wrapped in the shared shell, while
``roc-www render`` transforms a single fragment and prints the resulting
document, which is handy when editing the homepage around its splice marker.
Every option can also be supplied through ``ROC_WWW_*`` environment
variables.

Examples
--------
Build the site with the default directories:

>>> from roc_www.cli import main
>>> main()  # doctest: +SKIP

Preview one page:

>>> from roc_www.cli import app
>>> app(["render", "community.html", "content/community.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .generator import SiteBuilder
from .transform import transform_file_content

app = App(name="roc-www", config=cyclopts.config.Env("ROC_WWW_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render every page in the content directory into the site.")
def build(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config YAML", env_var="ROC_WWW_CONFIG")
    ] = None,
    input_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the content folder", env_var="ROC_WWW_INPUT_DIR"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="ROC_WWW_OUTPUT_DIR"),
    ] = None,
    pygments_style: typ.Annotated[
        str | None,
        Parameter(help="Pygments style for code blocks"),
    ] = None,
) -> None:
    """Build the website from Markdown and HTML fragments.

    Parameters
    ----------
    config : Path or None, optional
        YAML file layering page metadata and build settings over the
        built-in defaults.
    input_dir : Path or None, optional
        Content directory; overrides the config value.
    output_dir : Path or None, optional
        Output directory; overrides the config value.
    pygments_style : str or None, optional
        Highlighting style; overrides the config value.

    Raises
    ------
    SpliceMarkerNotFoundError
        If the homepage source lost its splice marker. The build stops.
    """
    site_config = load_site_config(config)
    if pygments_style:
        site_config.pygments_style = pygments_style
    builder = SiteBuilder(site_config, input_dir=input_dir, output_dir=output_dir)
    result = builder.run()
    for path in result.written:
        print(f"wrote {_format_path(path)}")
    print(f"copied {len(result.copied)} static files")


@app.command(help="Transform one HTML fragment and print the full page.")
def render(
    page_name: str,
    fragment: Path,
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config YAML", env_var="ROC_WWW_CONFIG")
    ] = None,
) -> None:
    """Print the document produced for ``fragment`` rendered as ``page_name``."""
    site_config = load_site_config(config)
    html = transform_file_content(
        page_name,
        fragment.read_text(encoding="utf-8"),
        registry=site_config.registry,
    )
    print(html, end="")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``roc-www`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
