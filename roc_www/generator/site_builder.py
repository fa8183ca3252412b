"""Walk a content directory and write the finished Roc website.

:class:`SiteBuilder` is the build pipeline around
:func:`roc_www.transform.transform_file_content`. Each file under
``input_dir`` is handled by suffix:

* ``.md`` sources are rendered to HTML fragments with
  :class:`~roc_www.generator.renderer.MarkdownRenderer` and written as
  ``.html``;
* ``.html`` files are treated as ready-made fragments;
* anything else (CSS, fonts, images, the REPL bundle) is copied unchanged.

Page names passed to the transformer are POSIX paths relative to
``input_dir``, so only a root-level ``index.html`` or ``index.md`` is the
homepage. A homepage without the splice marker aborts the whole build.

Example
-------
>>> from roc_www.config import load_site_config
>>> from roc_www.generator import SiteBuilder
>>> result = SiteBuilder(load_site_config()).run()  # doctest: +SKIP
>>> result.written[0]  # doctest: +SKIP
PosixPath('build/community.html')
"""

from __future__ import annotations

import dataclasses as dc
import shutil
import typing as typ
from pathlib import Path

from roc_www.config import SiteConfigError
from roc_www.transform import transform_file_content

from .renderer import MarkdownRenderer

if typ.TYPE_CHECKING:
    from roc_www.config import SiteConfig

PAGE_SUFFIXES = (".md", ".html")


@dc.dataclass(slots=True)
class BuildResult:
    """Paths produced by a :class:`SiteBuilder` run."""

    written: list[Path] = dc.field(default_factory=list)
    copied: list[Path] = dc.field(default_factory=list)


class SiteBuilder:
    """Render every page under ``input_dir`` into ``output_dir``."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        input_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : SiteConfig
            Registry, directories, and Pygments style for the build.
        input_dir : Path, optional
            Override for ``config.input_dir``.
        output_dir : Path, optional
            Override for ``config.output_dir``.
        """
        self.config = config
        self.input_dir = input_dir or config.input_dir
        self.output_dir = output_dir or config.output_dir
        self.renderer = MarkdownRenderer(config.pygments_style)

    def run(self) -> BuildResult:
        """Build the site and return the written and copied paths.

        Raises
        ------
        FileNotFoundError
            If ``input_dir`` does not exist.
        SiteConfigError
            If two sources map to the same page, such as ``docs.md`` and
            ``docs.html``.
        SpliceMarkerNotFoundError
            If the homepage source lacks the splice marker. Files already
            written by this run are left in place.
        """
        if not self.input_dir.is_dir():
            msg = f"Input directory '{self.input_dir}' not found."
            raise FileNotFoundError(msg)

        result = BuildResult()
        sources_by_page: dict[str, Path] = {}
        for source in sorted(self.input_dir.rglob("*")):
            if not source.is_file():
                continue
            relative = source.relative_to(self.input_dir)
            if source.suffix in PAGE_SUFFIXES:
                page_name = self.page_name(relative)
                if page_name in sources_by_page:
                    msg = (
                        f"Both '{sources_by_page[page_name]}' and '{source}' "
                        f"would be written as '{page_name}'."
                    )
                    raise SiteConfigError(msg)
                sources_by_page[page_name] = source
                result.written.append(self._build_page(source, relative))
            else:
                result.copied.append(self._copy_static(source, relative))
        return result

    def page_name(self, relative: Path) -> str:
        """Return the transformer page name for a source path."""
        return relative.with_suffix(".html").as_posix()

    def _build_page(self, source: Path, relative: Path) -> Path:
        content = source.read_text(encoding="utf-8")
        if source.suffix == ".md":
            content = self.renderer.render(content)
        page_name = self.page_name(relative)
        html = transform_file_content(
            page_name, content, registry=self.config.registry
        )
        output_path = self.output_dir / page_name
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return output_path

    def _copy_static(self, source: Path, relative: Path) -> Path:
        output_path = self.output_dir / relative
        output_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, output_path)
        return output_path


__all__ = ["PAGE_SUFFIXES", "BuildResult", "SiteBuilder"]
