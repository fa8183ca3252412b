"""Render Markdown page sources into HTML fragments."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from .link_rewriter import MarkdownLinkExtension

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)


class LanguageTaggedHtmlFormatter(HtmlFormatter):
    """Pygments formatter that records the block language on its wrapper div.

    ``codehilite`` passes each block's own language as ``lang_str`` (with the
    prefix configured empty), so fenced blocks, ``~~~`` fences, and indented
    blocks are all tagged independently. Blocks without a language are
    tagged ``text``.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.lang_str = lang_str or "text"

    def _wrap_div(
        self, inner: cabc.Iterable[tuple[int, str]]
    ) -> cabc.Iterator[tuple[int, str]]:
        wrapped = super()._wrap_div(inner)
        kind, opening = next(wrapped)
        language = escape(self.lang_str, quote=True)
        yield kind, f'{opening[:-1]} data-language="{language}">'
        yield from wrapped


class MarkdownRenderer:
    """Render Markdown with highlighted code and site-relative links."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        link_extension: Extension | None = None,
    ) -> None:
        """Initialize a renderer with a Pygments style and link extension.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        link_extension : Extension, optional
            Markdown extension used to rewrite links. Defaults to
            :class:`MarkdownLinkExtension`, which points ``.md`` links at the
            generated ``.html`` pages.
        """
        self.pygments_style = pygments_style
        self._link_extension = link_extension or MarkdownLinkExtension()

    def render(self, text: str) -> str:
        """Render ``text`` into an HTML fragment; blank input yields ``""``."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=[
                "fenced_code",
                "codehilite",
                "tables",
                "sane_lists",
                "toc",
                self._link_extension,
            ],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LanguageTaggedHtmlFormatter,
                    "lang_prefix": "",
                }
            },
        )
        return md.convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            return f"{fence}{language or ''}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["LanguageTaggedHtmlFormatter", "MarkdownRenderer"]
