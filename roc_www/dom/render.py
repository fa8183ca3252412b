"""Serialize :mod:`roc_www.dom` trees to HTML strings.

Rendering goes through the ``node.jinja`` macro with Jinja2 autoescaping on,
so attribute values are escaped while :class:`~roc_www.dom.nodes.Text`
content is trusted markup and emitted verbatim. Void elements such as
``<meta>`` and ``<link>`` are written without closing tags.

Examples
--------
>>> from roc_www.dom import element, render, text
>>> render(element("a", {"href": "/wip/"}, text("Roc")))
'<a href="/wip/">Roc</a>'
"""

from __future__ import annotations

import functools
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

if typ.TYPE_CHECKING:
    from .nodes import Node

DOCTYPE = "<!DOCTYPE html>"


class DocumentRenderer:
    """Render node trees through the shared ``node.jinja`` template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment and load the node template.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``node.jinja``. Defaults to
            ``roc_www/templates``.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("node.jinja")

    def render(self, node: Node) -> str:
        """Return the markup for ``node`` and its descendants."""
        return self.template.render(root=node)

    def render_document(self, node: Node) -> str:
        """Return a full HTML document with doctype and trailing newline."""
        return f"{DOCTYPE}\n{self.render(node)}\n"


@functools.cache
def _default_renderer() -> DocumentRenderer:
    return DocumentRenderer()


def render(node: Node) -> str:
    """Render ``node`` with the package templates."""
    return _default_renderer().render(node)


def render_document(node: Node) -> str:
    """Render ``node`` as a complete HTML document."""
    return _default_renderer().render_document(node)


__all__ = ["DOCTYPE", "DocumentRenderer", "render", "render_document"]
