"""Turn a rendered page fragment into a complete Roc website document.

:func:`transform_file_content` is the single entry point the site builder
calls per page. It looks up the page metadata, splices the interactive
example into the homepage at :data:`~roc_www._constants.SPLICE_MARKER`,
wraps everything in the shared shell, and serializes the result.

Examples
--------
>>> from roc_www.transform import transform_file_content
>>> html = transform_file_content("community.html", "<p>hi</p>")
>>> "<title>Community</title>" in html
True
"""

from __future__ import annotations

import typing as typ

from . import interactive_example
from ._constants import HOMEPAGE, SPLICE_MARKER
from .config import DEFAULT_REGISTRY, PageRegistry
from .dom import render_document, text
from .shell import build_page
from .splice import splice

if typ.TYPE_CHECKING:
    from .dom import Node


def body_nodes(
    page_name: str, html_fragment: str, widget: Node | None = None
) -> list[Node]:
    """Return the ``<main>`` children for ``page_name``.

    The interactive example is only built for the homepage, and only when
    no ``widget`` is supplied.
    """
    if page_name != HOMEPAGE:
        return [text(html_fragment)]
    inserted = widget if widget is not None else interactive_example.view()
    return splice(SPLICE_MARKER, html_fragment, inserted)


def transform_file_content(
    page_name: str,
    html_fragment: str,
    *,
    registry: PageRegistry = DEFAULT_REGISTRY,
    widget: Node | None = None,
) -> str:
    """Wrap ``html_fragment`` in the site shell and return the full document.

    Parameters
    ----------
    page_name : str
        Output filename, e.g. ``"index.html"``. Unknown names render with an
        empty title and description.
    html_fragment : str
        Pre-rendered HTML for the page body, inserted without escaping.
    registry : PageRegistry, optional
        Metadata source; defaults to the built-in registry.
    widget : Node, optional
        Node spliced into the homepage; defaults to the interactive example.

    Returns
    -------
    str
        Complete HTML document ending with a newline.

    Raises
    ------
    SpliceMarkerNotFoundError
        If ``page_name`` is the homepage and ``html_fragment`` lacks the
        splice marker.
    """
    nodes = body_nodes(page_name, html_fragment, widget)
    return render_document(build_page(page_name, nodes, registry=registry))


__all__ = ["body_nodes", "transform_file_content"]
