"""Build the Roc programming language website.

This package wraps each page's rendered content in the shared site shell
(head metadata, top bar, footer) and splices the interactive code example
into the homepage. The ``roc-www`` console script drives full builds.

Exports
-------
- ``transform_file_content``: turn one page fragment into a full document.
- ``SpliceMarkerNotFoundError``: raised when the homepage lost its marker.
- ``lookup``, ``title``, ``description``: page metadata from the built-in
  registry.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from roc_www import transform_file_content
>>> transform_file_content("docs.html", "<p>x</p>").startswith("<!DOCTYPE html>")
True
"""

from __future__ import annotations

from .cli import app, main
from .metadata import description, lookup, title
from .splice import SpliceMarkerNotFoundError
from .transform import transform_file_content

__all__ = [
    "SpliceMarkerNotFoundError",
    "app",
    "description",
    "lookup",
    "main",
    "title",
    "transform_file_content",
]
