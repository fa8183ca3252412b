"""Builders for the page shell shared by every Roc website page."""

from .navbar import build_logo, build_navbar
from .page import build_footer, build_head, build_page, preload_woff2

__all__ = [
    "build_footer",
    "build_head",
    "build_logo",
    "build_navbar",
    "build_page",
    "preload_woff2",
]
