"""Load and validate site configuration for Roc website builds.

This subpackage owns the page registry (filename to title/description) and
the optional ``site.yaml`` file that layers extra pages and build settings
over the built-in defaults. The primary entry point is
:func:`load_site_config`, which returns a :class:`SiteConfig` ready for the
site builder.

Examples
--------
>>> from roc_www.config import DEFAULT_REGISTRY
>>> DEFAULT_REGISTRY.description("community.html")
'The Roc community'
>>> DEFAULT_REGISTRY.lookup("nope.html").title
''
"""

from .defaults import DEFAULT_PAGES, DEFAULT_REGISTRY
from .loader import load_site_config
from .models import (
    EMPTY_METADATA,
    PageMetadata,
    PageRegistry,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "DEFAULT_PAGES",
    "DEFAULT_REGISTRY",
    "EMPTY_METADATA",
    "PageMetadata",
    "PageRegistry",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
