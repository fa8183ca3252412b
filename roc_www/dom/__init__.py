"""Document tree construction and serialization for Roc website pages."""

from .nodes import (
    VOID_ELEMENTS,
    Element,
    Fragment,
    Node,
    Text,
    element,
    fragment,
    text,
)
from .render import DOCTYPE, DocumentRenderer, render, render_document

__all__ = [
    "DOCTYPE",
    "VOID_ELEMENTS",
    "DocumentRenderer",
    "Element",
    "Fragment",
    "Node",
    "Text",
    "element",
    "fragment",
    "render",
    "render_document",
    "text",
]
