"""Immutable document tree used to assemble Roc website pages.

A page is built as a tree of three node kinds: :class:`Element` (tag,
ordered attributes, ordered children), :class:`Text` (markup inserted
verbatim), and :class:`Fragment` (siblings spliced in place of one node with
no wrapping tag). Trees are constructed fresh per render and never mutated
afterwards; every container field is a tuple.

The lowercase helpers :func:`element`, :func:`text`, and :func:`fragment`
keep the shell builders close to the shape of the markup they produce.

Examples
--------
>>> from roc_www.dom import element, text
>>> node = element("p", {"class": "lede"}, text("hi"))
>>> node.attributes
(('class', 'lede'),)
>>> node.children[0].content
'hi'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

Attributes = cabc.Mapping[str, str] | cabc.Iterable[tuple[str, str]]


@dc.dataclass(frozen=True, slots=True)
class Text:
    """Literal markup emitted as-is by the renderer."""

    content: str
    kind: typ.ClassVar[str] = "text"


@dc.dataclass(frozen=True, slots=True)
class Fragment:
    """Ordered siblings rendered without a wrapping tag."""

    children: tuple[Node, ...] = ()
    kind: typ.ClassVar[str] = "fragment"


@dc.dataclass(frozen=True, slots=True)
class Element:
    """An HTML element with ordered attributes and children.

    Attributes
    ----------
    tag : str
        Element name, e.g. ``"meta"`` or ``"svg"``.
    attributes : tuple[tuple[str, str], ...]
        ``(name, value)`` pairs in output order.
    children : tuple[Node, ...]
        Child nodes in document order. Ignored for void elements.
    """

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()
    kind: typ.ClassVar[str] = "element"

    @property
    def is_void(self) -> bool:
        """Return ``True`` when the element has no closing tag."""
        return self.tag in VOID_ELEMENTS

    def get(self, name: str) -> str | None:
        """Return the value of the first attribute called ``name``."""
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        return None


Node = Element | Text | Fragment


def _normalize_attributes(attributes: Attributes | None) -> tuple[tuple[str, str], ...]:
    """Coerce a mapping or pair iterable into an attribute tuple."""
    if attributes is None:
        return ()
    pairs = (
        attributes.items() if isinstance(attributes, cabc.Mapping) else attributes
    )
    return tuple((str(name), str(value)) for name, value in pairs)


def element(tag: str, attributes: Attributes | None = None, *children: Node) -> Element:
    """Build an :class:`Element` from a tag, attributes, and child nodes."""
    return Element(
        tag=tag,
        attributes=_normalize_attributes(attributes),
        children=tuple(children),
    )


def text(content: str) -> Text:
    """Build a :class:`Text` node."""
    return Text(content)


def fragment(*children: Node) -> Fragment:
    """Build a :class:`Fragment` grouping ``children``."""
    return Fragment(tuple(children))


__all__ = [
    "VOID_ELEMENTS",
    "Attributes",
    "Element",
    "Fragment",
    "Node",
    "Text",
    "element",
    "fragment",
    "text",
]
