"""Annotated code sample spliced into the homepage.

The widget shows a short Roc program where selected spans are focusable and
linked, through ``data-desc-id``, to a paragraph explaining that piece of
code. The site's script shows the matching description on hover or focus;
without scripting every description stays listed under the code and the
``<noscript>`` note says why.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
from html import escape

from .dom import Element, Node, element, text


@dc.dataclass(frozen=True, slots=True)
class ExampleSection:
    """A run of example code with an optional explanation."""

    code: str
    description: str | None = None


DEFAULT_SECTIONS: tuple[ExampleSection, ...] = (
    ExampleSection(
        "main =",
        "This defines main, which is where the program begins.",
    ),
    ExampleSection("\n    "),
    ExampleSection(
        "names = [\"Sam\", \"Lee\", \"Ari\"]",
        "A list of strings. Lists hold values of one type, in order.",
    ),
    ExampleSection("\n\n    "),
    ExampleSection(
        "greetings = List.map names \\name -> \"Hello, $(name)!\"",
        "List.map calls the given function on each element and returns a new "
        "list. The backslash starts an anonymous function, and $(name) "
        "interpolates name into the string.",
    ),
    ExampleSection("\n\n    "),
    ExampleSection(
        "Stdout.line! (Str.joinWith greetings \"\\n\")",
        "The ! suffix marks an effect: printing to standard output. "
        "Everything before this line was a pure computation.",
    ),
    ExampleSection("\n"),
)


def view(sections: cabc.Sequence[ExampleSection] = DEFAULT_SECTIONS) -> Element:
    """Return the interactive example as a node tree.

    Code and descriptions are plain text, so both are escaped before being
    wrapped in :class:`~roc_www.dom.Text` nodes.
    """
    code_nodes: list[Node] = []
    descriptions: list[Node] = []
    for section in sections:
        code = text(escape(section.code, quote=False))
        if section.description is None:
            code_nodes.append(code)
            continue
        desc_id = f"desc-{len(descriptions)}"
        code_nodes.append(
            element(
                "span",
                {"class": "interactive-desc", "data-desc-id": desc_id, "tabindex": "0"},
                code,
            )
        )
        descriptions.append(
            element(
                "p",
                {"class": "interactive-desc-text", "id": desc_id},
                text(escape(section.description, quote=False)),
            )
        )

    return element(
        "div",
        {"id": "homepage-interactive-example"},
        element(
            "div",
            {"class": "interactive-example-code"},
            element("pre", None, element("samp", None, *code_nodes)),
        ),
        element("div", {"id": "interactive-descriptions"}, *descriptions),
        element(
            "noscript",
            None,
            text("Enable JavaScript to see each explanation beside its code."),
        ),
    )


__all__ = ["DEFAULT_SECTIONS", "ExampleSection", "view"]
