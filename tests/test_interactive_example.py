"""Tests for the homepage interactive example widget."""

from __future__ import annotations

from bs4 import BeautifulSoup

from roc_www.dom import render
from roc_www.interactive_example import DEFAULT_SECTIONS, ExampleSection, view


def test_default_example_descriptions_match_annotated_spans() -> None:
    """Each annotated span links to exactly one description paragraph."""
    soup = BeautifulSoup(render(view()), "html.parser")
    spans = soup.select("samp .interactive-desc")
    paragraphs = soup.select("#interactive-descriptions .interactive-desc-text")
    annotated = [section for section in DEFAULT_SECTIONS if section.description]
    assert len(spans) == len(paragraphs) == len(annotated), (
        "one span and one paragraph per annotated section"
    )
    assert [span["data-desc-id"] for span in spans] == [p["id"] for p in paragraphs], (
        "span ids should match description ids"
    )
    assert all(span["tabindex"] == "0" for span in spans), "spans must be focusable"


def test_default_example_code_text() -> None:
    """The code block reads as the concatenated example source."""
    soup = BeautifulSoup(render(view()), "html.parser")
    expected = "".join(section.code for section in DEFAULT_SECTIONS)
    assert soup.samp.get_text() == expected, "code text should match the sections"


def test_code_and_descriptions_are_escaped() -> None:
    """Example text is plain text, not markup."""
    html = render(
        view([ExampleSection("a < b", "x & y"), ExampleSection(" <done>")])
    )
    assert "a &lt; b" in html, "code should be escaped"
    assert "x &amp; y" in html, "descriptions should be escaped"
    assert " &lt;done&gt;" in html, "unannotated code should be escaped"
    assert 'data-desc-id="desc-0"' in html, "first annotation should be desc-0"
