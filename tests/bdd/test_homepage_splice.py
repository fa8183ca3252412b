"""Behaviour tests for splicing the interactive example into the homepage.

The feature file ``homepage_splice.feature`` covers both sides of the
homepage contract: with the sentinel comment present the example is inserted
in its place, and without it the transform refuses to produce a page.

Usage
-----
Run ``pytest tests/bdd/test_homepage_splice.py -v`` after installing the
test extra (``pip install -e .[test]``). No network or filesystem access is
required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from roc_www import SpliceMarkerNotFoundError, transform_file_content
from roc_www._constants import SPLICE_MARKER

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "homepage_splice.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a homepage fragment containing the splice marker")
def given_marked_fragment(scenario_state: dict[str, object]) -> None:
    """Store a homepage fragment with the marker between two paragraphs."""
    scenario_state["fragment"] = f"<p>before</p>{SPLICE_MARKER}<p>after</p>"


@given("a homepage fragment without the splice marker")
def given_unmarked_fragment(scenario_state: dict[str, object]) -> None:
    """Store a homepage fragment whose marker has been edited away."""
    scenario_state["fragment"] = "<p>before</p><!-- example goes here --><p>after</p>"


@when("I transform the homepage fragment")
def when_transform(scenario_state: dict[str, object]) -> None:
    """Render the stored fragment as the homepage."""
    fragment = typ.cast("str", scenario_state["fragment"])
    scenario_state["html"] = transform_file_content("index.html", fragment)


@when("I try to transform the homepage fragment")
def when_try_transform(scenario_state: dict[str, object]) -> None:
    """Render the stored fragment, capturing the expected failure."""
    fragment = typ.cast("str", scenario_state["fragment"])
    with pytest.raises(SpliceMarkerNotFoundError) as excinfo:
        transform_file_content("index.html", fragment)
    scenario_state["error"] = excinfo.value


@then("the interactive example appears between the surrounding content")
def then_example_between(scenario_state: dict[str, object]) -> None:
    """Check the widget sits after the leading and before the trailing text."""
    html = typ.cast("str", scenario_state["html"])
    before = html.index("<p>before</p>")
    widget = html.index('<div id="homepage-interactive-example">')
    after = html.index("<p>after</p>")
    assert before < widget < after, (
        "expected the interactive example between the surrounding paragraphs"
    )


@then("the splice marker is absent from the output")
def then_marker_absent(scenario_state: dict[str, object]) -> None:
    """Check the sentinel comment was consumed."""
    html = typ.cast("str", scenario_state["html"])
    assert SPLICE_MARKER not in html, "splice marker should not survive rendering"


@then("the transform fails naming the missing marker")
def then_fails(scenario_state: dict[str, object]) -> None:
    """Check the error identifies the marker the maintainer needs to restore."""
    error = typ.cast("SpliceMarkerNotFoundError", scenario_state["error"])
    assert error.marker == SPLICE_MARKER, "error should carry the missing marker"
    assert SPLICE_MARKER in str(error), "error message should quote the marker"
    assert "homepage" in str(error), "error message should mention the homepage"
