"""Behaviour tests for syntax snapshot validation using pytest-bdd.

A document whose code block lacks ``highlightedLines`` must fail to build
with a remediation hint; regenerating the snapshots with Pygments makes the
same document render.

Usage
-----
Run ``pytest tests/bdd/test_snapshot_validation.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from termdocs.errors import SnapshotValidationError
from termdocs.pipeline import build_document_ast, layout_document
from termdocs.snapshots import SnapshotHighlighter

if typ.TYPE_CHECKING:
    from termdocs.render_ast import DocumentNode

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "snapshot_validation.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@given("a document with a code block missing highlightedLines")
def given_unsnapshotted(scenario_state: ScenarioState) -> None:
    """Store a raw document whose only code block has source but no snapshot."""
    scenario_state["raw"] = {
        "title": "Install",
        "sections": [
            {
                "title": "Boot",
                "content": [{"type": "code", "language": "bash", "code": "lsblk -f"}],
            }
        ],
    }


@when("I regenerate its syntax snapshots")
def when_regenerate(scenario_state: ScenarioState) -> None:
    """Fill the snapshot payloads with Pygments."""
    raw = typ.cast("dict[str, typ.Any]", scenario_state["raw"])
    scenario_state["raw"] = SnapshotHighlighter().snapshot_document(raw)


@when("I build the document")
def when_build(scenario_state: ScenarioState) -> None:
    """Build the AST, recording either the document or the error."""
    raw = typ.cast("dict[str, typ.Any]", scenario_state["raw"])
    try:
        scenario_state["document"] = build_document_ast(raw, "install")
    except SnapshotValidationError as exc:
        scenario_state["error"] = exc


@then(parsers.parse('a snapshot validation error names the "{block_type}" block'))
def then_error_names_block(scenario_state: ScenarioState, block_type: str) -> None:
    """The build failed on the expected block type."""
    error = scenario_state.get("error")
    assert isinstance(error, SnapshotValidationError), "expected a validation error"
    assert error.block_type == block_type, f"unexpected block type {error.block_type!r}"
    assert "document" not in scenario_state, "no document should have been built"


@then("the error message suggests regenerating syntax snapshots")
def then_error_has_hint(scenario_state: ScenarioState) -> None:
    """The message carries the remediation hint."""
    error = typ.cast("SnapshotValidationError", scenario_state["error"])
    assert "regenerate syntax snapshots" in str(error), f"no hint in {error}"


@then(parsers.parse('the rendered rows include the label "{label}"'))
def then_rows_include_label(scenario_state: ScenarioState, label: str) -> None:
    """Layout succeeds and shows the code label."""
    document = typ.cast("DocumentNode", scenario_state["document"])
    texts = [row.text for row in layout_document(document, 40)]
    assert label in texts, f"label {label!r} missing from {texts!r}"
    assert "lsblk -f" in texts, f"code line missing from {texts!r}"
