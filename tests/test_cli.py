"""Tests for the termdocs command-line entrypoints.

The subcommands are plain functions, so most tests call them directly and
inspect captured output; only the error path goes through :func:`main`.
"""

from __future__ import annotations

import json
import typing as typ

import pytest

from termdocs import cli
from termdocs.content import load_document

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write_json(path: Path, payload: dict[str, typ.Any]) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def guide(tmp_path: Path) -> Path:
    """Return a small, fully snapshotted document."""
    return _write_json(
        tmp_path / "guide.json",
        {
            "slug": "guide",
            "title": "Guide",
            "sections": [
                {
                    "title": "Setup",
                    "content": [
                        {"type": "text", "content": "Hello world"},
                        {"type": "code", "language": "bash", "highlightedLines": ["ls"]},
                    ],
                }
            ],
        },
    )


@pytest.fixture
def broken(tmp_path: Path) -> Path:
    """Return a document whose code block lacks its snapshot."""
    return _write_json(
        tmp_path / "broken.json",
        {
            "title": "Broken",
            "sections": [{"title": "x", "content": [{"type": "code", "language": "sh"}]}],
        },
    )


def test_render_plain_prints_rows_and_status(
    guide: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Plain output lists visible rows followed by the line range."""
    cli.render(guide, width=40, height=4, plain=True)
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Setup", "", "Hello world", "", "lines 1-4 of 6"], (
        f"unexpected output {lines!r}"
    )


def test_render_large_offset_shows_the_end(
    guide: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A huge offset scrolls to the last window."""
    cli.render(guide, width=40, height=2, offset=10**12, plain=True)
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["BASH", "ls", "lines 5-6 of 6"], f"unexpected output {lines!r}"


def test_render_painted_output_contains_text(
    guide: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Coloured output still carries the row text."""
    cli.render(guide, width=40, height=10)
    out = capsys.readouterr().out
    assert "Hello world" in out, "painted output should include paragraph text"
    assert "lines 1-6 of 6" in out, "painted output should include the status"


def test_check_passes_for_complete_snapshots(
    guide: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Complete documents produce a success summary."""
    cli.check([guide])
    out = capsys.readouterr().out
    assert "checked 1 document(s): snapshots complete" in out, f"unexpected output {out!r}"


def test_check_exits_non_zero_for_missing_snapshots(
    broken: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Issues are printed and the command exits with status 1."""
    with pytest.raises(SystemExit) as excinfo:
        cli.check([broken])
    assert excinfo.value.code == 1, f"unexpected exit code {excinfo.value.code!r}"
    out = capsys.readouterr().out
    assert "broken:sections[0].content[0] missing code highlightedLines" in out, (
        f"unexpected output {out!r}"
    )


def test_snapshot_writes_json_next_to_yaml_source(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """YAML sources are snapshotted into a sibling JSON document."""
    source = tmp_path / "intro.yaml"
    source.write_text(
        "title: Intro\n"
        "sections:\n"
        "  - title: Shell\n"
        "    content:\n"
        "      - type: command\n"
        "        language: bash\n"
        "        command: echo hi\n"
        "        output: hi\n",
        encoding="utf-8",
    )
    cli.snapshot(source)
    target = tmp_path / "intro.json"
    assert target.exists(), "snapshot should write a JSON file"
    assert "wrote" in capsys.readouterr().out, "snapshot should report the target"
    slug, raw = load_document(target)
    assert slug == "intro", f"slug should fall back to the file stem, got {slug!r}"
    block = raw["sections"][0]["content"][0]
    assert len(block["highlightedCommandLines"]) == 1, "one command line expected"


def test_main_reports_pipeline_errors(
    broken: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Pipeline errors are printed to stderr with the error's exit status."""
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["render", str(broken), "--plain"])
    assert excinfo.value.code == 2, f"unexpected exit code {excinfo.value.code!r}"
    assert "regenerate syntax snapshots" in capsys.readouterr().err, (
        "stderr should carry the remediation hint"
    )
