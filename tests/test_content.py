"""Tests for reading content documents from disk."""

from __future__ import annotations

import typing as typ

import pytest

from termdocs.content import dump_document, load_document
from termdocs.errors import ContentLoadError

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_json_document_uses_its_slug(tmp_path: Path) -> None:
    """An explicit slug wins over the file name."""
    path = tmp_path / "file.json"
    path.write_text('{"slug": "install", "title": "Install"}', encoding="utf-8")
    slug, raw = load_document(path)
    assert slug == "install", f"unexpected slug {slug!r}"
    assert raw["title"] == "Install", "title should be decoded"


def test_yaml_document_falls_back_to_stem(tmp_path: Path) -> None:
    """Without a slug the file stem identifies the document."""
    path = tmp_path / "network-setup.yml"
    path.write_text("title: Network\nslug: '  '\n", encoding="utf-8")
    slug, _raw = load_document(path)
    assert slug == "network-setup", f"unexpected slug {slug!r}"


def test_yaml_one_point_two_keeps_yes_as_string(tmp_path: Path) -> None:
    """YAML 1.2 rules apply, so ``yes`` stays a string."""
    path = tmp_path / "doc.yaml"
    path.write_text("title: yes\n", encoding="utf-8")
    _slug, raw = load_document(path)
    assert raw["title"] == "yes", f"unexpected title {raw['title']!r}"


@pytest.mark.parametrize(
    ("name", "text", "match"),
    [
        ("doc.txt", "title: x", "Unsupported content format"),
        ("doc.json", "{not json", "is not valid"),
        ("doc.yaml", "a: [1, 2", "is not valid"),
        ("doc.json", "[1, 2]", "mapping"),
    ],
)
def test_bad_documents_raise_content_load_error(
    tmp_path: Path, name: str, text: str, match: str
) -> None:
    """Unreadable input is reported as a content error."""
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ContentLoadError, match=match):
        load_document(path)


def test_missing_document_raises(tmp_path: Path) -> None:
    """A missing file is a content error, not an OSError."""
    with pytest.raises(ContentLoadError, match="could not be read"):
        load_document(tmp_path / "absent.json")


def test_dump_document_round_trips(tmp_path: Path) -> None:
    """Dumped documents load back unchanged."""
    path = tmp_path / "out.json"
    document = {"slug": "out", "title": "Out", "sections": []}
    dump_document(path, document)
    assert load_document(path) == ("out", document), "document should round-trip"
