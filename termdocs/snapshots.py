"""Generate and audit syntax snapshots for code and command blocks.

Content sources ship code pre-highlighted so the render pipeline never runs a
lexer. :class:`SnapshotHighlighter` produces those snapshots with Pygments,
encoding each token's style colour with the inline marker grammar decoded by
:mod:`termdocs.pipeline.syntax_tokens`. :func:`collect_snapshot_issues`
reports missing snapshots without raising, for use in content checks.

Example
-------
>>> from termdocs.snapshots import SnapshotHighlighter
>>> lines = SnapshotHighlighter("monokai").highlight("echo hi", "bash")
>>> len(lines)
1
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ._constants import (
    COLOR_MARKER_OPEN,
    COLOR_MARKER_TEMPLATE,
    END_MARKER,
    MARKER_GLYPH_SUBSTITUTE,
)
from .errors import ConfigError

if typ.TYPE_CHECKING:
    from pygments.lexer import Lexer
    from pygments.style import StyleMeta

logger = logging.getLogger(__name__)

RawBlock = typ.Mapping[str, typ.Any]


class SnapshotHighlighter:
    """Highlight source text into marker-encoded snapshot lines."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize the highlighter with a Pygments style name.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style whose token colours are recorded.
            Defaults to ``"monokai"``.

        Raises
        ------
        ConfigError
            If Pygments does not know ``pygments_style``.
        """
        self.pygments_style = pygments_style
        try:
            self._style: StyleMeta = get_style_by_name(pygments_style)
        except ClassNotFound as exc:
            msg = f"Unknown Pygments style '{pygments_style}'."
            raise ConfigError(msg) from exc

    def highlight(self, code: str, language: str | None = None) -> list[str]:
        """Return one snapshot line per source line of ``code``.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Pygments lexer name; defaults to ``"text"`` when not provided or
            when the lexer lookup fails.

        Returns
        -------
        list[str]
            Snapshot lines; an empty snippet yields an empty list.
        """
        if not code:
            return []
        lexer = self._lexer(language or "text")
        lines: list[list[tuple[str | None, str]]] = [[]]
        for token_type, value in lexer.get_tokens(code):
            color = self._style.style_for_token(token_type).get("color")
            pieces = value.split("\n")
            for index, piece in enumerate(pieces):
                if piece:
                    _append_piece(lines[-1], f"#{color}" if color else None, piece)
                if index < len(pieces) - 1:
                    lines.append([])
        return [_encode(line) for line in lines]

    def snapshot_document(self, raw: typ.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
        """Return a copy of ``raw`` with every snapshot array filled in.

        ``code`` blocks take their source from a ``code`` string and
        ``command`` blocks from a ``command`` string; Q&A answers are
        processed recursively. Existing snapshots are regenerated.
        """
        document = dict(raw)
        document["sections"] = [
            {**section, "content": self._snapshot_blocks(section.get("content"))}
            if isinstance(section, cabc.Mapping)
            else section
            for section in _as_list(raw.get("sections"))
        ]
        return document

    def _snapshot_blocks(self, blocks: object) -> list[typ.Any]:
        return [self._snapshot_block(block) for block in _as_list(blocks)]

    def _snapshot_block(self, block: object) -> object:
        if not isinstance(block, cabc.Mapping):
            return block
        updated = dict(block)
        language = block.get("language")
        match block.get("type"):
            case "code" if isinstance(block.get("code"), str):
                updated["highlightedLines"] = self.highlight(block["code"], language)
            case "command" if isinstance(block.get("command"), str):
                updated["highlightedCommandLines"] = self.highlight(
                    block["command"], language
                )
            case "qa":
                updated["items"] = [
                    {**item, "answer": self._snapshot_blocks(item.get("answer"))}
                    if isinstance(item, cabc.Mapping)
                    else item
                    for item in _as_list(block.get("items"))
                ]
        return updated

    @staticmethod
    def _lexer(language: str) -> Lexer:
        try:
            return get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.debug("no lexer for %r; falling back to plain text", language)
            return get_lexer_by_name("text", stripnl=False, ensurenl=False)


def _as_list(value: object) -> list[typ.Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def _append_piece(line: list[tuple[str | None, str]], color: str | None, text: str) -> None:
    if line and line[-1][0] == color:
        line[-1] = (color, line[-1][1] + text)
        return
    line.append((color, text))


def _escape(text: str) -> str:
    # Every marker opens with this glyph.
    return text.replace(COLOR_MARKER_OPEN[0], MARKER_GLYPH_SUBSTITUTE)


def _encode(line: cabc.Iterable[tuple[str | None, str]]) -> str:
    """Join coloured pieces into one marker-encoded snapshot line.

    Source text that contains the marker opening glyph ``‹`` is written with
    a lookalike character instead, so it can never be read back as a marker.
    """
    return "".join(
        f"{COLOR_MARKER_TEMPLATE.format(color=color)}{_escape(text)}{END_MARKER}"
        if color
        else _escape(text)
        for color, text in line
    )


def _has_string_array(value: object) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)


def _has_language(block: RawBlock) -> bool:
    language = block.get("language")
    return isinstance(language, str) and bool(language.strip())


def collect_snapshot_issues(
    slug: str, blocks: object, path_prefix: str = "content"
) -> list[str]:
    """Audit raw blocks for missing snapshots without raising.

    Parameters
    ----------
    slug : str
        Document identifier used to prefix each issue.
    blocks : object
        Raw block list; anything else yields no issues.
    path_prefix : str, optional
        Location of ``blocks`` within the document, used in messages.

    Returns
    -------
    list[str]
        Messages such as ``"install:content[2] missing code highlightedLines"``.
    """
    issues: list[str] = []
    for index, block in enumerate(_as_list(blocks)):
        path = f"{path_prefix}[{index}]"
        if not isinstance(block, cabc.Mapping):
            issues.append(f"{slug}:{path} malformed block")
            continue
        match block.get("type"):
            case "code":
                if not _has_language(block):
                    issues.append(f"{slug}:{path} missing code language")
                if not _has_string_array(block.get("highlightedLines")):
                    issues.append(f"{slug}:{path} missing code highlightedLines")
            case "command":
                if not _has_language(block):
                    issues.append(f"{slug}:{path} missing command language")
                if not _has_string_array(block.get("highlightedCommandLines")):
                    issues.append(
                        f"{slug}:{path} missing command highlightedCommandLines"
                    )
            case "qa":
                issues.extend(_qa_issues(slug, block, path))
    return issues


def _qa_issues(slug: str, block: RawBlock, path: str) -> list[str]:
    issues: list[str] = []
    for item_index, item in enumerate(_as_list(block.get("items"))):
        item_path = f"{path}.items[{item_index}]"
        if not isinstance(item, cabc.Mapping):
            issues.append(f"{slug}:{item_path} malformed QA item")
            continue
        answer = item.get("answer")
        if not isinstance(answer, (list, tuple)):
            issues.append(f"{slug}:{item_path} missing QA answer")
            continue
        issues.extend(collect_snapshot_issues(slug, answer, f"{item_path}.answer"))
    return issues


def audit_document(slug: str, raw: typ.Mapping[str, typ.Any]) -> list[str]:
    """Return snapshot issues for every section of a raw document."""
    issues: list[str] = []
    for index, section in enumerate(_as_list(raw.get("sections"))):
        if not isinstance(section, cabc.Mapping):
            issues.append(f"{slug}:sections[{index}] malformed section")
            continue
        issues.extend(
            collect_snapshot_issues(slug, section.get("content"), f"sections[{index}].content")
        )
    return issues


__all__ = [
    "SnapshotHighlighter",
    "audit_document",
    "collect_snapshot_issues",
]
