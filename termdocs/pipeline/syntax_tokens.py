r"""Decode syntax-snapshot lines into coloured tokens.

Snapshot lines interleave plain text with inline colour markers: a start
marker ``‹color:VALUE›`` opens a span, ``‹/›`` closes the innermost open span.
Markers may nest or sit back to back; an unterminated span runs to the end of
the line and a stray end marker is ignored. Text outside any span has no
colour and falls back to the caller's intent.

Example
-------
>>> from termdocs.pipeline.syntax_tokens import parse_syntax_token_line
>>> parse_syntax_token_line("‹color:#b392f0›echo‹/› hi")
[SyntaxToken(text='echo', color='#b392f0'), SyntaxToken(text=' hi', color=None)]
"""

from __future__ import annotations

import dataclasses as dc
import re

from termdocs._constants import COLOR_MARKER_CLOSE, COLOR_MARKER_OPEN, END_MARKER

MARKER_PATTERN = re.compile(
    re.escape(COLOR_MARKER_OPEN)
    + r"([^"
    + re.escape(COLOR_MARKER_CLOSE + COLOR_MARKER_OPEN[0])
    + r"]*)"
    + re.escape(COLOR_MARKER_CLOSE)
    + "|"
    + re.escape(END_MARKER)
)


@dc.dataclass(frozen=True, slots=True)
class SyntaxToken:
    """A span of snapshot text and its literal colour, if any."""

    text: str
    color: str | None = None


def _append_token(tokens: list[SyntaxToken], text: str, color: str | None) -> None:
    if not text:
        return
    if tokens and tokens[-1].color == color:
        tokens[-1] = SyntaxToken(tokens[-1].text + text, color)
        return
    tokens.append(SyntaxToken(text, color))


def parse_syntax_token_line(line: str) -> list[SyntaxToken]:
    """Split a highlighted line into ordered tokens.

    Parameters
    ----------
    line : str
        One snapshot line. Plain text without markers yields a single
        uncoloured token.

    Returns
    -------
    list[SyntaxToken]
        Tokens in source order with adjacent same-colour spans merged. An
        empty line yields an empty list.
    """
    tokens: list[SyntaxToken] = []
    stack: list[str | None] = []
    cursor = 0
    for match in MARKER_PATTERN.finditer(line):
        _append_token(tokens, line[cursor : match.start()], stack[-1] if stack else None)
        cursor = match.end()
        if match.group(0) == END_MARKER:
            if stack:
                stack.pop()
            continue
        stack.append(match.group(1).strip() or None)
    _append_token(tokens, line[cursor:], stack[-1] if stack else None)
    return tokens


def strip_syntax_markers(line: str) -> str:
    """Return the plain text of a snapshot line."""
    return "".join(token.text for token in parse_syntax_token_line(line))


def syntax_token_colors(line: str) -> list[str]:
    """Return the literal colours used by ``line`` in order of appearance."""
    return [token.color for token in parse_syntax_token_line(line) if token.color]


__all__ = [
    "MARKER_PATTERN",
    "SyntaxToken",
    "parse_syntax_token_line",
    "strip_syntax_markers",
    "syntax_token_colors",
]
