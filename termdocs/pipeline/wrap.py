"""Character-accurate word wrapping over styled runs.

The engine never loses a character's style: runs are exploded into
per-character glyphs, grouped into whitespace-delimited words, force-split
when a word is wider than the target, greedily packed into lines, and only
coalesced back into runs when a line is flushed.

Embedded ``\\n`` characters are hard paragraph breaks. An empty paragraph
still yields one (empty) line, so blank lines keep their vertical space.

Example
-------
>>> from termdocs.pipeline.wrap import wrap_plain_lines
>>> from termdocs.render_ast import TextNode
>>> wrap_plain_lines([TextNode("alpha beta gamma")], 10)
['alpha beta', 'gamma']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import itertools
import typing as typ

from termdocs._constants import DEFAULT_MIN_WIDTH
from termdocs.render_ast import StyledRun

from .runs import inline_nodes_to_runs

if typ.TYPE_CHECKING:
    from termdocs.render_ast import ColorIntent, InlineNode

Glyph = tuple[str, StyledRun]
WrappedLine = list[StyledRun]


@dc.dataclass(slots=True)
class _Word:
    glyphs: list[Glyph]
    gap: list[Glyph] = dc.field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.glyphs)


def safe_wrap_width(width: int | float | None, min_width: int = DEFAULT_MIN_WIDTH) -> int:
    """Return ``width`` as an integer no smaller than ``min_width`` (itself >= 1)."""
    minimum = max(1, int(min_width))
    if width is None:
        return minimum
    try:
        requested = int(width)
    except (OverflowError, ValueError):
        return minimum
    return max(minimum, requested)


def _with_fallback(run: StyledRun, default_intent: ColorIntent) -> StyledRun:
    if run.color_intent is None and run.literal_color is None:
        return dc.replace(run, color_intent=default_intent)
    return run


def _split_paragraphs(
    runs: cabc.Iterable[StyledRun], default_intent: ColorIntent
) -> list[list[Glyph]]:
    paragraphs: list[list[Glyph]] = [[]]
    for run in runs:
        styled = _with_fallback(run, default_intent)
        for char in run.text:
            if char == "\n":
                paragraphs.append([])
                continue
            paragraphs[-1].append((char, styled))
    return paragraphs


def _extract_words(glyphs: cabc.Iterable[Glyph]) -> list[_Word]:
    words: list[_Word] = []
    current: list[Glyph] = []
    gap: list[Glyph] = []
    for glyph in glyphs:
        if glyph[0].isspace():
            if current:
                words.append(_Word(current, gap))
                current, gap = [], []
            gap.append(glyph)
            continue
        current.append(glyph)
    if current:
        words.append(_Word(current, gap))
    return words


def _chunk_word(word: _Word, width: int) -> list[_Word]:
    if word.length <= width:
        return [word]
    chunks = [
        _Word(word.glyphs[start : start + width])
        for start in range(0, word.length, width)
    ]
    chunks[0].gap = word.gap
    return chunks


def _coalesce(glyphs: cabc.Iterable[Glyph]) -> WrappedLine:
    line: WrappedLine = []
    for _key, group in itertools.groupby(glyphs, key=lambda glyph: glyph[1].style_key):
        members = list(group)
        line.append(members[0][1].with_text("".join(char for char, _ in members)))
    return line


def _pack(
    words: cabc.Sequence[_Word],
    width: int,
    separator: StyledRun,
    *,
    preserve_whitespace: bool,
) -> list[WrappedLine]:
    if not words:
        return [[]]

    lines: list[WrappedLine] = []
    current: list[Glyph] = []
    leading = True
    for word in words:
        for chunk in _chunk_word(word, width):
            gap = chunk.gap if preserve_whitespace else [(" ", separator)]
            if not current:
                if preserve_whitespace and leading and chunk.gap:
                    room = width - chunk.length
                    current.extend(chunk.gap[:room])
                current.extend(chunk.glyphs)
            elif len(current) + len(gap) + chunk.length <= width:
                current.extend(gap)
                current.extend(chunk.glyphs)
            else:
                lines.append(_coalesce(current))
                current = list(chunk.glyphs)
            leading = False
    if current:
        lines.append(_coalesce(current))
    return lines


def wrap_runs(
    runs: cabc.Iterable[StyledRun],
    width: int,
    default_intent: ColorIntent = "text",
    min_width: int = DEFAULT_MIN_WIDTH,
    *,
    preserve_whitespace: bool = False,
) -> list[WrappedLine]:
    """Wrap a stream of styled runs to ``width`` columns.

    Parameters
    ----------
    runs : Iterable[StyledRun]
        One logical text stream; ``\\n`` inside run text starts a new
        paragraph.
    width : int
        Target width. Values below ``min_width`` are clamped up to it.
    default_intent : ColorIntent, optional
        Intent applied to runs that carry neither an intent nor a literal
        colour, and to the separator spaces inserted between words.
    min_width : int, optional
        Lower bound for the effective width; defaults to ``1``.
    preserve_whitespace : bool, optional
        Keep each paragraph's leading indentation and the original spacing
        between words instead of collapsing it to one space. Used for code.

    Returns
    -------
    list[list[StyledRun]]
        Wrapped lines. Never empty: blank input yields ``[[]]``.
    """
    safe_width = safe_wrap_width(width, min_width)
    separator = StyledRun(" ", color_intent=default_intent)
    wrapped: list[WrappedLine] = []
    for glyphs in _split_paragraphs(runs, default_intent):
        wrapped.extend(
            _pack(
                _extract_words(glyphs),
                safe_width,
                separator,
                preserve_whitespace=preserve_whitespace,
            )
        )
    return wrapped or [[]]


def wrap_inline(
    nodes: cabc.Iterable[InlineNode],
    width: int,
    default_intent: ColorIntent = "text",
    min_width: int = DEFAULT_MIN_WIDTH,
) -> list[WrappedLine]:
    """Wrap inline nodes after mapping them onto runs."""
    return wrap_runs(
        inline_nodes_to_runs(nodes, default_intent), width, default_intent, min_width
    )


def wrap_plain_lines(
    nodes: cabc.Iterable[InlineNode],
    width: int,
    default_intent: ColorIntent = "text",
    min_width: int = DEFAULT_MIN_WIDTH,
) -> list[str]:
    """Return the plain text of each wrapped line of ``nodes``."""
    return [
        "".join(run.text for run in line)
        for line in wrap_inline(nodes, width, default_intent, min_width)
    ]


__all__ = [
    "WrappedLine",
    "safe_wrap_width",
    "wrap_inline",
    "wrap_plain_lines",
    "wrap_runs",
]
