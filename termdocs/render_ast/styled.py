"""Styled runs and rows: the output vocabulary of the layout pipeline.

A :class:`StyledRun` is a span of text sharing one set of style attributes;
a :class:`StyledRow` is one fully laid-out terminal line tagged with a
semantic kind. Colours are symbolic intents resolved later by a theme, except
for ``literal_color`` which carries exact syntax-highlight colours and always
wins over ``color_intent``.

Example
-------
>>> from termdocs.render_ast.styled import StyledRow, StyledRun
>>> row = StyledRow("paragraph", (StyledRun("Hello", color_intent="text"),))
>>> row.text
'Hello'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

ColorIntent = typ.Literal[
    "text",
    "dim_text",
    "accent",
    "info",
    "warning",
    "error",
    "success",
    "section_heading",
    "section_subheading",
    "command_prompt",
    "card_background",
    "command_bar_background",
    "warning_background",
]

RowKind = typ.Literal[
    "meta",
    "heading",
    "paragraph",
    "code",
    "command",
    "table",
    "note",
    "qa",
    "conversation",
    "interactive",
    "spacer",
]

StyleKey = tuple[str | bool | None, ...]


@dc.dataclass(frozen=True, slots=True)
class StyledRun:
    """Contiguous text sharing identical style attributes.

    Attributes
    ----------
    text : str
        The characters of the run; may be empty for placeholder runs.
    color_intent : ColorIntent | None
        Symbolic foreground colour.
    background_intent : ColorIntent | None
        Symbolic background colour.
    literal_color : str | None
        Exact colour from a syntax snapshot; takes precedence over
        ``color_intent``.
    bold, italic, underline : bool | None
        Text attributes; ``None`` means "inherit".
    """

    text: str
    color_intent: ColorIntent | None = None
    background_intent: ColorIntent | None = None
    literal_color: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None

    @property
    def style_key(self) -> StyleKey:
        """Return a hashable tuple of every attribute except ``text``."""
        return (
            self.color_intent,
            self.background_intent,
            self.literal_color,
            self.bold,
            self.italic,
            self.underline,
        )

    @property
    def effective_color(self) -> str | None:
        """Return the literal colour when present, otherwise the intent."""
        return self.literal_color or self.color_intent

    def with_text(self, text: str) -> StyledRun:
        """Return a copy of this run carrying ``text`` instead."""
        return dc.replace(self, text=text)

    def same_style(self, other: StyledRun) -> bool:
        """Return ``True`` when both runs could be merged into one."""
        return self.style_key == other.style_key


@dc.dataclass(frozen=True, slots=True)
class StyledRow:
    """One terminal line produced by the layout engine."""

    kind: RowKind
    runs: tuple[StyledRun, ...] = ()

    @property
    def text(self) -> str:
        """Return the plain text of the row."""
        return "".join(run.text for run in self.runs)

    @property
    def width(self) -> int:
        """Return the visible width, counting one column per character."""
        return sum(len(run.text) for run in self.runs)


def spacer_row() -> StyledRow:
    """Return a blank separator row."""
    return StyledRow("spacer", (StyledRun(""),))


__all__ = [
    "ColorIntent",
    "RowKind",
    "StyleKey",
    "StyledRow",
    "StyledRun",
    "spacer_row",
]
