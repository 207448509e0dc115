"""Turn styled rows into Rich renderables using a theme palette.

This is the thin bridge between the pure layout pipeline and a real terminal:
symbolic intents are resolved through :class:`~termdocs.config.ThemeConfig`
and literal syntax colours are passed through unchanged.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from rich.color import Color, ColorParseError
from rich.style import Style
from rich.text import Text

from .config import ThemeConfig

if typ.TYPE_CHECKING:
    from .render_ast import StyledRow, StyledRun


def _color(value: str | None) -> Color | None:
    if not value:
        return None
    try:
        return Color.parse(value)
    except ColorParseError:
        return None


def run_style(run: StyledRun, theme: ThemeConfig) -> Style:
    """Return the Rich style for ``run``; literal colours beat intents."""
    return Style(
        color=_color(run.literal_color) or _color(theme.resolve(run.color_intent)),
        bgcolor=_color(theme.resolve(run.background_intent)),
        bold=run.bold,
        italic=run.italic,
        underline=run.underline,
    )


def paint_row(row: StyledRow, theme: ThemeConfig | None = None) -> Text:
    """Return one row as a Rich ``Text`` line."""
    palette = theme or ThemeConfig()
    text = Text(no_wrap=True, overflow="crop")
    for run in row.runs:
        text.append(run.text, style=run_style(run, palette))
    return text


def paint_rows(
    rows: cabc.Iterable[StyledRow], theme: ThemeConfig | None = None
) -> list[Text]:
    """Return every row painted with ``theme``."""
    palette = theme or ThemeConfig()
    return [paint_row(row, palette) for row in rows]


__all__ = ["paint_row", "paint_rows", "run_style"]
