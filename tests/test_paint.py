"""Tests for painting styled rows as Rich text."""

from __future__ import annotations

from rich.color import Color

from termdocs.config import ThemeConfig
from termdocs.paint import paint_row, paint_rows, run_style
from termdocs.render_ast import StyledRow, StyledRun, spacer_row


def test_literal_colour_beats_intent() -> None:
    """Syntax colours override the symbolic intent."""
    style = run_style(
        StyledRun("x", color_intent="text", literal_color="#111111"), ThemeConfig()
    )
    assert style.color == Color.parse("#111111"), f"unexpected colour {style.color!r}"


def test_intents_resolve_through_the_palette() -> None:
    """Intents and backgrounds take their palette values."""
    theme = ThemeConfig({"accent": "#ff00ff", "card_background": "#202020"})
    style = run_style(
        StyledRun("x", color_intent="accent", background_intent="card_background", bold=True),
        theme,
    )
    assert style.color == Color.parse("#ff00ff"), "accent should resolve"
    assert style.bgcolor == Color.parse("#202020"), "background should resolve"
    assert style.bold, "bold should carry through"


def test_inherit_and_invalid_colours_leave_colour_unset() -> None:
    """The ``default`` sentinel and unparsable values fall back to the terminal."""
    theme = ThemeConfig({"text": "not-a-colour", "card_background": "default"})
    style = run_style(StyledRun("x", color_intent="text", background_intent="card_background"), theme)
    assert style.color is None, "invalid colour should be ignored"
    assert style.bgcolor is None, "inherited background should be unset"


def test_paint_row_keeps_text_and_spans() -> None:
    """One span is produced per run."""
    row = StyledRow(
        "paragraph",
        (StyledRun("Hello ", color_intent="text"), StyledRun("world", bold=True)),
    )
    text = paint_row(row)
    assert text.plain == "Hello world", f"unexpected text {text.plain!r}"
    assert len(text.spans) == 2, f"expected two spans, got {text.spans!r}"


def test_paint_rows_handles_spacers() -> None:
    """Blank rows paint as empty text."""
    painted = paint_rows([spacer_row(), spacer_row()])
    assert [line.plain for line in painted] == ["", ""], "spacers should be empty"
