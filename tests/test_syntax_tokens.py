"""Tests for decoding marker-encoded syntax snapshot lines."""

from __future__ import annotations

import pytest

from termdocs.pipeline.syntax_tokens import (
    SyntaxToken,
    parse_syntax_token_line,
    strip_syntax_markers,
    syntax_token_colors,
)


def test_plain_line_is_one_uncoloured_token() -> None:
    """Text without markers comes back as a single token."""
    tokens = parse_syntax_token_line("echo hi")
    assert tokens == [SyntaxToken("echo hi")], f"unexpected tokens {tokens!r}"


def test_empty_line_has_no_tokens() -> None:
    """An empty snapshot line yields no tokens."""
    assert parse_syntax_token_line("") == [], "expected no tokens"


def test_back_to_back_spans_keep_their_colours() -> None:
    """Adjacent spans with different colours stay separate."""
    tokens = parse_syntax_token_line("‹color:#b392f0›echo‹/›‹color:#e1e4e8› hi‹/›")
    assert tokens == [
        SyntaxToken("echo", "#b392f0"),
        SyntaxToken(" hi", "#e1e4e8"),
    ], f"unexpected tokens {tokens!r}"


def test_nested_spans_restore_the_outer_colour() -> None:
    """Closing an inner span returns to the enclosing colour."""
    tokens = parse_syntax_token_line("‹color:#111111›a‹color:#222222›b‹/›c‹/›d")
    assert tokens == [
        SyntaxToken("a", "#111111"),
        SyntaxToken("b", "#222222"),
        SyntaxToken("c", "#111111"),
        SyntaxToken("d"),
    ], f"unexpected tokens {tokens!r}"


def test_unterminated_span_runs_to_end_of_line() -> None:
    """A start marker without an end colours the rest of the line."""
    tokens = parse_syntax_token_line("‹color:#111111›abc")
    assert tokens == [SyntaxToken("abc", "#111111")], f"unexpected tokens {tokens!r}"


def test_stray_end_marker_is_ignored() -> None:
    """An end marker with nothing open is dropped without splitting text."""
    tokens = parse_syntax_token_line("a‹/›b")
    assert tokens == [SyntaxToken("ab")], f"unexpected tokens {tokens!r}"


def test_same_colour_spans_are_merged() -> None:
    """Consecutive spans sharing a colour collapse into one token."""
    tokens = parse_syntax_token_line("‹color:#111111›a‹/›‹color:#111111›b‹/›")
    assert tokens == [SyntaxToken("ab", "#111111")], f"unexpected tokens {tokens!r}"


def test_blank_colour_value_means_no_colour() -> None:
    """A start marker with an empty value leaves the text uncoloured."""
    tokens = parse_syntax_token_line("‹color:›x‹/›")
    assert tokens == [SyntaxToken("x")], f"unexpected tokens {tokens!r}"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("x ‹y› z", "x ‹y› z"),
        ("‹color:#111111›def‹/› main():", "def main():"),
        ("‹/›‹/›", ""),
    ],
)
def test_strip_syntax_markers_returns_plain_text(line: str, expected: str) -> None:
    """Only well-formed markers are removed."""
    assert strip_syntax_markers(line) == expected, f"unexpected plain text for {line!r}"


def test_syntax_token_colors_lists_colours_in_order() -> None:
    """Colours are reported in order of appearance, skipping plain text."""
    colors = syntax_token_colors("‹color:#aa0000›a‹/› b ‹color:#00aa00›c‹/›")
    assert colors == ["#aa0000", "#00aa00"], f"unexpected colours {colors!r}"
