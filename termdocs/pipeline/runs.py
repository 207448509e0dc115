"""Helpers converting inline nodes to styled runs and reshaping run lists."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import itertools
import typing as typ

from termdocs._constants import ELLIPSIS
from termdocs.render_ast import (
    CodeNode,
    EmphasisNode,
    InlineNode,
    LinkNode,
    StrongNode,
    StyledRun,
    TextNode,
)

if typ.TYPE_CHECKING:
    from termdocs.render_ast import ColorIntent

_STYLE_FIELDS = (
    "color_intent",
    "background_intent",
    "literal_color",
    "bold",
    "italic",
    "underline",
)


def _link_suffix(node: LinkNode) -> str:
    href = node.href.strip()
    if href and node.href != node.text:
        return f" ({node.href})"
    return ""


def inline_nodes_to_plain(nodes: cabc.Iterable[InlineNode]) -> str:
    """Return the plain projection of ``nodes``, expanding link targets."""
    parts: list[str] = []
    for node in nodes:
        parts.append(node.text)
        if isinstance(node, LinkNode):
            parts.append(_link_suffix(node))
    return "".join(parts)


def inline_nodes_to_runs(
    nodes: cabc.Iterable[InlineNode], default_intent: ColorIntent = "text"
) -> list[StyledRun]:
    """Map inline nodes onto styled runs.

    Empty nodes are skipped. When nothing remains a single empty run in
    ``default_intent`` is returned so callers always have a style to extend.
    """
    runs: list[StyledRun] = []
    for node in nodes:
        if not node.text:
            continue
        match node:
            case TextNode():
                runs.append(StyledRun(node.text, color_intent=default_intent))
            case StrongNode():
                runs.append(StyledRun(node.text, color_intent=default_intent, bold=True))
            case EmphasisNode():
                runs.append(
                    StyledRun(node.text, color_intent=default_intent, italic=True)
                )
            case CodeNode():
                runs.append(StyledRun(node.text, color_intent="accent", bold=True))
            case LinkNode():
                runs.append(StyledRun(node.text, color_intent="info", underline=True))
                suffix = _link_suffix(node)
                if suffix:
                    runs.append(StyledRun(suffix, color_intent="dim_text"))
            case _:
                typ.assert_never(node)
    return runs or [StyledRun("", color_intent=default_intent)]


def runs_length(runs: cabc.Iterable[StyledRun]) -> int:
    """Return the total character count of ``runs``."""
    return sum(len(run.text) for run in runs)


def coalesce_runs(runs: cabc.Iterable[StyledRun]) -> list[StyledRun]:
    """Merge adjacent runs with identical style, dropping empty ones.

    Character order is preserved exactly; only the run boundaries change.
    """
    merged: list[StyledRun] = []
    non_empty = (run for run in runs if run.text)
    for _key, group in itertools.groupby(non_empty, key=lambda run: run.style_key):
        members = list(group)
        merged.append(members[0].with_text("".join(run.text for run in members)))
    return merged


def first_line_runs(runs: cabc.Iterable[StyledRun]) -> list[StyledRun]:
    """Return ``runs`` up to, but excluding, the first newline."""
    kept: list[StyledRun] = []
    for run in runs:
        head, newline, _rest = run.text.partition("\n")
        kept.append(run.with_text(head) if newline else run)
        if newline:
            break
    return kept


def flatten_runs(runs: cabc.Iterable[StyledRun]) -> list[StyledRun]:
    """Return ``runs`` with every newline replaced by a space."""
    return [
        run.with_text(run.text.replace("\n", " ")) if "\n" in run.text else run
        for run in runs
    ]


def take_runs(runs: cabc.Iterable[StyledRun], width: int) -> list[StyledRun]:
    """Return the leading ``width`` characters of ``runs``, styles intact."""
    taken: list[StyledRun] = []
    remaining = width
    for run in runs:
        if remaining <= 0:
            break
        if len(run.text) <= remaining:
            taken.append(run)
            remaining -= len(run.text)
            continue
        taken.append(run.with_text(run.text[:remaining]))
        remaining = 0
    return taken


def truncate_runs(
    runs: cabc.Sequence[StyledRun], width: int, fallback_intent: ColorIntent = "text"
) -> list[StyledRun]:
    """Clip ``runs`` to ``width`` columns, ending with an ellipsis on overflow."""
    if width <= 0:
        return []
    if runs_length(runs) <= width:
        return list(runs)
    truncated = take_runs(runs, width - 1)
    truncated.append(StyledRun(ELLIPSIS, color_intent=fallback_intent))
    return truncated


def pad_runs(
    runs: cabc.Sequence[StyledRun], width: int, fallback_intent: ColorIntent = "text"
) -> list[StyledRun]:
    """Right-pad ``runs`` with spaces up to ``width`` columns."""
    padded = list(runs)
    missing = width - runs_length(padded)
    if missing > 0:
        padded.append(StyledRun(" " * missing, color_intent=fallback_intent))
    return padded


def decorate_run(run: StyledRun, style: StyledRun) -> StyledRun:
    """Fill attributes that ``run`` leaves unset from ``style``."""
    changes = {
        name: getattr(style, name)
        for name in _STYLE_FIELDS
        if getattr(run, name) is None and getattr(style, name) is not None
    }
    return dc.replace(run, **changes) if changes else run


__all__ = [
    "coalesce_runs",
    "decorate_run",
    "first_line_runs",
    "flatten_runs",
    "inline_nodes_to_plain",
    "inline_nodes_to_runs",
    "pad_runs",
    "runs_length",
    "take_runs",
    "truncate_runs",
]
