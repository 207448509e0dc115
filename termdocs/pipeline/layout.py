"""Lay out the render tree into fixed-width styled terminal rows.

Each block variant has one layout rule returning :class:`StyledRow` objects
for an available width. Indentation is applied uniformly at the end of
:func:`layout_block` by prefixing every row, so nested content (Q&A answers)
is laid out by calling :func:`layout_block` again with an accumulated indent.
:func:`layout_document` walks the whole tree and joins block output with
spacer rows.

Example
-------
>>> from termdocs.pipeline.layout import layout_block
>>> from termdocs.render_ast import ParagraphBlock, TextNode
>>> [row.text for row in layout_block(ParagraphBlock((TextNode("one two"),)), 3)]
['one', 'two']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from termdocs._constants import (
    BULLET,
    DEFAULT_MIN_WIDTH,
    DIVIDER_GLYPH,
    QA_ANSWER_INDENT,
    TABLE_COLUMN_GAP,
    TABLE_COLUMN_MAX,
)
from termdocs.render_ast import (
    BlockNode,
    CodeBlock,
    CommandBlock,
    ConversationBlock,
    DocumentNode,
    Inlines,
    InteractiveBlock,
    ListBlock,
    NoteBlock,
    ParagraphBlock,
    QABlock,
    StyledRow,
    StyledRun,
    TableBlock,
    spacer_row,
)

from .runs import (
    coalesce_runs,
    decorate_run,
    first_line_runs,
    flatten_runs,
    inline_nodes_to_plain,
    inline_nodes_to_runs,
    pad_runs,
    truncate_runs,
)
from .syntax_tokens import parse_syntax_token_line
from .wrap import WrappedLine, safe_wrap_width, wrap_inline, wrap_runs

if typ.TYPE_CHECKING:
    from termdocs.render_ast import ColorIntent, RowKind

CARD = StyledRun("", background_intent="card_background")
COMMAND_BAR = StyledRun(
    "", color_intent="command_prompt", bold=True, background_intent="command_bar_background"
)
DIM = StyledRun("", color_intent="dim_text")

_NOTE_INTENTS: dict[str, ColorIntent] = {
    "info": "info",
    "warning": "warning",
    "danger": "error",
}


def _to_rows(lines: cabc.Iterable[WrappedLine], kind: RowKind) -> list[StyledRow]:
    return [StyledRow(kind, tuple(line) or (StyledRun(""),)) for line in lines]


def _decorate(rows: cabc.Iterable[StyledRow], style: StyledRun) -> list[StyledRow]:
    return [
        dc.replace(row, runs=tuple(decorate_run(run, style) for run in row.runs))
        for row in rows
    ]


def _single_line(runs: cabc.Sequence[StyledRun], width: int, kind: RowKind) -> StyledRow:
    # Only the first line is kept; a row is always one terminal line.
    clipped = coalesce_runs(truncate_runs(first_line_runs(runs), width))
    return StyledRow(kind, tuple(clipped) or (StyledRun(""),))


def _row(text: str, kind: RowKind, style: StyledRun, width: int) -> StyledRow:
    return _single_line([style.with_text(text)], width, kind)


def _placeholder(text: str, kind: RowKind, style: StyledRun, width: int) -> list[StyledRow]:
    return _to_rows(wrap_runs([style.with_text(text)], width), kind)


def _indent_rows(rows: list[StyledRow], indent: int) -> list[StyledRow]:
    if indent <= 0:
        return rows
    prefix = StyledRun(" " * indent)
    return [dc.replace(row, runs=(prefix, *row.runs)) for row in rows]


def _wrap_with_prefix(
    nodes: Inlines,
    width: int,
    kind: RowKind,
    prefix: str,
    default_intent: ColorIntent = "text",
    style: StyledRun | None = None,
) -> list[StyledRow]:
    """Wrap ``nodes`` behind ``prefix`` with a hanging indent.

    Continuation lines align under the first word, not under the marker.
    The marker is clipped so at least one column is left for the content.
    """
    head = f"{prefix} " if prefix.strip() else ""
    head = head[: max(0, width - 1)]
    continuation = " " * len(head)
    lines = wrap_inline(nodes, max(1, width - len(head)), default_intent)
    rows = [
        StyledRow(
            kind,
            (
                StyledRun(head if index == 0 else continuation, color_intent=default_intent),
                *line,
            ),
        )
        for index, line in enumerate(lines)
    ]
    return _decorate(rows, style) if style else rows


def _syntax_runs(line: str, fallback: ColorIntent, base: StyledRun) -> list[StyledRun]:
    return [
        StyledRun(
            token.text,
            color_intent=None if token.color else fallback,
            literal_color=token.color,
            background_intent=base.background_intent,
            bold=base.bold,
            italic=base.italic,
            underline=base.underline,
        )
        for token in parse_syntax_token_line(line)
    ]


def _layout_paragraph(block: ParagraphBlock, width: int) -> list[StyledRow]:
    return _to_rows(wrap_inline(block.content, width), "paragraph")


def _layout_code(block: CodeBlock, width: int) -> list[StyledRow]:
    label = block.language.upper()
    if block.filename:
        label = f"{label} {BULLET} {block.filename}"
    label_style = StyledRun(
        label, color_intent="section_subheading", bold=True, background_intent="card_background"
    )
    rows = _to_rows(wrap_runs([label_style], width), "meta")
    if not block.lines:
        rows.extend(
            _placeholder(
                "(empty code block)",
                "code",
                StyledRun("", color_intent="dim_text", background_intent="card_background"),
                width,
            )
        )
        return rows
    for line in block.lines:
        wrapped = wrap_runs(
            _syntax_runs(line, "text", CARD), width, "text", preserve_whitespace=True
        )
        rows.extend(_decorate(_to_rows(wrapped, "code"), CARD))
    return rows


def _layout_command(block: CommandBlock, width: int) -> list[StyledRow]:
    rows: list[StyledRow] = []
    if block.description:
        rows.extend(_decorate(_to_rows(wrap_inline(block.description, width), "paragraph"), CARD))
    prompt_width = max(0, min(2, width - 1))
    content_width = max(1, width - prompt_width)
    for line_index, line in enumerate(block.command_lines):
        wrapped = wrap_runs(
            _syntax_runs(line, "command_prompt", COMMAND_BAR),
            content_width,
            "command_prompt",
            preserve_whitespace=True,
        )
        for row_index, runs in enumerate(wrapped):
            prompt = "$ " if line_index == 0 and row_index == 0 else "  "
            prompt = prompt[:prompt_width]
            rows.append(StyledRow("command", (COMMAND_BAR.with_text(prompt), *runs)))
    output_style = StyledRun("", color_intent="dim_text", background_intent="card_background")
    for line in block.output_lines:
        rows.append(_single_line([output_style.with_text(line)], width, "command"))
    return _decorate(rows, CARD)


def _first_line_length(cell: Inlines) -> int:
    return len(inline_nodes_to_plain(cell).partition("\n")[0])


def _table_line(
    cells: cabc.Sequence[Inlines],
    widths: cabc.Sequence[int],
    width: int,
    style: StyledRun,
) -> StyledRow:
    intent = style.color_intent or "text"
    runs: list[StyledRun] = []
    for index, column_width in enumerate(widths):
        if index:
            runs.append(StyledRun(TABLE_COLUMN_GAP, color_intent=intent))
        cell = cells[index] if index < len(cells) else ()
        cell_runs = truncate_runs(
            first_line_runs(inline_nodes_to_runs(cell, intent)), column_width, intent
        )
        runs.extend(pad_runs(cell_runs, column_width, intent))
    row = _single_line(runs, width, "table")
    return _decorate([row], style)[0]


def _layout_table(block: TableBlock, width: int) -> list[StyledRow]:
    # Cells are single-line: only the first line, clipped to the column, is shown.
    matrix = [block.headers, *block.rows]
    column_count = max((len(row) for row in matrix), default=0)
    if column_count == 0:
        return []
    widths = [
        min(
            TABLE_COLUMN_MAX,
            max(
                (_first_line_length(row[index]) for row in matrix if index < len(row)),
                default=1,
            )
            or 1,
        )
        for index in range(column_count)
    ]
    table_width = sum(widths) + len(TABLE_COLUMN_GAP) * (column_count - 1)
    header_style = StyledRun(
        "", color_intent="section_subheading", bold=True, background_intent="card_background"
    )
    body_style = StyledRun("", color_intent="text", background_intent="card_background")
    rows = [_table_line(block.headers, widths, width, header_style)]
    rows.append(
        _row(
            DIVIDER_GLYPH * min(width, table_width),
            "table",
            StyledRun("", color_intent="dim_text", background_intent="card_background"),
            width,
        )
    )
    rows.extend(_table_line(cells, widths, width, body_style) for cells in block.rows)
    return rows


def _layout_list(block: ListBlock, width: int) -> list[StyledRow]:
    rows: list[StyledRow] = []
    for index, item in enumerate(block.items, start=1):
        marker = f"{index}." if block.ordered else BULLET
        rows.extend(_wrap_with_prefix(item.content, width, "paragraph", marker))
        for child in item.children:
            rows.extend(
                _wrap_with_prefix(
                    child, width, "paragraph", f"  {BULLET}", "dim_text", DIM
                )
            )
    return rows


def _layout_conversation(block: ConversationBlock, width: int) -> list[StyledRow]:
    rows: list[StyledRow] = []
    for message in block.messages:
        label, intent = ("AI", "info") if message.role == "ai" else ("User", "section_subheading")
        speaker = _wrap_with_prefix(message.text, width, "conversation", f"{label}:", intent)
        first = speaker[0]
        speaker[0] = dc.replace(
            first, runs=(dc.replace(first.runs[0], bold=True), *first.runs[1:])
        )
        rows.extend(speaker)
        for item in message.list:
            rows.extend(_wrap_with_prefix(item, width, "conversation", f"  {BULLET}"))
    return _decorate(rows, CARD)


def _layout_interactive(block: InteractiveBlock, width: int) -> list[StyledRow]:
    rows: list[StyledRow] = []
    if block.intro:
        rows.extend(_decorate(_to_rows(wrap_inline(block.intro, width), "interactive"), CARD))
    for step in block.steps:
        # Step commands are never wrapped, but stay on one terminal line.
        command = step.command.replace("\n", " ")
        rows.append(StyledRow("interactive", (COMMAND_BAR.with_text(f"$ {command}"),)))
        if step.description:
            rows.extend(
                _decorate(_to_rows(wrap_inline(step.description, width), "interactive"), CARD)
            )
    return rows


def _layout_qa(block: QABlock, width: int) -> list[StyledRow]:
    rows: list[StyledRow] = []
    heading = StyledRun("", color_intent="section_heading", bold=True)
    for index, item in enumerate(block.items):
        rows.extend(
            _wrap_with_prefix(item.question, width, "qa", "Q:", "section_heading", heading)
        )
        answer_label = StyledRun("", color_intent="section_subheading", bold=True)
        rows.append(_row("A:", "qa", answer_label, width))
        if not item.answer:
            rows.extend(_placeholder("(no answer provided)", "qa", DIM, width))
        for answer in item.answer:
            rows.extend(layout_block(answer, width, QA_ANSWER_INDENT))
        if index < len(block.items) - 1:
            rows.append(spacer_row())
    return rows


def _layout_note(block: NoteBlock, width: int) -> list[StyledRow]:
    background: ColorIntent = (
        "card_background" if block.variant == "info" else "warning_background"
    )
    label = StyledRun(
        f"[{block.variant.upper()}]",
        color_intent=_NOTE_INTENTS[block.variant],
        bold=True,
        background_intent=background,
    )
    rows = [_single_line([label], width, "note")]
    content = _to_rows(wrap_inline(block.content, width), "note")
    rows.extend(_decorate(content, StyledRun("", background_intent=background)))
    return rows


def layout_block(block: BlockNode, width: int, indent: int = 0) -> list[StyledRow]:
    """Lay out one block at ``width`` columns, shifted right by ``indent``.

    Parameters
    ----------
    block : BlockNode
        Any block variant; Q&A answers recurse through this function.
    width : int
        Total columns available, including the indent.
    indent : int, optional
        Spaces prefixed to every produced row. The indent shrinks when it
        would leave less than one column for the content.

    Returns
    -------
    list[StyledRow]
        Rows no wider than ``max(1, width)``, except interactive step
        commands, which are never wrapped.
    """
    indent = max(0, min(indent, width - 1))
    safe_width = max(1, width - indent)
    match block:
        case ParagraphBlock():
            rows = _layout_paragraph(block, safe_width)
        case CodeBlock():
            rows = _layout_code(block, safe_width)
        case TableBlock():
            rows = _layout_table(block, safe_width)
        case ListBlock():
            rows = _layout_list(block, safe_width)
        case ConversationBlock():
            rows = _layout_conversation(block, safe_width)
        case InteractiveBlock():
            rows = _layout_interactive(block, safe_width)
        case CommandBlock():
            rows = _layout_command(block, safe_width)
        case QABlock():
            rows = _layout_qa(block, safe_width)
        case NoteBlock():
            rows = _layout_note(block, safe_width)
        case _:
            typ.assert_never(block)
    return _indent_rows(rows, indent)


def _heading_row(title: Inlines, level: int, width: int) -> StyledRow:
    intent: ColorIntent = "section_heading" if level == 2 else "section_subheading"
    runs = [
        dc.replace(run, bold=True) for run in flatten_runs(inline_nodes_to_runs(title, intent))
    ]
    return _single_line(runs, width, "heading")


def _trim_trailing_spacers(rows: list[StyledRow]) -> list[StyledRow]:
    end = len(rows)
    while end and rows[end - 1].kind == "spacer":
        end -= 1
    return rows[:end]


def layout_document(
    document: DocumentNode, width: int, min_width: int = DEFAULT_MIN_WIDTH
) -> list[StyledRow]:
    """Lay out a whole document into one flat row sequence.

    The intro (when present) comes first followed by a spacer. Each section
    contributes a bold heading row, a spacer and its blocks separated by
    spacers; sections are separated by a spacer. Trailing spacers are
    trimmed so the document never ends on a blank row.
    """
    safe_width = safe_wrap_width(width, min_width)
    rows: list[StyledRow] = []
    if document.intro:
        rows.extend(_to_rows(wrap_inline(document.intro, safe_width), "paragraph"))
        rows.append(spacer_row())
    for section_index, section in enumerate(document.sections):
        if section_index > 0 and rows:
            rows.append(spacer_row())
        rows.append(_heading_row(section.title, section.level, safe_width))
        rows.append(spacer_row())
        for block_index, block in enumerate(section.blocks):
            rows.extend(layout_block(block, safe_width))
            if block_index < len(section.blocks) - 1:
                rows.append(spacer_row())
    return _trim_trailing_spacers(rows)


__all__ = ["layout_block", "layout_document"]
