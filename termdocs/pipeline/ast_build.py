"""Convert external content documents into the immutable render tree.

The external schema is plain data (as decoded from JSON or YAML): a title, an
optional intro and ordered sections, each holding typed content blocks whose
``type`` key discriminates the variant. Rich text is either a string or a
list mixing strings with ``{"type": "bold" | "italic" | "code" | "link"}``
parts.

Two policies apply. Code and command blocks must carry a non-empty
``language`` and a string-array syntax snapshot; anything else raises
:class:`~termdocs.errors.SnapshotValidationError` and aborts the build. Every
other unexpected shape is normalised to empty or plain content so a single
malformed node never stops a page from rendering.

Example
-------
>>> from termdocs.pipeline.ast_build import build_document_ast
>>> doc = build_document_ast(
...     {"title": "Install", "sections": [{"title": "Boot", "content": []}]},
...     "install",
... )
>>> doc.sections[0].level
2
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from termdocs.errors import SnapshotValidationError
from termdocs.render_ast import (
    BlockNode,
    CodeBlock,
    CodeNode,
    CommandBlock,
    ConversationBlock,
    ConversationMessage,
    DocumentNode,
    EmphasisNode,
    InlineNode,
    Inlines,
    InteractiveBlock,
    InteractiveStep,
    LinkNode,
    ListBlock,
    ListItem,
    NoteBlock,
    ParagraphBlock,
    QABlock,
    QAItem,
    SectionNode,
    StrongNode,
    TableBlock,
    TextNode,
)

logger = logging.getLogger(__name__)

RawMapping = typ.Mapping[str, typ.Any]

_INLINE_KINDS: dict[str, type[TextNode | StrongNode | EmphasisNode | CodeNode]] = {
    "text": TextNode,
    "bold": StrongNode,
    "strong": StrongNode,
    "italic": EmphasisNode,
    "emphasis": EmphasisNode,
    "code": CodeNode,
}


def _as_list(value: object) -> list[typ.Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _as_str(value: object) -> str:
    return value if isinstance(value, str) else ""


def _inline_part(part: object) -> InlineNode | None:
    if isinstance(part, str):
        return TextNode(part) if part else None
    if not isinstance(part, cabc.Mapping):
        logger.debug("dropping non-mapping inline part %r", part)
        return None
    kind = part.get("type")
    text = _as_str(part.get("text"))
    if kind == "link":
        return LinkNode(text, _as_str(part.get("href")))
    node_type = _INLINE_KINDS.get(kind) if isinstance(kind, str) else None
    if node_type is None:
        logger.debug("dropping unrecognised inline part type %r", kind)
        return None
    return node_type(text)


def to_inline_nodes(value: object) -> Inlines:
    """Map a string or rich-text list onto inline nodes.

    Unrecognised parts are dropped; anything that is neither a string nor a
    list yields an empty tuple.
    """
    if isinstance(value, str):
        return (TextNode(value),) if value else ()
    nodes = (_inline_part(part) for part in _as_list(value))
    return tuple(node for node in nodes if node is not None)


def _require_snapshot(block: RawMapping, block_type: str, field: str) -> tuple[str, ...]:
    language = block.get("language")
    if not isinstance(language, str) or not language.strip():
        _fail(block_type, "language", "missing required language")
    lines = block.get(field)
    if not isinstance(lines, (list, tuple)):
        _fail(block_type, field, f"missing {field} snapshot payload")
    if not all(isinstance(line, str) for line in lines):
        _fail(block_type, field, f"{field} contains non-string entries")
    return tuple(lines)


def _fail(block_type: str, field: str, detail: str) -> typ.NoReturn:
    error = SnapshotValidationError(block_type, field, detail)
    logger.error("snapshot validation failed: %s", error)
    raise error


def _code_node(block: RawMapping) -> CodeBlock:
    lines = _require_snapshot(block, "code", "highlightedLines")
    filename = block.get("filename")
    return CodeBlock(
        language=block["language"],
        lines=lines,
        filename=filename if isinstance(filename, str) and filename else None,
    )


def _command_node(block: RawMapping) -> CommandBlock:
    lines = _require_snapshot(block, "command", "highlightedCommandLines")
    output = block.get("output")
    return CommandBlock(
        language=block["language"],
        description=to_inline_nodes(block.get("description")),
        command_lines=lines,
        output_lines=tuple(output.split("\n")) if isinstance(output, str) and output else (),
    )


def _table_node(block: RawMapping) -> TableBlock:
    return TableBlock(
        headers=tuple(to_inline_nodes(cell) for cell in _as_list(block.get("headers"))),
        rows=tuple(
            tuple(to_inline_nodes(cell) for cell in _as_list(row))
            for row in _as_list(block.get("rows"))
        ),
    )


def _list_item(item: object) -> ListItem:
    if isinstance(item, cabc.Mapping):
        return ListItem(
            content=to_inline_nodes(item.get("text")),
            children=tuple(to_inline_nodes(child) for child in _as_list(item.get("children"))),
        )
    return ListItem(content=to_inline_nodes(item))


def _list_node(block: RawMapping) -> ListBlock:
    return ListBlock(
        ordered=bool(block.get("ordered")),
        items=tuple(_list_item(item) for item in _as_list(block.get("items"))),
    )


def _conversation_node(block: RawMapping) -> ConversationBlock:
    messages = []
    for message in _as_list(block.get("messages")):
        if not isinstance(message, cabc.Mapping):
            continue
        messages.append(
            ConversationMessage(
                role="ai" if message.get("role") == "ai" else "user",
                text=to_inline_nodes(message.get("text")),
                list=tuple(to_inline_nodes(item) for item in _as_list(message.get("list"))),
            )
        )
    return ConversationBlock(messages=tuple(messages))


def _interactive_node(block: RawMapping) -> InteractiveBlock:
    steps = tuple(
        InteractiveStep(
            command=_as_str(step.get("command")),
            description=to_inline_nodes(step.get("description")),
        )
        for step in _as_list(block.get("steps"))
        if isinstance(step, cabc.Mapping)
    )
    intro = block.get("intro")
    return InteractiveBlock(steps=steps, intro=to_inline_nodes(intro) if intro else None)


def _qa_node(block: RawMapping) -> QABlock:
    items = tuple(
        QAItem(
            question=to_inline_nodes(item.get("question")),
            answer=tuple(to_block_node(answer) for answer in _as_list(item.get("answer"))),
        )
        for item in _as_list(block.get("items"))
        if isinstance(item, cabc.Mapping)
    )
    return QABlock(items=items)


def _note_node(block: RawMapping) -> NoteBlock:
    variant = block.get("variant")
    return NoteBlock(
        variant=variant if variant in ("info", "warning", "danger") else "info",
        content=to_inline_nodes(block.get("content")),
    )


def to_block_node(block: object) -> BlockNode:
    """Convert one raw content block, recursing into Q&A answers.

    Unknown or malformed blocks degrade to an empty paragraph.

    Raises
    ------
    SnapshotValidationError
        If a ``code`` or ``command`` block lacks its language or snapshot.
    """
    if not isinstance(block, cabc.Mapping):
        logger.debug("replacing non-mapping block %r with an empty paragraph", block)
        return ParagraphBlock()
    match block.get("type"):
        case "text" | "paragraph":
            return ParagraphBlock(content=to_inline_nodes(block.get("content")))
        case "code":
            return _code_node(block)
        case "table":
            return _table_node(block)
        case "list":
            return _list_node(block)
        case "conversation":
            return _conversation_node(block)
        case "interactive":
            return _interactive_node(block)
        case "command":
            return _command_node(block)
        case "qa":
            return _qa_node(block)
        case "note":
            return _note_node(block)
        case other:
            logger.debug("unknown block type %r rendered as empty paragraph", other)
            return ParagraphBlock()


def _section_node(section: object) -> SectionNode:
    if not isinstance(section, cabc.Mapping):
        return SectionNode(title=())
    return SectionNode(
        title=to_inline_nodes(section.get("title")),
        level=3 if section.get("level") == 3 else 2,
        blocks=tuple(to_block_node(block) for block in _as_list(section.get("content"))),
    )


def build_document_ast(content: RawMapping, slug: str) -> DocumentNode:
    """Build a :class:`DocumentNode` from one external content document.

    Parameters
    ----------
    content : Mapping[str, Any]
        Decoded document with ``title``, optional ``intro`` and ``sections``.
    slug : str
        Identifier of the document, supplied by the navigation collaborator.

    Returns
    -------
    DocumentNode
        A fresh, immutable tree.

    Raises
    ------
    SnapshotValidationError
        If any code or command block, including those nested in Q&A answers,
        is missing its language or syntax snapshot.
    """
    intro = content.get("intro")
    return DocumentNode(
        title=to_inline_nodes(content.get("title")),
        slug=slug,
        intro=to_inline_nodes(intro) if intro else None,
        sections=tuple(_section_node(section) for section in _as_list(content.get("sections"))),
    )


__all__ = ["build_document_ast", "to_block_node", "to_inline_nodes"]
