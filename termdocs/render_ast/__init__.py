"""Document tree and styled-row data model shared by the render pipeline."""

from .nodes import (
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
from .styled import ColorIntent, RowKind, StyledRow, StyledRun, spacer_row

__all__ = [
    "BlockNode",
    "CodeBlock",
    "CodeNode",
    "ColorIntent",
    "CommandBlock",
    "ConversationBlock",
    "ConversationMessage",
    "DocumentNode",
    "EmphasisNode",
    "InlineNode",
    "Inlines",
    "InteractiveBlock",
    "InteractiveStep",
    "LinkNode",
    "ListBlock",
    "ListItem",
    "NoteBlock",
    "ParagraphBlock",
    "QABlock",
    "QAItem",
    "RowKind",
    "SectionNode",
    "StrongNode",
    "StyledRow",
    "StyledRun",
    "TableBlock",
    "TextNode",
    "spacer_row",
]
