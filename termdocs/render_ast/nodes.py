"""Immutable document tree consumed by the layout engine.

Inline nodes carry rich text fragments; block nodes form a closed sum type
with one dataclass per content-block variant. Every layout and conversion
site matches over :data:`BlockNode` exhaustively, so adding a variant means
extending the union and revisiting each ``match``.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

NoteVariant = typ.Literal["info", "warning", "danger"]
SpeakerRole = typ.Literal["user", "ai"]
SectionLevel = typ.Literal[2, 3]


@dc.dataclass(frozen=True, slots=True)
class TextNode:
    text: str


@dc.dataclass(frozen=True, slots=True)
class StrongNode:
    text: str


@dc.dataclass(frozen=True, slots=True)
class EmphasisNode:
    text: str


@dc.dataclass(frozen=True, slots=True)
class CodeNode:
    text: str


@dc.dataclass(frozen=True, slots=True)
class LinkNode:
    text: str
    href: str


InlineNode = TextNode | StrongNode | EmphasisNode | CodeNode | LinkNode
Inlines = tuple[InlineNode, ...]


@dc.dataclass(frozen=True, slots=True)
class ParagraphBlock:
    content: Inlines = ()


@dc.dataclass(frozen=True, slots=True)
class CodeBlock:
    """Code listing whose ``lines`` are already syntax-highlighted."""

    language: str
    lines: tuple[str, ...] = ()
    filename: str | None = None


@dc.dataclass(frozen=True, slots=True)
class TableBlock:
    headers: tuple[Inlines, ...] = ()
    rows: tuple[tuple[Inlines, ...], ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ListItem:
    content: Inlines = ()
    children: tuple[Inlines, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ListBlock:
    ordered: bool = False
    items: tuple[ListItem, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ConversationMessage:
    role: SpeakerRole
    text: Inlines = ()
    list: tuple[Inlines, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ConversationBlock:
    messages: tuple[ConversationMessage, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class InteractiveStep:
    command: str
    description: Inlines = ()


@dc.dataclass(frozen=True, slots=True)
class InteractiveBlock:
    steps: tuple[InteractiveStep, ...] = ()
    intro: Inlines | None = None


@dc.dataclass(frozen=True, slots=True)
class CommandBlock:
    """Shell transcript; ``command_lines`` are already syntax-highlighted."""

    language: str
    description: Inlines = ()
    command_lines: tuple[str, ...] = ()
    output_lines: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class QAItem:
    question: Inlines = ()
    answer: tuple[BlockNode, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class QABlock:
    items: tuple[QAItem, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class NoteBlock:
    variant: NoteVariant = "info"
    content: Inlines = ()


BlockNode = (
    ParagraphBlock
    | CodeBlock
    | TableBlock
    | ListBlock
    | ConversationBlock
    | InteractiveBlock
    | CommandBlock
    | QABlock
    | NoteBlock
)


@dc.dataclass(frozen=True, slots=True)
class SectionNode:
    """A titled group of blocks at heading level 2 or 3."""

    title: Inlines
    level: SectionLevel = 2
    blocks: tuple[BlockNode, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class DocumentNode:
    """Root of the tree built for a single render call.

    Attributes
    ----------
    title : Inlines
        Document title; drawn by the host frame, not by the layout engine.
    slug : str
        Identifier supplied by the navigation collaborator.
    intro : Inlines | None
        Optional lead paragraph rendered before the first section.
    sections : tuple[SectionNode, ...]
        Ordered sections.
    """

    title: Inlines
    slug: str
    intro: Inlines | None = None
    sections: tuple[SectionNode, ...] = ()


__all__ = [
    "BlockNode",
    "CodeBlock",
    "CodeNode",
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
    "NoteVariant",
    "ParagraphBlock",
    "QABlock",
    "QAItem",
    "SectionLevel",
    "SectionNode",
    "SpeakerRole",
    "StrongNode",
    "TableBlock",
    "TextNode",
]
