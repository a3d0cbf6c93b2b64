from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class InlineElement:
    """Base class for inline nodes."""


@dataclass(frozen=True)
class InlineText(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineBold(InlineElement):
    children: Tuple["Inline", ...]


@dataclass(frozen=True)
class InlineItalic(InlineElement):
    children: Tuple["Inline", ...]


@dataclass(frozen=True)
class InlineCode(InlineElement):
    """Verbatim code span; its text is never tokenized again."""

    text: str


Inline = Union[InlineText, InlineBold, InlineItalic, InlineCode]


@dataclass(frozen=True)
class Document:
    blocks: Tuple["BlockNode", ...]


@dataclass(frozen=True)
class Heading(Block):
    level: int
    inline: Tuple[Inline, ...]


@dataclass(frozen=True)
class Paragraph(Block):
    inline: Tuple[Inline, ...]


@dataclass(frozen=True)
class ListBlock(Block):
    ordered: bool
    items: Tuple[Tuple[Inline, ...], ...]


@dataclass(frozen=True)
class CodeBlock(Block):
    lines: Tuple[str, ...]
    info: str | None = None


@dataclass(frozen=True)
class HorizontalRule(Block):
    """Horizontal rule / thematic break."""


BlockNode = Union[Heading, Paragraph, ListBlock, CodeBlock, HorizontalRule]

