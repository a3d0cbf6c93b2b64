"""Serialise a block tree back into the line-oriented source format.

The output is canonical rather than byte-identical: bold is always written
with ``**``, italic with ``*``, bullets with ``-``, ordered items are
renumbered from 1 and blocks are separated by one blank line.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Union

from .markdown_parser import FENCE
from .model import (
    Block,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    InlineBold,
    InlineCode,
    InlineElement,
    InlineItalic,
    InlineText,
    ListBlock,
    Paragraph,
)

RULE = "---"


def render_text(doc: Union[Document, Sequence[Block]]) -> str:
    blocks = doc.blocks if isinstance(doc, Document) else doc
    return "\n\n".join(_render_block(block) for block in blocks)


def render_inline(inlines: Iterable[InlineElement]) -> str:
    parts: List[str] = []
    for inline in inlines:
        if isinstance(inline, InlineText):
            parts.append(inline.text)
        elif isinstance(inline, InlineBold):
            parts.append(f"**{render_inline(inline.children)}**")
        elif isinstance(inline, InlineItalic):
            content = render_inline(inline.children)
            # "* x*" at the start of a line would scan as a bullet
            marker = "_" if content[:1].isspace() else "*"
            parts.append(f"{marker}{content}{marker}")
        elif isinstance(inline, InlineCode):
            parts.append(f"`{inline.text}`")
        else:
            raise TypeError(f"Unsupported inline type: {type(inline).__name__}")
    return "".join(parts)


def _render_block(block: Block) -> str:
    if isinstance(block, Heading):
        return f"{'#' * block.level} {render_inline(block.inline)}"
    if isinstance(block, Paragraph):
        return render_inline(block.inline)
    if isinstance(block, ListBlock):
        lines = []
        for idx, item in enumerate(block.items, start=1):
            marker = f"{idx}." if block.ordered else "-"
            lines.append(f"{marker} {render_inline(item)}")
        return "\n".join(lines)
    if isinstance(block, CodeBlock):
        return "\n".join([FENCE + (block.info or ""), *block.lines, FENCE])
    if isinstance(block, HorizontalRule):
        return RULE
    raise TypeError(f"Unsupported block type: {type(block).__name__}")
