from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .inline_parser import tokenize_inline
from .model import (
    BlockNode,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Inline,
    ListBlock,
    Paragraph,
)

logger = logging.getLogger(__name__)

FENCE = "```"

HEADING_RE = re.compile(r"(#{1,6})\s+(.+)")
UNORDERED_ITEM_RE = re.compile(r"\s*[-*]\s+(.+)")
ORDERED_ITEM_RE = re.compile(r"\s*\d+\.\s+(.+)")
RULE_RE = re.compile(r"[-*_]{3,}")


@dataclass
class _ScanState:
    blocks: List[BlockNode] = field(default_factory=list)
    in_code_block: bool = False
    code_info: str | None = None
    code_buffer: List[str] = field(default_factory=list)
    list_ordered: Optional[bool] = None
    list_items: List[Tuple[Inline, ...]] = field(default_factory=list)

    def flush_list(self) -> None:
        if self.list_items and self.list_ordered is not None:
            self.blocks.append(ListBlock(ordered=self.list_ordered, items=tuple(self.list_items)))
        self.list_items = []
        self.list_ordered = None

    def add_list_item(self, content: str, ordered: bool) -> None:
        if self.list_ordered is not ordered:
            self.flush_list()
            self.list_ordered = ordered
        self.list_items.append(tokenize_inline(content))

    def open_code_block(self, info: str) -> None:
        self.flush_list()
        self.in_code_block = True
        self.code_info = info.strip() or None

    def close_code_block(self) -> None:
        self.flush_list()
        self.blocks.append(CodeBlock(lines=tuple(self.code_buffer), info=self.code_info))
        self.code_buffer = []
        self.code_info = None
        self.in_code_block = False


def parse_markdown(text: str) -> Document:
    blocks = parse_blocks(text)
    logger.debug("Parsed %d blocks", len(blocks))
    return Document(blocks=blocks)


def parse_blocks(text: str) -> Tuple[BlockNode, ...]:
    """Scan ``text`` line by line into block nodes.

    Never raises: anything that is not a recognised construct becomes a
    paragraph, and a code fence left open at the end of input still yields
    the lines collected so far.
    """
    state = _ScanState()
    for raw_line in text.split("\n"):
        _scan_line(state, raw_line)

    state.flush_list()
    if state.in_code_block and state.code_buffer:
        logger.debug("Unterminated code fence, keeping %d buffered lines", len(state.code_buffer))
        state.close_code_block()
    return tuple(state.blocks)


def _scan_line(state: _ScanState, line: str) -> None:
    if line.startswith(FENCE):
        if state.in_code_block:
            state.close_code_block()
        else:
            state.open_code_block(line[len(FENCE) :])
        return

    if state.in_code_block:
        state.code_buffer.append(line)
        return

    line = _strip_cr(line)

    match = HEADING_RE.fullmatch(line)
    if match:
        state.flush_list()
        marker, content = match.groups()
        state.blocks.append(Heading(level=len(marker), inline=tokenize_inline(content)))
        return

    match = UNORDERED_ITEM_RE.fullmatch(line)
    if match:
        state.add_list_item(match.group(1), ordered=False)
        return

    match = ORDERED_ITEM_RE.fullmatch(line)
    if match:
        state.add_list_item(match.group(1), ordered=True)
        return

    stripped = line.strip()
    if RULE_RE.fullmatch(stripped):
        state.flush_list()
        state.blocks.append(HorizontalRule())
        return

    state.flush_list()
    if stripped:
        state.blocks.append(Paragraph(inline=tokenize_inline(line)))


def _strip_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line
