from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from docx import Document as DocxDocument
from docx.enum.text import WD_BREAK

from . import docx_format
from .docx_format import RenderOptions
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

logger = logging.getLogger(__name__)

BULLET = "•"


@dataclass
class RenderState:
    options: RenderOptions = field(default_factory=RenderOptions)
    blocks_rendered: int = 0


def render_document(doc: Document, output_path: str | Path, options: RenderOptions | None = None) -> None:
    output_path = Path(output_path)
    state = RenderState(options=options or RenderOptions())
    docx = DocxDocument()

    for block in doc.blocks:
        _dispatch_block(docx, block, state)
        state.blocks_rendered += 1

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)
    logger.debug("Wrote %d blocks to %s", state.blocks_rendered, output_path)


def _dispatch_block(docx: DocxDocument, block: Block, state: RenderState) -> None:
    if isinstance(block, Heading):
        _render_heading(docx, block, state)
    elif isinstance(block, Paragraph):
        _render_paragraph(docx, block.inline, state)
    elif isinstance(block, ListBlock):
        _render_list(docx, block, state)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block, state)
    elif isinstance(block, HorizontalRule):
        _render_horizontal_rule(docx)
    else:
        raise TypeError(f"Unsupported block type: {type(block).__name__}")


def _render_heading(docx: DocxDocument, heading: Heading, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    _add_inline_runs(paragraph, heading.inline, state.options)
    docx_format.apply_heading_format(paragraph, heading.level, state.options)


def _render_paragraph(docx: DocxDocument, inline_elements: Iterable[InlineElement], state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    _add_inline_runs(paragraph, inline_elements, state.options)
    docx_format.apply_body_paragraph_format(paragraph)


def _render_list(docx: DocxDocument, block: ListBlock, state: RenderState) -> None:
    # source numbers are discarded; ordered lists always count from 1
    for idx, item in enumerate(block.items, start=1):
        paragraph = docx.add_paragraph()
        prefix = f"{idx}. " if block.ordered else f"{BULLET} "
        run = paragraph.add_run(prefix)
        docx_format.set_run_font(run, state.options)
        _add_inline_runs(paragraph, item, state.options)
        docx_format.apply_list_item_format(paragraph)


def _render_code_block(docx: DocxDocument, block: CodeBlock, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run()
    for idx, line in enumerate(block.lines):
        if idx:
            run.add_break(WD_BREAK.LINE)
        run.add_text(line)
    docx_format.set_run_font(run, state.options, code=True)
    docx_format.apply_code_format(paragraph, state.options)


def _render_horizontal_rule(docx: DocxDocument) -> None:
    paragraph = docx.add_paragraph()
    docx_format.apply_rule_format(paragraph)


def _add_inline_runs(
    paragraph,
    inlines: Iterable[InlineElement],
    options: RenderOptions,
    bold: bool = False,
    italic: bool = False,
) -> None:
    for inline in inlines:
        if isinstance(inline, InlineText):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, options, bold=bold, italic=italic)
        elif isinstance(inline, InlineBold):
            _add_inline_runs(paragraph, inline.children, options, bold=True, italic=italic)
        elif isinstance(inline, InlineItalic):
            _add_inline_runs(paragraph, inline.children, options, bold=bold, italic=True)
        elif isinstance(inline, InlineCode):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, options, bold=bold, italic=italic, code=True)
        else:
            raise TypeError(f"Unsupported inline type: {type(inline).__name__}")
