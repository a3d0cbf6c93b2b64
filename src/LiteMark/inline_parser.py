"""Inline span tokenizer.

Turns the raw text of a single line into ``InlineText``, ``InlineBold``,
``InlineItalic`` and ``InlineCode`` nodes.

Scanning keeps one cursor into the line. At each step the nearest bold,
italic and code constructs at or after the cursor are located independently;
the one that starts first wins, and a tie on the start position goes to bold,
then italic, then code. Text between the cursor and the winning construct is
emitted as plain text. Span content is never scanned again, so the tree is at
most one level deep.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple

from .model import Inline, InlineBold, InlineCode, InlineItalic, InlineText

BOLD_DELIMITERS = ("**", "__")
ITALIC_DELIMITERS = "*_"
CODE_DELIMITER = "`"

BOLD = 0
ITALIC = 1
CODE = 2


class _Span(NamedTuple):
    start: int  # index of the opening delimiter
    kind: int
    content_start: int
    content_end: int
    end: int  # first index after the closing delimiter


def tokenize_inline(line: str) -> Tuple[Inline, ...]:
    nodes: List[Inline] = []
    pos = 0
    while pos < len(line):
        span = _nearest_span(line, pos)
        if span is None:
            nodes.append(InlineText(line[pos:]))
            break
        if span.start > pos:
            nodes.append(InlineText(line[pos : span.start]))
        nodes.append(_make_node(span, line[span.content_start : span.content_end]))
        pos = span.end
    return tuple(nodes)


def _nearest_span(line: str, pos: int) -> Optional[_Span]:
    candidates = [
        span
        for span in (_find_bold(line, pos), _find_italic(line, pos), _find_code(line, pos))
        if span is not None
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda span: (span.start, span.kind))


def _make_node(span: _Span, content: str) -> Inline:
    if span.kind == BOLD:
        return InlineBold((InlineText(content),))
    if span.kind == ITALIC:
        return InlineItalic((InlineText(content),))
    return InlineCode(content)


def _find_bold(line: str, pos: int) -> Optional[_Span]:
    """Earliest ``**``/``__`` pair enclosing at least one character."""
    for start in range(pos, len(line) - 1):
        delimiter = line[start : start + 2]
        if delimiter not in BOLD_DELIMITERS:
            continue
        close = line.find(delimiter, start + 3)
        if close != -1:
            return _Span(start, BOLD, start + 2, close, close + 2)
    return None


def _find_italic(line: str, pos: int) -> Optional[_Span]:
    """Earliest single ``*``/``_`` opener that has a closing partner.

    An opener followed by the same character is part of a run, not a single
    marker, so ``****`` never opens a span. The first opener with a partner is
    final: when the character right before it (inside the unconsumed text) is
    the same delimiter, no italic is produced on this step.
    Only the same character blocks the opener; "_*a*" still yields an italic.
    """
    for start in range(pos, len(line)):
        char = line[start]
        if char not in ITALIC_DELIMITERS:
            continue
        if line[start + 1 : start + 2] == char:
            continue
        close = line.find(char, start + 2)
        if close == -1:
            continue
        if start > pos and line[start - 1] == char:
            return None
        return _Span(start, ITALIC, start + 1, close, close + 1)
    return None


def _find_code(line: str, pos: int) -> Optional[_Span]:
    start = line.find(CODE_DELIMITER, pos)
    while start != -1:
        close = line.find(CODE_DELIMITER, start + 1)
        if close == -1:
            return None
        if close > start + 1:
            return _Span(start, CODE, start + 1, close, close + 1)
        # empty pair; the second backtick may still open a span
        start = close
    return None
