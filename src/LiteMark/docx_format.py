from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Cm, Pt

FONT_NAME = "Calibri"
FONT_SIZE_PT = 11
CODE_FONT_NAME = "Courier New"
CODE_SHADING = "F3F4F6"
RULE_COLOR = "E5E7EB"
LIST_INDENT_CM = 0.75
PARAGRAPH_SPACING_PT = 3

# headline sizes ranked from h1 (largest) to h6 (smallest)
HEADING_SIZES_PT = {1: 18, 2: 15, 3: 13.5, 4: 12, 5: 10.5, 6: 10.5}
HEADING_BOLD = {1: True, 2: True, 3: True, 4: True, 5: True, 6: False}

# schema order of the paragraph properties that follow w:pBdr and w:shd
_PPR_AFTER_SHADING = (
    "w:tabs",
    "w:suppressAutoHyphens",
    "w:kinsoku",
    "w:wordWrap",
    "w:overflowPunct",
    "w:topLinePunct",
    "w:autoSpaceDE",
    "w:autoSpaceDN",
    "w:bidi",
    "w:adjustRightInd",
    "w:snapToGrid",
    "w:spacing",
    "w:ind",
    "w:contextualSpacing",
    "w:mirrorIndents",
    "w:suppressOverlap",
    "w:jc",
    "w:textDirection",
    "w:textAlignment",
    "w:textboxTightWrap",
    "w:outlineLvl",
    "w:divId",
    "w:cnfStyle",
    "w:rPr",
    "w:sectPr",
    "w:pPrChange",
)
_PPR_AFTER_BORDER = ("w:shd",) + _PPR_AFTER_SHADING


@dataclass
class RenderOptions:
    font_name: str = FONT_NAME
    font_size_pt: float = FONT_SIZE_PT
    code_font_name: str = CODE_FONT_NAME
    code_shading: str = CODE_SHADING
    heading_sizes_pt: Dict[int, float] = field(default_factory=lambda: dict(HEADING_SIZES_PT))

    def heading_size(self, level: int) -> float:
        return self.heading_sizes_pt.get(level, self.font_size_pt)


def set_run_font(run, options: RenderOptions, bold: bool = False, italic: bool = False, code: bool = False) -> None:
    run.font.name = options.code_font_name if code else options.font_name
    run.font.size = Pt(options.font_size_pt)
    run.bold = bold
    run.italic = italic
    if code:
        shade_run(run, options.code_shading)


def apply_body_paragraph_format(paragraph) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(PARAGRAPH_SPACING_PT)
    paragraph.paragraph_format.space_after = Pt(PARAGRAPH_SPACING_PT)
    paragraph.paragraph_format.first_line_indent = Cm(0)


def apply_heading_format(paragraph, level: int, options: RenderOptions) -> None:
    """Size-ranked headline: larger and with more space above for lower levels."""
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(PARAGRAPH_SPACING_PT * (4 if level <= 2 else 2))
    paragraph.paragraph_format.space_after = Pt(PARAGRAPH_SPACING_PT * 2)
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.keep_with_next = True
    for run in paragraph.runs:
        run.font.size = Pt(options.heading_size(level))
        if HEADING_BOLD.get(level, True):
            run.bold = True


def apply_list_item_format(paragraph) -> None:
    apply_body_paragraph_format(paragraph)
    paragraph.paragraph_format.left_indent = Cm(LIST_INDENT_CM)
    paragraph.paragraph_format.space_before = Pt(0)


def apply_code_format(paragraph, options: RenderOptions) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.space_before = Pt(PARAGRAPH_SPACING_PT * 2)
    paragraph.paragraph_format.space_after = Pt(PARAGRAPH_SPACING_PT * 2)
    _set_paragraph_shading(paragraph, options.code_shading)


def apply_rule_format(paragraph) -> None:
    """Draw a divider as the bottom border of an empty paragraph."""
    p_pr = paragraph._p.get_or_add_pPr()
    for child in list(p_pr):
        if child.tag == qn("w:pBdr"):
            p_pr.remove(child)
    borders = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), "6")
    bottom.set(qn("w:space"), "1")
    bottom.set(qn("w:color"), RULE_COLOR)
    borders.append(bottom)
    p_pr.insert_element_before(borders, *_PPR_AFTER_BORDER)
    paragraph.paragraph_format.space_after = Pt(PARAGRAPH_SPACING_PT * 2)


def shade_run(run, fill: str) -> None:
    r_pr = run._r.get_or_add_rPr()
    r_pr.append(_shading_element(fill))


def _set_paragraph_shading(paragraph, fill: str) -> None:
    p_pr = paragraph._p.get_or_add_pPr()
    p_pr.insert_element_before(_shading_element(fill), *_PPR_AFTER_SHADING)


def _shading_element(fill: str):
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    return shd
