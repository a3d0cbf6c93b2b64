import textwrap

from LiteMark import markdown_parser
from LiteMark.model import (
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    InlineBold,
    InlineText,
    ListBlock,
    Paragraph,
)


def test_parse_blocks_and_inline():
    md_text = textwrap.dedent(
        """
        # Title

        Text with *italic*, **bold** and `code`.

        - First item
        - Second item

        ```python
        print("# not a heading")
        ```

        ---
        """
    )
    document = markdown_parser.parse_markdown(md_text)
    assert isinstance(document, Document)
    kinds = [type(block) for block in document.blocks]
    assert kinds == [Heading, Paragraph, ListBlock, CodeBlock, HorizontalRule]
    assert document.blocks[3].info == "python"
    assert document.blocks[3].lines == ('print("# not a heading")',)


def test_heading_then_paragraph():
    blocks = markdown_parser.parse_blocks("# Title\n\nSome text")
    assert blocks == (
        Heading(level=1, inline=(InlineText("Title"),)),
        Paragraph(inline=(InlineText("Some text"),)),
    )


def test_heading_levels():
    blocks = markdown_parser.parse_blocks("###### Six\n### Three")
    assert [block.level for block in blocks] == [6, 3]


def test_seven_markers_fall_through_to_paragraph():
    blocks = markdown_parser.parse_blocks("####### Too deep")
    assert blocks == (Paragraph(inline=(InlineText("####### Too deep"),)),)


def test_heading_needs_whitespace_after_marker():
    blocks = markdown_parser.parse_blocks("#hashtag")
    assert isinstance(blocks[0], Paragraph)


def test_lists_split_on_blank_line_and_style():
    blocks = markdown_parser.parse_blocks("- a\n- b\n\n1. x\n2. y")
    assert blocks == (
        ListBlock(ordered=False, items=((InlineText("a"),), (InlineText("b"),))),
        ListBlock(ordered=True, items=((InlineText("x"),), (InlineText("y"),))),
    )


def test_bullet_style_switch_starts_new_list():
    blocks = markdown_parser.parse_blocks("* a\n1. b\n- c")
    assert [(block.ordered, len(block.items)) for block in blocks] == [(False, 1), (True, 1), (False, 1)]


def test_mixed_unordered_markers_share_a_list():
    blocks = markdown_parser.parse_blocks("- a\n* b\n  - c")
    assert len(blocks) == 1
    assert len(blocks[0].items) == 3


def test_ordered_numbers_are_discarded():
    blocks = markdown_parser.parse_blocks("7. seven\n3. three")
    assert blocks == (ListBlock(ordered=True, items=((InlineText("seven"),), (InlineText("three"),))),)


def test_paragraph_terminates_list():
    blocks = markdown_parser.parse_blocks("- a\nplain\n- b")
    assert [type(block) for block in blocks] == [ListBlock, Paragraph, ListBlock]


def test_list_items_are_tokenized():
    blocks = markdown_parser.parse_blocks("- **key** value")
    assert blocks[0].items[0] == (InlineBold((InlineText("key"),)), InlineText(" value"))


def test_code_block_is_verbatim():
    md_text = "```\n# heading?\n- item?\n  **kept**  \n\n```"
    blocks = markdown_parser.parse_blocks(md_text)
    assert blocks == (CodeBlock(lines=("# heading?", "- item?", "  **kept**  ", "")),)


def test_code_fence_terminates_open_list():
    blocks = markdown_parser.parse_blocks("- a\n```\nx\n```\n- b")
    assert [type(block) for block in blocks] == [ListBlock, CodeBlock, ListBlock]


def test_empty_code_block_is_kept():
    assert markdown_parser.parse_blocks("```\n```") == (CodeBlock(lines=()),)


def test_unterminated_fence_is_recovered():
    assert markdown_parser.parse_blocks("```\ncode line") == (CodeBlock(lines=("code line",)),)


def test_unterminated_empty_fence_emits_nothing():
    assert markdown_parser.parse_blocks("text\n```") == (Paragraph(inline=(InlineText("text"),)),)


def test_rules():
    assert markdown_parser.parse_blocks("***") == (HorizontalRule(),)
    assert markdown_parser.parse_blocks("  _-*_  ") == (HorizontalRule(),)


def test_bold_line_is_not_a_rule():
    blocks = markdown_parser.parse_blocks("** not a rule **")
    assert blocks == (Paragraph(inline=(InlineBold((InlineText(" not a rule "),)),)),)


def test_spaced_dashes_are_a_list_item():
    blocks = markdown_parser.parse_blocks("- - -")
    assert blocks == (ListBlock(ordered=False, items=((InlineText("- -"),),)),)


def test_empty_and_blank_input():
    assert markdown_parser.parse_blocks("") == ()
    assert markdown_parser.parse_blocks("\n  \n\t\n") == ()


def test_crlf_input_matches_lf_input():
    lf = "# Title\n- a\n- b\n\ntext"
    assert markdown_parser.parse_blocks(lf.replace("\n", "\r\n")) == markdown_parser.parse_blocks(lf)


def test_carriage_return_inside_fence_is_kept():
    blocks = markdown_parser.parse_blocks("```\r\na\r\n```")
    assert blocks == (CodeBlock(lines=("a\r",)),)


def test_paragraph_keeps_leading_whitespace():
    blocks = markdown_parser.parse_blocks("   indented")
    assert blocks == (Paragraph(inline=(InlineText("   indented"),)),)


def test_each_line_is_its_own_paragraph():
    blocks = markdown_parser.parse_blocks("one\ntwo")
    assert len(blocks) == 2


def test_block_count_is_bounded_by_line_count():
    samples = [
        "",
        "- a\n# b\n- c\n1. d\n***\ntext",
        "```\n```\n```\n```",
        "a\nb\nc\n\n\n",
    ]
    for sample in samples:
        assert len(markdown_parser.parse_blocks(sample)) <= len(sample.split("\n")) + 1


def test_parse_returns_fresh_trees():
    first = markdown_parser.parse_blocks("- a")
    second = markdown_parser.parse_blocks("- a")
    assert first == second
    assert first[0] is not second[0]
