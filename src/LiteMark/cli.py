from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import markdown_parser, renderer_docx, renderer_text
from .docx_format import FONT_NAME, FONT_SIZE_PT, RenderOptions
from .utils import OUTPUT_SUFFIXES, configure_logging, read_markdown, resolve_output_path, write_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="LiteMark",
        description="Convert lightweight Markdown into DOCX or canonical text.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output file or directory")
    parser.add_argument(
        "-f",
        "--format",
        choices=sorted(OUTPUT_SUFFIXES),
        default="docx",
        help="Output format (default: docx)",
    )
    parser.add_argument("--font", type=str, default=FONT_NAME, help="Body font for DOCX output")
    parser.add_argument("--font-size", type=float, default=FONT_SIZE_PT, help="Body font size in points")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output, args.format)

    logging.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Parsing markdown...")
    document = markdown_parser.parse_markdown(markdown_text)
    logging.debug("Block count: %d", len(document.blocks))

    if args.format == "text":
        logging.info("Writing canonical text to %s", output_path)
        write_text(output_path, renderer_text.render_text(document))
    else:
        logging.info("Rendering DOCX to %s", output_path)
        options = RenderOptions(font_name=args.font, font_size_pt=args.font_size)
        renderer_docx.render_document(document, output_path=output_path, options=options)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
