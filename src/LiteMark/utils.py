from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

OUTPUT_SUFFIXES = {"docx": ".docx", "text": ".out.md"}


def configure_logging(verbose: bool = False) -> None:
    """Configure a simple console logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def resolve_output_path(input_path: Path, output: Optional[str], output_format: str = "docx") -> Path:
    suffix = OUTPUT_SUFFIXES[output_format]
    if output:
        out_path = Path(output)
        if out_path.is_dir():
            out_path = out_path / f"{input_path.stem}{suffix}"
    else:
        out_path = input_path.with_suffix(suffix)
    if out_path.resolve() == input_path.resolve():
        raise ValueError(f"Output path would overwrite the input file: {input_path}")
    return out_path


def read_markdown(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
