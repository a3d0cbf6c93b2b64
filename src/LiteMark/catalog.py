from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import yaml


@dataclass(frozen=True)
class Section:
    id: str
    tag: str
    title: str
    anchor: str


@dataclass(frozen=True)
class Page:
    path: str
    file: str
    title: str
    sections: Tuple[Section, ...] = ()
    internal_links: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Selection:
    """Navigation event emitted when a page or one of its sections is picked."""

    path: str
    anchor: Optional[str] = None


def load_catalog(text: str) -> Tuple[Page, ...]:
    """Parse a page catalog from YAML (or JSON) text, preserving its order."""
    data = yaml.safe_load(text)
    if data is None:
        return ()
    if isinstance(data, dict):
        data = data.get("pages") or []
    if not isinstance(data, list):
        raise ValueError("Catalog root must be a list of pages or a mapping with a 'pages' list.")
    return tuple(_build_page(entry) for entry in data)


def _build_page(entry) -> Page:
    if not isinstance(entry, dict):
        raise ValueError(f"Page entry must be a mapping, got {type(entry).__name__}.")
    path = entry.get("path")
    if not path:
        raise ValueError("Page entry is missing 'path'.")
    sections = tuple(_build_section(section) for section in entry.get("sections") or [])
    return Page(
        path=str(path),
        file=str(entry.get("file") or ""),
        title=str(entry.get("title") or ""),
        sections=sections,
        internal_links=tuple(str(link) for link in entry.get("internal_links") or []),
    )


def _build_section(entry) -> Section:
    if not isinstance(entry, dict):
        raise ValueError(f"Section entry must be a mapping, got {type(entry).__name__}.")
    return Section(
        id=str(entry.get("id") or ""),
        tag=str(entry.get("tag") or ""),
        title=str(entry.get("title") or ""),
        anchor=str(entry.get("anchor") or ""),
    )


def current_page(pages: Sequence[Page], current_path: str) -> Optional[Page]:
    for page in pages:
        if page.path == current_path:
            return page
    return pages[0] if pages else None


def display_text(pages: Sequence[Page], current_path: str, current_anchor: Optional[str] = None) -> str:
    page = current_page(pages, current_path)
    if page is None:
        return "/"
    if current_anchor:
        return page.path + current_anchor
    return page.path


def select_page(page: Page) -> Selection:
    return Selection(path=page.path)


def select_section(page: Page, section: Section) -> Selection:
    return Selection(path=page.path, anchor=section.anchor)


def is_page_active(page: Page, current_path: str, current_anchor: Optional[str] = None) -> bool:
    return page.path == current_path and not current_anchor


def is_section_active(page: Page, section: Section, current_path: str, current_anchor: Optional[str] = None) -> bool:
    return page.path == current_path and current_anchor == section.anchor
