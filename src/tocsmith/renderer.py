"""Render a section tree as a numbered Markdown list."""

from __future__ import annotations

import re
from typing import Iterable

from tocsmith.config import TOCSMITH_INDENT
from tocsmith.schemas import Heading, SectionNode
from tocsmith.sections import build_section_tree, exclude_sections
from tocsmith.slugs import strip_markdown_links

_TITLE_LEVEL = 1
_UNESCAPED_BRACKET_RE = re.compile(r"(?<!\\)([\[\]])")


def build_toc_tree(
    headings: Iterable[Heading],
    *,
    exclude: Iterable[str] | None = None,
) -> list[SectionNode]:
    """Arrange the listable headings into the tree the TOC is rendered from.

    Level-1 headings are the document title and never listed.
    """
    entries = [heading for heading in headings if heading.level > _TITLE_LEVEL]
    return exclude_sections(build_section_tree(entries), exclude)


def render_toc(
    headings: Iterable[Heading],
    *,
    indent: int = TOCSMITH_INDENT,
    exclude: Iterable[str] | None = None,
) -> list[str]:
    """Render headings as nested ``N. [title](#slug)`` lines.

    Numbering restarts at 1 under each parent, and each nesting step adds
    ``indent`` spaces.

    Args:
        headings: Headings in source order.
        indent: Spaces per nesting depth.
        exclude: Section titles to leave out, along with their subsections.

    Returns:
        TOC lines without line terminators.
    """
    return render_sections(build_toc_tree(headings, exclude=exclude), indent=indent)


def render_sections(sections: list[SectionNode], *, indent: int = TOCSMITH_INDENT, depth: int = 0) -> list[str]:
    lines: list[str] = []
    for number, section in enumerate(sections, start=1):
        prefix = " " * (indent * depth)
        lines.append(f"{prefix}{number}. {format_entry(section.heading)}")
        if section.children:
            lines.extend(render_sections(section.children, indent=indent, depth=depth + 1))
    return lines


def format_entry(heading: Heading) -> str:
    """Format a single TOC entry link; bare square brackets are escaped."""
    label = _UNESCAPED_BRACKET_RE.sub(r"\\\1", strip_markdown_links(heading.text))
    return f"[{label}](#{heading.slug})"
