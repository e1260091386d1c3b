"""Section tree construction and filtering."""

from __future__ import annotations

import re
from typing import Iterable

from tocsmith.schemas import Heading, SectionNode


def normalize_section_title(title: str) -> str:
    """Normalize section titles for comparison."""
    title = title.strip().lower()
    title = re.sub(r"^[\d.]+\s+", "", title)
    return re.sub(r"\s+", " ", title)


def build_section_tree(headings: Iterable[Heading]) -> list[SectionNode]:
    """Arrange headings into a forest following their levels.

    A heading becomes the child of the nearest preceding open section with a
    lower level. Skipped levels nest one step deeper, never more.
    """
    roots: list[SectionNode] = []
    stack: list[SectionNode] = []
    for heading in headings:
        node = SectionNode(heading=heading)
        while stack and stack[-1].heading.level >= heading.level:
            stack.pop()
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)
    return roots


def count_sections(sections: Iterable[SectionNode]) -> int:
    """Count total sections in the tree."""
    total = 0
    for section in sections:
        total += 1
        total += count_sections(section.children)
    return total


def exclude_sections(
    sections: list[SectionNode],
    titles: Iterable[str] | None = None,
) -> list[SectionNode]:
    """Drop sections whose title matches, together with their subsections.

    Kept nodes are copies; the input tree is left untouched.
    """
    excluded = {normalize_section_title(title) for title in (titles or []) if title.strip()}
    if not excluded:
        return sections

    def _filter(nodes: list[SectionNode]) -> list[SectionNode]:
        result: list[SectionNode] = []
        for node in nodes:
            if normalize_section_title(node.heading.text) in excluded:
                continue
            result.append(node.model_copy(update={"children": _filter(node.children)}))
        return result

    return _filter(list(sections))
