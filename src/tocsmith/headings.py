"""Extract headings from Markdown text."""

from __future__ import annotations

import re
from dataclasses import dataclass

from tocsmith.config import TOCSMITH_MAX_LEVEL
from tocsmith.schemas import Heading
from tocsmith.slugs import SlugRegistry, slugify

_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.*?)[ \t]*$")
_CLOSING_HASHES_RE = re.compile(r"(?:^|[ \t]+)#+$")
_FENCE_OPEN_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
_FENCE_CLOSE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*$")


@dataclass
class _FenceState:
    """Open fence bookkeeping while walking the document."""

    char: str | None = None
    length: int = 0

    @property
    def is_open(self) -> bool:
        return self.char is not None

    def feed(self, line: str) -> bool:
        """Update state for ``line``; return True if the line is fence syntax."""
        if self.is_open:
            match = _FENCE_CLOSE_RE.match(line)
            if match:
                run = match.group(1)
                if run[0] == self.char and len(run) >= self.length:
                    self.char = None
                    self.length = 0
                    return True
            return False

        match = _FENCE_OPEN_RE.match(line)
        if not match:
            return False
        run, info = match.groups()
        # Backtick fences may not carry backticks in the info string.
        if run[0] == "`" and "`" in info:
            return False
        self.char = run[0]
        self.length = len(run)
        return True


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` and drop a trailing ``\\r`` from each line."""
    return [line.rstrip("\r") for line in text.split("\n")]


def parse_heading_line(line: str) -> tuple[int, str] | None:
    """Return ``(level, title)`` for an ATX heading line, else None."""
    match = _HEADING_RE.match(line)
    if not match:
        return None
    hashes, title = match.groups()
    title = _CLOSING_HASHES_RE.sub("", title).strip()
    if not title:
        return None
    return len(hashes), title


def extract_headings(
    text: str,
    *,
    max_level: int = TOCSMITH_MAX_LEVEL,
    ignore_lines: range | None = None,
) -> list[Heading]:
    """Extract headings outside fenced code blocks, in source order.

    Every heading claims a slug, including ones deeper than ``max_level``,
    so anchors stay stable when the depth limit changes. Only headings at or
    above ``max_level`` are returned.

    Args:
        text: Markdown document text.
        max_level: Deepest heading level to return (1-6).
        ignore_lines: 0-based line indexes to skip entirely, such as the body
            of an existing TOC region.

    Returns:
        Ordered list of headings with unique slugs.
    """
    registry = SlugRegistry()
    fence = _FenceState()
    headings: list[Heading] = []

    for index, line in enumerate(split_lines(text)):
        if ignore_lines is not None and index in ignore_lines:
            continue
        if fence.feed(line) or fence.is_open:
            continue
        parsed = parse_heading_line(line)
        if parsed is None:
            continue
        level, title = parsed
        slug = registry.claim(slugify(title))
        if level > max_level:
            continue
        headings.append(
            Heading(level=level, text=title, slug=slug, position=len(headings), line=index + 1)
        )

    return headings
