"""Anchor slug generation for Markdown headings."""

from __future__ import annotations

import re

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for heading text cleanup (pip install beautifulsoup4)."
    ) from exc

_INLINE_LINK_RE = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")
_REFERENCE_LINK_RE = re.compile(r"!?\[([^\]]*)\]\[[^\]]*\]")
_CODE_SPAN_RE = re.compile(r"(`+)(.+?)\1")
_NON_SLUG_CHARS_RE = re.compile(r"[^\w\- ]")
_FALLBACK_SLUG = "section"


def strip_markdown_links(text: str) -> str:
    """Replace inline and reference links with their label text."""
    text = _INLINE_LINK_RE.sub(r"\1", text)
    return _REFERENCE_LINK_RE.sub(r"\1", text)


def _prose_text(text: str) -> str:
    text = strip_markdown_links(text)
    if "<" in text or "&" in text:
        text = BeautifulSoup(text, "html.parser").get_text()
    return text.replace("`", "")


def plain_text(text: str) -> str:
    """Reduce a heading title to the text a reader sees.

    Code span contents are kept literally. Outside code spans, links collapse
    to their labels and inline HTML collapses to its text content.
    """
    parts: list[str] = []
    position = 0
    for match in _CODE_SPAN_RE.finditer(text):
        parts.append(_prose_text(text[position : match.start()]))
        parts.append(match.group(2))
        position = match.end()
    parts.append(_prose_text(text[position:]))
    return "".join(parts).strip()


def slugify(text: str) -> str:
    """Build a GitHub-style anchor for a heading title.

    Lowercase, strip everything except word characters, spaces and hyphens,
    then turn spaces into hyphens. Titles that strip down to nothing become
    ``section``.
    """
    slug = _NON_SLUG_CHARS_RE.sub("", plain_text(text).lower())
    slug = slug.replace(" ", "-")
    return slug or _FALLBACK_SLUG


class SlugRegistry:
    """Hand out unique slugs in order of first appearance.

    The first occurrence of a slug is kept as is; later duplicates get
    ``-1``, ``-2``, ... appended, skipping any suffixed name already taken.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self._counts: dict[str, int] = {}

    def claim(self, base: str) -> str:
        if base not in self._seen:
            self._seen.add(base)
            self._counts.setdefault(base, 0)
            return base

        count = self._counts.get(base, 0)
        while True:
            count += 1
            candidate = f"{base}-{count}"
            if candidate not in self._seen:
                break
        self._counts[base] = count
        self._seen.add(candidate)
        return candidate
