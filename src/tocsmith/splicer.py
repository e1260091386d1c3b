"""Locate TOC markers and splice rendered content between them."""

from __future__ import annotations

import re

from tocsmith.config import TOCSMITH_BEGIN_MARKER, TOCSMITH_END_MARKER
from tocsmith.exceptions import MarkerMismatchError, MissingMarkersError
from tocsmith.schemas import MarkerSpan

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def split_keepends(text: str) -> list[str]:
    """Split on ``\\n`` only, keeping terminators attached."""
    return _LINE_RE.findall(text)


def _is_marker(line: str, token: str) -> bool:
    return line.strip() == token


def find_marker_span(
    lines: list[str],
    *,
    begin_marker: str = TOCSMITH_BEGIN_MARKER,
    end_marker: str = TOCSMITH_END_MARKER,
) -> MarkerSpan:
    """Find the first begin marker and the first end marker after it.

    A marker line matches when it equals the token once surrounding
    whitespace and the line ending are stripped.

    Args:
        lines: Document lines, with or without line terminators.
        begin_marker: Token that opens the TOC region.
        end_marker: Token that closes the TOC region.

    Returns:
        The marker span.

    Raises:
        MissingMarkersError: If neither marker appears.
        MarkerMismatchError: If the begin marker has no end marker after it,
            or an end marker appears without a preceding begin marker.
    """
    begin = next((i for i, line in enumerate(lines) if _is_marker(line, begin_marker)), None)
    if begin is None:
        stray_end = next((i for i, line in enumerate(lines) if _is_marker(line, end_marker)), None)
        if stray_end is None:
            raise MissingMarkersError("no TOC markers found")
        raise MarkerMismatchError(
            f"{end_marker!r} found without a preceding {begin_marker!r}", line=stray_end + 1
        )

    for index in range(begin + 1, len(lines)):
        if _is_marker(lines[index], end_marker):
            return MarkerSpan(begin_line=begin, end_line=index)

    raise MarkerMismatchError(f"{begin_marker!r} has no matching {end_marker!r} after it", line=begin + 1)


def splice_toc(
    text: str,
    toc_lines: list[str],
    *,
    newline: str = "\n",
    begin_marker: str = TOCSMITH_BEGIN_MARKER,
    end_marker: str = TOCSMITH_END_MARKER,
) -> tuple[str, MarkerSpan]:
    """Replace everything strictly between the marker lines with ``toc_lines``.

    Marker lines and all text outside the span are kept byte for byte.

    Returns:
        Tuple of (new text, marker span).

    Raises:
        MarkerMismatchError: See :func:`find_marker_span`.
    """
    lines = split_keepends(text)
    span = find_marker_span(lines, begin_marker=begin_marker, end_marker=end_marker)

    block = "".join(line + newline for line in toc_lines)
    head = "".join(lines[: span.begin_line + 1])
    tail = "".join(lines[span.end_line :])
    return head + block + tail, span
