"""Load, extract, render, splice and write back Markdown documents."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from tocsmith.config import (
    TOCSMITH_BEGIN_MARKER,
    TOCSMITH_END_MARKER,
    TOCSMITH_INDENT,
    TOCSMITH_MAX_LEVEL,
)
from tocsmith.exceptions import FileAccessError, MarkerMismatchError, MissingMarkersError
from tocsmith.headings import extract_headings
from tocsmith.loader import (
    detect_newline,
    read_document,
    read_document_async,
    write_document,
    write_document_async,
)
from tocsmith.renderer import build_toc_tree, render_sections
from tocsmith.schemas import SpliceResult
from tocsmith.sections import count_sections
from tocsmith.splicer import find_marker_span, splice_toc, split_keepends
from tocsmith.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class TocOptions:
    """Options for TOC generation.

    Attributes:
        begin_marker: Line that opens the generated region.
        end_marker: Line that closes the generated region.
        max_level: Deepest heading level listed in the TOC.
        indent: Spaces per nesting depth.
        exclude: Section titles left out of the TOC with their subsections.
    """

    begin_marker: str = TOCSMITH_BEGIN_MARKER
    end_marker: str = TOCSMITH_END_MARKER
    max_level: int = TOCSMITH_MAX_LEVEL
    indent: int = TOCSMITH_INDENT
    exclude: list[str] = field(default_factory=list)


@dataclass
class FileResult:
    """Outcome for one file in a run."""

    path: Path
    result: SpliceResult | None = None
    written: bool = False
    error: FileAccessError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def process_text(
    text: str,
    options: TocOptions | None = None,
    *,
    path: Path | None = None,
) -> SpliceResult:
    """Regenerate the TOC region of a document held in memory.

    Marker problems are not fatal: they are logged and the text comes back
    unchanged with ``marker_error`` set.

    Args:
        text: Full document text.
        options: Generation options. Uses defaults if None.
        path: Source path, used only in log messages.

    Returns:
        The splice result.
    """
    opts = options or TocOptions()
    try:
        span = find_marker_span(
            split_keepends(text), begin_marker=opts.begin_marker, end_marker=opts.end_marker
        )
        headings = extract_headings(
            text,
            max_level=opts.max_level,
            ignore_lines=range(span.begin_line + 1, span.end_line),
        )
        tree = build_toc_tree(headings, exclude=opts.exclude)
        toc_lines = render_sections(tree, indent=opts.indent)
        new_text, span = splice_toc(
            text,
            toc_lines,
            newline=detect_newline(text),
            begin_marker=opts.begin_marker,
            end_marker=opts.end_marker,
        )
    except MarkerMismatchError as exc:
        exc.path = path
        level = logging.INFO if isinstance(exc, MissingMarkersError) else logging.WARNING
        logger.log(level, "Document left unchanged: %s", exc)
        return SpliceResult(text=text, changed=False, marker_error=str(exc))

    return SpliceResult(text=new_text, changed=new_text != text, entries=count_sections(tree), span=span)


def update_file(path: Path, options: TocOptions | None = None, *, in_place: bool = False) -> FileResult:
    """Regenerate the TOC of one file, writing back only when it changed.

    Raises:
        FileAccessError: If the file cannot be read or written.
    """
    text = read_document(path)
    result = process_text(text, options, path=path)
    written = False
    if in_place and result.changed:
        written = write_document(path, result.text, original=text)
    return FileResult(path=path, result=result, written=written)


async def update_files(
    paths: Iterable[Path],
    options: TocOptions | None = None,
    *,
    in_place: bool = False,
) -> list[FileResult]:
    """Process files concurrently; results keep the input order.

    Files share no state, so each runs as its own task. A file that cannot be
    read or written is reported in its result and does not stop the rest.
    """
    opts = options or TocOptions()

    async def _run(path: Path) -> FileResult:
        try:
            text = await read_document_async(path)
            result = process_text(text, opts, path=path)
            written = False
            if in_place and result.changed:
                written = await write_document_async(path, result.text, original=text)
        except FileAccessError as exc:
            logger.error("%s", exc)
            return FileResult(path=path, error=exc)
        return FileResult(path=path, result=result, written=written)

    return list(await asyncio.gather(*(_run(Path(path)) for path in paths)))
