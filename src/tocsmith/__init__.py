"""tocsmith: generate tables of contents for Markdown reference files."""

__version__ = "0.1.0"

from tocsmith.exceptions import (  # noqa: E402
    FileAccessError,
    MarkerMismatchError,
    MissingMarkersError,
    TocsmithError,
)
from tocsmith.headings import extract_headings  # noqa: E402
from tocsmith.pipeline import FileResult, TocOptions, process_text, update_file, update_files  # noqa: E402
from tocsmith.renderer import render_toc  # noqa: E402
from tocsmith.schemas import Heading, MarkerSpan, SectionNode, SpliceResult  # noqa: E402
from tocsmith.sections import build_section_tree  # noqa: E402
from tocsmith.slugs import slugify  # noqa: E402
from tocsmith.splicer import find_marker_span, splice_toc  # noqa: E402

__all__ = [
    "FileAccessError",
    "FileResult",
    "Heading",
    "MarkerMismatchError",
    "MarkerSpan",
    "MissingMarkersError",
    "SectionNode",
    "SpliceResult",
    "TocOptions",
    "TocsmithError",
    "build_section_tree",
    "extract_headings",
    "find_marker_span",
    "process_text",
    "render_toc",
    "slugify",
    "splice_toc",
    "update_file",
    "update_files",
    "__version__",
]
