"""Command line entry point for tocsmith."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from tocsmith import __version__
from tocsmith.config import (
    TOCSMITH_BEGIN_MARKER,
    TOCSMITH_END_MARKER,
    TOCSMITH_INDENT,
    TOCSMITH_LOG_LEVEL,
    TOCSMITH_MAX_LEVEL,
)
from tocsmith.pipeline import TocOptions, update_files
from tocsmith.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_STALE = 1
EXIT_FILE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tocsmith",
        description="Regenerate the table of contents between TOC markers in Markdown files.",
    )
    parser.add_argument("files", nargs="+", type=Path, metavar="FILE", help="Markdown file(s) to process")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-i", "--in-place", action="store_true", help="Rewrite files instead of printing them")
    mode.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if any table of contents is out of date; write nothing",
    )
    parser.add_argument("--begin-marker", default=TOCSMITH_BEGIN_MARKER, help="Line opening the TOC region")
    parser.add_argument("--end-marker", default=TOCSMITH_END_MARKER, help="Line closing the TOC region")
    parser.add_argument(
        "--max-level",
        type=int,
        default=TOCSMITH_MAX_LEVEL,
        choices=range(2, 7),
        metavar="{2-6}",
        help="Deepest heading level to list",
    )
    parser.add_argument("--indent", type=int, default=TOCSMITH_INDENT, help="Spaces per nesting level")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="TITLE",
        help="Leave out a section (and its subsections) by title; repeatable",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log progress details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.indent < 1:
        parser.error("--indent must be at least 1")

    if args.verbose:
        configure_logging(logging.INFO)
    elif args.quiet:
        configure_logging(logging.ERROR)
    else:
        configure_logging(TOCSMITH_LOG_LEVEL)

    options = TocOptions(
        begin_marker=args.begin_marker,
        end_marker=args.end_marker,
        max_level=args.max_level,
        indent=args.indent,
        exclude=args.exclude,
    )
    results = asyncio.run(update_files(args.files, options, in_place=args.in_place))

    exit_code = EXIT_OK
    for file_result in results:
        if not file_result.ok:
            exit_code = EXIT_FILE_ERROR
            continue
        result = file_result.result
        if args.check:
            if result.changed:
                logger.warning("Table of contents is out of date: %s", file_result.path)
                if exit_code == EXIT_OK:
                    exit_code = EXIT_STALE
        elif not args.in_place:
            sys.stdout.write(result.text)

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
