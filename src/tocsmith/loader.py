"""Read and write Markdown documents without disturbing line endings."""

from __future__ import annotations

import asyncio
from pathlib import Path

from tocsmith.exceptions import FileAccessError
from tocsmith.utils.logging_config import get_logger

logger = get_logger(__name__)


def detect_newline(text: str) -> str:
    """Return ``\\r\\n`` if the text uses Windows line endings, else ``\\n``."""
    return "\r\n" if "\r\n" in text else "\n"


def read_document(path: Path, encoding: str = "utf-8") -> str:
    """Read a document as text with newline translation disabled.

    Args:
        path: Path to the Markdown file.
        encoding: Text encoding to use.

    Returns:
        The file contents, line endings untouched.

    Raises:
        FileAccessError: If the file is missing, unreadable or not valid text.
    """
    try:
        with open(path, "r", encoding=encoding, newline="") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise FileAccessError(path, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise FileAccessError(path, f"not valid {encoding} text") from exc
    except OSError as exc:
        raise FileAccessError(path, exc.strerror or str(exc)) from exc


def write_document(
    path: Path,
    content: str,
    *,
    original: str | None = None,
    encoding: str = "utf-8",
) -> bool:
    """Write ``content`` to ``path`` unless it matches ``original``.

    Args:
        path: Path to the Markdown file.
        content: Full new document text.
        original: Text previously read from ``path``; when equal to
            ``content`` nothing is written and the mtime is left alone.
        encoding: Text encoding to use.

    Returns:
        True if the file was written.

    Raises:
        FileAccessError: If the file cannot be written.
    """
    if original is not None and content == original:
        return False
    try:
        with open(path, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise FileAccessError(path, exc.strerror or str(exc)) from exc
    logger.info("Updated table of contents", extra={"path": str(path)})
    return True


async def read_document_async(path: Path, encoding: str = "utf-8") -> str:
    """Read a document in a worker thread."""
    return await asyncio.to_thread(read_document, path, encoding)


async def write_document_async(
    path: Path,
    content: str,
    *,
    original: str | None = None,
    encoding: str = "utf-8",
) -> bool:
    """Write a document in a worker thread."""
    return await asyncio.to_thread(
        write_document, path, content, original=original, encoding=encoding
    )
