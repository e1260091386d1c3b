"""Custom exceptions for tocsmith."""

from __future__ import annotations

from pathlib import Path


class TocsmithError(Exception):
    """Base exception for tocsmith operations."""


class FileAccessError(TocsmithError):
    """A document could not be read or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class MarkerMismatchError(TocsmithError):
    """TOC markers are unpaired or out of order.

    Attributes:
        line: 1-based line number of the offending marker, if known.
        path: Document path, attached by the pipeline once known.
    """

    def __init__(self, message: str, *, line: int | None = None, path: Path | str | None = None) -> None:
        self.message = message
        self.line = line
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        location = str(self.path) if self.path else "<text>"
        if self.line is not None:
            location = f"{location}:{self.line}"
        return f"{location}: {self.message}"


class MissingMarkersError(MarkerMismatchError):
    """Neither TOC marker is present in the document."""
