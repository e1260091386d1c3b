"""Marker span and splice output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class MarkerSpan(BaseModel):
    """0-based line indexes of the begin and end marker lines."""

    model_config = ConfigDict(frozen=True)

    begin_line: int
    end_line: int

    @model_validator(mode="after")
    def _check_order(self) -> "MarkerSpan":
        if self.begin_line < 0 or self.end_line <= self.begin_line:
            raise ValueError("begin marker must precede end marker")
        return self


class SpliceResult(BaseModel):
    """Outcome of splicing a rendered TOC into a document."""

    text: str
    changed: bool
    entries: int = 0
    span: MarkerSpan | None = None
    marker_error: str | None = None
