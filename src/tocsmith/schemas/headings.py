"""Heading and section tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Heading(BaseModel):
    """A heading extracted from a Markdown document.

    Attributes:
        level: Depth derived from the number of leading ``#`` characters.
        text: Heading title as written, without the closing ``#`` run.
        slug: Unique anchor for the heading within its document.
        position: 0-based index in source order among extracted headings.
        line: 1-based line number of the heading in the source text.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=6)
    text: str
    slug: str
    position: int = Field(..., ge=0)
    line: int = Field(..., ge=1)


class SectionNode(BaseModel):
    """A hierarchical section node."""

    heading: Heading
    children: list["SectionNode"] = Field(default_factory=list)
