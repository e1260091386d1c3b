"""Shared schemas for tocsmith."""

from tocsmith.schemas.headings import Heading, SectionNode
from tocsmith.schemas.splice import MarkerSpan, SpliceResult

__all__ = ["Heading", "MarkerSpan", "SectionNode", "SpliceResult"]
