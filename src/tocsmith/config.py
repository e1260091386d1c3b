"""Local configuration for tocsmith."""

from __future__ import annotations

import os


DEFAULT_BEGIN_MARKER = "<!--BEGIN TOC-->"
DEFAULT_END_MARKER = "<!--END TOC-->"
DEFAULT_MAX_LEVEL = 6
DEFAULT_INDENT = 4
DEFAULT_LOG_LEVEL = "WARNING"

TOCSMITH_BEGIN_MARKER = os.getenv("TOCSMITH_BEGIN_MARKER", DEFAULT_BEGIN_MARKER)
TOCSMITH_END_MARKER = os.getenv("TOCSMITH_END_MARKER", DEFAULT_END_MARKER)
TOCSMITH_MAX_LEVEL = int(os.getenv("TOCSMITH_MAX_LEVEL", str(DEFAULT_MAX_LEVEL)))
TOCSMITH_INDENT = int(os.getenv("TOCSMITH_INDENT", str(DEFAULT_INDENT)))
TOCSMITH_LOG_LEVEL = os.getenv("TOCSMITH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
