"""Test setup for tocsmith."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def reference_doc() -> str:
    """A small reference document with a stale TOC region."""
    return (
        "# Shell notes\n"
        "\n"
        "<!--BEGIN TOC-->\n"
        "stale entry\n"
        "<!--END TOC-->\n"
        "\n"
        "## Redirection\n"
        "\n"
        "```bash\n"
        "## not a heading\n"
        "echo hi > out.txt\n"
        "```\n"
        "\n"
        "### Here documents\n"
        "\n"
        "## Parameter expansion\n"
        "\n"
        "## Special variables\n"
    )


@pytest.fixture
def reference_toc() -> str:
    """Expected TOC region body for ``reference_doc``."""
    return (
        "1. [Redirection](#redirection)\n"
        "    1. [Here documents](#here-documents)\n"
        "2. [Parameter expansion](#parameter-expansion)\n"
        "3. [Special variables](#special-variables)\n"
    )
