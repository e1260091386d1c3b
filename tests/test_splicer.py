"""Tests for marker detection and splicing."""

from __future__ import annotations

import pytest

from tocsmith.exceptions import MarkerMismatchError, MissingMarkersError
from tocsmith.schemas import MarkerSpan
from tocsmith.splicer import find_marker_span, splice_toc, split_keepends

BEGIN = "<!--BEGIN TOC-->"
END = "<!--END TOC-->"


class TestFindMarkerSpan:
    """Tests for find_marker_span function."""

    def test_finds_pair(self) -> None:
        lines = ["# T", BEGIN, "old", END, "## A"]
        assert find_marker_span(lines) == MarkerSpan(begin_line=1, end_line=3)

    def test_ignores_surrounding_whitespace(self) -> None:
        lines = [f"  {BEGIN}\r\n", f"{END}  \n"]
        assert find_marker_span(lines) == MarkerSpan(begin_line=0, end_line=1)

    def test_uses_first_pair_only(self) -> None:
        lines = [BEGIN, END, BEGIN, END]
        assert find_marker_span(lines) == MarkerSpan(begin_line=0, end_line=1)

    def test_missing_both(self) -> None:
        with pytest.raises(MissingMarkersError):
            find_marker_span(["# T", "## A"])

    def test_missing_end(self) -> None:
        with pytest.raises(MarkerMismatchError) as excinfo:
            find_marker_span(["# T", BEGIN, "## A"])
        assert not isinstance(excinfo.value, MissingMarkersError)
        assert excinfo.value.line == 2

    def test_end_before_begin(self) -> None:
        with pytest.raises(MarkerMismatchError) as excinfo:
            find_marker_span([END, "text", BEGIN])
        assert excinfo.value.line == 3

    def test_end_without_begin(self) -> None:
        with pytest.raises(MarkerMismatchError) as excinfo:
            find_marker_span(["text", END])
        assert excinfo.value.line == 2
        assert "2" in str(excinfo.value)

    def test_marker_must_be_whole_line(self) -> None:
        with pytest.raises(MissingMarkersError):
            find_marker_span([f"text {BEGIN}", f"{END} text"])

    def test_custom_tokens(self) -> None:
        lines = ["[[toc]]", "[[/toc]]"]
        span = find_marker_span(lines, begin_marker="[[toc]]", end_marker="[[/toc]]")
        assert span == MarkerSpan(begin_line=0, end_line=1)


class TestMarkerSpan:
    """Tests for MarkerSpan validation."""

    def test_rejects_reversed_span(self) -> None:
        with pytest.raises(ValueError):
            MarkerSpan(begin_line=3, end_line=2)


class TestSpliceToc:
    """Tests for splice_toc function."""

    def test_replaces_region(self) -> None:
        text = f"# T\n{BEGIN}\nold 1\nold 2\n{END}\n## A\n"
        new_text, span = splice_toc(text, ["1. [A](#a)"])

        assert new_text == f"# T\n{BEGIN}\n1. [A](#a)\n{END}\n## A\n"
        assert span == MarkerSpan(begin_line=1, end_line=4)

    def test_preserves_outside_bytes(self) -> None:
        head = "# T  \n\n\tindented\n"
        tail = "\n## A\n\ntrailing without newline"
        text = f"{head}  {BEGIN}  \nold\n{END}{tail}"
        new_text, _ = splice_toc(text, ["x"])

        assert new_text == f"{head}  {BEGIN}  \nx\n{END}{tail}"

    def test_empty_toc_leaves_adjacent_markers(self) -> None:
        new_text, _ = splice_toc(f"{BEGIN}\nold\n{END}\n", [])
        assert new_text == f"{BEGIN}\n{END}\n"

    def test_crlf_newline(self) -> None:
        text = f"{BEGIN}\r\n{END}\r\n"
        new_text, _ = splice_toc(text, ["a", "b"], newline="\r\n")
        assert new_text == f"{BEGIN}\r\na\r\nb\r\n{END}\r\n"

    def test_idempotent(self) -> None:
        text = f"{BEGIN}\nstale\n{END}\nbody\n"
        once, _ = splice_toc(text, ["1. [A](#a)"])
        twice, _ = splice_toc(once, ["1. [A](#a)"])
        assert once == twice

    def test_missing_markers_raise(self) -> None:
        with pytest.raises(MissingMarkersError):
            splice_toc("no markers\n", ["x"])


class TestSplitKeepends:
    """Tests for split_keepends function."""

    def test_only_splits_on_newline(self) -> None:
        assert split_keepends("a\r\nb\x0cc\nd") == ["a\r\n", "b\x0cc\n", "d"]

    def test_empty(self) -> None:
        assert split_keepends("") == []
