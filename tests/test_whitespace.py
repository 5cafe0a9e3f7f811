"""Tests for tree_hygiene.checks.whitespace."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tree_hygiene.checks.whitespace import check_trailing_whitespace, scan_lines

if TYPE_CHECKING:
    from collections.abc import Callable

    from tree_hygiene.checks.base import RunContext


class TestScanLines:
    def test_single_line_with_trailing_space(self) -> None:
        violations = scan_lines("a.dart", ["int x; "])
        assert [str(v) for v in violations] == ["a.dart:1: trailing U+0020 space character"]

    def test_trailing_tab(self) -> None:
        violations = scan_lines("a.dart", ["ok", "bad\t"])
        assert [str(v) for v in violations] == ["a.dart:2: trailing U+0009 tab character"]

    def test_last_line_without_newline_is_fine(self) -> None:
        assert scan_lines("a.dart", ["first", "last"]) == []

    def test_trailing_blank_line(self) -> None:
        violations = scan_lines("a.dart", ["code", ""])
        assert [str(v) for v in violations] == ["a.dart:2: trailing blank line"]

    def test_empty_file(self) -> None:
        assert scan_lines("a.dart", []) == []

    def test_interior_blank_lines_allowed(self) -> None:
        assert scan_lines("a.dart", ["a", "", "b"]) == []


class TestCheckTrailingWhitespace:
    def test_reports_across_files(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx(
            {
                "clean.dart": "void main() {}\n",
                "lib/spaces.dart": "int x; \n",
                "README.md": "Title\n\n",
            }
        )
        result = check_trailing_whitespace(ctx)
        assert [str(v) for v in result.violations] == [
            "README.md:2: trailing blank line",
            "lib/spaces.dart:1: trailing U+0020 space character",
        ]

    def test_crlf_endings_are_not_whitespace(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx({"win.bat": "@ECHO off\r\nREM hi\r\n"})
        assert check_trailing_whitespace(ctx).ok

    def test_excluded_extensions_and_names(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx(
            {
                "image.png": b"\x89PNG \n",
                "serviceaccount.enc": "secret \n",
                "lib/ok.dart": "ok\n",
            }
        )
        assert check_trailing_whitespace(ctx).ok

    def test_undecodable_file_does_not_abort(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx({"legacy.bin": b"\xff\xfe \n"})
        result = check_trailing_whitespace(ctx)
        assert [v.line for v in result.violations] == [1]
