"""Tests for tree_hygiene.checks.deprecations: deprecation-notice grammar."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tree_hygiene.checks.deprecations import (
    DOUBLE_QUOTE_HINT,
    ERR_CAPITAL,
    ERR_CLOSING,
    ERR_DEV_VERSION,
    ERR_INCOMPLETE,
    ERR_INDENT,
    ERR_PATTERN,
    ERR_PERIOD,
    check_deprecations,
    find_notice_starts,
    scan_deprecations,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from tree_hygiene.checks.base import RunContext

GOOD = [
    "class Foo {",
    "  @Deprecated(",
    "    'Use Bar instead. '",
    "    'This feature was deprecated after v1.20.0-1.0.pre.'",
    "  )",
    "  void foo() {}",
    "}",
]


def _messages(lines: list[str]) -> list[tuple[int | None, str]]:
    return [(v.line, v.message) for v in scan_deprecations("a.dart", lines)]


class TestFindNoticeStarts:
    def test_matches_both_spellings(self) -> None:
        lines = ["@Deprecated(", "@deprecated", "plain"]
        assert find_notice_starts(lines) == [0, 1]

    def test_ignore_markers(self) -> None:
        lines = [
            "@deprecated // flutter_ignore: deprecation_syntax (see analyze.dart)",
            "@deprecated // flutter_ignore: deprecation_syntax, "
            "https://github.com/flutter/flutter/issues/44609",
        ]
        assert find_notice_starts(lines) == []


class TestValidNotices:
    def test_well_formed(self) -> None:
        assert _messages(GOOD) == []

    def test_multi_line_message(self) -> None:
        lines = [
            "@Deprecated(",
            "  'Use Bar instead. '",
            "  'Bar handles more cases. '",
            "  'This feature was deprecated after v2.3.0-0.1.pre.'",
            ")",
        ]
        assert _messages(lines) == []

    def test_pre_dev_release_needs_no_suffix(self) -> None:
        lines = [
            "@Deprecated(",
            "  'Use Bar instead. '",
            "  'This feature was deprecated after v1.19.0.'",
            ")",
        ]
        assert _messages(lines) == []

    def test_version_line_with_trailing_comma(self) -> None:
        lines = [
            "@Deprecated(",
            "  'Use Bar instead. '",
            "  'This feature was deprecated after v1.20.0-1.0.pre.',",
            ")",
        ]
        assert _messages(lines) == []


class TestMalformedNotices:
    def test_malformed_version_reported_at_version_line(self) -> None:
        lines = [
            "@Deprecated(",
            "  'Use Bar instead. '",
            "  'Bar handles more cases. '",
            "  'This feature was deprecated after v1.20.'",
            ")",
        ]
        assert _messages(lines) == [(4, ERR_PATTERN)]

    def test_missing_dev_suffix(self) -> None:
        lines = [
            "@Deprecated(",
            "  'Use Bar instead. '",
            "  'Bar handles more cases. '",
            "  'This feature was deprecated after v2.0.0.'",
            ")",
        ]
        assert _messages(lines) == [(4, ERR_DEV_VERSION)]

    def test_annotation_not_on_own_line(self) -> None:
        assert _messages(["@Deprecated('Use Bar')"]) == [(1, ERR_PATTERN)]

    def test_lowercase_message(self) -> None:
        lines = [
            "@Deprecated(",
            "  'use Bar instead. '",
            "  'This feature was deprecated after v1.20.0-1.0.pre.'",
            ")",
        ]
        assert _messages(lines) == [(2, ERR_CAPITAL)]

    def test_missing_period(self) -> None:
        lines = [
            "@Deprecated(",
            "  'Use Bar instead '",
            "  'This feature was deprecated after v1.20.0-1.0.pre.'",
            ")",
        ]
        assert _messages(lines) == [(3, ERR_PERIOD)]

    def test_wrong_indent(self) -> None:
        lines = [
            "  @Deprecated(",
            "  'Use Bar instead. '",
            "  'This feature was deprecated after v1.20.0-1.0.pre.'",
            "  )",
        ]
        assert _messages(lines) == [(2, ERR_INDENT)]

    def test_bad_closing(self) -> None:
        lines = [
            "@Deprecated(",
            "  'Use Bar instead. '",
            "  'This feature was deprecated after v1.20.0-1.0.pre.'",
            ") void foo() {}",
        ]
        assert _messages(lines) == [(4, ERR_CLOSING)]

    def test_double_quotes_hint(self) -> None:
        lines = [
            "@Deprecated(",
            '  "Use Bar instead. "',
            "  'This feature was deprecated after v1.20.0-1.0.pre.'",
            ")",
        ]
        assert _messages(lines) == [(2, ERR_PATTERN + DOUBLE_QUOTE_HINT)]

    @pytest.mark.parametrize(
        "lines",
        [
            ["@Deprecated("],
            ["@Deprecated(", "  'Use Bar instead. '"],
            [
                "@Deprecated(",
                "  'Use Bar instead. '",
                "  'This feature was deprecated after v1.20.0-1.0.pre.'",
            ],
        ],
    )
    def test_incomplete(self, lines: list[str]) -> None:
        assert _messages(lines) == [(len(lines) + 1, ERR_INCOMPLETE)]

    def test_scanning_continues_after_error(self) -> None:
        lines = ["@Deprecated('x')", "", *GOOD, "@deprecated"]
        assert _messages(lines) == [(1, ERR_PATTERN), (10, ERR_PATTERN)]


class TestCheckDeprecations:
    def test_only_dart_files(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx(
            {
                "lib/good.dart": "\n".join(GOOD) + "\n",
                "lib/bad.dart": "@deprecated\nvoid f() {}\n",
                "notes.md": "@deprecated\n",
            }
        )
        result = check_deprecations(ctx)
        assert [str(v) for v in result.violations] == [f"lib/bad.dart:1: {ERR_PATTERN}"]
        assert "Tree-hygiene" in result.footer[0]
