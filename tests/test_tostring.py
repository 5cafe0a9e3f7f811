"""Tests for tree_hygiene.checks.tostring: no runtimeType in toString."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tree_hygiene.checks.tostring import MESSAGE, check_runtime_type_in_to_string, scan_to_string

if TYPE_CHECKING:
    from collections.abc import Callable

    from tree_hygiene.checks.base import RunContext


def _lines(source: str) -> list[int | None]:
    return [v.line for v in scan_to_string("a.dart", source.split("\n"))]


class TestScanToString:
    def test_runtime_type_on_signature_line(self) -> None:
        source = "class A {\n  String toString() => '$runtimeType()';\n}"
        assert _lines(source) == [2]

    def test_arrow_body_spanning_lines(self) -> None:
        source = (
            "class A {\n"
            "  @override\n"
            "  String toString() =>\n"
            "      '${runtimeType.toString()}#$hashCode';\n"
            "}"
        )
        assert _lines(source) == [3]

    def test_block_body(self) -> None:
        source = (
            "class A {\n"
            "  @override\n"
            "  String toString() {\n"
            "    final String name = '$runtimeType';\n"
            "    return name;\n"
            "  }\n"
            "}"
        )
        assert _lines(source) == [3]

    def test_clean_block_then_unrelated_runtime_type(self) -> None:
        source = (
            "class A {\n"
            "  String toString() {\n"
            "    return 'A';\n"
            "  }\n"
            "  String describe() => '$runtimeType';\n"
            "}"
        )
        assert _lines(source) == []

    def test_arrow_body_ends_at_semicolon(self) -> None:
        source = (
            "class A {\n"
            "  String toString() =>\n"
            "      'A';\n"
            "  String get label => '$runtimeType';\n"
            "}"
        )
        assert _lines(source) == []

    def test_to_string_variants(self) -> None:
        source = "class A {\n  String toStringShort() => '$runtimeType';\n}"
        assert _lines(source) == [2]

    def test_top_level_function_not_matched(self) -> None:
        assert _lines("String toString() => '$runtimeType';") == []

    def test_unterminated_body_stops_at_end(self) -> None:
        assert _lines("class A {\n  String toString() {\n    return 'A';") == []

    def test_message(self) -> None:
        violations = scan_to_string("lib/a.dart", ["  String toString() => '$runtimeType';"])
        assert str(violations[0]) == f"lib/a.dart:1: {MESSAGE}"


class TestCheckRuntimeTypeInToString:
    def test_object_dart_excluded(self, make_ctx: Callable[..., RunContext]) -> None:
        bad = "class A {\n  String toString() => '$runtimeType';\n}\n"
        ctx = make_ctx(
            {
                "packages/flutter/lib/src/foundation/object.dart": bad,
                "packages/flutter/lib/src/widgets/framework.dart": bad,
                "packages/other/lib/other.dart": bad,
            }
        )
        result = check_runtime_type_in_to_string(ctx)
        assert [v.path for v in result.violations] == [
            "packages/flutter/lib/src/widgets/framework.dart"
        ]
