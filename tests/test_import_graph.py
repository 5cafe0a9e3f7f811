"""Tests for tree_hygiene.checks.import_graph: framework dependency graph and cycles."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tree_hygiene.checks.import_graph import (
    DependencyGraph,
    check_framework_imports,
    check_tools_imports,
    format_cycle,
    package_import_pattern,
)
from tree_hygiene.config import HygieneConfig
from tree_hygiene.errors import ScopeIntegrityError

if TYPE_CHECKING:
    from collections.abc import Callable

    from tree_hygiene.checks.base import RunContext


HEALTHY: dict[str, list[str]] = {
    "foundation": [],
    "painting": ["foundation"],
    "rendering": ["painting", "foundation"],
    "widgets": ["rendering"],
    "material": ["widgets"],
}


def _framework(units: dict[str, list[str]]) -> dict[str, str | bytes]:
    """One export library and one source file per unit."""
    files: dict[str, str | bytes] = {}
    for unit, dependencies in units.items():
        files[f"packages/flutter/lib/{unit}.dart"] = f"export 'src/{unit}/{unit}.dart';\n"
        files[f"packages/flutter/lib/src/{unit}/{unit}.dart"] = "".join(
            f"import 'package:flutter/{dependency}.dart';\n" for dependency in dependencies
        )
    return files


def _messages(ctx: RunContext) -> list[str]:
    return [v.message for v in check_framework_imports(ctx).violations]


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------


class TestShortestCycle:
    def test_three_cycle_with_outside_importer(self) -> None:
        graph = DependencyGraph.from_pairs([("A", "B"), ("B", "C"), ("C", "A"), ("D", "A")])
        assert graph.find_cycles() == [["A", "B", "C", "A"]]
        assert graph.shortest_cycle_from("D") is None

    def test_deterministic(self) -> None:
        pairs = [("A", "B"), ("B", "C"), ("C", "A"), ("D", "A")]
        first = DependencyGraph.from_pairs(pairs).find_cycles()
        second = DependencyGraph.from_pairs(list(reversed(pairs))).find_cycles()
        assert first == second

    def test_shortest_wins(self) -> None:
        graph = DependencyGraph.from_pairs([("A", "B"), ("B", "C"), ("C", "A"), ("B", "A")])
        assert graph.shortest_cycle_from("A") == ["A", "B", "A"]

    def test_alphabetical_tie_break(self) -> None:
        graph = DependencyGraph.from_pairs([("A", "C"), ("A", "B"), ("B", "A"), ("C", "A")])
        assert graph.shortest_cycle_from("A") == ["A", "B", "A"]
        assert graph.find_cycles() == [["A", "B", "A"], ["C", "A", "C"]]

    def test_rotations_reported_once(self) -> None:
        graph = DependencyGraph.from_pairs([("X", "Y"), ("Y", "Z"), ("Z", "X")])
        assert graph.find_cycles() == [["X", "Y", "Z", "X"]]

    def test_acyclic(self) -> None:
        graph = DependencyGraph.from_pairs([("a", "b"), ("b", "c")], nodes=["c"])
        assert graph.find_cycles() == []
        assert graph.nodes == ("a", "b", "c")

    def test_self_edge_reported_separately(self) -> None:
        graph = DependencyGraph.from_pairs([("A", "A"), ("A", "B")], nodes=["B"])
        assert graph.self_dependent() == ["A"]
        assert graph.find_cycles() == []

    def test_undeclared_targets(self) -> None:
        graph = DependencyGraph.from_pairs([("A", "Z"), ("A", "B")], nodes=["B"])
        assert graph.undeclared() == [("A", "Z")]
        assert graph.depends_on("A", "Z")
        assert graph.find_cycles() == []

    def test_unknown_start(self) -> None:
        assert DependencyGraph.from_pairs([]).shortest_cycle_from("nope") is None

    def test_format_cycle(self) -> None:
        assert format_cycle(["A", "B", "C", "A"]) == (
            "Dependency loop: A depends on B depends on C depends on A"
        )


class TestImportPattern:
    def test_captures_unit(self) -> None:
        match = package_import_pattern("flutter").search("import 'package:flutter/widgets.dart';")
        assert match is not None
        assert match.group(2) == "widgets"

    def test_ignores_other_packages(self) -> None:
        pattern = package_import_pattern("flutter")
        assert pattern.search("import 'package:flutter_test/flutter_test.dart';") is None
        assert pattern.search("// import 'package:flutter/widgets.dart';") is None


# ---------------------------------------------------------------------------
# Framework check
# ---------------------------------------------------------------------------


class TestCheckFrameworkImports:
    def test_healthy(self, make_ctx: Callable[..., RunContext]) -> None:
        assert check_framework_imports(make_ctx(_framework(HEALTHY))).ok

    def test_cycle(self, make_ctx: Callable[..., RunContext]) -> None:
        units = dict(HEALTHY, foundation=["material"])
        result = check_framework_imports(make_ctx(_framework(units)))
        messages = [v.message for v in result.violations]
        assert (
            "Dependency loop: foundation depends on material depends on widgets "
            "depends on rendering depends on foundation"
        ) in messages
        assert result.header == (
            "Multiple errors were detected when looking at import dependencies "
            "within the flutter package:"
        )

    def test_export_mismatch(self, make_ctx: Callable[..., RunContext]) -> None:
        files = _framework(HEALTHY)
        files["packages/flutter/lib/extra.dart"] = ""
        messages = _messages(make_ctx(files))
        assert len(messages) == 1
        assert messages[0].startswith("flutter/lib/*.dart does not match flutter/lib/src/*/:")
        assert "  lib/extra.dart\n" in messages[0]

    def test_single_error_header(self, make_ctx: Callable[..., RunContext]) -> None:
        files = _framework(HEALTHY)
        files["packages/flutter/lib/extra.dart"] = ""
        result = check_framework_imports(make_ctx(files))
        assert result.header is not None
        assert result.header.startswith("An error was detected")

    def test_self_import(self, make_ctx: Callable[..., RunContext]) -> None:
        units = dict(HEALTHY, painting=["foundation", "painting"])
        assert _messages(make_ctx(_framework(units))) == [
            "One of the files in the painting package imports that package recursively."
        ]

    def test_undeclared_unit(self, make_ctx: Callable[..., RunContext]) -> None:
        units = dict(HEALTHY, widgets=["rendering", "cupertino"])
        messages = _messages(make_ctx(_framework(units)))
        assert len(messages) == 1
        assert messages[0].startswith(
            "widgets imported package:flutter/cupertino.dart which is not one of the valid "
            "exports { foundation.dart, material.dart, painting.dart, rendering.dart, "
            "widgets.dart }."
        )

    def test_meta_import_outside_leaf(self, make_ctx: Callable[..., RunContext]) -> None:
        files = _framework(HEALTHY)
        files["packages/flutter/lib/src/foundation/annotations.dart"] = (
            "import 'package:meta/meta.dart';\n"
        )
        files["packages/flutter/lib/src/painting/extra.dart"] = (
            "import 'package:meta/meta.dart';\n"
        )
        result = check_framework_imports(make_ctx(files))
        assert [(v.path, v.line) for v in result.violations] == [
            ("packages/flutter/lib/src/painting/extra.dart", 1)
        ]

    def test_missing_expected_dependency(self, make_ctx: Callable[..., RunContext]) -> None:
        units = dict(HEALTHY, material=["foundation"])
        assert _messages(make_ctx(_framework(units))) == [
            "Expected material to import flutter/widgets.dart; "
            "the dependency scan may be missing imports."
        ]

    def test_missing_library_with_minimums(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx({"README.md": "hi\n"}, config=HygieneConfig())
        with pytest.raises(ScopeIntegrityError):
            check_framework_imports(ctx)

    def test_missing_library_without_minimums(
        self, make_ctx: Callable[..., RunContext]
    ) -> None:
        assert check_framework_imports(make_ctx({"README.md": "hi\n"})).ok


class TestCheckToolsImports:
    def test_package_import_flagged(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx(
            {
                "packages/flutter_tools/lib/src/a.dart": (
                    "import 'package:flutter_tools/src/b.dart';\n"
                ),
                "packages/flutter_tools/lib/src/b.dart": "import 'a.dart';\n",
            }
        )
        result = check_tools_imports(ctx)
        assert [str(v) for v in result.violations] == [
            "packages/flutter_tools/lib/src/a.dart: imports package:flutter_tools"
        ]
        assert result.header is not None
        assert "within the tools package" in result.header

    def test_relative_imports_pass(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx({"packages/flutter_tools/lib/src/a.dart": "import 'b.dart';\n"})
        assert check_tools_imports(ctx).ok
