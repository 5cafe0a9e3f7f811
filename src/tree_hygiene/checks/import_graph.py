"""Import dependency graph of the framework package, and cycle detection over it.

Each directory under ``<package>/lib/src`` is a unit exported by a same-named
``<package>/lib/<unit>.dart`` library. A unit depends on another when any of
its files imports ``package:<package>/<other>.dart``. The graph must only
reference declared units, must not contain self-imports and must be acyclic.
"""

from __future__ import annotations

import logging
import re
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tree_hygiene.checks.base import CheckResult, Violation
from tree_hygiene.errors import ScopeIntegrityError
from tree_hygiene.scanning.enumerator import iter_tracked_files

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from tree_hygiene.checks.base import RunContext
    from tree_hygiene.scanning.enumerator import TrackedFile

logger = logging.getLogger(__name__)

NAME = "framework-imports"
TOOLS_NAME = "tools-imports"

META_IMPORT = re.compile(r"""^\s*import (['"])package:meta/meta\.dart\1""")


def package_import_pattern(package: str) -> re.Pattern[str]:
    """Regex capturing the unit name of ``import 'package:<package>/<unit>.dart'``."""
    return re.compile(rf"""^\s*import (['"])package:{re.escape(package)}/([^.]+)\.dart\1""")


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------


def _normalize_cycle(path: list[str]) -> tuple[str, ...]:
    """Rotate a cycle so that its smallest element comes first.

    The path must not repeat the start node at the end.
    """
    if not path:
        return ()
    min_idx = path.index(min(path))
    return tuple(path[min_idx:] + path[:min_idx])


@dataclass
class DependencyGraph:
    """Units and their dependencies, stored as integer-indexed adjacency lists.

    Dependencies on names outside ``nodes`` are kept in ``edges`` so they can
    be reported, but are left out of the indexed adjacency used for searches.
    """

    edges: Mapping[str, frozenset[str]]
    nodes: tuple[str, ...] = field(init=False)
    _index: dict[str, int] = field(init=False, repr=False)
    _adjacency: list[list[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.nodes = tuple(sorted(self.edges))
        self._index = {name: position for position, name in enumerate(self.nodes)}
        self._adjacency = [
            sorted(
                self._index[target]
                for target in self.edges[name]
                if target in self._index and target != name
            )
            for name in self.nodes
        ]

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, str]], nodes: Iterable[str] = ()
    ) -> DependencyGraph:
        """Build a graph from ``(source, target)`` pairs plus optional isolated nodes."""
        edges: dict[str, set[str]] = {name: set() for name in nodes}
        for source, target in pairs:
            edges.setdefault(source, set()).add(target)
        return cls({name: frozenset(targets) for name, targets in edges.items()})

    def depends_on(self, source: str, target: str) -> bool:
        return target in self.edges.get(source, frozenset())

    def self_dependent(self) -> list[str]:
        """Units that import themselves."""
        return [name for name in self.nodes if name in self.edges[name]]

    def undeclared(self) -> list[tuple[str, str]]:
        """``(unit, target)`` pairs whose target is not a declared unit."""
        return [
            (name, target)
            for name in self.nodes
            for target in sorted(self.edges[name])
            if target not in self._index
        ]

    def shortest_cycle_from(self, start: str) -> list[str] | None:
        """Shortest dependency chain leading from *start* back to *start*.

        Breadth-first over the indexed adjacency with parent links, so chains
        that merely run into a loop elsewhere are never returned: the result
        always begins and ends with *start*. Self-imports are ignored here;
        they are reported separately. Ties go to the alphabetically first
        neighbour.
        """
        origin = self._index.get(start)
        if origin is None:
            return None
        parent: dict[int, int] = {}
        queue: deque[int] = deque([origin])
        while queue:
            current = queue.popleft()
            for neighbor in self._adjacency[current]:
                if neighbor == origin:
                    chain = [origin]
                    node = current
                    while node != origin:
                        chain.append(node)
                        node = parent[node]
                    chain.append(origin)
                    return [self.nodes[position] for position in reversed(chain)]
                if neighbor not in parent:
                    parent[neighbor] = current
                    queue.append(neighbor)
        return None

    def find_cycles(self) -> list[list[str]]:
        """One shortest cycle per structural loop, in node order.

        Every unit is searched; a loop found again from another of its members
        (a rotation of an earlier result) is reported only once.
        """
        cycles: list[list[str]] = []
        seen: set[tuple[str, ...]] = set()
        for name in self.nodes:
            cycle = self.shortest_cycle_from(name)
            if cycle is None:
                continue
            normalized = _normalize_cycle(cycle[:-1])
            if normalized in seen:
                continue
            seen.add(normalized)
            cycles.append(cycle)
        return cycles


def format_cycle(cycle: list[str]) -> str:
    return "Dependency loop: " + " depends on ".join(cycle)


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


def scan_dependencies(
    files: Iterable[TrackedFile],
    pattern: re.Pattern[str],
    *,
    check_for_meta: bool,
) -> tuple[set[str], list[Violation]]:
    """Collect the units imported by *files*.

    When *check_for_meta* is set, direct imports of the ``meta`` package are
    returned as violations: outside the leaf unit it must be reached through
    the ``foundation`` library.
    """
    dependencies: set[str] = set()
    violations: list[Violation] = []
    for tracked in files:
        for index, line in enumerate(tracked.read_lines()):
            match = pattern.search(line)
            if match is not None:
                dependencies.add(match.group(2))
            if check_for_meta and META_IMPORT.search(line):
                violations.append(
                    Violation(
                        'imports the meta package; import the "foundation.dart" library instead',
                        path=tracked.relative,
                        line=index + 1,
                    )
                )
    return dependencies, violations


def _listing(directory: Path) -> tuple[list[str], list[str]]:
    """Sorted export library stems in *directory* and unit directories in ``src``."""
    exports = sorted(
        entry.stem for entry in directory.iterdir() if entry.is_file() and entry.suffix == ".dart"
    )
    src = directory / "src"
    units = sorted(entry.name for entry in src.iterdir() if entry.is_dir()) if src.is_dir() else []
    return exports, units


def check_framework_imports(ctx: RunContext) -> CheckResult:
    """Validate exports against units, then the unit dependency graph."""
    config = ctx.config
    package_name = config.framework_import_name
    lib = ctx.path(config.framework_package) / "lib"
    lib_display = f"{package_name}/lib"
    if not lib.is_dir():
        if config.check_minimums:
            raise ScopeIntegrityError(str(lib), "dart", 1, 0)
        return CheckResult.passed(NAME)

    violations: list[Violation] = []

    exports, units = _listing(lib)
    if exports != units:
        violations.append(
            Violation(
                f"{lib_display}/*.dart does not match {lib_display}/src/*/:\n"
                "These are the exported packages:\n"
                + "".join(f"  lib/{name}.dart\n" for name in exports)
                + "These are the directories:\n"
                + "\n".join(f"  lib/src/{name}/" for name in units)
            )
        )

    pattern = package_import_pattern(package_name)
    edges: dict[str, frozenset[str]] = {}
    for unit in units:
        files = iter_tracked_files(
            lib / "src" / unit,
            "dart",
            index=ctx.index,
            config=config,
            minimum_matches=1,
        )
        dependencies, meta_violations = scan_dependencies(
            files, pattern, check_for_meta=unit != config.framework_leaf
        )
        logger.debug("%s depends on %s", unit, sorted(dependencies))
        edges[unit] = frozenset(dependencies)
        violations.extend(meta_violations)

    graph = DependencyGraph(edges)

    for source, target in config.expected_dependencies:
        if source in edges and not graph.depends_on(source, target):
            violations.append(
                Violation(
                    f"Expected {source} to import {package_name}/{target}.dart; "
                    "the dependency scan may be missing imports."
                )
            )

    for unit in graph.self_dependent():
        violations.append(
            Violation(f"One of the files in the {unit} package imports that package recursively.")
        )

    valid = ", ".join(f"{name}.dart" for name in graph.nodes)
    for unit, target in graph.undeclared():
        violations.append(
            Violation(
                f"{unit} imported package:{package_name}/{target}.dart which is not one of "
                f"the valid exports {{ {valid} }}.\n"
                f"Consider changing {target}.dart to one of them."
            )
        )

    for cycle in graph.find_cycles():
        violations.append(Violation(format_cycle(cycle)))

    if not violations:
        return CheckResult.passed(NAME)
    detected = (
        "An error was detected" if len(violations) == 1 else "Multiple errors were detected"
    )
    return CheckResult(
        name=NAME,
        violations=tuple(violations),
        header=(
            f"{detected} when looking at import dependencies within the "
            f"{package_name} package:"
        ),
    )


def check_tools_imports(ctx: RunContext) -> CheckResult:
    """The tools package must import its own files relatively, never by package URI."""
    config = ctx.config
    violations = [
        Violation(f"imports {config.tools_import_marker.rstrip('/')}", path=tracked.relative)
        for tracked in iter_tracked_files(
            ctx.path(config.tools_lib),
            "dart",
            index=ctx.index,
            config=config,
            minimum_matches=config.tools_minimum,
        )
        if config.tools_import_marker in tracked.read_text()
    ]
    if not violations:
        return CheckResult.passed(TOOLS_NAME)
    detected = (
        "An error was detected" if len(violations) == 1 else "Multiple errors were detected"
    )
    return CheckResult(
        name=TOOLS_NAME,
        violations=tuple(violations),
        header=f"{detected} when looking at import dependencies within the tools package:",
    )
