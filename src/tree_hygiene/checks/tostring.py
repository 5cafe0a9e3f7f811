"""Ban ``runtimeType`` inside ``toString`` implementations of the framework.

``runtimeType`` is expensive and minifies badly, so descriptions must name
their class explicitly. Bodies are found by line scanning: arrow bodies end
at the first ``;``, block bodies when their braces balance.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tree_hygiene.checks.base import CheckResult, Violation
from tree_hygiene.scanning.enumerator import iter_tracked_files

if TYPE_CHECKING:
    from tree_hygiene.checks.base import RunContext

NAME = "runtime-type-in-tostring"

TO_STRING = re.compile(r"^\s+String\s+to(.+?)?String(.+?)?\(\)\s+(\{|=>)")
MESSAGE = "toString calls runtimeType.toString"


def _mentions_runtime_type(line: str) -> bool:
    return "$runtimeType" in line or "runtimeType.toString()" in line


def scan_to_string(relative: str, lines: list[str]) -> list[Violation]:
    """Return one violation per ``toString``-like method that uses ``runtimeType``.

    The violation is reported at the method's signature line. An unterminated
    body ends the scan at the end of the file.
    """
    violations: list[Violation] = []
    index = 0
    while index < len(lines):
        line = lines[index]
        if not TO_STRING.search(line):
            index += 1
            continue

        source_line = index + 1
        if _mentions_runtime_type(line):
            violations.append(Violation(MESSAGE, path=relative, line=source_line))
            index += 1
            continue

        if "=>" in line:
            while ";" not in lines[index] and index + 1 < len(lines):
                index += 1
                if _mentions_runtime_type(lines[index]):
                    violations.append(Violation(MESSAGE, path=relative, line=source_line))
                    break
        else:
            depth = line.count("{") - line.count("}")
            while "}" not in lines[index] and depth > 0 and index + 1 < len(lines):
                index += 1
                if _mentions_runtime_type(lines[index]):
                    violations.append(Violation(MESSAGE, path=relative, line=source_line))
                    break
                depth += lines[index].count("{") - lines[index].count("}")
        index += 1
    return violations


def check_runtime_type_in_to_string(ctx: RunContext) -> CheckResult:
    """Scan the framework library for ``toString`` methods using ``runtimeType``."""
    config = ctx.config
    lib = ctx.path(config.framework_package) / "lib"
    excluded = {f"{config.framework_package}/lib/{name}" for name in config.tostring_excluded}
    violations: list[Violation] = []
    for tracked in iter_tracked_files(
        lib,
        "dart",
        index=ctx.index,
        config=config,
        minimum_matches=config.tostring_minimum,
    ):
        if tracked.relative in excluded:
            continue
        violations.extend(scan_to_string(tracked.relative, tracked.read_lines()))
    return CheckResult(name=NAME, violations=tuple(violations))
