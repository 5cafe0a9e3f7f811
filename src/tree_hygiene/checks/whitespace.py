"""Trailing whitespace: no line may end in a space or tab, no trailing blank line."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from tree_hygiene.checks.base import CheckResult, Violation
from tree_hygiene.scanning.enumerator import iter_tracked_files, read_lines

if TYPE_CHECKING:
    from tree_hygiene.checks.base import RunContext

NAME = "trailing-whitespace"


def scan_lines(relative: str, lines: list[str]) -> list[Violation]:
    """Return whitespace violations for one file's *lines*."""
    violations: list[Violation] = []
    for index, line in enumerate(lines):
        if line.endswith(" "):
            violations.append(
                Violation("trailing U+0020 space character", path=relative, line=index + 1)
            )
        elif line.endswith("\t"):
            violations.append(
                Violation("trailing U+0009 tab character", path=relative, line=index + 1)
            )
    if lines and lines[-1] == "":
        violations.append(Violation("trailing blank line", path=relative, line=len(lines)))
    return violations


def _excluded(relative: str, names: frozenset[str], extensions: frozenset[str]) -> bool:
    path = PurePosixPath(relative)
    return path.name in names or path.suffix in extensions


def check_trailing_whitespace(ctx: RunContext) -> CheckResult:
    """Scan nearly every tracked file for trailing spaces, tabs and blank lines.

    Relies on the binaries check having run first: every file reaching this
    point is expected to decode as UTF-8.
    """
    config = ctx.config
    files = [
        tracked
        for tracked in iter_tracked_files(
            ctx.root,
            None,
            index=ctx.index,
            config=config,
            minimum_matches=config.whitespace_minimum,
        )
        if not _excluded(
            tracked.relative,
            config.whitespace_excluded_names,
            config.whitespace_excluded_extensions,
        )
    ]
    violations: list[Violation] = []
    for tracked in files:
        # Allow-listed legacy binaries outside the exclusion list must not abort the scan.
        text = tracked.read_bytes().decode("utf-8", errors="replace")
        violations.extend(scan_lines(tracked.relative, read_lines(text)))
    return CheckResult(name=NAME, violations=tuple(violations))
