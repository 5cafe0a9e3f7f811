"""Library code must not import test files; shared test utilities live in their own file."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tree_hygiene.checks.base import CheckResult, Violation, plural
from tree_hygiene.scanning.enumerator import iter_tracked_files

if TYPE_CHECKING:
    from tree_hygiene.checks.base import RunContext

NAME = "test-imports"

TEST_IMPORT = re.compile(r"""import (['"])([^'"]+_test\.dart)\1""")


def scan_test_imports(
    relative: str, lines: list[str], exempt: frozenset[str]
) -> list[Violation]:
    """One violation per line importing a non-exempt ``*_test.dart`` file."""
    violations: list[Violation] = []
    for index, line in enumerate(lines):
        match = TEST_IMPORT.search(line)
        if match is not None and match.group(2) not in exempt:
            violations.append(
                Violation(f"imports {match.group(2)}", path=relative, line=index + 1)
            )
    return violations


def check_test_imports(ctx: RunContext) -> CheckResult:
    """Scan every Dart file under the packages tree for test-file imports."""
    config = ctx.config
    violations: list[Violation] = []
    for tracked in iter_tracked_files(
        ctx.path(config.test_import_root),
        "dart",
        index=ctx.index,
        config=config,
        minimum_matches=config.test_import_minimum,
    ):
        violations.extend(
            scan_test_imports(tracked.relative, tracked.read_lines(), config.exempt_test_imports)
        )
    if not violations:
        return CheckResult.passed(NAME)

    files = {violation.path for violation in violations}
    return CheckResult(
        name=NAME,
        violations=tuple(violations),
        header=(
            f"The following {plural(len(files), 'file', 'files')} import a test directly. "
            "Test utilities should be in their own file."
        ),
    )
