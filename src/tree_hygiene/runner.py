"""Ordered driver: run every hygiene check and make one exit decision."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tree_hygiene.checks import analyzer, binaries, cross_imports, deprecations
from tree_hygiene.checks import import_graph, licenses, localizations, tostring, whitespace
from tree_hygiene.checks.base import RunContext
from tree_hygiene.errors import ConfigError, HygieneError
from tree_hygiene.report import error_result
from tree_hygiene.scanning.vcs import TrackedFileIndex

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from tree_hygiene.checks.base import CheckFunction, CheckResult
    from tree_hygiene.config import HygieneConfig

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_CONFIG_ERROR = 2


@dataclass(frozen=True)
class Check:
    """A named step of the run."""

    name: str
    title: str  # progress line
    run: CheckFunction


CHECKS: tuple[Check, ...] = (
    Check(
        tostring.NAME,
        "No runtimeType in toString",
        tostring.check_runtime_type_in_to_string,
    ),
    Check(binaries.NAME, "No unexpected binaries", binaries.check_binaries),
    Check(whitespace.NAME, "No trailing whitespace", whitespace.check_trailing_whitespace),
    Check(deprecations.NAME, "Deprecations", deprecations.check_deprecations),
    Check(licenses.NAME, "Licenses", licenses.check_licenses),
    Check(cross_imports.NAME, "Test imports", cross_imports.check_test_imports),
    Check(
        import_graph.NAME,
        "Bad imports (framework)",
        import_graph.check_framework_imports,
    ),
    Check(import_graph.TOOLS_NAME, "Bad imports (tools)", import_graph.check_tools_imports),
    Check(localizations.NAME, "Generated localizations", localizations.check_localizations),
    Check(
        analyzer.PACKAGES_NAME,
        "Package dependencies",
        analyzer.check_package_dependencies,
    ),
    Check(analyzer.ANALYZE_NAME, "Dart analysis", analyzer.check_analyze),
    Check(
        analyzer.ANALYZE_WATCH_NAME,
        "Dart analysis (watch mode)",
        analyzer.check_analyze_watch,
    ),
    Check(analyzer.SAMPLE_CODE_NAME, "Sample code", analyzer.check_sample_code),
    Check(analyzer.MEGA_GALLERY_NAME, "Mega gallery analysis", analyzer.check_mega_gallery),
)

CHECK_NAMES: tuple[str, ...] = tuple(check.name for check in CHECKS)


@dataclass
class RunResult:
    """Results of every check that ran, in order."""

    results: list[CheckResult] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    aborted: bool = False  # stopped by a scope, allow-list or collaborator error
    elapsed_ms: float = 0.0

    @property
    def failures(self) -> list[CheckResult]:
        return [result for result in self.results if not result.ok]

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def exit_code(self) -> int:
        return EXIT_OK if self.ok else EXIT_VIOLATIONS


def validate_skip(skip: frozenset[str], checks: Sequence[Check] = CHECKS) -> None:
    """Raise ConfigError when *skip* names a check that does not exist."""
    known = {check.name for check in checks}
    unknown = sorted(skip - known)
    if unknown:
        msg = (
            f"unknown check name(s) to skip: {', '.join(unknown)}; "
            f"valid: {', '.join(sorted(known))}"
        )
        raise ConfigError(msg)


def run(
    root: Path,
    config: HygieneConfig,
    *,
    analyzer_args: Sequence[str] = (),
    index: TrackedFileIndex | None = None,
    checks: Sequence[Check] = CHECKS,
    progress: Callable[[str], None] | None = None,
) -> RunResult:
    """Run *checks* in order under the configured aggregation policy.

    ``fail-fast`` stops after the first failing check; ``collect-all`` keeps
    going. Scope-integrity, allow-list and collaborator errors stop the run
    under either policy and are recorded as a failing result.

    Raises
    ------
    ConfigError
        When ``config.skip`` names an unknown check.
    """
    validate_skip(config.skip, checks)
    start = time.monotonic()
    ctx = RunContext(
        root=root,
        config=config,
        index=index if index is not None else TrackedFileIndex(root),
        analyzer_args=tuple(analyzer_args),
    )
    outcome = RunResult()

    for check in checks:
        if check.name in config.skip:
            logger.debug("Skipping %s", check.name)
            outcome.skipped.append(check.name)
            continue
        if progress is not None:
            progress(check.title)
        try:
            result = check.run(ctx)
        except ConfigError:
            raise
        except HygieneError as exc:
            logger.debug("%s stopped the run: %s", check.name, exc)
            outcome.results.append(error_result(check.name, exc))
            outcome.aborted = True
            break
        outcome.results.append(result)
        logger.debug("%s: %d violation(s)", check.name, len(result.violations))
        if not result.ok and config.fail_fast:
            break

    outcome.elapsed_ms = (time.monotonic() - start) * 1000
    return outcome
