"""Wrapped tool invocations: dependency verification and analyzer runs.

These steps are pass/fail by exit code only. Output streams to the terminal
and a non-zero exit raises :class:`~tree_hygiene.errors.CollaboratorError`.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from tree_hygiene.checks.base import CheckResult
from tree_hygiene.infrastructure.process import run_command

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tree_hygiene.checks.base import RunContext

logger = logging.getLogger(__name__)

PACKAGES_NAME = "package-dependencies"
ANALYZE_NAME = "analyze"
ANALYZE_WATCH_NAME = "analyze-watch"
SAMPLE_CODE_NAME = "sample-code"
MEGA_GALLERY_NAME = "analyze-mega-gallery"


def run_flutter_analyze(ctx: RunContext, working_directory: Path, options: Sequence[str]) -> None:
    """Run ``flutter analyze --dartdocs`` with *options* in *working_directory*."""
    run_command(
        ctx.config.executable(ctx.root, "flutter"),
        ["analyze", "--dartdocs", *options],
        cwd=working_directory,
    )


def check_package_dependencies(ctx: RunContext) -> CheckResult:
    """All package dependencies must be in sync."""
    run_command(
        ctx.config.executable(ctx.root, "flutter"),
        ["update-packages", "--verify-only"],
        cwd=ctx.root,
    )
    return CheckResult.passed(PACKAGES_NAME)


def check_analyze(ctx: RunContext) -> CheckResult:
    """Analyze all the Dart code in the repository."""
    run_flutter_analyze(ctx, ctx.root, ["--flutter-repo", *ctx.analyzer_args])
    return CheckResult.passed(ANALYZE_NAME)


def check_analyze_watch(ctx: RunContext) -> CheckResult:
    """Same analysis through the watching analyzer; ``--benchmark`` exits after one run."""
    run_flutter_analyze(
        ctx, ctx.root, ["--flutter-repo", "--watch", "--benchmark", *ctx.analyzer_args]
    )
    return CheckResult.passed(ANALYZE_WATCH_NAME)


def check_sample_code(ctx: RunContext) -> CheckResult:
    """Analyze the sample code embedded in API documentation."""
    run_command(
        ctx.config.executable(ctx.root, "dart"),
        [str(ctx.path(ctx.config.sample_code_script))],
        cwd=ctx.root,
    )
    return CheckResult.passed(SAMPLE_CODE_NAME)


def check_mega_gallery(ctx: RunContext) -> CheckResult:
    """Analyze a synthetically inflated copy of the gallery app.

    The copy is generated into a temporary directory that is always removed.
    """
    with tempfile.TemporaryDirectory(prefix="flutter_mega_gallery.") as out_dir:
        out = Path(out_dir)
        logger.debug("Generating mega gallery into %s", out)
        run_command(
            ctx.config.executable(ctx.root, "dart"),
            [str(ctx.path(ctx.config.mega_gallery_script)), "--out", str(out)],
            cwd=ctx.root,
        )
        run_flutter_analyze(ctx, out, ["--watch", "--benchmark", *ctx.analyzer_args])
    return CheckResult.passed(MEGA_GALLERY_NAME)
