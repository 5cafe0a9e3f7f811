"""Generated localizations must match what the generator produces today."""

from __future__ import annotations

import difflib
import logging
from typing import TYPE_CHECKING

from tree_hygiene.checks.base import CheckResult, Violation
from tree_hygiene.infrastructure.process import eval_command

if TYPE_CHECKING:
    from tree_hygiene.checks.base import RunContext
    from tree_hygiene.config import LocalizationTarget

logger = logging.getLogger(__name__)

NAME = "localizations"

GENERATOR_LABEL = "gen_localizations"


def diff_generated(relative: str, expected: str, generated: str) -> Violation | None:
    """Compare checked-in *expected* text with *generated* output, both trimmed.

    Returns a violation holding a conflict-style block followed by a unified
    diff, or None when they agree.
    """
    expected = expected.strip()
    generated = generated.strip()
    if expected == generated:
        return None
    unified = "\n".join(
        difflib.unified_diff(
            expected.splitlines(),
            generated.splitlines(),
            fromfile=relative,
            tofile=GENERATOR_LABEL,
            lineterm="",
        )
    )
    message = "\n".join(
        [
            f"<<<<<<< {relative}",
            expected,
            "=======",
            generated,
            f">>>>>>> {GENERATOR_LABEL}",
            unified,
            f"The contents of {relative} are different from that produced by "
            f"{GENERATOR_LABEL}.",
            "",
            f"Did you forget to run {GENERATOR_LABEL}.dart after updating a .arb file?",
        ]
    )
    return Violation(message)


def check_target(ctx: RunContext, target: LocalizationTarget) -> Violation | None:
    """Run the generator for *target* and diff its stdout against the checked-in file."""
    config = ctx.config
    result = eval_command(
        config.executable(ctx.root, "dart"),
        [config.localization_script, target.flag],
        cwd=ctx.root,
    )
    generated_path = ctx.path(target.generated_file)
    if generated_path.is_file():
        expected = generated_path.read_bytes().decode("utf-8", errors="replace")
    else:
        logger.debug("%s is missing; comparing against empty text", target.generated_file)
        expected = ""
    return diff_generated(target.generated_file, expected, result.stdout)


def check_localizations(ctx: RunContext) -> CheckResult:
    """Regenerate every localization target and report the first that drifted."""
    for target in ctx.config.localization_targets:
        violation = check_target(ctx, target)
        if violation is not None:
            return CheckResult(name=NAME, violations=(violation,))
    return CheckResult.passed(NAME)
