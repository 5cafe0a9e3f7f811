"""License headers: every source file starts with its extension's copyright block."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tree_hygiene.checks.base import CheckResult, Violation, plural
from tree_hygiene.scanning.enumerator import iter_tracked_files

if TYPE_CHECKING:
    from tree_hygiene.checks.base import RunContext
    from tree_hygiene.config import LicenseSpec

NAME = "licenses"


def has_license(content: str, spec: LicenseSpec) -> bool:
    """True when *content* is empty or starts with the expected header.

    Line endings are normalised to ``\\n`` first.
    """
    normalized = content.replace("\r\n", "\n")
    if not normalized:
        return True
    return normalized.startswith(spec.pattern)


def check_extension(ctx: RunContext, spec: LicenseSpec) -> CheckResult:
    """Check every tracked file with *spec*'s extension."""
    missing = [
        Violation("", path=tracked.relative)
        for tracked in iter_tracked_files(
            ctx.root,
            spec.extension,
            index=ctx.index,
            config=ctx.config,
            minimum_matches=spec.minimum,
        )
        if not has_license(tracked.read_text(), spec)
    ]
    if not missing:
        return CheckResult.passed(f"{NAME}:{spec.extension}")

    count = len(missing)
    verb = plural(count, " does", "s do")
    footer = ["The expected license header is:", spec.header]
    if spec.trailing_blank:
        footer.append("...followed by a blank line.")
    return CheckResult(
        name=f"{NAME}:{spec.extension}",
        violations=tuple(missing),
        header=f"The following {count} file{verb} not have the right license header:",
        footer=tuple(footer),
    )


def check_licenses(ctx: RunContext) -> CheckResult:
    """Check every registered extension; stop at the first extension that fails.

    Each extension is reported with its own expected header, so the first
    failing extension's result is returned as is.
    """
    for spec in ctx.config.licenses:
        result = check_extension(ctx, spec)
        if not result.ok:
            return result
    return CheckResult.passed(NAME)
