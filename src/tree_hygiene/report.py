"""Report formatting: plain text lines, rich console output and JSON."""

from __future__ import annotations

import json
from datetime import datetime
from typing import TYPE_CHECKING

from rich.markup import escape

from tree_hygiene.checks.base import CheckResult, Violation, plural
from tree_hygiene.errors import CollaboratorError

if TYPE_CHECKING:
    from rich.console import Console

    from tree_hygiene.errors import HygieneError
    from tree_hygiene.runner import RunResult

BULLET = "•"
SUCCESS_BANNER = "Analysis successful."


def clock(now: datetime | None = None) -> str:
    """Wall-clock timestamp used to prefix progress lines."""
    return (now or datetime.now()).strftime("%H:%M:%S")  # noqa: DTZ005


def default_header(result: CheckResult) -> str:
    count = len(result.violations)
    return f"Found {count} {plural(count, 'problem', 'problems')} in {result.name}:"


def format_result(result: CheckResult) -> list[str]:
    """Plain-text report for one failing check.

    Returns an empty list for a passing check.
    """
    if result.ok:
        return []
    lines = [result.header or default_header(result)]
    lines.extend(f"  {BULLET} {violation}" for violation in result.violations)
    if result.footer:
        lines.append("")
        lines.extend(result.footer)
    return lines


def format_text(run: RunResult) -> str:
    """All failing checks of *run*, separated by blank lines."""
    blocks = ["\n".join(format_result(result)) for result in run.failures]
    if not blocks:
        return SUCCESS_BANNER
    return "\n\n".join(blocks)


def error_result(name: str, exc: HygieneError) -> CheckResult:
    """Turn a run-stopping error into a failing result for *name*.

    Collaborator failures carry the captured output, if any, as footer lines.
    """
    footer: list[str] = []
    if isinstance(exc, CollaboratorError):
        footer.append(f"Command: {exc.command}")
        footer.append(f"Working directory: {exc.working_directory}")
        if exc.stdout.strip():
            footer.extend(["", "stdout:", exc.stdout.rstrip()])
        if exc.stderr.strip():
            footer.extend(["", "stderr:", exc.stderr.rstrip()])
        message = f"ERROR: Last command exited with {exc.exit_code} (expected zero)."
    else:
        message = f"ERROR: {exc}"
    return CheckResult(name=name, violations=(Violation(message),), footer=tuple(footer))


# ---------------------------------------------------------------------------
# Rich console output
# ---------------------------------------------------------------------------


def print_progress(console: Console, title: str) -> None:
    console.print(f"[dim]{clock()}[/] [bold]{escape(title)}[/]...", highlight=False)


def print_result(console: Console, result: CheckResult) -> None:
    """Render one failing check: bold red header, bulleted violations, yellow hints."""
    if result.ok:
        return
    console.print(f"[bold red]{escape(result.header or default_header(result))}[/]")
    for violation in result.violations:
        console.print(f"  {BULLET} {escape(str(violation))}", highlight=False, soft_wrap=True)
    if result.footer:
        console.print()
        for line in result.footer:
            console.print(f"[yellow]{escape(line)}[/]", highlight=False, soft_wrap=True)
    console.print()


def print_run(console: Console, run: RunResult) -> None:
    for result in run.failures:
        print_result(console, result)
    if run.skipped:
        console.print(f"[dim]Skipped: {', '.join(run.skipped)}[/]")
    if run.ok:
        console.print(f"[dim]{clock()}[/] [bold green]{SUCCESS_BANNER}[/]")
    else:
        failed = len(run.failures)
        console.print(
            f"[bold red]{failed} {plural(failed, 'check', 'checks')} failed.[/]"
        )


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def format_json(run: RunResult) -> str:
    """Format a RunResult as structured JSON.

    Returns a JSON string with a ``checks`` array and a ``summary`` object.
    """
    checks: list[dict[str, object]] = []
    for result in run.results:
        checks.append(
            {
                "name": result.name,
                "ok": result.ok,
                "header": result.header,
                "violations": [
                    {"path": v.path, "line": v.line, "message": v.message}
                    for v in result.violations
                ],
                "footer": list(result.footer),
            }
        )

    output: dict[str, object] = {
        "checks": checks,
        "summary": {
            "ok": run.ok,
            "exit_code": run.exit_code,
            "checks_run": len(run.results),
            "checks_skipped": list(run.skipped),
            "violations_count": sum(len(result.violations) for result in run.results),
            "aborted": run.aborted,
            "elapsed_ms": run.elapsed_ms,
        },
    }

    return json.dumps(output, indent=2)
