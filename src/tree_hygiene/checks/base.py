"""Shared types for hygiene checks: violations, results and the run context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from tree_hygiene.config import HygieneConfig
    from tree_hygiene.scanning.vcs import TrackedFileIndex


@dataclass(frozen=True)
class Violation:
    """A single hygiene violation."""

    message: str
    path: str | None = None  # relative to the repository root
    line: int | None = None  # 1-based, or a byte offset for encoding errors

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        if self.line is None:
            return f"{self.path}: {self.message}" if self.message else self.path
        return f"{self.path}:{self.line}: {self.message}"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check: an ordered list of violations plus report text."""

    name: str
    violations: tuple[Violation, ...] = ()
    header: str | None = None  # shown above the violations
    footer: tuple[str, ...] = ()  # remediation hints shown below them

    @property
    def ok(self) -> bool:
        return not self.violations

    @classmethod
    def passed(cls, name: str) -> CheckResult:
        return cls(name=name)


@dataclass(frozen=True)
class RunContext:
    """Read-only state shared by every check in a run."""

    root: Path
    config: HygieneConfig
    index: TrackedFileIndex
    analyzer_args: tuple[str, ...] = field(default=())

    def path(self, relative: str) -> Path:
        """Resolve a root-relative POSIX path."""
        return self.root.joinpath(*relative.split("/"))


class CheckFunction(Protocol):
    def __call__(self, ctx: RunContext) -> CheckResult: ...


def plural(count: int, singular: str, plural_form: str) -> str:
    """Pick the singular or plural form for *count*."""
    return singular if count == 1 else plural_form
