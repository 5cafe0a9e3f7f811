"""Deprecation-notice grammar.

Every ``@Deprecated`` annotation in Dart sources must have exactly this shape::

    @Deprecated(
      'Use Foo instead. '
      'This feature was deprecated after v1.20.0-1.0.pre.'
    )

The message spans one or more single-quoted lines, each ending in a space
inside the quotes; the message starts with a capital letter and ends with
terminal punctuation; the version line names the release the deprecation
landed in. Malformed notices produce one violation each, at the line where
the structure first breaks, and scanning continues with the next notice.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tree_hygiene.checks.base import CheckResult, Violation
from tree_hygiene.scanning.enumerator import iter_tracked_files

if TYPE_CHECKING:
    from tree_hygiene.checks.base import RunContext

NAME = "deprecations"

FIND_DEPRECATION = re.compile(r"@[Dd]eprecated")
OPENING = re.compile(r"^( *)@Deprecated\($")
MESSAGE_LINE = re.compile(r"^ *'(.+) '$")
VERSION_LINE = re.compile(
    r"^ *'This feature was deprecated after v([0-9]+)\.([0-9]+)\.([0-9]+)"
    r"(\-[0-9]+\.[0-9]+\.pre)?\.',?$"
)
CLOSING = re.compile(r"^ *\)$")

# Notices that are intentionally irregular carry one of these markers.
IGNORE_MARKER = " // flutter_ignore: deprecation_syntax (see analyze.dart)"
LEGACY_MARKER = re.compile(
    r" // flutter_ignore: deprecation_syntax, https://github.com/flutter/flutter/issues/[0-9]+$"
)

FOOTER = ("See: https://github.com/flutter/flutter/wiki/Tree-hygiene#handling-breaking-changes",)

ERR_PATTERN = "Deprecation notice does not match required pattern."
ERR_INCOMPLETE = "Incomplete deprecation notice."
ERR_INDENT = "Unexpected deprecation notice indent."
ERR_CAPITAL = (
    "Deprecation notice should be a grammatically correct sentence and start with a "
    "capital letter; see style guide: "
    "https://github.com/flutter/flutter/wiki/Style-guide-for-Flutter-repo"
)
ERR_PERIOD = "Deprecation notice should be a grammatically correct sentence and end with a period."
ERR_DEV_VERSION = (
    "Deprecation notice does not accurately indicate a dev branch version number; please "
    "see https://flutter.dev/docs/development/tools/sdk/releases to find the latest dev "
    "build version number."
)
ERR_CLOSING = "End of deprecation notice does not match required pattern."
DOUBLE_QUOTE_HINT = (
    " You might have used double quotes (\") for the string instead of single quotes (')."
)


class DeprecationSyntaxError(Exception):
    """A malformed notice; *index* is the 0-based line the scan stopped on."""

    def __init__(self, message: str, index: int) -> None:
        super().__init__(message)
        self.message = message
        self.index = index


def find_notice_starts(lines: list[str]) -> list[int]:
    """Indexes of lines that open a deprecation notice and are not exempt."""
    return [
        index
        for index, line in enumerate(lines)
        if FIND_DEPRECATION.search(line)
        and not line.endswith(IGNORE_MARKER)
        and not LEGACY_MARKER.search(line)
    ]


def _requires_dev_suffix(major: int, minor: int) -> bool:
    """Releases from 1.20 onward are cut from dev builds with a ``-X.Y.pre`` suffix."""
    return major > 1 or (major == 1 and minor >= 20)


def validate_notice(lines: list[str], start: int) -> None:
    """Validate the notice opening at *start*.

    Raises
    ------
    DeprecationSyntaxError
        At the first line that breaks the expected structure.
    """
    index = start
    opening = OPENING.match(lines[index])
    if opening is None:
        raise DeprecationSyntaxError(ERR_PATTERN, index)
    indent = opening.group(1)
    body_prefix = f"{indent}  '"

    index += 1
    if index >= len(lines):
        raise DeprecationSyntaxError(ERR_INCOMPLETE, index)

    message: str | None = None
    version: re.Match[str] | None = None
    while version is None:
        line = lines[index]
        match = MESSAGE_LINE.match(line)
        if match is None:
            reason = ERR_PATTERN
            if line.lstrip().startswith('"'):
                reason += DOUBLE_QUOTE_HINT
            raise DeprecationSyntaxError(reason, index)
        if not line.startswith(body_prefix):
            raise DeprecationSyntaxError(ERR_INDENT, index)
        if message is None:
            first = match.group(1)[0]
            if first.upper() != first:
                raise DeprecationSyntaxError(ERR_CAPITAL, index)
        message = match.group(1)
        index += 1
        if index >= len(lines):
            raise DeprecationSyntaxError(ERR_INCOMPLETE, index)
        version = VERSION_LINE.match(lines[index])

    major = int(version.group(1))
    minor = int(version.group(2))
    if _requires_dev_suffix(major, minor) and version.group(4) is None:
        raise DeprecationSyntaxError(ERR_DEV_VERSION, index)
    if not message.endswith((".", "!", "?")):
        raise DeprecationSyntaxError(ERR_PERIOD, index)
    if not lines[index].startswith(body_prefix):
        raise DeprecationSyntaxError(ERR_INDENT, index)

    index += 1
    if index >= len(lines):
        raise DeprecationSyntaxError(ERR_INCOMPLETE, index)
    if not CLOSING.search(lines[index]):
        raise DeprecationSyntaxError(ERR_CLOSING, index)
    if not lines[index].startswith(f"{indent})"):
        raise DeprecationSyntaxError(ERR_INDENT, index)


def scan_deprecations(relative: str, lines: list[str]) -> list[Violation]:
    """Return one violation per malformed notice in a file."""
    violations: list[Violation] = []
    for start in find_notice_starts(lines):
        try:
            validate_notice(lines, start)
        except DeprecationSyntaxError as exc:
            violations.append(Violation(exc.message, path=relative, line=exc.index + 1))
    return violations


def check_deprecations(ctx: RunContext) -> CheckResult:
    """Validate every deprecation notice in tracked Dart files."""
    violations: list[Violation] = []
    for tracked in iter_tracked_files(
        ctx.root,
        "dart",
        index=ctx.index,
        config=ctx.config,
        minimum_matches=ctx.config.deprecation_minimum,
    ):
        violations.extend(scan_deprecations(tracked.relative, tracked.read_lines()))
    return CheckResult(name=NAME, violations=tuple(violations), footer=FOOTER)
