"""Content classifier: every tracked file must be UTF-8 unless it is a legacy binary."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tree_hygiene.checks.base import CheckResult, Violation
from tree_hygiene.scanning.fingerprint import ContentFingerprint, verify_allow_list
from tree_hygiene.scanning.legacy_binaries import LEGACY_BINARIES, LEGACY_BINARIES_CHECKSUM

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tree_hygiene.checks.base import RunContext

logger = logging.getLogger(__name__)

NAME = "binaries"

FOOTER: tuple[str, ...] = (
    "All files in this repository must be UTF-8. In particular, images and other binaries",
    "must not be checked into this repository. This is because we are very sensitive to the",
    "size of the repository as it is distributed to all our developers. If you have a binary",
    "to which you need access, you should consider how to fetch it from another repository;",
    'for example, the "assets-for-api-docs" repository is used for images in API docs.',
)


def first_invalid_offset(data: bytes) -> int | None:
    """Byte offset of the first invalid UTF-8 sequence, or None if *data* decodes."""
    try:
        data.decode("utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        return exc.start
    return None


def classify(
    relative: str,
    data: bytes,
    allow_list: frozenset[ContentFingerprint],
) -> Violation | None:
    """Return a violation for non-UTF-8 *data* whose fingerprint is not allowed."""
    offset = first_invalid_offset(data)
    if offset is None:
        return None
    if ContentFingerprint.of(data) in allow_list:
        logger.debug("Allowing legacy binary %s", relative)
        return None
    return Violation("file is not valid UTF-8", path=relative, line=offset)


def find_binaries(
    files: Iterable[tuple[str, bytes]],
    allow_list: frozenset[ContentFingerprint],
) -> list[Violation]:
    """Classify ``(relative_path, content)`` pairs."""
    violations: list[Violation] = []
    for relative, data in files:
        violation = classify(relative, data, allow_list)
        if violation is not None:
            violations.append(violation)
    return violations


def check_binaries(
    ctx: RunContext,
    *,
    allow_list: frozenset[ContentFingerprint] = LEGACY_BINARIES,
    checksum: int = LEGACY_BINARIES_CHECKSUM,
) -> CheckResult:
    """Flag every tracked file that is not valid UTF-8 and not a legacy binary.

    The allow-list is verified against its pinned checksum first; a mismatch
    raises :class:`~tree_hygiene.errors.AllowListIntegrityError`.
    """
    verify_allow_list(allow_list, checksum)

    excluded = ctx.config.utf8_excluded_names

    def _contents() -> Iterable[tuple[str, bytes]]:
        for relative in ctx.index.relative_paths:
            path = ctx.path(relative)
            if path.name in excluded or not path.is_file():
                continue
            yield relative, path.read_bytes()

    violations = find_binaries(_contents(), allow_list)
    return CheckResult(name=NAME, violations=tuple(violations), footer=FOOTER)
