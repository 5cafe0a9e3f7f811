"""Version-control listing: the set of files ``git`` tracks under a directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tree_hygiene.infrastructure.process import eval_command

logger = logging.getLogger(__name__)


def _canonical(path: Path) -> str:
    return os.path.normcase(os.path.realpath(path))


def parse_ls_files(output: str) -> list[str]:
    """Split NUL-separated ``git ls-files -z`` output into relative paths.

    Git terminates every entry (including the last) with a NUL byte, so the
    trailing empty element is dropped.
    """
    names = output.split("\x00")
    if names and names[-1] == "":
        names.pop()
    return names


class TrackedFileIndex:
    """Tracked files under *root*, listed once and read-only thereafter.

    The listing is produced lazily on first use by ``git ls-files -z`` run in
    *root*; a non-zero exit raises
    :class:`~tree_hygiene.errors.CollaboratorError` with the captured output.
    """

    def __init__(self, root: Path, paths: list[str] | None = None) -> None:
        self.root = root.resolve()
        self._relative: tuple[str, ...] | None = tuple(paths) if paths is not None else None
        self._canonical: frozenset[str] | None = None

    @classmethod
    def from_paths(cls, root: Path, paths: list[str]) -> TrackedFileIndex:
        """Build an index from an explicit list of root-relative POSIX paths."""
        return cls(root, paths)

    def _load(self) -> tuple[str, ...]:
        if self._relative is None:
            result = eval_command("git", ["ls-files", "-z"], cwd=self.root)
            self._relative = tuple(parse_ls_files(result.stdout))
            logger.debug("git reports %d tracked files under %s", len(self._relative), self.root)
        return self._relative

    @property
    def relative_paths(self) -> tuple[str, ...]:
        """Tracked paths relative to the root, in ``git`` order."""
        return self._load()

    def files(self) -> list[Path]:
        """Absolute paths of every tracked file, in ``git`` order."""
        return [self.root / name for name in self._load()]

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, Path):
            return False
        if self._canonical is None:
            self._canonical = frozenset(_canonical(self.root / name) for name in self._load())
        return _canonical(path) in self._canonical

    def __len__(self) -> int:
        return len(self._load())
