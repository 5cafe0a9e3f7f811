"""File enumerator: walk a directory, keep tracked files, apply exclusion rules."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from tree_hygiene.errors import ScopeIntegrityError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tree_hygiene.config import HygieneConfig
    from tree_hygiene.scanning.vcs import TrackedFileIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackedFile:
    """A version-controlled file found by the enumerator."""

    path: Path  # absolute
    root: Path  # repository root the run is anchored at

    @property
    def extension(self) -> str:
        """Extension without the leading dot (empty when there is none)."""
        return self.path.suffix[1:]

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def relative(self) -> str:
        """POSIX path relative to the repository root, used in messages."""
        try:
            return PurePosixPath(self.path.relative_to(self.root)).as_posix()
        except ValueError:
            return self.path.as_posix()

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def read_text(self) -> str:
        """Decode the file as UTF-8, replacing invalid bytes.

        Invalid content is reported by the binaries check; text scans still
        see the rest of the file.
        """
        return self.path.read_bytes().decode("utf-8", errors="replace")

    def read_lines(self) -> list[str]:
        """Return the file's lines without terminators.

        A trailing newline does not produce an extra empty line; ``\\r\\n`` and
        ``\\n`` both terminate a line.
        """
        return read_lines(self.read_text())


def read_lines(text: str) -> list[str]:
    """Split *text* into lines the way a line reader does."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_generated_plugin_registrant(path: Path, config: HygieneConfig) -> bool:
    """True for generated plugin registrants outside the pub cache."""
    return ".pub-cache" not in path.as_posix() and path.name in config.generated_registrants


def _excluded_file(path: Path, config: HygieneConfig) -> bool:
    if is_generated_plugin_registrant(path, config):
        return True
    return path.name in config.excluded_filenames


def _excluded_directory(path: Path, config: HygieneConfig) -> bool:
    if path.name in config.excluded_dirs:
        return True
    return (path / config.ignore_marker).is_file()


def iter_tracked_files(
    directory: Path,
    extension: str | None,
    *,
    index: TrackedFileIndex,
    config: HygieneConfig,
    minimum_matches: int = 0,
) -> Iterator[TrackedFile]:
    """Yield tracked files under *directory*, optionally filtered by *extension*.

    Parameters
    ----------
    directory:
        Directory to walk; need not be the repository root.
    extension:
        Extension without a leading dot, or ``None`` for every file.
    index:
        The run's tracked-file listing; untracked files are skipped even when
        physically present.
    config:
        Supplies the exclusion rules and whether minimums are enforced.
    minimum_matches:
        Fewer matches than this raises :class:`ScopeIntegrityError` once the
        walk completes (when ``config.check_minimums`` is set).

    Raises
    ------
    ValueError
        When *extension* starts with a period.
    ScopeIntegrityError
        When the walk yields fewer files than *minimum_matches*.
    """
    if extension is not None and extension.startswith("."):
        msg = "Extension argument should not start with a period."
        raise ValueError(msg)

    suffix = f".{extension}" if extension is not None else None
    pending: deque[Path] = deque([directory])
    matches = 0
    while pending:
        entity = pending.popleft()
        if entity.suffix == config.template_suffix:
            continue
        if entity.is_dir():
            if entity != directory and _excluded_directory(entity, config):
                continue
            if entity == directory and (entity / config.ignore_marker).is_file():
                continue
            pending.extend(sorted(entity.iterdir()))
        elif entity.is_file():
            if entity not in index:
                continue
            if _excluded_file(entity, config):
                continue
            if suffix is None or entity.suffix == suffix:
                matches += 1
                yield TrackedFile(path=entity, root=index.root)

    logger.debug("Found %d files matching %r under %s", matches, extension, directory)
    required = config.minimum(minimum_matches)
    if matches < required:
        raise ScopeIntegrityError(str(directory), extension, required, matches)


def list_tracked_files(
    directory: Path,
    extension: str | None,
    *,
    index: TrackedFileIndex,
    config: HygieneConfig,
    minimum_matches: int = 0,
) -> list[TrackedFile]:
    """Eager form of :func:`iter_tracked_files`."""
    return list(
        iter_tracked_files(
            directory,
            extension,
            index=index,
            config=config,
            minimum_matches=minimum_matches,
        )
    )
