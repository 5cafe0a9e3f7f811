"""Shared test fixtures for tree-hygiene."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

import pytest

from tree_hygiene.checks.base import RunContext
from tree_hygiene.config import HygieneConfig
from tree_hygiene.scanning.vcs import TrackedFileIndex

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        ["git", *args],  # noqa: S607
        cwd=str(repo),
        capture_output=True,
        check=True,
    )


def write_files(root: Path, files: Mapping[str, str | bytes]) -> None:
    """Write root-relative POSIX *files*; bytes are written verbatim."""
    for relative, content in files.items():
        path = root.joinpath(*relative.split("/"))
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))


@pytest.fixture()
def git_repo(tmp_path: Path) -> Path:
    """Create a real temporary git repository."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    return repo


@pytest.fixture()
def track(git_repo: Path) -> Callable[[Mapping[str, str | bytes]], Path]:
    """Write files into the git repository and stage them."""

    def _track(files: Mapping[str, str | bytes]) -> Path:
        write_files(git_repo, files)
        _git(git_repo, "add", "--", *files)
        return git_repo

    return _track


@pytest.fixture()
def relaxed_config() -> HygieneConfig:
    """Default rules with file-count minimums disabled."""
    return HygieneConfig(check_minimums=False)


@pytest.fixture()
def make_ctx(
    tmp_path: Path, relaxed_config: HygieneConfig
) -> Callable[..., RunContext]:
    """Build a RunContext over files written to a scratch root.

    Every written file is treated as tracked unless listed in *untracked*.
    """

    def _make(
        files: Mapping[str, str | bytes],
        *,
        config: HygieneConfig | None = None,
        untracked: tuple[str, ...] = (),
        analyzer_args: tuple[str, ...] = (),
    ) -> RunContext:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        write_files(root, files)
        tracked = [name for name in files if name not in untracked]
        return RunContext(
            root=root.resolve(),
            config=config or relaxed_config,
            index=TrackedFileIndex.from_paths(root, tracked),
            analyzer_args=analyzer_args,
        )

    return _make
