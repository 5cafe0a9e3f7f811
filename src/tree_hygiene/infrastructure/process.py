"""External process orchestration: run a tool, capture or stream its output.

Every invocation is synchronous. A non-zero exit status (or a missing
executable) raises :class:`~tree_hygiene.errors.CollaboratorError` carrying the
captured output.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from tree_hygiene.errors import CollaboratorError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

# Exit status reported when the executable itself cannot be started.
EXIT_NOT_FOUND = 127


@dataclass(frozen=True)
class EvalResult:
    """Captured result of a finished subprocess."""

    stdout: str
    stderr: str
    exit_code: int = 0


def describe_command(executable: str | Path, arguments: Sequence[str], cwd: Path) -> str:
    """Render a command line for messages.

    An absolute executable path is shown relative to *cwd*; a bare name that is
    looked up on PATH is shown as is.
    """
    shown = str(executable)
    if Path(executable).is_absolute():
        try:
            shown = os.path.relpath(executable, cwd)
        except ValueError:
            # Different drives on Windows.
            pass
    return " ".join([shown, *arguments])


def eval_command(
    executable: str | Path,
    arguments: Sequence[str],
    *,
    cwd: Path,
) -> EvalResult:
    """Run a command to completion and capture its stdout and stderr.

    Output is decoded as UTF-8 with replacement so that a misbehaving tool
    cannot crash the run with a decode error.

    Raises
    ------
    CollaboratorError
        When the command exits non-zero or the executable cannot be found.
    """
    description = describe_command(executable, arguments, cwd)
    logger.debug("RUNNING %s in %s", description, cwd)
    start = time.monotonic()
    try:
        completed = subprocess.run(  # noqa: S603
            [str(executable), *arguments],
            cwd=str(cwd),
            capture_output=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise CollaboratorError(
            description, str(cwd), EXIT_NOT_FOUND, stderr=str(exc)
        ) from exc

    elapsed = time.monotonic() - start
    logger.info("ELAPSED TIME: %.2fs for %s in %s", elapsed, description, cwd)

    result = EvalResult(
        stdout=completed.stdout.decode("utf-8", errors="replace"),
        stderr=completed.stderr.decode("utf-8", errors="replace"),
        exit_code=completed.returncode,
    )
    if result.exit_code != 0:
        raise CollaboratorError(
            description,
            str(cwd),
            result.exit_code,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result


def run_command(
    executable: str | Path,
    arguments: Sequence[str],
    *,
    cwd: Path,
) -> None:
    """Run a command with its output streamed straight to the terminal.

    Used for the long-running analyzer invocations, whose progress output is
    useful to the operator as it happens.

    Raises
    ------
    CollaboratorError
        When the command exits non-zero or cannot be started.
    """
    description = describe_command(executable, arguments, cwd)
    logger.debug("RUNNING %s in %s", description, cwd)
    start = time.monotonic()
    try:
        completed = subprocess.run(  # noqa: S603
            [str(executable), *arguments],
            cwd=str(cwd),
            check=False,
        )
    except FileNotFoundError as exc:
        raise CollaboratorError(
            description, str(cwd), EXIT_NOT_FOUND, stderr=str(exc)
        ) from exc

    logger.info(
        "ELAPSED TIME: %.2fs for %s in %s", time.monotonic() - start, description, cwd
    )
    if completed.returncode != 0:
        raise CollaboratorError(description, str(cwd), completed.returncode)
