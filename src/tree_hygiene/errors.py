"""Exception hierarchy shared by the scanners, checks and the driver."""

from __future__ import annotations


class HygieneError(Exception):
    """Base class for errors that abort a hygiene run."""


class ConfigError(HygieneError):
    """Raised when the configuration file or an override is invalid."""


class ScopeIntegrityError(HygieneError):
    """Raised when an enumeration finds fewer files than its configured minimum.

    This is a canary against exclusion rules that silently hide a whole class
    of files, not a normal lint failure.
    """

    def __init__(self, directory: str, extension: str | None, minimum: int, found: int) -> None:
        self.directory = directory
        self.extension = extension
        self.minimum = minimum
        self.found = found
        kind = f'with extension ".{extension}"' if extension is not None else "of any type"
        super().__init__(
            f"Expected to find at least {minimum} files {kind} in "
            f'"{directory}", but only found {found}.'
        )


class AllowListIntegrityError(HygieneError):
    """Raised when the legacy binary allow-list fails its checksum."""


class CollaboratorError(HygieneError):
    """Raised when an external tool exits with a non-zero status."""

    def __init__(
        self,
        command: str,
        working_directory: str,
        exit_code: int,
        *,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.command = command
        self.working_directory = working_directory
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"Command exited with {exit_code}: {command} (in {working_directory})")
