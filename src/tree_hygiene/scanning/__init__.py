"""Scanning: tracked-file listing, enumeration with exclusions, content fingerprints."""

from tree_hygiene.scanning.enumerator import (
    TrackedFile,
    is_generated_plugin_registrant,
    iter_tracked_files,
    list_tracked_files,
    read_lines,
)
from tree_hygiene.scanning.fingerprint import (
    ContentFingerprint,
    allow_list_checksum,
    verify_allow_list,
)
from tree_hygiene.scanning.legacy_binaries import LEGACY_BINARIES, LEGACY_BINARIES_CHECKSUM
from tree_hygiene.scanning.vcs import TrackedFileIndex, parse_ls_files

__all__ = [
    "LEGACY_BINARIES",
    "LEGACY_BINARIES_CHECKSUM",
    "ContentFingerprint",
    "TrackedFile",
    "TrackedFileIndex",
    "allow_list_checksum",
    "is_generated_plugin_registrant",
    "iter_tracked_files",
    "list_tracked_files",
    "parse_ls_files",
    "read_lines",
    "verify_allow_list",
]
