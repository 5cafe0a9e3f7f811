"""Content fingerprints: SHA-256 digests split into four 64-bit words."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from functools import reduce
from operator import xor
from typing import TYPE_CHECKING

from tree_hygiene.errors import AllowListIntegrityError

if TYPE_CHECKING:
    from collections.abc import Iterable

_WORD_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class ContentFingerprint:
    """A 256-bit content identity as four unsigned 64-bit words.

    Equality and hashing are structural over ``a``, ``b``, ``c`` and ``d``.
    """

    a: int
    b: int
    c: int
    d: int

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "d"):
            value = getattr(self, name)
            if not 0 <= value <= _WORD_MASK:
                msg = f"word {name} out of range: {value:#x}"
                raise ValueError(msg)

    @classmethod
    def from_digest(cls, digest: bytes) -> ContentFingerprint:
        """Build a fingerprint from a 32-byte digest, big-endian per word."""
        if len(digest) != 32:
            msg = f"expected a 32-byte digest, got {len(digest)} bytes"
            raise ValueError(msg)
        return cls(
            int.from_bytes(digest[0:8], "big"),
            int.from_bytes(digest[8:16], "big"),
            int.from_bytes(digest[16:24], "big"),
            int.from_bytes(digest[24:32], "big"),
        )

    @classmethod
    def of(cls, data: bytes) -> ContentFingerprint:
        """Fingerprint raw *data* with SHA-256."""
        return cls.from_digest(hashlib.sha256(data).digest())

    @property
    def words(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    def __str__(self) -> str:
        return ", ".join(f"0x{word:016X}" for word in self.words)


def allow_list_checksum(fingerprints: Iterable[ContentFingerprint]) -> int:
    """XOR of every word of every fingerprint."""
    return reduce(xor, (word for fingerprint in fingerprints for word in fingerprint.words), 0)


def verify_allow_list(fingerprints: frozenset[ContentFingerprint], expected: int) -> None:
    """Check the allow-list against its pinned checksum.

    Raises
    ------
    AllowListIntegrityError
        When the XOR of all words differs from *expected*.
    """
    actual = allow_list_checksum(fingerprints)
    if actual != expected:
        msg = (
            f"The legacy binary allow-list checksum is 0x{actual:016X}, expected "
            f"0x{expected:016X}. Entries must not be added to the allow-list."
        )
        raise AllowListIntegrityError(msg)
