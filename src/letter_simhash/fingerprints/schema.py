"""Fingerprint schema.

A fingerprint is 16 raw bytes. For storage it is packed into two unsigned
64-bit words; `FingerprintParams` records how a fingerprint was produced so
stored values can be recomputed after a window or digest change.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple

FINGERPRINT_BITS = 128
FINGERPRINT_BYTES = FINGERPRINT_BITS // 8
WORD_BYTES = 8
WORD_MASK = (1 << 64) - 1

DEFAULT_NGRAM_SIZE = 3


class PackedFingerprint(NamedTuple):
    """Bytes 0-7 (high) and 8-15 (low) of a fingerprint, each big-endian."""
    high: int
    low: int


@dataclass(frozen=True)
class FingerprintParams:
    """Versioned parameters a fingerprint was computed with."""
    fingerprint_version: str = "v1"
    ngram_size: int = DEFAULT_NGRAM_SIZE
    digest: str = "md5"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fingerprint_version": self.fingerprint_version,
            "ngram_size": self.ngram_size,
            "digest": self.digest,
        }
