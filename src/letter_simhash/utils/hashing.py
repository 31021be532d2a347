"""Per-token digest functions.

A digest maps a byte sequence to exactly 16 bytes (128 bits), one bit per
fingerprint position. The digest is not a security boundary; any deterministic
128-bit hash with well-spread bits can stand in.

- md5: reference digest, what stored fingerprints were produced with
- blake2b: BLAKE2b truncated to 16 bytes via its digest_size parameter
"""

from __future__ import annotations
import hashlib
from typing import Callable

DIGEST_SIZE = 16

Digest = Callable[[bytes], bytes]


def md5_digest(data: bytes) -> bytes:
    return hashlib.md5(data).digest()


def blake2b_digest(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=DIGEST_SIZE).digest()
