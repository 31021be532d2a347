"""Weighted bit accumulation.

Each token is digested to 128 bits. Every set bit votes +1 for its position
and every clear bit votes -1; the per-position sums form the weight vector.
Bits are read MSB first within each digest byte, so position `8*i + j` is bit
`7 - j` of byte `i`.
"""

from __future__ import annotations
from typing import Iterable, Optional

import numpy as np

from ..errors import InvalidArgumentError
from ..utils.hashing import DIGEST_SIZE, Digest, md5_digest
from .schema import FINGERPRINT_BITS


def _digest_bits(token: str, digest: Digest) -> np.ndarray:
    # lone surrogates are kept rather than rejected
    raw = digest(token.encode("utf-8", errors="surrogatepass"))
    if not isinstance(raw, (bytes, bytearray)) or len(raw) != DIGEST_SIZE:
        got = len(raw) if isinstance(raw, (bytes, bytearray)) else type(raw).__name__
        raise InvalidArgumentError(f"digest must return {DIGEST_SIZE} bytes, got {got}")
    return np.unpackbits(np.frombuffer(bytes(raw), dtype=np.uint8))


def accumulate(tokens: Iterable[str], digest: Optional[Digest] = None) -> np.ndarray:
    """Return the int64 weight vector for `tokens` (all zeros if there are none)."""
    digest = digest or md5_digest
    weights = np.zeros(FINGERPRINT_BITS, dtype=np.int64)
    for token in tokens:
        bits = _digest_bits(token, digest).astype(np.int64)
        weights += 2 * bits - 1
    return weights
