"""Pack fingerprints into two 64-bit words and back.

`high` holds bytes 0-7 and `low` bytes 8-15, each read big-endian. Malformed
input raises instead of falling back to (0, 0): an all-zero pair is a real
fingerprint and must not double as "no data".

The persistence layer stores the words in signed BIGINT columns, so two's
complement helpers are provided as well.
"""

from __future__ import annotations
from typing import Any, Tuple

from ..errors import InvalidArgumentError
from .schema import FINGERPRINT_BYTES, WORD_BYTES, WORD_MASK, PackedFingerprint

_SIGN_BIT = 1 << 63


def split(fp: Any) -> PackedFingerprint:
    if fp is None:
        raise InvalidArgumentError("fingerprint is required")
    if not isinstance(fp, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(f"fingerprint must be bytes, got {type(fp).__name__}")
    raw = bytes(fp)
    if len(raw) != FINGERPRINT_BYTES:
        raise InvalidArgumentError(
            f"fingerprint must be {FINGERPRINT_BYTES} bytes, got {len(raw)}"
        )
    return PackedFingerprint(
        high=int.from_bytes(raw[:WORD_BYTES], "big"),
        low=int.from_bytes(raw[WORD_BYTES:], "big"),
    )


def _check_word(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > WORD_MASK:
        raise InvalidArgumentError(f"{name} out of unsigned 64-bit range: {value}")
    return value


def unsplit(high: int, low: int) -> bytes:
    high = _check_word("high", high)
    low = _check_word("low", low)
    return high.to_bytes(WORD_BYTES, "big") + low.to_bytes(WORD_BYTES, "big")


def to_signed_words(packed: PackedFingerprint) -> Tuple[int, int]:
    """Reinterpret both words as signed 64-bit integers."""
    high = _check_word("high", packed[0])
    low = _check_word("low", packed[1])
    return (high - (1 << 64) if high & _SIGN_BIT else high,
            low - (1 << 64) if low & _SIGN_BIT else low)


def from_signed_words(high: int, low: int) -> PackedFingerprint:
    for name, value in (("high", high), ("low", low)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
        if value < -_SIGN_BIT or value >= _SIGN_BIT:
            raise InvalidArgumentError(f"{name} out of signed 64-bit range: {value}")
    return PackedFingerprint(high & WORD_MASK, low & WORD_MASK)
