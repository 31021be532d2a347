"""Collapse a weight vector into a 16-byte fingerprint by sign."""

from __future__ import annotations
from typing import Sequence, Union

import numpy as np

from ..errors import InvalidArgumentError
from .schema import FINGERPRINT_BITS


def encode(weights: Union[np.ndarray, Sequence[int]]) -> bytes:
    """Bit j is set iff weights[j] > 0. A zero weight encodes to 0."""
    arr = np.asarray(weights)
    if arr.shape != (FINGERPRINT_BITS,):
        raise InvalidArgumentError(
            f"weight vector must have {FINGERPRINT_BITS} entries, got shape {arr.shape}"
        )
    # packbits is MSB first: bit j lands in byte j // 8 at position 7 - j % 8
    return np.packbits(arr > 0).tobytes()
