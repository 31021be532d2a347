"""letter_simhash

Near-duplicate fingerprinting for OCR'd credit-operations letters.

Public API surface:
- letter_simhash.compute_fingerprint : text -> 16-byte SimHash
- letter_simhash.split_fingerprint / unsplit_fingerprint : 16 bytes <-> (high, low)
- letter_simhash.SimHasher : configured fingerprinter (window size + digest)
- letter_simhash.plugins.registry : register alternative 128-bit digests
- letter_simhash.cli.main : CLI entrypoint

Storage of fingerprints and Hamming-distance search belong to the callers.
"""
from .errors import InvalidArgumentError
from .fingerprints import (
    DEFAULT_NGRAM_SIZE,
    PackedFingerprint,
    SimHasher,
    compute_fingerprint,
    split_fingerprint,
    unsplit_fingerprint,
)

__all__ = [
    "__version__",
    "DEFAULT_NGRAM_SIZE",
    "InvalidArgumentError",
    "PackedFingerprint",
    "SimHasher",
    "compute_fingerprint",
    "split_fingerprint",
    "unsplit_fingerprint",
]
__version__ = "0.1.0"
