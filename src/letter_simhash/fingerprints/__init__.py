"""Near-duplicate fingerprinting: tokenize -> accumulate -> encode -> split."""

from .schema import (
    DEFAULT_NGRAM_SIZE,
    FINGERPRINT_BITS,
    FINGERPRINT_BYTES,
    FingerprintParams,
    PackedFingerprint,
)
from .tokenizer import tokenize
from .weights import accumulate
from .encoder import encode
from .codec import split, unsplit, to_signed_words, from_signed_words
from .simhash import (
    SimHasher,
    compute_fingerprint,
    fingerprint_hex,
    split_fingerprint,
    unsplit_fingerprint,
)

__all__ = [
    "DEFAULT_NGRAM_SIZE",
    "FINGERPRINT_BITS",
    "FINGERPRINT_BYTES",
    "FingerprintParams",
    "PackedFingerprint",
    "tokenize",
    "accumulate",
    "encode",
    "split",
    "unsplit",
    "to_signed_words",
    "from_signed_words",
    "SimHasher",
    "compute_fingerprint",
    "fingerprint_hex",
    "split_fingerprint",
    "unsplit_fingerprint",
]
