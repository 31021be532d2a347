"""SimHash fingerprints for letter text.

compute_fingerprint: text -> 16-byte fingerprint
split_fingerprint / unsplit_fingerprint: fingerprint <-> (high, low) words

`SimHasher` binds a window size and a digest so one configured instance can be
shared across threads; it holds no mutable state.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Union

from ..errors import InvalidArgumentError
from ..plugins.registry import DEFAULT_DIGEST, get_digest
from ..utils.hashing import Digest
from .codec import split, unsplit
from .encoder import encode
from .schema import DEFAULT_NGRAM_SIZE, FingerprintParams, PackedFingerprint
from .tokenizer import check_ngram_size, tokenize
from .weights import accumulate

if TYPE_CHECKING:
    from ..config import SimhashConfig

log = logging.getLogger("letter_simhash.simhash")


def _resolve_digest(digest: Union[str, Digest, None]) -> Digest:
    if digest is None:
        return get_digest(DEFAULT_DIGEST)
    if isinstance(digest, str):
        return get_digest(digest)
    return digest


def compute_fingerprint(
    text: str,
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    digest: Union[str, Digest, None] = None,
) -> bytes:
    """Compute the 128-bit SimHash of `text` as 16 bytes.

    Args:
        text: Extracted letter text
        ngram_size: Words per token
        digest: Registered digest name or a callable bytes -> 16 bytes (default md5)

    Returns:
        16-byte fingerprint; all zeros when the text has fewer than `ngram_size` words
    """
    tokens = tokenize(text, ngram_size)
    return encode(accumulate(tokens, _resolve_digest(digest)))


def split_fingerprint(fp: bytes) -> PackedFingerprint:
    return split(fp)


def unsplit_fingerprint(high: int, low: int) -> bytes:
    return unsplit(high, low)


class SimHasher:
    """Fingerprint computation with a fixed window size and digest."""

    def __init__(
        self,
        ngram_size: int = DEFAULT_NGRAM_SIZE,
        digest: str = DEFAULT_DIGEST,
        fingerprint_version: str = "v1",
    ):
        self.ngram_size = check_ngram_size(ngram_size)
        # params() must name a digest that get_digest can resolve again
        if not isinstance(digest, str):
            raise InvalidArgumentError(
                f"SimHasher needs a registered digest name, got {type(digest).__name__}; "
                "register callables with register_digest first"
            )
        self.digest_name = digest
        self._digest = get_digest(digest)
        self.fingerprint_version = fingerprint_version
        log.debug("SimHasher ngram_size=%d digest=%s", self.ngram_size, self.digest_name)

    @classmethod
    def from_config(cls, cfg: "SimhashConfig") -> "SimHasher":
        return cls(ngram_size=cfg.ngram_size, digest=cfg.digest)

    def params(self) -> FingerprintParams:
        return FingerprintParams(
            fingerprint_version=self.fingerprint_version,
            ngram_size=self.ngram_size,
            digest=self.digest_name,
        )

    def fingerprint(self, text: str) -> bytes:
        return encode(accumulate(tokenize(text, self.ngram_size), self._digest))

    def packed(self, text: str) -> PackedFingerprint:
        return split(self.fingerprint(text))

    def __repr__(self) -> str:
        return f"SimHasher(ngram_size={self.ngram_size}, digest={self.digest_name!r})"


def fingerprint_hex(fp: bytes) -> str:
    """32 lowercase hex characters; validates the length like `split`."""
    split(fp)
    return bytes(fp).hex()
