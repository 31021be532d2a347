"""Digest registry.

Named digests let configuration pick the hashing primitive without code
changes. Built-ins (md5, blake2b) are registered at import time; callers may
add their own before building a SimHasher or loading a config that names them.
"""

from __future__ import annotations
from typing import Dict, List

from ..errors import InvalidArgumentError
from ..utils.hashing import Digest, blake2b_digest, md5_digest

DEFAULT_DIGEST = "md5"

_DIGESTS: Dict[str, Digest] = {}


def register_digest(name: str, fn: Digest) -> None:
    if not name or not callable(fn):
        raise InvalidArgumentError(f"Cannot register digest {name!r}: need a name and a callable")
    _DIGESTS[name] = fn


def get_digest(name: str) -> Digest:
    try:
        return _DIGESTS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown digest: {name!r}. Available: {', '.join(available_digests())}"
        ) from None


def available_digests() -> List[str]:
    return sorted(_DIGESTS)


register_digest("md5", md5_digest)
register_digest("blake2b", blake2b_digest)
