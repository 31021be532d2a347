"""Fingerprint configuration.

Example `simhash.yaml`:

    ngram_size: 3
    digest: md5
    encoding: utf-8
    log_dir: logs
    log_level: INFO
"""

from __future__ import annotations
import codecs
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from .errors import InvalidArgumentError
from .fingerprints.schema import DEFAULT_NGRAM_SIZE
from .fingerprints.tokenizer import check_ngram_size
from .plugins.registry import DEFAULT_DIGEST, get_digest

log = logging.getLogger("letter_simhash.config")


def _check_encoding(encoding: Any) -> None:
    if not isinstance(encoding, str):
        raise InvalidArgumentError(f"encoding must be a string, got {encoding!r}")
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise InvalidArgumentError(f"Unknown encoding: {encoding!r}") from None


def _check_log_level(level: Any) -> None:
    if isinstance(level, bool) or not isinstance(level, (str, int)):
        raise InvalidArgumentError(f"log_level must be a level name or number, got {level!r}")
    if isinstance(level, str) and not isinstance(logging.getLevelName(level.upper()), int):
        raise InvalidArgumentError(f"Unknown log_level: {level!r}")


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@dataclass
class SimhashConfig:
    ngram_size: int = DEFAULT_NGRAM_SIZE
    digest: str = DEFAULT_DIGEST
    encoding: str = "utf-8"
    log_dir: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimhashConfig":
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            log.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        cfg = cls(**{k: v for k, v in data.items() if k in known})
        check_ngram_size(cfg.ngram_size)
        get_digest(cfg.digest)
        _check_encoding(cfg.encoding)
        _check_log_level(cfg.log_level)
        return cfg


def load_config(path: Optional[str] = None) -> SimhashConfig:
    if path is None:
        return SimhashConfig()
    return SimhashConfig.from_dict(load_yaml(path))
