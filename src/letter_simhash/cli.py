"""CLI entrypoint.

Commands:
- `letter-simhash fingerprint <file> [<file> ...] [--config simhash.yaml]`
- `letter-simhash unsplit <high> <low>`
- `letter-simhash digests`

`fingerprint` prints one JSON object per file: path, 32-hex-char fingerprint
and its (high, low) words, ready to load into the document_text table.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from .config import load_config
from .errors import InvalidArgumentError
from .fingerprints import SimHasher, fingerprint_hex, split, unsplit
from .logging_ import setup_logging
from .plugins.registry import available_digests

log = logging.getLogger("letter_simhash.cli")


def _read_text(path: str, encoding: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def _parse_word(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError:
        raise InvalidArgumentError(f"not an integer: {value!r}") from None


def _cmd_fingerprint(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    if args.ngram_size is not None:
        cfg.ngram_size = args.ngram_size
    if args.digest is not None:
        cfg.digest = args.digest
    setup_logging(log_dir=cfg.log_dir, level=cfg.log_level)

    hasher = SimHasher.from_config(cfg)
    log.info("Fingerprinting %d file(s) with %r", len(args.paths), hasher)

    failed = 0
    for path in tqdm(args.paths, desc="fingerprint", unit="file", file=sys.stderr, disable=len(args.paths) < 2):
        try:
            text = _read_text(path, cfg.encoding)
        except (OSError, UnicodeDecodeError) as e:
            log.error("Cannot read %s: %s", path, e)
            failed += 1
            continue
        fp = hasher.fingerprint(text)
        packed = split(fp)
        print(json.dumps({
            "path": path,
            "fingerprint": fingerprint_hex(fp),
            "high": packed.high,
            "low": packed.low,
        }))
    if failed:
        log.warning("%d of %d file(s) failed", failed, len(args.paths))
    return 1 if failed else 0


def _cmd_unsplit(args: argparse.Namespace) -> int:
    fp = unsplit(_parse_word(args.high), _parse_word(args.low))
    print(fp.hex())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="letter-simhash")
    sub = p.add_subparsers(dest="cmd", required=True)

    pf = sub.add_parser("fingerprint", help="Fingerprint text files ('-' reads stdin)")
    pf.add_argument("paths", nargs="+")
    pf.add_argument("--config", default=None, help="YAML config file")
    pf.add_argument("--ngram-size", type=int, default=None)
    pf.add_argument("--digest", default=None, help="Registered digest name")

    pu = sub.add_parser("unsplit", help="Rebuild a fingerprint from its (high, low) words")
    pu.add_argument("high", help="Decimal or 0x-prefixed hex")
    pu.add_argument("low", help="Decimal or 0x-prefixed hex")

    sub.add_parser("digests", help="List registered digests")

    args = p.parse_args(argv)

    if args.cmd == "digests":
        for name in available_digests():
            print(name)
        return 0

    try:
        if args.cmd == "unsplit":
            return _cmd_unsplit(args)
        return _cmd_fingerprint(args)
    except InvalidArgumentError as e:
        print(f"letter-simhash: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
