import json
import logging

import pytest

from letter_simhash import compute_fingerprint, split_fingerprint
from letter_simhash.cli import main


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers[len(handlers):]:
        h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_fingerprint_files(tmp_path, capsys):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("please close my account today", encoding="utf-8")
    b.write_text("x y", encoding="utf-8")

    assert main(["fingerprint", str(a), str(b)]) == 0
    lines = [json.loads(l) for l in capsys.readouterr().out.splitlines()]
    assert [l["path"] for l in lines] == [str(a), str(b)]

    fp = compute_fingerprint("please close my account today")
    high, low = split_fingerprint(fp)
    assert lines[0] == {"path": str(a), "fingerprint": fp.hex(), "high": high, "low": low}
    assert lines[1]["fingerprint"] == "0" * 32
    assert (lines[1]["high"], lines[1]["low"]) == (0, 0)


def test_fingerprint_options_and_config(tmp_path, capsys):
    cfg = tmp_path / "simhash.yaml"
    cfg.write_text("ngram_size: 2\n", encoding="utf-8")
    doc = tmp_path / "doc.txt"
    doc.write_text("a b c d", encoding="utf-8")

    assert main(["fingerprint", str(doc), "--config", str(cfg)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["fingerprint"] == compute_fingerprint("a b c d", 2).hex()

    assert main(["fingerprint", str(doc), "--config", str(cfg), "--ngram-size", "4", "--digest", "blake2b"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["fingerprint"] == compute_fingerprint("a b c d", 4, "blake2b").hex()


def test_fingerprint_stdin(monkeypatch, capsys):
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO("a b c"))
    assert main(["fingerprint", "-"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["path"] == "-"
    assert out["fingerprint"] == compute_fingerprint("a b c").hex()


def test_missing_file_fails_but_continues(tmp_path, capsys):
    ok = tmp_path / "ok.txt"
    ok.write_text("a b c", encoding="utf-8")
    assert main(["fingerprint", str(tmp_path / "missing.txt"), str(ok)]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["path"] == str(ok)


def test_bad_ngram_size_exits_2(tmp_path, capsys):
    doc = tmp_path / "doc.txt"
    doc.write_text("a b c", encoding="utf-8")
    assert main(["fingerprint", str(doc), "--ngram-size", "0"]) == 2
    assert "ngram size" in capsys.readouterr().err


def test_unsplit(capsys):
    assert main(["unsplit", "0xffffffffffffffff", "0"]) == 0
    assert capsys.readouterr().out.strip() == "ff" * 8 + "00" * 8
    assert main(["unsplit", "1", "2"]) == 0
    assert capsys.readouterr().out.strip() == "00" * 7 + "01" + "00" * 7 + "02"


@pytest.mark.parametrize("words", [["-1", "0"], ["0", "0x1" + "0" * 16], ["abc", "0"]])
def test_unsplit_invalid(words, capsys):
    assert main(["unsplit", *words]) == 2
    assert "error" in capsys.readouterr().err


def test_digests(capsys):
    assert main(["digests"]) == 0
    assert capsys.readouterr().out.split() == ["blake2b", "md5"]


@pytest.mark.parametrize("line", ["encoding: nope-enc\n", "log_level: LOUD\n"])
def test_bad_config_values_exit_2(tmp_path, capsys, line):
    cfg = tmp_path / "simhash.yaml"
    cfg.write_text(line, encoding="utf-8")
    doc = tmp_path / "doc.txt"
    doc.write_text("a b c", encoding="utf-8")
    assert main(["fingerprint", str(doc), "--config", str(cfg)]) == 2
    assert "Unknown" in capsys.readouterr().err
