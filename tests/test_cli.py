import json

import pytest

from huffpack.api.codec import encode
from huffpack.cli import app
from huffpack.cli.app import TOOL_VERSION, main


def test_encode_then_decode(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_bytes(b"aaabbc" * 100)
    huf = tmp_path / "out" / "in.huf"
    back = tmp_path / "back.txt"

    assert main(["encode", "--in", str(src), "--out", str(huf)]) == 0
    assert huf.read_bytes() == encode(src.read_bytes())
    assert "DONE" in capsys.readouterr().out

    assert main(["decode", "--input", str(huf), "--output", str(back)]) == 0
    assert back.read_bytes() == src.read_bytes()


def test_encode_empty_file(tmp_path):
    src = tmp_path / "empty"
    src.write_bytes(b"")
    huf = tmp_path / "empty.huf"
    back = tmp_path / "empty.out"
    main(["encode", "--in", str(src), "--out", str(huf)])
    main(["decode", "--in", str(huf), "--out", str(back)])
    assert back.read_bytes() == b""


def test_missing_input_exits_nonzero(tmp_path):
    with pytest.raises(SystemExit) as ei:
        main(["encode", "--in", str(tmp_path / "missing"), "--out", str(tmp_path / "x.huf")])
    assert "InputNotFound" in str(ei.value.code)
    assert not (tmp_path / "x.huf").exists()


def test_decode_foreign_file_exits_nonzero(tmp_path):
    src = tmp_path / "foreign.bin"
    src.write_bytes(b"PK\x03\x04 not a huf file")
    out = tmp_path / "out.bin"
    with pytest.raises(SystemExit) as ei:
        main(["decode", "--in", str(src), "--out", str(out)])
    assert "InvalidMagic" in str(ei.value.code)
    assert not out.exists()


def test_inspect_with_tree(tmp_path, capsys):
    huf = tmp_path / "x.huf"
    huf.write_bytes(encode(b"aaabbc"))
    assert main(["inspect", "--in", str(huf), "--tree"]) == 0
    out = capsys.readouterr().out
    assert "entries:        3" in out
    assert "trailing_bits:  1" in out
    assert "--[97](0)" in out


def test_inspect_foreign_file(tmp_path):
    src = tmp_path / "foreign.bin"
    src.write_bytes(b"GIF89a")
    with pytest.raises(SystemExit) as ei:
        main(["inspect", "--in", str(src)])
    assert "InvalidMagic" in str(ei.value.code)


def test_version_short_circuits(capsys):
    with pytest.raises(SystemExit) as ei:
        main(["--version"])
    assert ei.value.code == 0
    assert TOOL_VERSION in capsys.readouterr().out


def test_bench_file_with_json(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_bytes(b"the quick brown fox jumps over the lazy dog\n" * 50)
    report = tmp_path / "reports" / "bench.json"
    assert main(["bench", "--in", str(src), "--out_json", str(report)]) == 0
    assert "huffpack" in capsys.readouterr().out

    payload = json.loads(report.read_text(encoding="utf-8"))
    rows = payload["results"][str(src)]
    assert {r["name"] for r in rows} == {"raw", "gzip-9", "zstd-10", "huffpack"}


def test_bench_needs_input():
    with pytest.raises(SystemExit) as ei:
        main(["bench"])
    assert "--toy" in str(ei.value.code)


def test_positional_paths(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"abracadabra")
    huf = tmp_path / "a.huf"
    back = tmp_path / "a.out"

    assert main(["encode", str(src), str(huf)]) == 0
    assert main(["decode", str(huf), str(back)]) == 0
    assert back.read_bytes() == b"abracadabra"


def test_mixed_positional_and_flag_paths(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"mississippi")
    huf = tmp_path / "a.huf"
    assert main(["encode", str(src), "--out", str(huf)]) == 0
    assert huf.read_bytes() == encode(b"mississippi")


def test_missing_output_path_is_usage_error(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"x")
    with pytest.raises(SystemExit) as ei:
        main(["encode", str(src)])
    assert ei.value.code == 2


def test_conflicting_input_paths_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as ei:
        main(["encode", str(tmp_path / "a"), str(tmp_path / "b"), "--in", str(tmp_path / "c")])
    assert ei.value.code == 2


def test_inspect_reads_input_once(tmp_path, monkeypatch):
    huf = tmp_path / "x.huf"
    huf.write_bytes(encode(b"aaabbc"))
    calls = []

    def counting_read(path):
        calls.append(path)
        return huf.read_bytes()

    monkeypatch.setattr(app, "read_input", counting_read)
    assert main(["inspect", "--in", str(huf)]) == 0
    assert calls == [str(huf)]
