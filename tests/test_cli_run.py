import csv
from pathlib import Path

from apps.cli.run import main


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _run(tmp_path: Path, dict_path: Path, *extra):
    return main(["--dict", str(dict_path), "--outdir", str(tmp_path / "out"),
                 "--progress", "off", *extra])


def test_cli_runs_batch(tmp_path: Path, capsys):
    d = tmp_path / "dict.txt"
    _write(d, ["crane 10", "slate 8", "trace 5"])
    answers = tmp_path / "answers.txt"
    _write(answers, ["crane", "cr4ne", "cranes"])

    assert _run(tmp_path, d, "--answers", str(answers)) == 0
    out = capsys.readouterr().out
    assert "Skipped 2 malformed answer(s)" in out
    assert "Solved 1/1" in out

    [csv_path] = (tmp_path / "out").glob("run_*.csv")
    with csv_path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ["CRANE"]


def test_cli_negative_weight_exits_2(tmp_path: Path, capsys):
    d = tmp_path / "dict.txt"
    _write(d, ["crane 10", "slate -2"])
    assert _run(tmp_path, d) == 2
    assert "negative" in capsys.readouterr().err


def test_cli_not_utf8_exits_2(tmp_path: Path, capsys):
    d = tmp_path / "dict.txt"
    d.write_bytes(b"crane 10\n\xff\xfe 3\n")
    assert _run(tmp_path, d) == 2
    captured = capsys.readouterr()
    assert captured.out.rstrip().endswith("FAIL")
    assert "error:" in captured.err


def test_cli_missing_dictionary_exits_2(tmp_path: Path):
    assert _run(tmp_path, tmp_path / "nope.txt") == 2
