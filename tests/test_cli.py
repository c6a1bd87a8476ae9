"""
Tests for the command line entry point.

Runs main() in a temporary working directory with puzzle inputs written
to disk, checking the report on stdout and the exit code.

Usage:
    pytest tests/test_cli.py
"""

import json
import re
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main as cli

DAY1 = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"

LINE_RE = re.compile(r"^(\d+) ([AB]): (.+) \((\d+) us\)$")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Empty working directory with an input/ folder."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input").mkdir()
    return tmp_path


def write_input(workdir, day, text, folder="input"):
    path = workdir / folder / f"{day}.txt"
    path.parent.mkdir(exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_single_part(workdir, capsys):
    write_input(workdir, 1, DAY1)

    assert cli.main(["1", "a"]) == 0

    out = capsys.readouterr().out
    match = LINE_RE.match(out.strip())
    assert match
    assert match.group(1, 2, 3) == ("1", "A", "24000")


def test_one_day_runs_both_parts(workdir, capsys):
    write_input(workdir, 1, DAY1)

    assert cli.main(["1"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [LINE_RE.match(line).group(3) for line in lines] == ["24000", "45000"]


def test_input_override(workdir, capsys):
    sample = workdir / "sample.txt"
    sample.write_text("A Y\nB X\nC Z\n", encoding="utf-8")

    assert cli.main(["2", "B", "--input", str(sample)]) == 0

    assert LINE_RE.match(capsys.readouterr().out.strip()).group(3) == "12"


def test_display_solution_prints_check_stdout(workdir, capsys):
    write_input(workdir, 10, "\n".join(["noop"] * 240))

    assert cli.main(["10", "b"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:6] == ["###" + "." * 37] * 6
    assert LINE_RE.match(lines[6]).group(3) == "check stdout"


def test_unknown_day_prints_nothing(workdir, capsys):
    """Test that an unknown selection fails without a report."""
    assert cli.main(["99"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "day 99 not found" in captured.err


def test_missing_input_fails_single_part(workdir, capsys):
    assert cli.main(["4", "a"]) == 1

    out = capsys.readouterr().out
    assert out.startswith("4 A: ERROR: ")
    assert "4.txt" in out


def test_missing_input_in_one_day_still_exits_zero(workdir, capsys):
    assert cli.main(["4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == ["4 A", "4 B"]


def test_all_with_no_inputs(workdir, capsys):
    """Test that every entry reports its failure and the total is zero."""
    assert cli.main(["all"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 51
    assert all(": ERROR: " in line for line in lines[:50])
    assert lines[-1] == "All solutions ran in 0.000000 seconds (0 us)"


def test_all_reports_summary_with_exact_total(workdir, capsys):
    write_input(workdir, 1, DAY1)

    cli.main(["all"])

    lines = capsys.readouterr().out.splitlines()
    times = [int(m.group(4)) for m in map(LINE_RE.match, lines) if m]
    total = sum(times)
    assert lines[-1] == (
        f"All solutions ran in {total // 1_000_000}.{total % 1_000_000:06d} seconds ({total} us)"
    )


def test_list(workdir, capsys):
    assert cli.main(["--list"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 50
    assert lines[0].startswith("1 A: ")
    assert lines[-1].startswith("25 B: ")


def test_input_dir_from_config(workdir, capsys):
    write_input(workdir, 6, "mjqjpqmgbljsphdztnvjfqwrcgsmlb\n", folder="puzzles")
    (workdir / "config.json").write_text(json.dumps({"input_dir": "puzzles"}), encoding="utf-8")

    assert cli.main(["6", "a"]) == 0
    assert LINE_RE.match(capsys.readouterr().out.strip()).group(3) == "7"


def test_input_dir_flag_beats_config(workdir, capsys):
    write_input(workdir, 6, "mjqjpqmgbljsphdztnvjfqwrcgsmlb\n", folder="other")
    (workdir / "config.json").write_text(json.dumps({"input_dir": "puzzles"}), encoding="utf-8")

    assert cli.main(["6", "b", "--input-dir", "other"]) == 0
    assert LINE_RE.match(capsys.readouterr().out.strip()).group(3) == "19"


@pytest.mark.parametrize("argv", [
    [],
    ["1", "c"],
    ["all", "a"],
    ["one"],
    ["all", "--input", "x.txt"],
])
def test_usage_errors(workdir, argv):
    with pytest.raises(SystemExit) as info:
        cli.main(argv)
    assert info.value.code == 2
