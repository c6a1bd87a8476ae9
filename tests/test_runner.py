"""
Tests for the timed runner and reporter.

A fake nanosecond clock makes every timing assertion exact.

Usage:
    pytest tests/test_runner.py
"""

import io
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aoc import runner as runner_module
from aoc.inputs import MemoryInputLoader
from aoc.report import format_result, format_seconds, format_summary
from aoc.runner import TimedRunner
from aoc.solver import (
    Entry,
    Part,
    RunResult,
    Selection,
    SolveError,
    Solver,
    SolverKind,
    build_registry,
)


class FakeClock:
    """Returns scripted nanosecond readings, one per call."""

    def __init__(self, *readings):
        self.readings = list(readings)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.readings.pop(0)


def make_entry(day, part, func, kind=SolverKind.VALUE, inputs=None):
    loader = MemoryInputLoader(inputs if inputs is not None else {day: "input"})
    return Entry(day=day, part=part, solver=Solver(func=func, kind=kind), loader=loader)


def fail(reason):
    def func(text):
        raise SolveError(reason)
    return func


def test_format_seconds_is_exact():
    assert format_seconds(0) == "0.000000"
    assert format_seconds(1) == "0.000001"
    assert format_seconds(1_234_567) == "1.234567"
    assert format_seconds(25_000_000) == "25.000000"


def test_report_line_formats():
    ok = RunResult(day=3, part=Part.B, value="70", elapsed_us=12)
    failed = RunResult(day=4, part=Part.A, error="no input")
    assert format_result(ok) == "3 B: 70 (12 us)"
    assert format_result(failed) == "4 A: ERROR: no input"
    assert format_summary(1500) == "All solutions ran in 0.001500 seconds (1500 us)"


def test_elapsed_time_is_truncated_microseconds():
    """Test that only whole microseconds are reported."""
    out = io.StringIO()
    clock = FakeClock(1_000, 4_999)
    entry = make_entry(1, Part.A, lambda text: 42)

    summary = TimedRunner(out=out, clock=clock).run([entry], Selection.one_part(1, Part.A))

    assert out.getvalue() == "1 A: 42 (3 us)\n"
    assert summary.total_us == 3


def test_input_is_loaded_before_timing_starts():
    """Test that the clock is read only around the solver call."""
    clock = FakeClock(0, 0)

    class RecordingLoader(MemoryInputLoader):
        def load(self, day, part):
            assert clock.calls == 0
            return "text"

    seen = []
    entry = Entry(
        day=2, part=Part.A,
        solver=Solver(func=lambda text: seen.append(clock.calls) or 1),
        loader=RecordingLoader({}),
    )
    TimedRunner(out=io.StringIO(), clock=clock).run([entry], Selection.one_day(2))

    assert seen == [1]
    assert clock.calls == 2


def test_total_is_exact_sum_and_printed_for_all():
    out = io.StringIO()
    clock = FakeClock(0, 1_500_999, 2_000_000, 2_000_999, 5_000_000, 5_250_000)
    entries = [
        make_entry(1, Part.A, lambda text: 1),
        make_entry(1, Part.B, lambda text: "two"),
        make_entry(2, Part.A, lambda text: 3),
    ]

    summary = TimedRunner(out=out, clock=clock).run(entries, Selection.all())

    assert out.getvalue().splitlines() == [
        "1 A: 1 (1500 us)",
        "1 B: two (0 us)",
        "2 A: 3 (250 us)",
        "All solutions ran in 0.001750 seconds (1750 us)",
    ]
    assert summary.total_us == 1750
    assert summary.completed == 3
    assert not summary.failed


def test_summary_line_only_for_all():
    out = io.StringIO()
    entries = [make_entry(5, Part.A, lambda text: 1), make_entry(5, Part.B, lambda text: 2)]

    TimedRunner(out=out, clock=FakeClock(0, 0, 0, 0)).run(entries, Selection.one_day(5))

    assert out.getvalue().splitlines() == ["5 A: 1 (0 us)", "5 B: 2 (0 us)"]


def test_display_lines_precede_check_stdout():
    """Test that a rendered display is written before its report line."""
    out = io.StringIO()
    entry = make_entry(10, Part.B, lambda text: ["#..", ".#."], kind=SolverKind.DISPLAY)

    TimedRunner(out=out, clock=FakeClock(0, 7_000)).run([entry], Selection.one_part(10, Part.B))

    assert out.getvalue() == "#..\n.#.\n10 B: check stdout (7 us)\n"


def test_failures_are_isolated_in_a_full_run():
    """Test that a failed entry is reported and the run continues."""
    out = io.StringIO()
    entries = [
        make_entry(1, Part.A, fail("bad input")),
        make_entry(1, Part.B, lambda text: 9),
        make_entry(2, Part.A, lambda text: 1, inputs={}),
    ]

    summary = TimedRunner(out=out, clock=FakeClock(0, 0, 10_000)).run(entries, Selection.all())

    assert out.getvalue().splitlines() == [
        "1 A: ERROR: bad input",
        "1 B: 9 (10 us)",
        "2 A: ERROR: no embedded input",
        "All solutions ran in 0.000010 seconds (10 us)",
    ]
    assert summary.failed
    assert summary.completed == 1
    assert summary.total_us == 10


def test_single_selection_stops_after_failure():
    out = io.StringIO()
    entries = [make_entry(3, Part.A, fail("broken")), make_entry(3, Part.B, lambda text: 1)]

    summary = TimedRunner(out=out, clock=FakeClock(0)).run(entries, Selection.one_part(3, Part.A))

    assert out.getvalue() == "3 A: ERROR: broken\n"
    assert len(summary.results) == 1


def test_load_failure_never_starts_the_clock():
    clock = FakeClock()
    entry = make_entry(4, Part.A, lambda text: 1, inputs={})

    result = TimedRunner(out=io.StringIO(), clock=clock).run_entry(entry)

    assert result.error == "no embedded input"
    assert clock.calls == 0


def test_malformed_input_becomes_an_error_line():
    out = io.StringIO()
    entry = make_entry(6, Part.A, lambda text: int(text))

    TimedRunner(out=out, clock=FakeClock(0, 0)).run([entry], Selection.one_part(6, Part.A))

    assert out.getvalue().startswith("6 A: ERROR: malformed input:")


def test_debug_mode_saves_rendered_displays(monkeypatch):
    saved = []
    monkeypatch.setattr(runner_module, "save_display_image",
                        lambda lines, label: saved.append((lines, label)) or Path(label))
    entry = make_entry(10, Part.B, lambda text: ["##"], kind=SolverKind.DISPLAY)

    TimedRunner(out=io.StringIO(), clock=FakeClock(0, 0), debug=True).run(
        [entry], Selection.one_part(10, Part.B))

    assert saved == [(("##",), "day10b")]


def test_malformed_puzzle_input_is_reported_per_entry():
    """Test that bad input to real solvers yields error lines for both parts."""
    loader = MemoryInputLoader({
        13: "[\"x\"]\n[\"y\"]\n",
        21: "root: aaaa + bbbb\naaaa: bbbb * 2\nbbbb: aaaa - 1\n",
    })
    registry = build_registry(loader)

    for day in (13, 21):
        out = io.StringIO()
        selection = Selection.one_day(day)
        summary = TimedRunner(out=out).run(registry.resolve(selection), selection)

        lines = out.getvalue().splitlines()
        assert [line.split(": ERROR: ")[0] for line in lines] == [f"{day} A", f"{day} B"]
        assert summary.completed == 0
