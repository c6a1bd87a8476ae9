"""
Reporter Module - Stable, line-oriented report of a run.

Each line is written and flushed as soon as it is produced so that report
lines interleave correctly with any display a solver renders.
"""

from typing import TextIO

from .solver.result import RunResult


MICROS_PER_SECOND = 1_000_000


def format_seconds(total_us: int) -> str:
    """
    Render a microsecond count as exact decimal seconds.

    Args:
        total_us: Non-negative number of microseconds

    Returns:
        Seconds with six fractional digits, e.g. "1.234567"
    """
    seconds, micros = divmod(total_us, MICROS_PER_SECOND)
    return f"{seconds}.{micros:06d}"


def format_result(result: RunResult) -> str:
    """Format one entry's report line."""
    if not result.ok:
        return f"{result.day} {result.part}: ERROR: {result.error}"
    return f"{result.day} {result.part}: {result.value} ({result.elapsed_us} us)"


def format_summary(total_us: int) -> str:
    """Format the closing line of a full run."""
    return f"All solutions ran in {format_seconds(total_us)} seconds ({total_us} us)"


class Reporter:
    """
    Writes report lines to an output stream.

    Args:
        out: Stream receiving the report, normally standard output
    """

    def __init__(self, out: TextIO):
        self.out = out

    def _emit(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()

    def result(self, result: RunResult) -> None:
        self._emit(format_result(result))

    def summary(self, total_us: int) -> None:
        self._emit(format_summary(total_us))

    def listing(self, day: str, part: str, description: str) -> None:
        self._emit(f"{day} {part}: {description}")
