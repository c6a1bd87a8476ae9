"""
Timed Runner Module - Sequential execution and timing of selected entries.

Entries run one at a time in registry order. Only the solver call sits
inside the timed window: input is loaded before the first clock reading
and the answer is formatted after the second.
"""

import logging
import sys
import time
from typing import Callable, Iterable, Optional, TextIO

from .debug import save_display_image
from .report import Reporter
from .solver import (
    Entry,
    LoadError,
    RenderedDisplay,
    RunResult,
    RunSummary,
    Selection,
    SolveError,
    format_output,
)

logger = logging.getLogger(__name__)

NANOS_PER_MICRO = 1000


class TimedRunner:
    """
    Runs entries, reports each one immediately and totals their solve time.

    Example:
        runner = TimedRunner()
        summary = runner.run(registry.resolve(selection), selection)
        if summary.failed and selection.is_single:
            sys.exit(1)

    Args:
        out: Stream receiving report lines and rendered displays
        clock: Monotonic nanosecond clock
        debug: Save rendered displays as PNG images
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        clock: Callable[[], int] = time.perf_counter_ns,
        debug: bool = False,
    ):
        self.out = out if out is not None else sys.stdout
        self.clock = clock
        self.debug = debug
        self.reporter = Reporter(self.out)

    def run(self, entries: Iterable[Entry], selection: Selection) -> RunSummary:
        """
        Run entries sequentially.

        A failed entry is reported on its own line. The run continues past
        it unless the selection names a single entry. The summary line is
        only written when the selection is All.

        Args:
            entries: Resolved entries in execution order
            selection: Selection the entries were resolved from

        Returns:
            RunSummary with per-entry results and the total solve time
        """
        summary = RunSummary()

        for entry in entries:
            result = self.run_entry(entry)
            summary.add(result)
            self.reporter.result(result)

            if not result.ok and selection.is_single:
                logger.debug(f"Stopping after failed entry {entry}")
                break

        if selection.is_all:
            self.reporter.summary(summary.total_us)

        logger.debug(f"Ran {len(summary.results)} entries, {summary.completed} succeeded, "
                     f"{summary.total_us} us total")
        return summary

    def run_entry(self, entry: Entry) -> RunResult:
        """
        Load, solve and time a single entry.

        Args:
            entry: Entry to run

        Returns:
            RunResult with the formatted value and elapsed microseconds,
            or with the failure reason
        """
        try:
            text = entry.load()
        except LoadError as e:
            logger.debug(f"Load failed for {entry}", exc_info=True)
            return RunResult(day=entry.day, part=entry.part, error=e.reason)

        start = self.clock()
        try:
            output = entry.solver.run(text, self.out)
        except SolveError as e:
            logger.debug(f"Solve failed for {entry}", exc_info=True)
            return RunResult(day=entry.day, part=entry.part, error=str(e))
        end = self.clock()

        elapsed_us = (end - start) // NANOS_PER_MICRO
        logger.debug(f"{entry} solved in {elapsed_us} us")

        if self.debug and isinstance(output, RenderedDisplay):
            path = save_display_image(output.lines, f"day{entry.day:02d}{entry.part.value.lower()}")
            logger.info(f"Display image saved: {path}")

        return RunResult(
            day=entry.day,
            part=entry.part,
            value=format_output(output),
            elapsed_us=elapsed_us,
        )
