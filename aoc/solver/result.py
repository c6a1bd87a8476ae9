"""
Run Result Module - Per-entry outcomes and the aggregate of a run.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .part import Part


@dataclass(frozen=True)
class RunResult:
    """
    Outcome of running one entry.

    Attributes:
        day: Puzzle day
        part: Puzzle part
        value: Formatted answer, or None if the entry failed
        elapsed_us: Solve time in whole microseconds, or None if the entry failed
        error: Failure reason, or None on success
    """
    day: int
    part: Part
    value: Optional[str] = None
    elapsed_us: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunSummary:
    """
    Aggregate of one harness invocation.

    Attributes:
        results: Per-entry results in execution order
        total_us: Sum of elapsed_us over successful entries
    """
    results: List[RunResult] = field(default_factory=list)
    total_us: int = 0

    @property
    def failed(self) -> bool:
        """True if any entry failed."""
        return any(not result.ok for result in self.results)

    @property
    def completed(self) -> int:
        """Number of entries that produced an answer."""
        return sum(1 for result in self.results if result.ok)

    def add(self, result: RunResult) -> None:
        """Record a result, adding its time to the total when it succeeded."""
        self.results.append(result)
        if result.ok:
            self.total_us += result.elapsed_us
