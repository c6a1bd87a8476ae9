"""
Solver Capability Module - Uniform wrapper around a day's puzzle function.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, TextIO, Tuple, Union

from .errors import SolveError


# Report text for solvers whose answer is written to the output stream
CHECK_STDOUT = "check stdout"


class SolverKind(Enum):
    """
    How a solver delivers its answer.

    VALUE solvers return an int or str. DISPLAY solvers return the lines of
    a rendered image, which are written to the output stream during the run.
    """
    VALUE = "value"
    DISPLAY = "display"


@dataclass(frozen=True)
class RenderedDisplay:
    """
    Marker returned by DISPLAY solvers once their lines have been written.

    Attributes:
        lines: The rendered rows, already written to the output stream
    """
    lines: Tuple[str, ...]


SolverOutput = Union[int, str, RenderedDisplay]


@dataclass(frozen=True)
class Solver:
    """
    One puzzle solution behind the shared solve interface.

    Attributes:
        func: Puzzle function taking the raw input text
        kind: Whether the answer is returned or rendered to the output
        description: Short human-readable label for listings
    """
    func: Callable[[str], Any]
    kind: SolverKind = SolverKind.VALUE
    description: str = ""

    def run(self, text: str, out: TextIO) -> SolverOutput:
        """
        Solve the puzzle for already-loaded input.

        Args:
            text: Raw puzzle input
            out: Output stream for DISPLAY solvers

        Returns:
            The computed value, or a RenderedDisplay for DISPLAY solvers

        Raises:
            SolveError: If the input violates the solver's preconditions
        """
        try:
            value = self.func(text)
        except SolveError:
            raise
        except (ValueError, KeyError, IndexError) as e:
            raise SolveError(f"malformed input: {e}") from e

        if self.kind is SolverKind.DISPLAY:
            lines = tuple(value)
            for line in lines:
                out.write(line + "\n")
            out.flush()
            return RenderedDisplay(lines=lines)

        return value


def format_output(value: SolverOutput) -> str:
    """
    Render a solver's output for the report line.

    Numbers become their decimal string, rendered displays become the
    "check stdout" marker, strings pass through unchanged.
    """
    if isinstance(value, RenderedDisplay):
        return CHECK_STDOUT
    return str(value)
