"""
Error Types - Failure taxonomy for registration, selection, loading and solving.
"""

from typing import Optional

from .part import Part


class AocError(Exception):
    """Base class for all harness errors."""


class RegistrationError(AocError):
    """
    The static solver catalogue is inconsistent.

    Raised for duplicate or missing (day, part) registrations. This is a
    programming error and always terminates the run.
    """


class SelectionNotFound(AocError):
    """A requested day or day/part has no registered solver."""

    def __init__(self, day: int, part: Optional[Part] = None):
        self.day = day
        self.part = part
        if part is None:
            message = f"day {day} not found"
        else:
            message = f"day {day} part {part} not found"
        super().__init__(message)


class LoadError(AocError):
    """Input for an entry could not be obtained."""

    def __init__(self, day: int, part: Part, reason: str):
        self.day = day
        self.part = part
        self.reason = reason
        super().__init__(f"failed to load input for day {day} part {part}: {reason}")


class SolveError(AocError):
    """
    A solver's precondition was violated by its input.

    The message is the solver-supplied reason and is shown verbatim on the
    report line.
    """
