"""
Entry Module - Registered (day, part) bindings and run-time selections.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

from .base import Solver
from .part import Part

if TYPE_CHECKING:
    from ..inputs.base import InputLoader


@dataclass(frozen=True)
class Entry:
    """
    One solver bound to its identity and input source.

    Attributes:
        day: Puzzle day, 1-25
        part: Puzzle part
        solver: Solver capability for this day/part
        loader: Collaborator supplying the raw input
    """
    day: int
    part: Part
    solver: Solver
    loader: 'InputLoader'

    @property
    def key(self) -> Tuple[int, Part]:
        """Identity of the entry, unique within a registry."""
        return (self.day, self.part)

    def load(self) -> str:
        """
        Fetch this entry's input.

        Raises:
            LoadError: If the loader cannot supply the input
        """
        return self.loader.load(self.day, self.part)

    def __str__(self) -> str:
        return f"{self.day} {self.part}"


@dataclass(frozen=True)
class Selection:
    """
    Filter describing which entries to run.

    Build with Selection.all(), Selection.one_day(d) or
    Selection.one_part(d, p).

    Attributes:
        day: Selected day, or None for every day
        part: Selected part, or None for both parts
    """
    day: Optional[int] = None
    part: Optional[Part] = None

    def __post_init__(self):
        if self.part is not None and self.day is None:
            raise ValueError("a part can only be selected together with a day")

    @classmethod
    def all(cls) -> 'Selection':
        return cls()

    @classmethod
    def one_day(cls, day: int) -> 'Selection':
        return cls(day=day)

    @classmethod
    def one_part(cls, day: int, part: Part) -> 'Selection':
        return cls(day=day, part=part)

    @property
    def is_all(self) -> bool:
        return self.day is None

    @property
    def is_single(self) -> bool:
        """True when the selection names exactly one entry."""
        return self.part is not None

    def matches(self, entry: Entry) -> bool:
        """Check whether an entry falls inside this selection."""
        if self.day is not None and entry.day != self.day:
            return False
        if self.part is not None and entry.part != self.part:
            return False
        return True

    def __str__(self) -> str:
        if self.is_all:
            return "all"
        if self.part is None:
            return f"day {self.day}"
        return f"day {self.day} part {self.part}"
