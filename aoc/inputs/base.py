"""
Input Loader Base Interface

Abstract base class defining the puzzle input collaborator.
"""

from abc import ABC, abstractmethod

from ..solver.part import Part


class InputLoader(ABC):
    """
    Abstract base class for puzzle input sources.

    The harness treats a loader as opaque: it either returns the raw input
    text for a day/part or raises LoadError.
    """

    @abstractmethod
    def load(self, day: int, part: Part) -> str:
        """
        Fetch the raw input for one puzzle.

        Args:
            day: Puzzle day, 1-25
            part: Puzzle part

        Returns:
            Raw input text, unmodified

        Raises:
            LoadError: If the input cannot be obtained
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Loader identifier used in log messages."""
        pass
