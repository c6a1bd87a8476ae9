"""
Part Module - The two halves of each day's puzzle.
"""

from enum import Enum


class Part(Enum):
    """
    Puzzle part identifier.

    Parts order A before B, which is also the order they run in.
    """
    A = "A"
    B = "B"

    @classmethod
    def parse(cls, text: str) -> 'Part':
        """
        Parse a part name, case-insensitively.

        Args:
            text: "a", "A", "b" or "B"

        Returns:
            Matching Part

        Raises:
            ValueError: If text is not a part name
        """
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"part must be either A or B, got {text!r}") from None

    @property
    def index(self) -> int:
        """Zero-based position of this part within a day."""
        return 0 if self is Part.A else 1

    def __lt__(self, other: 'Part') -> bool:
        if not isinstance(other, Part):
            return NotImplemented
        return self.index < other.index

    def __str__(self) -> str:
        return self.value
