"""
Day 24: Blizzard Basin
"""

import math
from typing import List, Set, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import lines

Position = Tuple[int, int]

BLIZZARDS = "<>^v"
MOVES = ((0, 0), (0, 1), (1, 0), (0, -1), (-1, 0))


class Valley:
    """
    The valley floor, in coordinates that exclude the surrounding wall.

    The entrance sits at row -1 and the exit at row `height`. Blizzards
    are never simulated: each one moves in a straight line, so a cell is
    checked by looking back along its row and column.
    """

    def __init__(self, text: str):
        rows = lines(text)
        if len(rows) < 3:
            raise SolveError("valley must have at least 3 lines")
        for row in rows:
            if len(row) != len(rows[0]) or set(row) - set("#." + BLIZZARDS):
                raise SolveError(f"invalid character in valley row: {row!r}")

        self.grid = [row[1:-1] for row in rows[1:-1]]
        self.height = len(self.grid)
        self.width = len(rows[0]) - 2
        if self.width < 1:
            raise SolveError("valley has no floor")

        start, end = rows[0].find("."), rows[-1].find(".")
        if start < 1 or end < 1:
            raise SolveError("valley needs an entrance and an exit")
        self.start: Position = (-1, start - 1)
        self.end: Position = (self.height, end - 1)
        self.period = self.width * self.height // math.gcd(self.width, self.height)

    def is_clear(self, position: Position, minute: int) -> bool:
        if position in (self.start, self.end):
            return True
        r, c = position
        if not (0 <= r < self.height and 0 <= c < self.width):
            return False
        row = self.grid[r]
        return (
            row[(c - minute) % self.width] != ">"
            and row[(c + minute) % self.width] != "<"
            and self.grid[(r - minute) % self.height][c] != "v"
            and self.grid[(r + minute) % self.height][c] != "^"
        )

    def crossing_time(self, source: Position, target: Position, minute: int) -> int:
        """
        Earliest minute `target` can be reached, leaving `source` at `minute`.

        Raises:
            SolveError: If the target can never be reached
        """
        limit = minute + self.period * (self.width * self.height + 2)
        frontier: Set[Position] = {source}
        while target not in frontier:
            minute += 1
            if minute > limit:
                raise SolveError("failed to reach end")
            frontier = {
                (r + dr, c + dc)
                for r, c in frontier
                for dr, dc in MOVES
                if self.is_clear((r + dr, c + dc), minute)
            }
            if not frontier:
                raise SolveError("failed to reach end")
        return minute


@register_solver(24, Part.A)
def solve_a(text: str) -> int:
    """Fewest minutes to cross the valley."""
    valley = Valley(text)
    return valley.crossing_time(valley.start, valley.end, 0)


@register_solver(24, Part.B)
def solve_b(text: str) -> int:
    """Fewest minutes to cross, go back for the snacks, and cross again."""
    valley = Valley(text)
    legs: List[Tuple[Position, Position]] = [
        (valley.start, valley.end),
        (valley.end, valley.start),
        (valley.start, valley.end),
    ]
    minute = 0
    for source, target in legs:
        minute = valley.crossing_time(source, target, minute)
    return minute
