"""
Day 17: Pyroclastic Flow
"""

from typing import Dict, List, Set, Tuple

from ..solver import Part, SolveError, register_solver

WIDTH = 7

# Rock shapes as (x, y) offsets from their bottom-left corner, y pointing up
ROCKS = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),
    ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),
    ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 0), (1, 0), (0, 1), (1, 1)),
)


def read_jets(text: str) -> List[int]:
    jets = []
    for char in text.strip():
        if char == ">":
            jets.append(1)
        elif char == "<":
            jets.append(-1)
        else:
            raise SolveError(f"unexpected character: {char}")
    if not jets:
        raise SolveError("no jets in input")
    return jets


class Chamber:
    """
    The seven-unit-wide chamber rocks fall into.

    Attributes:
        height: Height of the tower
        rocks: Rocks dropped so far
        jet_index: Index of the next jet to apply
    """

    def __init__(self, jets: List[int]):
        self.jets = jets
        self.jet_index = 0
        self.rocks = 0
        self.height = 0
        self.occupied: Set[Tuple[int, int]] = set()
        self.column_heights = [0] * WIDTH

    def fits(self, shape, x: int, y: int) -> bool:
        for dx, dy in shape:
            cx, cy = x + dx, y + dy
            if not 0 <= cx < WIDTH or cy < 0 or (cx, cy) in self.occupied:
                return False
        return True

    def drop(self) -> None:
        """Drop the next rock until it comes to rest."""
        shape = ROCKS[self.rocks % len(ROCKS)]
        self.rocks += 1
        x, y = 2, self.height + 3
        while True:
            push = self.jets[self.jet_index]
            self.jet_index = (self.jet_index + 1) % len(self.jets)
            if self.fits(shape, x + push, y):
                x += push
            if not self.fits(shape, x, y - 1):
                break
            y -= 1

        for dx, dy in shape:
            self.occupied.add((x + dx, y + dy))
            self.column_heights[x + dx] = max(self.column_heights[x + dx], y + dy + 1)
        self.height = max(self.column_heights)

    def state(self) -> Tuple[int, int, Tuple[int, ...]]:
        """Next rock, next jet and the shape of the tower's surface."""
        profile = tuple(self.height - h for h in self.column_heights)
        return self.rocks % len(ROCKS), self.jet_index, profile


def tower_height(text: str, rocks: int) -> int:
    """
    Height of the tower after `rocks` rocks have fallen.

    Once the chamber returns to a state it has been in before, the rocks in
    between repeat forever, so whole repetitions are skipped.
    """
    chamber = Chamber(read_jets(text))
    seen: Dict[Tuple, Tuple[int, int]] = {}
    while chamber.rocks < rocks:
        key = chamber.state()
        if key in seen:
            previous_rocks, previous_height = seen[key]
            period = chamber.rocks - previous_rocks
            cycles, leftover = divmod(rocks - chamber.rocks, period)
            skipped = cycles * (chamber.height - previous_height)
            for _ in range(leftover):
                chamber.drop()
            return chamber.height + skipped
        seen[key] = (chamber.rocks, chamber.height)
        chamber.drop()
    return chamber.height


@register_solver(17, Part.A)
def solve_a(text: str) -> int:
    """Tower height after 2022 rocks."""
    return tower_height(text, 2022)


@register_solver(17, Part.B)
def solve_b(text: str) -> int:
    """Tower height after one trillion rocks."""
    return tower_height(text, 1_000_000_000_000)
