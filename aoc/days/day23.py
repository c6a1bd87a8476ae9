"""
Day 23: Unstable Diffusion
"""

from collections import Counter
from typing import Set, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import lines

Position = Tuple[int, int]

NEIGHBORS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc]

# Each direction: the three cells that must be empty, then the move itself
DIRECTIONS = [
    (((-1, -1), (-1, 0), (-1, 1)), (-1, 0)),  # north
    (((1, -1), (1, 0), (1, 1)), (1, 0)),      # south
    (((-1, -1), (0, -1), (1, -1)), (0, -1)),  # west
    (((-1, 1), (0, 1), (1, 1)), (0, 1)),      # east
]

SPREAD_ROUNDS = 10


def read_elves(text: str) -> Set[Position]:
    elves = set()
    for r, line in enumerate(lines(text)):
        for c, char in enumerate(line):
            if char == "#":
                elves.add((r, c))
            elif char != ".":
                raise SolveError(f"invalid character {char!r} on line {r + 1}")
    if not elves:
        raise SolveError("no elves in input")
    return elves


def spread(elves: Set[Position], first_direction: int) -> bool:
    """
    Play one round in place.

    Returns:
        True if any elf moved
    """
    proposals = {}
    for r, c in elves:
        if not any((r + dr, c + dc) in elves for dr, dc in NEIGHBORS):
            continue
        for turn in range(4):
            checks, (dr, dc) = DIRECTIONS[(first_direction + turn) % 4]
            if not any((r + cr, c + cc) in elves for cr, cc in checks):
                proposals[(r, c)] = (r + dr, c + dc)
                break

    counts = Counter(proposals.values())
    moved = False
    for elf, target in proposals.items():
        if counts[target] == 1:
            elves.remove(elf)
            elves.add(target)
            moved = True
    return moved


def empty_ground(elves: Set[Position]) -> int:
    rows = [r for r, _ in elves]
    cols = [c for _, c in elves]
    area = (max(rows) - min(rows) + 1) * (max(cols) - min(cols) + 1)
    return area - len(elves)


@register_solver(23, Part.A)
def solve_a(text: str) -> int:
    """Empty ground tiles in the elves' bounding rectangle after ten rounds."""
    elves = read_elves(text)
    for round_ in range(SPREAD_ROUNDS):
        spread(elves, round_ % 4)
    return empty_ground(elves)


@register_solver(23, Part.B)
def solve_b(text: str) -> int:
    """First round in which no elf moves."""
    elves = read_elves(text)
    round_ = 0
    while spread(elves, round_ % 4):
        round_ += 1
    return round_ + 1
