"""
Day 5: Supply Stacks
"""

import re
from typing import List, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import blocks

MOVE_RE = re.compile(r"move (\d+) from (\d+) to (\d+)")

Move = Tuple[int, int, int]


def read_stacks(drawing: str) -> List[List[str]]:
    """
    Parse the crate drawing, bottom crate first in each stack.

    The last line of the drawing numbers the stacks; each stack occupies a
    four-character column.
    """
    rows = drawing.split("\n")
    count = len(rows[-1].split())
    if count == 0:
        raise SolveError("no stacks in initial configuration")
    stacks: List[List[str]] = [[] for _ in range(count)]
    for row in reversed(rows[:-1]):
        for i in range(count):
            position = 4 * i + 1
            if position < len(row) and row[position] != " ":
                stacks[i].append(row[position])
    return stacks


def read_moves(section: str) -> List[Move]:
    moves = []
    for line in section.split("\n"):
        match = MOVE_RE.fullmatch(line.strip())
        if not match:
            raise SolveError(f"invalid move: {line!r}")
        moves.append(tuple(int(n) for n in match.groups()))
    return moves


def read_input(text: str) -> Tuple[List[List[str]], List[Move]]:
    sections = blocks(text)
    if len(sections) != 2:
        raise SolveError("input must contain the initial configuration and the moves")
    return read_stacks(sections[0]), read_moves(sections[1])


def operate(text: str, keep_order: bool) -> str:
    stacks, moves = read_input(text)
    for number, source, target in moves:
        if not (1 <= source <= len(stacks) and 1 <= target <= len(stacks)):
            raise SolveError(f"stack index overflows number of stacks ({len(stacks)})")
        origin = stacks[source - 1]
        if len(origin) < number:
            raise SolveError(f"stack {source} does not have {number} crates to move")
        moved = origin[len(origin) - number:]
        del origin[len(origin) - number:]
        stacks[target - 1].extend(moved if keep_order else reversed(moved))
    return "".join(stack[-1] for stack in stacks if stack)


@register_solver(5, Part.A)
def solve_a(text: str) -> str:
    """Top crates after the CrateMover 9000 moves them one at a time."""
    return operate(text, keep_order=False)


@register_solver(5, Part.B)
def solve_b(text: str) -> str:
    """Top crates after the CrateMover 9001 moves them together."""
    return operate(text, keep_order=True)
