"""
Day 2: Rock Paper Scissors

Shapes are numbered 0 (rock), 1 (paper), 2 (scissors); shape n beats
shape (n - 1) mod 3.
"""

from typing import Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import lines

OPPONENT = {"A": 0, "B": 1, "C": 2}
YOURS = {"X": 0, "Y": 1, "Z": 2}


def read_round(line: str) -> Tuple[int, int]:
    if len(line) != 3 or line[1] != " ":
        raise SolveError(f"invalid round: {line!r}")
    if line[0] not in OPPONENT:
        raise SolveError(f"invalid opponent char: {line[0]!r}")
    if line[2] not in YOURS:
        raise SolveError(f"invalid response char: {line[2]!r}")
    return OPPONENT[line[0]], YOURS[line[2]]


def outcome_score(theirs: int, mine: int) -> int:
    """0 for a loss, 3 for a draw, 6 for a win."""
    return ((mine - theirs + 1) % 3) * 3


@register_solver(2, Part.A)
def solve_a(text: str) -> int:
    """Score when the second column is the shape to play."""
    total = 0
    for line in lines(text):
        theirs, mine = read_round(line)
        total += mine + 1 + outcome_score(theirs, mine)
    return total


@register_solver(2, Part.B)
def solve_b(text: str) -> int:
    """Score when the second column is the outcome to reach."""
    total = 0
    for line in lines(text):
        theirs, outcome = read_round(line)
        # X loses, Y draws, Z wins
        mine = (theirs + outcome - 1) % 3
        total += mine + 1 + outcome * 3
    return total
