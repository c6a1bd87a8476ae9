"""
Day 1: Calorie Counting
"""

from typing import List

from ..solver import Part, SolveError, register_solver
from .parsing import blocks


def read_totals(text: str) -> List[int]:
    """Sum the calories carried by each elf."""
    return [sum(int(line) for line in group.split("\n")) for group in blocks(text)]


@register_solver(1, Part.A)
def solve_a(text: str) -> int:
    """Calories carried by the best-stocked elf."""
    totals = read_totals(text)
    if not totals:
        raise SolveError("no elves in input")
    return max(totals)


@register_solver(1, Part.B)
def solve_b(text: str) -> int:
    """Calories carried by the top three elves."""
    totals = sorted(read_totals(text), reverse=True)
    if len(totals) < 3:
        raise SolveError(f"need at least three elves, found {len(totals)}")
    return sum(totals[:3])
