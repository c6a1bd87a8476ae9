"""
Day 4: Camp Cleanup
"""

from typing import List, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import lines

Range = Tuple[int, int]


def read_assignments(text: str) -> List[Tuple[Range, Range]]:
    pairs = []
    for line in lines(text):
        try:
            first, second = line.split(",")
            a, b = (int(n) for n in first.split("-"))
            c, d = (int(n) for n in second.split("-"))
        except ValueError:
            raise SolveError(f"invalid assignment pair: {line!r}") from None
        pairs.append(((a, b), (c, d)))
    return pairs


def fully_contains(outer: Range, inner: Range) -> bool:
    return outer[0] <= inner[0] and outer[1] >= inner[1]


def overlaps(first: Range, second: Range) -> bool:
    return first[0] <= second[1] and second[0] <= first[1]


@register_solver(4, Part.A)
def solve_a(text: str) -> int:
    """Pairs where one range fully contains the other."""
    return sum(
        1 for first, second in read_assignments(text)
        if fully_contains(first, second) or fully_contains(second, first)
    )


@register_solver(4, Part.B)
def solve_b(text: str) -> int:
    """Pairs whose ranges overlap at all."""
    return sum(1 for first, second in read_assignments(text) if overlaps(first, second))
