"""
Day 14: Regolith Reservoir
"""

from typing import Set, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import ints, lines

Point = Tuple[int, int]

SAND_SOURCE = (500, 0)


def read_rock(text: str) -> Set[Point]:
    rock: Set[Point] = set()
    for line in lines(text):
        numbers = ints(line)
        if len(numbers) % 2 or not numbers:
            raise SolveError(f"invalid rock path: {line!r}")
        points = list(zip(numbers[::2], numbers[1::2]))
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            if x1 != x2 and y1 != y2:
                raise SolveError("cannot draw diagonal wall")
            for x in range(min(x1, x2), max(x1, x2) + 1):
                for y in range(min(y1, y2), max(y1, y2) + 1):
                    rock.add((x, y))
        if len(points) == 1:
            rock.add(points[0])
    return rock


def pour(rock: Set[Point], floor: bool) -> int:
    """
    Count resting sand units.

    Without a floor, stops when sand would fall into the abyss. With a
    floor two below the lowest rock, stops once the source is covered.
    """
    blocked = set(rock)
    lowest = max(y for _, y in rock)
    rested = 0
    # Path of the falling unit; the next unit resumes from where this one rested
    path = [SAND_SOURCE]

    while path:
        x, y = path[-1]
        if y > lowest and not floor:
            return rested
        for nx in (x, x - 1, x + 1):
            candidate = (nx, y + 1)
            if candidate not in blocked and not (floor and y + 1 == lowest + 2):
                path.append(candidate)
                break
        else:
            blocked.add(path.pop())
            rested += 1
    return rested


@register_solver(14, Part.A)
def solve_a(text: str) -> int:
    """Units of sand at rest before sand flows into the abyss."""
    return pour(read_rock(text), floor=False)


@register_solver(14, Part.B)
def solve_b(text: str) -> int:
    """Units of sand at rest once the source is blocked."""
    return pour(read_rock(text), floor=True)
