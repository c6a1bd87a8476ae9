"""
Day 12: Hill Climbing Algorithm
"""

from collections import deque
from typing import Dict, List, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import lines

Point = Tuple[int, int]


def read_heightmap(text: str) -> Tuple[Dict[Point, int], Point, Point]:
    heights: Dict[Point, int] = {}
    start = end = None
    for r, row in enumerate(lines(text)):
        for c, char in enumerate(row):
            if char == "S":
                start, char = (r, c), "a"
            elif char == "E":
                end, char = (r, c), "z"
            elif not "a" <= char <= "z":
                raise SolveError(f"invalid height {char!r} at row {r}, column {c}")
            heights[(r, c)] = ord(char) - ord("a")
    if start is None or end is None:
        raise SolveError("heightmap needs both a start and an end")
    return heights, start, end


def distances_from_end(heights: Dict[Point, int], end: Point) -> Dict[Point, int]:
    """
    Breadth-first search walking the climbing rule backwards.

    A step up may rise at most one level, so walking down from the end a
    step may drop at most one level.
    """
    distances = {end: 0}
    queue = deque([end])
    while queue:
        r, c = queue.popleft()
        for neighbor in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if neighbor in heights and neighbor not in distances:
                if heights[(r, c)] - heights[neighbor] <= 1:
                    distances[neighbor] = distances[(r, c)] + 1
                    queue.append(neighbor)
    return distances


@register_solver(12, Part.A)
def solve_a(text: str) -> int:
    """Fewest steps from S to E."""
    heights, start, end = read_heightmap(text)
    distances = distances_from_end(heights, end)
    if start not in distances:
        raise SolveError("no path found")
    return distances[start]


@register_solver(12, Part.B)
def solve_b(text: str) -> int:
    """Fewest steps to E from any square at elevation a."""
    heights, _, end = read_heightmap(text)
    distances = distances_from_end(heights, end)
    lowest: List[int] = [d for point, d in distances.items() if heights[point] == 0]
    if not lowest:
        raise SolveError("no path found")
    return min(lowest)
