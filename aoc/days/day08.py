"""
Day 8: Treetop Tree House
"""

import numpy as np

from ..solver import Part, SolveError, register_solver
from .parsing import lines


def read_heights(text: str) -> np.ndarray:
    rows = lines(text)
    if not rows:
        raise SolveError("empty forest")
    if any(len(row) != len(rows[0]) for row in rows) or not all(row.isdigit() for row in rows):
        raise SolveError("forest must be a rectangle of digits")
    return np.array([[int(c) for c in row] for row in rows], dtype=np.int8)


def visible_from_left(heights: np.ndarray) -> np.ndarray:
    """Mask of trees taller than everything to their left."""
    tallest_before = np.maximum.accumulate(heights, axis=1)
    visible = np.ones_like(heights, dtype=bool)
    visible[:, 1:] = heights[:, 1:] > tallest_before[:, :-1]
    return visible


@register_solver(8, Part.A)
def solve_a(text: str) -> int:
    """Trees visible from outside the grid."""
    heights = read_heights(text)
    visible = np.zeros_like(heights, dtype=bool)
    # Rotate the grid so every edge takes a turn as the left edge
    for turns in range(4):
        rotated = np.rot90(heights, turns)
        visible |= np.rot90(visible_from_left(rotated), -turns)
    return int(visible.sum())


def viewing_distance(line: np.ndarray, height: int) -> int:
    """Trees seen along a line of sight, stopping at the first blocking tree."""
    blocking = np.nonzero(line >= height)[0]
    if blocking.size:
        return int(blocking[0]) + 1
    return int(line.size)


@register_solver(8, Part.B)
def solve_b(text: str) -> int:
    """Highest scenic score of any tree."""
    heights = read_heights(text)
    rows, cols = heights.shape
    best = 0
    for r in range(1, rows - 1):
        for c in range(1, cols - 1):
            height = heights[r, c]
            score = (
                viewing_distance(heights[r, c - 1::-1], height)
                * viewing_distance(heights[r, c + 1:], height)
                * viewing_distance(heights[r - 1::-1, c], height)
                * viewing_distance(heights[r + 1:, c], height)
            )
            best = max(best, score)
    return best
