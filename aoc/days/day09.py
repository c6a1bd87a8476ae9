"""
Day 9: Rope Bridge
"""

from typing import List, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import lines

DIRECTIONS = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}


def read_motions(text: str) -> List[Tuple[Tuple[int, int], int]]:
    motions = []
    for line in lines(text):
        direction, _, steps = line.partition(" ")
        if not steps:
            raise SolveError("missing space")
        if direction not in DIRECTIONS:
            raise SolveError(f"invalid direction: {direction}")
        motions.append((DIRECTIONS[direction], int(steps)))
    return motions


def sign(n: int) -> int:
    return (n > 0) - (n < 0)


def simulate(text: str, knots: int) -> int:
    """Count the positions the tail of a rope visits."""
    rope = [(0, 0)] * knots
    visited = {rope[-1]}
    for (dx, dy), steps in read_motions(text):
        for _ in range(steps):
            rope[0] = (rope[0][0] + dx, rope[0][1] + dy)
            for i in range(1, knots):
                hx, hy = rope[i - 1]
                tx, ty = rope[i]
                if abs(hx - tx) <= 1 and abs(hy - ty) <= 1:
                    break
                rope[i] = (tx + sign(hx - tx), ty + sign(hy - ty))
            visited.add(rope[-1])
    return len(visited)


@register_solver(9, Part.A)
def solve_a(text: str) -> int:
    """Positions visited by the tail of a two-knot rope."""
    return simulate(text, 2)


@register_solver(9, Part.B)
def solve_b(text: str) -> int:
    """Positions visited by the tail of a ten-knot rope."""
    return simulate(text, 10)
