"""
Day 10: Cathode-Ray Tube

Part B's answer is eight capital letters drawn on the CRT, so the solver
renders the screen instead of returning a value.
"""

from typing import Iterator, List

import numpy as np

from ..solver import Part, SolveError, SolverKind, register_solver
from .parsing import lines

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6

FIRST_CHECK = 20
CHECK_PERIOD = 40
CHECKS = 6


def register_values(text: str) -> Iterator[int]:
    """
    Yield the X register during each cycle, starting at cycle 1.

    Stops once the program has finished executing.
    """
    x = 1
    for line in lines(text):
        instruction, _, operand = line.partition(" ")
        if instruction == "noop" and not operand:
            yield x
        elif instruction == "addx":
            try:
                value = int(operand)
            except ValueError:
                raise SolveError(f"invalid operand for addx: {operand}") from None
            yield x
            yield x
            x += value
        else:
            raise SolveError(f"unknown instruction: {line}")


@register_solver(10, Part.A)
def solve_a(text: str) -> int:
    """Sum of the signal strengths at cycles 20, 60, ..., 220."""
    last_cycle = FIRST_CHECK + CHECK_PERIOD * (CHECKS - 1)
    values = register_values(text)
    x = 1
    total = 0
    for cycle in range(1, last_cycle + 1):
        # The register keeps its final value once the program ends
        x = next(values, x)
        if (cycle - FIRST_CHECK) % CHECK_PERIOD == 0 and cycle >= FIRST_CHECK:
            total += cycle * x
    return total


def draw_screen(text: str) -> np.ndarray:
    """Pixels lit while the program runs, as a SCREEN_HEIGHT x SCREEN_WIDTH mask."""
    pixels = np.zeros(SCREEN_HEIGHT * SCREEN_WIDTH, dtype=bool)
    for cycle, x in enumerate(register_values(text)):
        if cycle >= pixels.size:
            break
        if abs(cycle % SCREEN_WIDTH - x) <= 1:
            pixels[cycle] = True
    return pixels.reshape(SCREEN_HEIGHT, SCREEN_WIDTH)


@register_solver(10, Part.B, kind=SolverKind.DISPLAY)
def solve_b(text: str) -> List[str]:
    """Letters drawn on the CRT."""
    return ["".join("#" if lit else "." for lit in row) for row in draw_screen(text)]
