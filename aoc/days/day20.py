"""
Day 20: Grove Positioning System
"""

from typing import List

from ..solver import Part, SolveError, register_solver
from .parsing import lines

DECRYPTION_KEY = 811_589_153
GROVE_OFFSETS = (1000, 2000, 3000)


def read_numbers(text: str) -> List[int]:
    numbers = [int(line) for line in lines(text)]
    if numbers.count(0) != 1:
        raise SolveError("file must contain exactly one 0")
    return numbers


def grove_coordinates(numbers: List[int], rounds: int) -> int:
    """
    Mix the file and sum the values 1000, 2000 and 3000 after the 0.

    Each number moves by its value around the circle in original order;
    moving past the end wraps without counting the moved number itself.
    """
    size = len(numbers)
    order = list(enumerate(numbers))
    ring = list(order)
    for _ in range(rounds):
        for item in order:
            index = ring.index(item)
            ring.pop(index)
            ring.insert((index + item[1]) % (size - 1) if size > 1 else 0, item)

    values = [value for _, value in ring]
    zero = values.index(0)
    return sum(values[(zero + offset) % size] for offset in GROVE_OFFSETS)


@register_solver(20, Part.A)
def solve_a(text: str) -> int:
    """Grove coordinates after mixing once."""
    return grove_coordinates(read_numbers(text), rounds=1)


@register_solver(20, Part.B)
def solve_b(text: str) -> int:
    """Grove coordinates after applying the key and mixing ten times."""
    numbers = [n * DECRYPTION_KEY for n in read_numbers(text)]
    return grove_coordinates(numbers, rounds=10)
