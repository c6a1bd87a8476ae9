"""
Day 6: Tuning Trouble
"""

from ..solver import Part, SolveError, register_solver


def find_marker(buffer: str, length: int) -> int:
    """
    Position just after the first run of `length` distinct characters.

    Raises:
        SolveError: If no such run exists
    """
    last_seen = {}
    start = 0
    for i, char in enumerate(buffer):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = i
        if i - start + 1 == length:
            return i + 1
    raise SolveError(f"no marker of length {length} found")


@register_solver(6, Part.A)
def solve_a(text: str) -> int:
    """Characters processed before the start-of-packet marker."""
    return find_marker(text.strip(), 4)


@register_solver(6, Part.B)
def solve_b(text: str) -> int:
    """Characters processed before the start-of-message marker."""
    return find_marker(text.strip(), 14)
