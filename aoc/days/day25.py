"""
Day 25: Full of Hot Air

Day 25 has no second puzzle, so part B returns a fixed message.
"""

from ..solver import Part, SolveError, register_solver
from .parsing import lines

SNAFU_DIGITS = "=-012"
FINAL_MESSAGE = "Start The Blender"


def from_snafu(number: str) -> int:
    value = 0
    for char in number:
        digit = SNAFU_DIGITS.find(char)
        if digit < 0:
            raise SolveError(f"invalid SNAFU digit {char!r} in {number!r}")
        value = value * 5 + digit - 2
    return value


def to_snafu(value: int) -> str:
    """Balanced base-five rendering of a non-negative integer."""
    if value < 0:
        raise SolveError("SNAFU sums must not be negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value + 2, 5)
        digits.append(SNAFU_DIGITS[remainder])
    return "".join(reversed(digits))


@register_solver(25, Part.A)
def solve_a(text: str) -> str:
    """Sum of the fuel requirements, in SNAFU."""
    numbers = [line.strip() for line in lines(text)]
    if not numbers:
        raise SolveError("no numbers in input")
    return to_snafu(sum(from_snafu(number) for number in numbers))


@register_solver(25, Part.B)
def solve_b(text: str) -> str:
    """There is no part B on the last day."""
    return FINAL_MESSAGE
