"""
Day 3: Rucksack Reorganization
"""

from ..solver import Part, SolveError, register_solver
from .parsing import lines


def priority(item: str) -> int:
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise SolveError(f"unknown item code: {item!r}")


def single_common(*groups: str) -> str:
    common = set(groups[0])
    for group in groups[1:]:
        common &= set(group)
    if len(common) != 1:
        raise SolveError(
            f"expected a single common item, found {', '.join(sorted(common)) or 'none'}"
        )
    return common.pop()


@register_solver(3, Part.A)
def solve_a(text: str) -> int:
    """Priority of the item found in both compartments."""
    total = 0
    for line in lines(text):
        half = len(line) // 2
        total += priority(single_common(line[:half], line[half:]))
    return total


@register_solver(3, Part.B)
def solve_b(text: str) -> int:
    """Priority of each three-elf group's badge."""
    rucksacks = lines(text)
    if len(rucksacks) % 3:
        raise SolveError(f"{len(rucksacks)} rucksacks cannot be split into groups of three")
    return sum(
        priority(single_common(*rucksacks[i:i + 3]))
        for i in range(0, len(rucksacks), 3)
    )
