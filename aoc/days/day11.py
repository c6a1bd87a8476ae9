"""
Day 11: Monkey in the Middle
"""

import math
import re
from dataclasses import dataclass
from typing import Callable, List

from ..solver import Part, SolveError, register_solver
from .parsing import blocks, ints

OPERATION_RE = re.compile(r"new = old ([+*]) (old|\d+)")


@dataclass
class Monkey:
    """
    One monkey's items and throwing rule.

    Attributes:
        items: Worry levels of held items, in throwing order
        operation: Worry level update applied on inspection
        divisor: Divisibility test
        if_true: Target monkey when the test passes
        if_false: Target monkey when the test fails
        inspections: Items inspected so far
    """
    items: List[int]
    operation: Callable[[int], int]
    divisor: int
    if_true: int
    if_false: int
    inspections: int = 0


def read_operation(line: str) -> Callable[[int], int]:
    _, _, expression = line.partition(":")
    match = OPERATION_RE.fullmatch(expression.strip())
    if not match:
        raise SolveError(f"invalid operation: {expression.strip()}")
    operator, operand = match.groups()
    if operand == "old":
        return (lambda old: old * old) if operator == "*" else (lambda old: old + old)
    value = int(operand)
    return (lambda old: old * value) if operator == "*" else (lambda old: old + value)


def read_monkeys(text: str) -> List[Monkey]:
    monkeys = []
    for index, block in enumerate(blocks(text)):
        rows = [row.strip() for row in block.split("\n")]
        if len(rows) != 6 or ints(rows[0]) != [index]:
            raise SolveError(f"malformed description for monkey {index}")
        monkeys.append(Monkey(
            items=ints(rows[1]),
            operation=read_operation(rows[2]),
            divisor=ints(rows[3])[0],
            if_true=ints(rows[4])[0],
            if_false=ints(rows[5])[0],
        ))
    for monkey in monkeys:
        if monkey.divisor <= 0:
            raise SolveError(f"test divisor must be positive, got {monkey.divisor}")
        if max(monkey.if_true, monkey.if_false) >= len(monkeys):
            raise SolveError("monkey throws to a monkey that does not exist")
    return monkeys


def monkey_business(text: str, rounds: int, relief: bool) -> int:
    """Product of the two highest inspection counts after `rounds` rounds."""
    monkeys = read_monkeys(text)
    if len(monkeys) < 2:
        raise SolveError("need at least two monkeys")
    # Worry levels only matter modulo the product of all divisors
    modulus = math.prod(monkey.divisor for monkey in monkeys)

    for _ in range(rounds):
        for monkey in monkeys:
            for worry in monkey.items:
                worry = monkey.operation(worry)
                worry = worry // 3 if relief else worry % modulus
                target = monkey.if_true if worry % monkey.divisor == 0 else monkey.if_false
                monkeys[target].items.append(worry)
            monkey.inspections += len(monkey.items)
            monkey.items = []

    first, second = sorted((monkey.inspections for monkey in monkeys), reverse=True)[:2]
    return first * second


@register_solver(11, Part.A)
def solve_a(text: str) -> int:
    """Monkey business after 20 rounds with relief."""
    return monkey_business(text, rounds=20, relief=True)


@register_solver(11, Part.B)
def solve_b(text: str) -> int:
    """Monkey business after 10000 rounds without relief."""
    return monkey_business(text, rounds=10_000, relief=False)
