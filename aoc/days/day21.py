"""
Day 21: Monkey Math
"""

import operator
import re
from typing import Callable, Dict, List, Tuple, Union

from ..solver import Part, SolveError, register_solver
from .parsing import lines

ROOT = "root"
HUMAN = "humn"

JOB_RE = re.compile(r"(\w+): (?:(-?\d+)|(\w+) ([-+*/]) (\w+))")

OPERATORS: Dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.floordiv,
}

Job = Union[int, Tuple[str, str, str]]


def read_jobs(text: str) -> Dict[str, Job]:
    jobs: Dict[str, Job] = {}
    for line in lines(text):
        match = JOB_RE.fullmatch(line.strip())
        if not match:
            raise SolveError(f"invalid job: {line!r}")
        name, number, left, op, right = match.groups()
        jobs[name] = int(number) if number is not None else (left, op, right)
    if ROOT not in jobs:
        raise SolveError(f"no monkey named {ROOT}")
    for job in jobs.values():
        if isinstance(job, tuple):
            for operand in (job[0], job[2]):
                if operand not in jobs:
                    raise SolveError(f"unknown monkey {operand}")
    _check_acyclic(jobs)
    return jobs


def _check_acyclic(jobs: Dict[str, Job]) -> None:
    """Raise SolveError if any monkey ends up waiting on itself."""
    done = set()
    for origin in jobs:
        if origin in done:
            continue
        # (name, operands expanded) pairs; names on the stack are in progress
        stack = [(origin, False)]
        active = set()
        while stack:
            name, expanded = stack.pop()
            if expanded:
                active.discard(name)
                done.add(name)
                continue
            if name in done:
                continue
            if name in active:
                raise SolveError(f"monkey {name} depends on itself")
            active.add(name)
            stack.append((name, True))
            job = jobs[name]
            if isinstance(job, tuple):
                stack.extend((operand, False) for operand in (job[0], job[2]))


def evaluate(jobs: Dict[str, Job], name: str, cache: Dict[str, int]) -> int:
    if name not in cache:
        job = jobs[name]
        if isinstance(job, int):
            cache[name] = job
        else:
            left, op, right = job
            a, b = evaluate(jobs, left, cache), evaluate(jobs, right, cache)
            if op == "/" and b == 0:
                raise SolveError(f"{name} divides by zero")
            cache[name] = OPERATORS[op](a, b)
    return cache[name]


def path_to(jobs: Dict[str, Job], name: str, target: str) -> List[str]:
    """Monkeys from `name` down to `target`, or [] if target is not below name."""
    if name == target:
        return [name]
    job = jobs[name]
    if isinstance(job, int):
        return []
    for child in (job[0], job[2]):
        path = path_to(jobs, child, target)
        if path:
            return [name] + path
    return []


def solve_for_human(jobs: Dict[str, Job]) -> int:
    """
    Value the human must yell so both sides of root are equal.

    Walks from root to the human, inverting each operation on the way down
    while the branch without the human is evaluated directly.
    """
    path = path_to(jobs, ROOT, HUMAN)
    if len(path) < 2:
        raise SolveError(f"{HUMAN} does not feed into {ROOT}")

    cache: Dict[str, int] = {}
    left, _, right = jobs[ROOT]
    target = evaluate(jobs, right if path[1] == left else left, cache)

    for name, child in zip(path[1:], path[2:]):
        left, op, right = jobs[name]
        human_on_left = child == left
        other = evaluate(jobs, right if human_on_left else left, cache)
        if op == "+":
            target -= other
        elif op == "*":
            if other == 0 or target % other:
                raise SolveError(f"no integer solution at {name}")
            target //= other
        elif op == "-":
            target = target + other if human_on_left else other - target
        elif human_on_left:
            target *= other
        else:
            if target == 0 or other % target:
                raise SolveError(f"no integer solution at {name}")
            target = other // target
    return target


@register_solver(21, Part.A)
def solve_a(text: str) -> int:
    """Number yelled by the root monkey."""
    return evaluate(read_jobs(text), ROOT, {})


@register_solver(21, Part.B)
def solve_b(text: str) -> int:
    """Number the human must yell to pass root's equality test."""
    jobs = read_jobs(text)
    if HUMAN not in jobs:
        raise SolveError(f"no monkey named {HUMAN}")
    if isinstance(jobs[ROOT], int):
        raise SolveError(f"{ROOT} must compare two monkeys")
    return solve_for_human(jobs)
