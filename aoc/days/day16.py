"""
Day 16: Proboscidea Volcanium
"""

import re
from collections import deque
from typing import Dict, List, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import lines

VALVE_RE = re.compile(r"Valve (\w+) has flow rate=(\d+); tunnels? leads? to valves? (.+)")

START = "AA"


def read_valves(text: str) -> Tuple[Dict[str, int], Dict[str, List[str]]]:
    rates: Dict[str, int] = {}
    tunnels: Dict[str, List[str]] = {}
    for line in lines(text):
        match = VALVE_RE.fullmatch(line.strip())
        if not match:
            raise SolveError(f"invalid valve description: {line!r}")
        name, rate, targets = match.groups()
        rates[name] = int(rate)
        tunnels[name] = [target.strip() for target in targets.split(",")]
    if START not in rates:
        raise SolveError(f"no valve named {START}")
    for name, targets in tunnels.items():
        for target in targets:
            if target not in rates:
                raise SolveError(f"tunnel from {name} leads to unknown valve {target}")
    return rates, tunnels


def travel_times(tunnels: Dict[str, List[str]], origin: str) -> Dict[str, int]:
    """Minutes to walk from origin to every reachable valve."""
    times = {origin: 0}
    queue = deque([origin])
    while queue:
        valve = queue.popleft()
        for target in tunnels[valve]:
            if target not in times:
                times[target] = times[valve] + 1
                queue.append(target)
    return times


def best_by_opened(text: str, minutes: int) -> Dict[int, int]:
    """
    Most pressure releasable for each set of opened valves.

    Only valves with a positive flow rate are worth visiting; each is
    identified by a bit in the returned masks.
    """
    rates, tunnels = read_valves(text)
    useful = [name for name, rate in rates.items() if rate > 0]
    times = {name: travel_times(tunnels, name) for name in useful + [START]}

    best: Dict[int, int] = {}
    stack = [(START, minutes, 0, 0)]
    while stack:
        position, time_left, opened, released = stack.pop()
        if best.get(opened, -1) < released:
            best[opened] = released
        for bit, valve in enumerate(useful):
            if opened & (1 << bit) or valve not in times[position]:
                continue
            # Walk there, then spend a minute opening it
            remaining = time_left - times[position][valve] - 1
            if remaining > 0:
                stack.append((valve, remaining, opened | (1 << bit), released + remaining * rates[valve]))
    return best


@register_solver(16, Part.A)
def solve_a(text: str) -> int:
    """Most pressure one person can release in 30 minutes."""
    return max(best_by_opened(text, 30).values())


@register_solver(16, Part.B)
def solve_b(text: str) -> int:
    """Most pressure released in 26 minutes working alongside an elephant."""
    best = best_by_opened(text, 26)
    width = max(best).bit_length()
    full = (1 << width) - 1

    # Best result using only valves within each mask
    within = [0] * (full + 1)
    for mask in range(full + 1):
        value = best.get(mask, 0)
        for bit in range(width):
            if mask & (1 << bit):
                value = max(value, within[mask ^ (1 << bit)])
        within[mask] = value

    return max(released + within[full ^ mask] for mask, released in best.items())
