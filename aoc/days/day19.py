"""
Day 19: Not Enough Minerals
"""

import math
import re
from dataclasses import dataclass
from typing import List

from ..solver import Part, SolveError, register_solver
from .parsing import ints, lines

BLUEPRINT_RE = re.compile(
    r"Blueprint (\d+): Each ore robot costs (\d+) ore\. "
    r"Each clay robot costs (\d+) ore\. "
    r"Each obsidian robot costs (\d+) ore and (\d+) clay\. "
    r"Each geode robot costs (\d+) ore and (\d+) obsidian\."
)


@dataclass(frozen=True)
class Blueprint:
    """Robot costs for one blueprint."""
    number: int
    ore_robot: int
    clay_robot: int
    obsidian_robot_ore: int
    obsidian_robot_clay: int
    geode_robot_ore: int
    geode_robot_obsidian: int

    @property
    def max_ore_spend(self) -> int:
        """Most ore any single robot costs; more ore robots than this never help."""
        return max(self.ore_robot, self.clay_robot, self.obsidian_robot_ore, self.geode_robot_ore)


def read_blueprints(text: str) -> List[Blueprint]:
    blueprints = []
    for line in lines(text):
        if not BLUEPRINT_RE.fullmatch(line.strip()):
            raise SolveError(f"invalid line: {line}")
        blueprints.append(Blueprint(*ints(line)))
    if not blueprints:
        raise SolveError("no blueprints in input")
    return blueprints


def wait_for(cost: int, stock: int, rate: int) -> int:
    """Minutes until `stock` growing by `rate` per minute covers `cost`."""
    if stock >= cost:
        return 0
    return math.ceil((cost - stock) / rate)


def max_geodes(blueprint: Blueprint, minutes: int) -> int:
    """
    Most geodes the blueprint can open in the given time.

    Searches over which robot to build next, skipping ahead to the minute it
    can be afforded. A geode robot finished with t minutes left is credited
    with its t geodes immediately.
    """
    best = 0
    # (time left, ore/clay/obsidian robots, ore/clay/obsidian stock, geodes)
    stack = [(minutes, 1, 0, 0, 0, 0, 0, 0)]
    while stack:
        time, ore_bots, clay_bots, obs_bots, ore, clay, obs, geodes = stack.pop()
        best = max(best, geodes)
        # Even a new geode robot every minute cannot beat the best found
        if geodes + time * (time - 1) // 2 <= best:
            continue

        if ore_bots < blueprint.max_ore_spend:
            wait = wait_for(blueprint.ore_robot, ore, ore_bots) + 1
            if wait < time:
                stack.append((
                    time - wait, ore_bots + 1, clay_bots, obs_bots,
                    ore + ore_bots * wait - blueprint.ore_robot,
                    clay + clay_bots * wait, obs + obs_bots * wait, geodes,
                ))

        if clay_bots < blueprint.obsidian_robot_clay:
            wait = wait_for(blueprint.clay_robot, ore, ore_bots) + 1
            if wait < time:
                stack.append((
                    time - wait, ore_bots, clay_bots + 1, obs_bots,
                    ore + ore_bots * wait - blueprint.clay_robot,
                    clay + clay_bots * wait, obs + obs_bots * wait, geodes,
                ))

        if clay_bots and obs_bots < blueprint.geode_robot_obsidian:
            wait = max(
                wait_for(blueprint.obsidian_robot_ore, ore, ore_bots),
                wait_for(blueprint.obsidian_robot_clay, clay, clay_bots),
            ) + 1
            if wait < time:
                stack.append((
                    time - wait, ore_bots, clay_bots, obs_bots + 1,
                    ore + ore_bots * wait - blueprint.obsidian_robot_ore,
                    clay + clay_bots * wait - blueprint.obsidian_robot_clay,
                    obs + obs_bots * wait, geodes,
                ))

        # Pushed last so geode robots are explored first
        if obs_bots:
            wait = max(
                wait_for(blueprint.geode_robot_ore, ore, ore_bots),
                wait_for(blueprint.geode_robot_obsidian, obs, obs_bots),
            ) + 1
            if wait < time:
                stack.append((
                    time - wait, ore_bots, clay_bots, obs_bots,
                    ore + ore_bots * wait - blueprint.geode_robot_ore,
                    clay + clay_bots * wait,
                    obs + obs_bots * wait - blueprint.geode_robot_obsidian,
                    geodes + time - wait,
                ))
    return best


@register_solver(19, Part.A)
def solve_a(text: str) -> int:
    """Sum of quality levels over 24 minutes."""
    return sum(bp.number * max_geodes(bp, 24) for bp in read_blueprints(text))


@register_solver(19, Part.B)
def solve_b(text: str) -> int:
    """Product of geodes opened by the first three blueprints in 32 minutes."""
    return math.prod(max_geodes(bp, 32) for bp in read_blueprints(text)[:3])
