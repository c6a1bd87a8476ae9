"""
Day 13: Distress Signal
"""

import json
from functools import cmp_to_key
from typing import List, Union

from ..solver import Part, SolveError, register_solver
from .parsing import blocks, lines

Packet = Union[int, List["Packet"]]

DIVIDERS = ([[2]], [[6]])


def read_packet(line: str) -> Packet:
    try:
        packet = json.loads(line)
    except json.JSONDecodeError as e:
        raise SolveError(f"invalid packet {line!r}: {e.msg}") from e
    if not isinstance(packet, list):
        raise SolveError(f"packet must be a list: {line!r}")
    if not _well_formed(packet):
        raise SolveError(f"packet may only hold integers and lists: {line!r}")
    return packet


def _well_formed(packet) -> bool:
    stack = [packet]
    while stack:
        item = stack.pop()
        if isinstance(item, list):
            stack.extend(item)
        elif not isinstance(item, int) or isinstance(item, bool):
            return False
    return True


def compare(left: Packet, right: Packet) -> int:
    """Negative when left comes first, positive when right does, zero if undecided."""
    if isinstance(left, int) and isinstance(right, int):
        return left - right
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        order = compare(a, b)
        if order:
            return order
    return len(left) - len(right)


@register_solver(13, Part.A)
def solve_a(text: str) -> int:
    """Sum of the indices of pairs already in the right order."""
    total = 0
    for index, pair in enumerate(blocks(text), start=1):
        packets = pair.split("\n")
        if len(packets) != 2:
            raise SolveError(f"pair {index} does not have two packets")
        if compare(read_packet(packets[0]), read_packet(packets[1])) < 0:
            total += index
    return total


@register_solver(13, Part.B)
def solve_b(text: str) -> int:
    """Decoder key: product of the divider packets' sorted positions."""
    packets = [read_packet(line) for line in lines(text) if line.strip()]
    packets.extend(DIVIDERS)
    packets.sort(key=cmp_to_key(compare))
    first, second = (packets.index(divider) + 1 for divider in DIVIDERS)
    return first * second
