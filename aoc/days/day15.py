"""
Day 15: Beacon Exclusion Zone
"""

from typing import Iterator, List, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import ints, lines

TARGET_ROW = 2_000_000
SEARCH_LIMIT = 4_000_000
TUNING_MULTIPLIER = 4_000_000

Sensor = Tuple[int, int, int, int]


def read_sensors(text: str) -> List[Sensor]:
    sensors = []
    for line in lines(text):
        numbers = ints(line)
        if len(numbers) != 4:
            raise SolveError(f"invalid sensor report: {line!r}")
        sensors.append(tuple(numbers))
    if not sensors:
        raise SolveError("no sensors in input")
    return sensors


def radius(sensor: Sensor) -> int:
    sx, sy, bx, by = sensor
    return abs(sx - bx) + abs(sy - by)


def row_coverage(sensors: List[Sensor], row: int) -> List[Tuple[int, int]]:
    """Merged, inclusive x ranges covered by sensors on a row."""
    ranges = []
    for sensor in sensors:
        sx, sy = sensor[0], sensor[1]
        reach = radius(sensor) - abs(sy - row)
        if reach >= 0:
            ranges.append((sx - reach, sx + reach))
    ranges.sort()

    merged: List[Tuple[int, int]] = []
    for start, end in ranges:
        if merged and start <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def excluded_positions(sensors: List[Sensor], row: int) -> int:
    """Positions on `row` where no beacon can be."""
    merged = row_coverage(sensors, row)
    if not merged:
        raise SolveError("no ranges")
    covered = sum(end - start + 1 for start, end in merged)
    beacons = {bx for _, _, bx, by in sensors if by == row}
    return covered - sum(1 for bx in beacons if any(s <= bx <= e for s, e in merged))


def candidate_positions(sensors: List[Sensor], limit: int) -> Iterator[Tuple[int, int]]:
    """
    Positions where the single uncovered square can sit.

    The gap lies just outside the range of its neighbouring sensors, so it
    is on the diagonals bounding a range at distance radius + 1: either at
    a crossing of two diagonals, or where one meets the search border.
    """
    rising = set()
    falling = set()
    for sensor in sensors:
        sx, sy = sensor[0], sensor[1]
        r = radius(sensor) + 1
        # Lines y = x + a and y = -x + b through the corners of the range
        rising.update((sy - sx + r, sy - sx - r))
        falling.update((sy + sx + r, sy + sx - r))

    for a in rising:
        for b in falling:
            if (b - a) % 2 == 0:
                yield (b - a) // 2, (a + b) // 2

    for a in rising:
        yield from ((0, a), (limit, limit + a), (-a, 0), (limit - a, limit))
    for b in falling:
        yield from ((0, b), (limit, b - limit), (b, 0), (b - limit, limit))
    yield from ((0, 0), (0, limit), (limit, 0), (limit, limit))


def find_beacon(sensors: List[Sensor], limit: int) -> Tuple[int, int]:
    """Locate the only uncovered position within 0..limit on both axes."""
    for x, y in candidate_positions(sensors, limit):
        if not (0 <= x <= limit and 0 <= y <= limit):
            continue
        if all(abs(x - s[0]) + abs(y - s[1]) > radius(s) for s in sensors):
            return x, y
    raise SolveError("no beacon found")


@register_solver(15, Part.A)
def solve_a(text: str) -> int:
    """Positions on row 2000000 that cannot contain a beacon."""
    return excluded_positions(read_sensors(text), TARGET_ROW)


@register_solver(15, Part.B)
def solve_b(text: str) -> int:
    """Tuning frequency of the distress beacon."""
    x, y = find_beacon(read_sensors(text), SEARCH_LIMIT)
    return x * TUNING_MULTIPLIER + y
