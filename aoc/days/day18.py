"""
Day 18: Boiling Boulders
"""

import numpy as np

from ..solver import Part, SolveError, register_solver
from .parsing import ints, lines


def read_droplet(text: str) -> np.ndarray:
    """
    Voxel grid of the droplet with one layer of air on every side.
    """
    cubes = []
    for line in lines(text):
        coordinates = ints(line)
        if len(coordinates) != 3:
            raise SolveError(f"invalid cube: {line!r}")
        cubes.append(coordinates)
    if not cubes:
        raise SolveError("no cubes in input")

    points = np.array(cubes)
    points -= points.min(axis=0) - 1
    grid = np.zeros(tuple(points.max(axis=0) + 2), dtype=bool)
    grid[points[:, 0], points[:, 1], points[:, 2]] = True
    return grid


def exposed_faces(solid: np.ndarray, outside: np.ndarray) -> int:
    """Count faces where a solid voxel touches an `outside` voxel."""
    faces = 0
    for axis in range(3):
        lower = [slice(None)] * 3
        upper = [slice(None)] * 3
        lower[axis] = slice(None, -1)
        upper[axis] = slice(1, None)
        faces += int((solid[tuple(lower)] & outside[tuple(upper)]).sum())
        faces += int((solid[tuple(upper)] & outside[tuple(lower)]).sum())
    return faces


def exterior(solid: np.ndarray) -> np.ndarray:
    """Flood-fill the air reachable from the grid's corner."""
    reached = np.zeros_like(solid)
    reached[0, 0, 0] = True
    while True:
        grown = _grow(reached) & ~solid
        if np.array_equal(grown, reached):
            return reached
        reached = grown


def _grow(mask: np.ndarray) -> np.ndarray:
    grown = mask.copy()
    grown[1:, :, :] |= mask[:-1, :, :]
    grown[:-1, :, :] |= mask[1:, :, :]
    grown[:, 1:, :] |= mask[:, :-1, :]
    grown[:, :-1, :] |= mask[:, 1:, :]
    grown[:, :, 1:] |= mask[:, :, :-1]
    grown[:, :, :-1] |= mask[:, :, 1:]
    return grown


@register_solver(18, Part.A)
def solve_a(text: str) -> int:
    """Surface area of the droplet, including internal pockets."""
    solid = read_droplet(text)
    return exposed_faces(solid, ~solid)


@register_solver(18, Part.B)
def solve_b(text: str) -> int:
    """Exterior surface area of the droplet."""
    solid = read_droplet(text)
    return exposed_faces(solid, exterior(solid))
