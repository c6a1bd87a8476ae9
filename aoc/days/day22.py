"""
Day 22: Monkey Map

Part B folds the map into a cube. Each face of the net is assigned a 3D
frame (right, down and outward normal) by rolling the cube across the net,
so walking off any edge can be resolved without hard-coding a net layout.
"""

import math
import re
from collections import deque
from typing import Dict, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import blocks

OPEN = "."
WALL = "#"
VOID = " "

# Facing values used in the password, in clockwise order
RIGHT, DOWN, LEFT, UP = range(4)
STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))

Vector = Tuple[int, int, int]
State = Tuple[int, int, int]


def _neg(v: Vector) -> Vector:
    return (-v[0], -v[1], -v[2])


class Board:
    """The monkeys' map and the path to follow on it."""

    def __init__(self, text: str):
        sections = blocks(text)
        if len(sections) != 2:
            raise SolveError("input must contain a map and a path")
        rows = sections[0].split("\n")
        self.width = max(len(row) for row in rows)
        self.rows = [row.ljust(self.width) for row in rows]
        self.height = len(self.rows)
        for row in self.rows:
            if set(row) - {OPEN, WALL, VOID}:
                raise SolveError(f"invalid map row: {row!r}")

        path = sections[1].strip()
        self.moves = re.findall(r"\d+|[LR]", path)
        if "".join(self.moves) != path:
            raise SolveError(f"invalid path: {path!r}")

        start = self.rows[0].find(OPEN)
        if start < 0:
            raise SolveError("no open tile in the top row")
        self.start: State = (0, start, RIGHT)

    def tile(self, row: int, col: int) -> str:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.rows[row][col]
        return VOID

    def walk(self, step) -> State:
        """
        Follow the path from the start.

        Args:
            step: Function mapping a state to the state one tile ahead,
                ignoring walls

        Returns:
            Final (row, col, facing)
        """
        row, col, facing = self.start
        for move in self.moves:
            if move == "R":
                facing = (facing + 1) % 4
            elif move == "L":
                facing = (facing - 1) % 4
            else:
                for _ in range(int(move)):
                    nrow, ncol, nfacing = step(row, col, facing)
                    if self.tile(nrow, ncol) == WALL:
                        break
                    row, col, facing = nrow, ncol, nfacing
        return row, col, facing

    def wrap_flat(self, row: int, col: int, facing: int) -> State:
        """Step ahead, wrapping around to the far side of the row or column."""
        dr, dc = STEPS[facing]
        if self.tile(row + dr, col + dc) != VOID:
            return row + dr, col + dc, facing
        while self.tile(row - dr, col - dc) != VOID:
            row, col = row - dr, col - dc
        return row, col, facing


class Cube:
    """
    The board folded into a cube.

    Attributes:
        size: Edge length of a face
        frames: (right, down, normal) vectors for each face, keyed by
            the face's (row, col) position in the net
    """

    def __init__(self, board: Board):
        self.board = board
        tiles = sum(1 for row in board.rows for char in row if char != VOID)
        self.size = math.isqrt(tiles // 6)
        if self.size == 0 or 6 * self.size * self.size != tiles:
            raise SolveError("map does not fold into a cube")

        faces = [
            (r, c)
            for r in range(board.height // self.size)
            for c in range(board.width // self.size)
            if board.tile(r * self.size, c * self.size) != VOID
        ]
        if len(faces) != 6:
            raise SolveError("map does not fold into a cube")

        self.frames: Dict[Tuple[int, int], Tuple[Vector, Vector, Vector]] = {
            faces[0]: ((1, 0, 0), (0, 1, 0), (0, 0, 1))
        }
        queue = deque([faces[0]])
        while queue:
            r, c = queue.popleft()
            right, down, normal = self.frames[(r, c)]
            rolls = {
                (r, c + 1): (_neg(normal), down, right),
                (r, c - 1): (normal, down, _neg(right)),
                (r + 1, c): (right, _neg(normal), down),
                (r - 1, c): (right, normal, _neg(down)),
            }
            for key, frame in rolls.items():
                if key in faces and key not in self.frames:
                    self.frames[key] = frame
                    queue.append(key)

        self.by_normal = {frame[2]: key for key, frame in self.frames.items()}
        if len(self.frames) != 6 or len(self.by_normal) != 6:
            raise SolveError("map does not fold into a cube")

    def step(self, row: int, col: int, facing: int) -> State:
        """Step ahead, crossing onto the adjoining face of the cube when needed."""
        n = self.size
        dr, dc = STEPS[facing]
        nrow, ncol = row + dr, col + dc
        here = (row // n, col // n)
        if (nrow // n, ncol // n) == here and self.board.tile(nrow, ncol) != VOID:
            return nrow, ncol, facing

        right, down, normal = self.frames[here]
        heading = tuple(dr * d + dc * r for d, r in zip(down, right))
        target = self.by_normal[heading]
        t_right, t_down, _ = self.frames[target]

        # Direction of travel on the new face, and the edge we cross
        motion = _neg(normal)
        if dr:
            edge, offset = right, col % n
        else:
            edge, offset = down, row % n

        if motion == t_down:
            lrow, lcol, facing = 0, None, DOWN
        elif motion == _neg(t_down):
            lrow, lcol, facing = n - 1, None, UP
        elif motion == t_right:
            lrow, lcol, facing = None, 0, RIGHT
        else:
            lrow, lcol, facing = None, n - 1, LEFT

        if edge == t_right:
            lcol = offset
        elif edge == _neg(t_right):
            lcol = n - 1 - offset
        elif edge == t_down:
            lrow = offset
        else:
            lrow = n - 1 - offset

        return target[0] * n + lrow, target[1] * n + lcol, facing


def password(state: State) -> int:
    row, col, facing = state
    return 1000 * (row + 1) + 4 * (col + 1) + facing


@register_solver(22, Part.A)
def solve_a(text: str) -> int:
    """Final password when the map wraps around flat."""
    board = Board(text)
    return password(board.walk(board.wrap_flat))


@register_solver(22, Part.B)
def solve_b(text: str) -> int:
    """Final password when the map is folded into a cube."""
    board = Board(text)
    return password(board.walk(Cube(board).step))
