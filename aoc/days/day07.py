"""
Day 7: No Space Left On Device
"""

from typing import Dict, Tuple

from ..solver import Part, SolveError, register_solver
from .parsing import lines

TOTAL_DISK_SPACE = 70_000_000
NEEDED_UNUSED_SPACE = 30_000_000
SMALL_DIRECTORY = 100_000


def directory_sizes(text: str) -> Dict[Tuple[str, ...], int]:
    """
    Replay the terminal session and total the size of every directory.

    Returns:
        Mapping of directory path (as a tuple of names, root is ()) to the
        size of everything beneath it
    """
    tree: Dict[Tuple[str, ...], Dict[str, int]] = {(): {}}
    children: Dict[Tuple[str, ...], set] = {(): set()}
    cwd: Tuple[str, ...] = ()

    for line in lines(text):
        if line.startswith("$"):
            command, _, arg = line[1:].strip().partition(" ")
            if command == "cd":
                if not arg:
                    raise SolveError("missing args for cd")
                if arg == "/":
                    cwd = ()
                elif arg == "..":
                    if not cwd:
                        raise SolveError("cannot traverse past root")
                    cwd = cwd[:-1]
                else:
                    target = cwd + (arg,)
                    if target not in tree:
                        raise SolveError(f"directory {arg} does not exist in /{'/'.join(cwd)}")
                    cwd = target
            elif command != "ls":
                raise SolveError(f"unknown command {command}")
            continue

        size, _, name = line.partition(" ")
        if not name:
            raise SolveError(f"invalid output line: {line}")
        if size == "dir":
            path = cwd + (name,)
            tree.setdefault(path, {})
            children.setdefault(path, set())
            children[cwd].add(path)
        else:
            try:
                tree[cwd][name] = int(size)
            except ValueError:
                raise SolveError(f"invalid size: {size}") from None

    sizes: Dict[Tuple[str, ...], int] = {}

    # Deepest paths first so children are totalled before their parents
    for path in sorted(tree, key=len, reverse=True):
        sizes[path] = sum(tree[path].values()) + sum(sizes[child] for child in children[path])
    return sizes


@register_solver(7, Part.A)
def solve_a(text: str) -> int:
    """Total size of directories holding at most 100000."""
    return sum(size for size in directory_sizes(text).values() if size <= SMALL_DIRECTORY)


@register_solver(7, Part.B)
def solve_b(text: str) -> int:
    """Size of the smallest directory whose deletion frees enough space."""
    sizes = directory_sizes(text)
    unused = TOTAL_DISK_SPACE - sizes[()]
    if unused >= NEEDED_UNUSED_SPACE:
        raise SolveError("already have enough unused disk space")
    needed = NEEDED_UNUSED_SPACE - unused
    candidates = [size for size in sizes.values() if size >= needed]
    if not candidates:
        raise SolveError("no directory can be deleted")
    return min(candidates)
