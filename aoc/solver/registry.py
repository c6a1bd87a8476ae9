"""
Solver Registry Module - Catalogue of every day/part solver and selection resolution.
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple, TYPE_CHECKING

from .base import Solver, SolverKind
from .entry import Entry, Selection
from .errors import RegistrationError, SelectionNotFound
from .part import Part

if TYPE_CHECKING:
    from ..inputs.base import InputLoader


FIRST_DAY = 1
LAST_DAY = 25

# Global catalogue of solvers, filled by @register_solver at import time
_SOLVERS: Dict[Tuple[int, Part], Solver] = {}


def register_solver(day: int, part: Part, kind: SolverKind = SolverKind.VALUE) -> Callable:
    """
    Decorator to register a puzzle function for one day and part.

    Usage:
        @register_solver(1, Part.A)
        def solve_a(text: str) -> int:
            ...

    Args:
        day: Puzzle day, 1-25
        part: Puzzle part
        kind: SolverKind.DISPLAY for solvers that render their answer

    Returns:
        Decorator returning the function unchanged

    Raises:
        RegistrationError: If the day is out of range or already registered
    """
    def decorator(func: Callable[[str], object]) -> Callable[[str], object]:
        if not FIRST_DAY <= day <= LAST_DAY:
            raise RegistrationError(f"{func.__qualname__}: day {day} outside {FIRST_DAY}-{LAST_DAY}")
        key = (day, part)
        if key in _SOLVERS:
            raise RegistrationError(f"duplicate solver for day {day} part {part}")
        description = (func.__doc__ or "").strip().splitlines()
        _SOLVERS[key] = Solver(
            func=func,
            kind=kind,
            description=description[0] if description else func.__qualname__,
        )
        return func
    return decorator


def registered_solvers() -> Dict[Tuple[int, Part], Solver]:
    """
    Get a copy of the solver catalogue.

    Returns:
        Mapping of (day, part) to Solver
    """
    return dict(_SOLVERS)


class Registry:
    """
    Ordered, immutable catalogue of entries.

    Entries are kept day-ascending with part A before part B, which is the
    order `All` runs in.
    """

    def __init__(self, entries: Iterable[Entry]):
        ordered = sorted(entries, key=lambda e: (e.day, e.part.index))
        seen = set()
        for entry in ordered:
            if entry.key in seen:
                raise RegistrationError(f"duplicate entry for day {entry.day} part {entry.part}")
            seen.add(entry.key)
        self._entries: Tuple[Entry, ...] = tuple(ordered)

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def resolve(self, selection: Selection) -> List[Entry]:
        """
        Resolve a selection into the entries to run.

        Args:
            selection: All, one day, or one day/part

        Returns:
            Matching entries in canonical order

        Raises:
            SelectionNotFound: If the selection matches no entry
        """
        entries = [entry for entry in self._entries if selection.matches(entry)]
        if not entries and not selection.is_all:
            raise SelectionNotFound(selection.day, selection.part)
        return entries

    def describe(self) -> List[Dict[str, str]]:
        """
        Get identity and description for every entry.

        Returns:
            List of dicts with 'day', 'part' and 'description' keys
        """
        return [
            {"day": str(entry.day), "part": str(entry.part), "description": entry.solver.description}
            for entry in self._entries
        ]


def build_registry(
    loader: 'InputLoader',
    solvers: Optional[Dict[Tuple[int, Part], Solver]] = None,
) -> Registry:
    """
    Bind every registered solver to an input loader.

    Args:
        loader: Input collaborator shared by all entries
        solvers: Catalogue to use instead of the registered one

    Returns:
        Registry holding all fifty entries

    Raises:
        RegistrationError: If any (day, part) is missing or unexpected
    """
    if solvers is None:
        # Import days to register them
        from .. import days  # noqa: F401
        solvers = registered_solvers()

    expected = {(day, part) for day in range(FIRST_DAY, LAST_DAY + 1) for part in Part}
    missing = sorted(expected - solvers.keys(), key=lambda k: (k[0], k[1].index))
    if missing:
        names = ", ".join(f"{day} {part}" for day, part in missing)
        raise RegistrationError(f"missing solvers: {names}")
    unexpected = set(solvers.keys()) - expected
    if unexpected:
        names = ", ".join(f"{day} {part}" for day, part in sorted(unexpected, key=lambda k: (k[0], k[1].index)))
        raise RegistrationError(f"unexpected solvers: {names}")

    return Registry(
        Entry(day=day, part=part, solver=solver, loader=loader)
        for (day, part), solver in solvers.items()
    )
