"""
Solver Package - Registry and capability framework for the daily puzzles.

Every day module registers its two puzzle functions with @register_solver.
The registry binds them to an input loader and resolves selections into
the entries the runner executes.

Public API:
    - Part: Puzzle part identifier (A or B)
    - Solver, SolverKind: Uniform solve capability
    - RenderedDisplay, CHECK_STDOUT: Marker for solvers that render output
    - Entry, Selection: Registered bindings and run-time filters
    - Registry, build_registry(): Catalogue construction and resolution
    - register_solver(): Registration decorator
    - RunResult, RunSummary: Runner outcomes
    - AocError and subclasses: Failure taxonomy

Usage:
    from aoc.inputs import FileInputLoader
    from aoc.solver import Selection, Part, build_registry

    registry = build_registry(FileInputLoader("input"))
    for entry in registry.resolve(Selection.one_part(1, Part.A)):
        print(entry.solver.run(entry.load(), sys.stdout))
"""

# Core data structures
from .part import Part
from .base import Solver, SolverKind, RenderedDisplay, CHECK_STDOUT, format_output
from .entry import Entry, Selection
from .result import RunResult, RunSummary

# Errors
from .errors import (
    AocError,
    RegistrationError,
    SelectionNotFound,
    LoadError,
    SolveError,
)

# Registry framework
from .registry import (
    Registry,
    build_registry,
    register_solver,
    registered_solvers,
)

__all__ = [
    # Data structures
    "Part",
    "Solver",
    "SolverKind",
    "RenderedDisplay",
    "CHECK_STDOUT",
    "format_output",
    "Entry",
    "Selection",
    "RunResult",
    "RunSummary",
    # Errors
    "AocError",
    "RegistrationError",
    "SelectionNotFound",
    "LoadError",
    "SolveError",
    # Registry framework
    "Registry",
    "build_registry",
    "register_solver",
    "registered_solvers",
]
