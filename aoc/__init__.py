"""
Advent of Code 2022 - timed puzzle solutions.

Subpackages:
    - solver: Registry, selections and the solve capability
    - inputs: Puzzle input loaders
    - days: One module per puzzle day
"""

__version__ = "1.0.0"
