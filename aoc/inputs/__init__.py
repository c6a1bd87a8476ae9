"""
Input Module for the puzzle harness

Pluggable input sources feeding raw puzzle text to the solvers.

Usage:
    from aoc.inputs import FileInputLoader

    loader = FileInputLoader("input")
    text = loader.load(1, Part.A)  # contents of input/1.txt
"""

# Public API - Base class for custom loaders
from .base import InputLoader

# Public API - Loaders
from .file_loader import FileInputLoader
from .memory_loader import MemoryInputLoader

__all__ = [
    "InputLoader",
    "FileInputLoader",
    "MemoryInputLoader",
]
