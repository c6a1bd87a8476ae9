"""
In-Memory Input Loader

Serves embedded puzzle inputs, keyed by day or by (day, part).
"""

from typing import Dict, Tuple, Union

from ..solver.errors import LoadError
from ..solver.part import Part
from .base import InputLoader


class MemoryInputLoader(InputLoader):
    """
    Loader backed by a dict of input strings.

    A (day, part) key takes precedence over a plain day key, so a part can
    be given its own input while sharing the day's default.
    """

    def __init__(self, inputs: Dict[Union[int, Tuple[int, Part]], str]):
        self._inputs = dict(inputs)

    @property
    def name(self) -> str:
        return "memory"

    def load(self, day: int, part: Part) -> str:
        if (day, part) in self._inputs:
            return self._inputs[(day, part)]
        if day in self._inputs:
            return self._inputs[day]
        raise LoadError(day, part, "no embedded input")
