"""
File Input Loader

Reads puzzle inputs from a directory holding one file per day.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..solver.errors import LoadError
from ..solver.part import Part
from .base import InputLoader

logger = logging.getLogger(__name__)


class FileInputLoader(InputLoader):
    """
    Loads `{input_dir}/{day}.txt`, shared by both parts of a day.

    Args:
        input_dir: Directory containing the day files
        override: Single file to read for every request instead
    """

    def __init__(self, input_dir: Union[str, Path] = "input",
                 override: Optional[Union[str, Path]] = None):
        self.input_dir = Path(input_dir)
        self.override = Path(override) if override is not None else None

    @property
    def name(self) -> str:
        return "file"

    def path_for(self, day: int) -> Path:
        """Get the file that holds a day's input."""
        if self.override is not None:
            return self.override
        return self.input_dir / f"{day}.txt"

    def load(self, day: int, part: Part) -> str:
        path = self.path_for(day)
        logger.debug(f"[{self.name}] Loading input for day {day} part {part} from {path}")
        try:
            return path.read_bytes().decode("utf-8")
        except OSError as e:
            raise LoadError(day, part, f"{path}: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise LoadError(day, part, f"{path}: not valid UTF-8") from e
