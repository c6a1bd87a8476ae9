"""
Parsing helpers shared by the day solvers.
"""

import re
from typing import List

_INT_RE = re.compile(r"-?\d+")
_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")


def normalize(text: str) -> str:
    """Convert line endings to \\n and drop surrounding blank lines."""
    return text.replace("\r\n", "\n").strip("\n")


def lines(text: str) -> List[str]:
    """
    Split input into lines, keeping leading whitespace.

    Trailing and leading blank lines are dropped; an empty input gives [].
    """
    text = normalize(text)
    if not text:
        return []
    return text.split("\n")


def blocks(text: str) -> List[str]:
    """Split input into groups separated by blank lines."""
    text = normalize(text)
    if not text:
        return []
    return _BLANK_LINE_RE.split(text)


def ints(text: str) -> List[int]:
    """Extract every (possibly negative) integer in a string."""
    return [int(n) for n in _INT_RE.findall(text)]
