"""Input loading and small numeric helpers shared by the puzzle solvers."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_BINARY = re.compile(r"[+-]?[01]+")
_EMPTY_LINE = re.compile(r"\n\s*\n")


def load_as_string(filename) -> str:
    """Return the whole file as text, line endings untouched."""
    with open(filename, encoding="utf-8", newline="") as handle:
        return handle.read()


def load_as_lines(filename) -> list[str]:
    """Return the lines of a file without their line terminators."""
    content = load_as_string(filename)
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def load_ints(filename) -> list[int]:
    """Return one integer per line of the file."""
    return [int(line) for line in load_as_lines(filename)]


def load_csv_int(filename) -> list[int]:
    """Return the comma separated integers on the first line of the file."""
    first_line = load_as_string(filename).split("\n")[0]
    return [int(value) for value in first_line.split(",")]


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def mean(values: Iterable[int]) -> float:
    """Arithmetic mean of the values."""
    items = _non_empty(values)
    return sum(items) / len(items)


def median(values: Iterable[int]) -> float:
    """Midpoint between the smallest and the largest value."""
    items = _non_empty(values)
    low, high = min(items), max(items)
    return (high - low) / 2 + low


def mode(values: Iterable[int]) -> int:
    """Most frequent value; on a tie the one seen first wins."""
    items = _non_empty(values)
    return Counter(items).most_common(1)[0][0]


def stdev(values: Iterable[int]) -> float:
    """Population standard deviation of the values."""
    items = _non_empty(values)
    centre = mean(items)
    return math.sqrt(sum((value - centre) ** 2 for value in items) / len(items))


def sort_string(text: str) -> str:
    """Return the characters of the text in ascending order."""
    return "".join(sorted(text))


def split_by_empty_newline(text: str) -> list[str]:
    """Split text into blocks separated by blank lines."""
    return _EMPTY_LINE.split(text.strip())


def binary_to_int(bits: str) -> int:
    """Parse a string of binary digits as a signed 64-bit integer."""
    if not _BINARY.fullmatch(bits):
        raise ValueError(f"invalid binary number: {bits!r}")
    value = int(bits, 2)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"binary number out of range: {bits!r}")
    return value