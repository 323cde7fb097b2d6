"""Solutions to days 19 to 25 of the 2021 Advent of Code, with shared helpers."""

__version__ = "0.1.0"