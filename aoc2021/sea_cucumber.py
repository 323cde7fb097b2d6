"""Sea cucumber herds moving east and south on a wrapping grid."""

from __future__ import annotations

import argparse
from itertools import takewhile

from aoc2021.utils import load_as_lines

EMPTY = "."
EAST = ">"
SOUTH = "v"


def _trailing_run(cells: list[str], kind: str) -> int:
    """Length of the run of ``kind`` at the end of cells, index 0 excluded."""
    return sum(1 for _ in takewhile(lambda c: c == kind, reversed(cells[1:])))


class Herd:
    """A grid of sea cucumbers whose edges wrap around."""

    def __init__(self, cells: list[list[str]]) -> None:
        if not cells:
            raise ValueError("grid needs at least one row")
        self.cells = cells
        self.height = len(cells)
        self.width = len(cells[0])

    @classmethod
    def from_lines(cls, lines) -> Herd:
        return cls([list(line) for line in lines])

    def get(self, row: int, col: int) -> str:
        return self.cells[row % self.height][col % self.width]

    def set(self, row: int, col: int, value: str) -> None:
        self.cells[row % self.height][col % self.width] = value

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) == EMPTY

    def move_east(self, row: int, col: int) -> None:
        self.set(row, col + 1, self.get(row, col))
        self.set(row, col, EMPTY)

    def move_south(self, row: int, col: int) -> None:
        self.set(row + 1, col, self.get(row, col))
        self.set(row, col, EMPTY)

    def step(self) -> int:
        """Move the east-facing herd, then the south-facing one; return the moves."""
        moves = 0

        for i, row in enumerate(self.cells):
            # cucumbers that wrapped onto column 0 must not move twice
            limit = self.width
            if row[0] == EAST:
                limit -= _trailing_run(row, EAST)
            j = 0
            while j < limit:
                if row[j] == EAST and self.is_empty(i, j + 1):
                    self.move_east(i, j)
                    j += 1
                    moves += 1
                j += 1

        for j in range(self.width):
            column = [row[j] for row in self.cells]
            limit = self.height
            if column[0] == SOUTH:
                limit -= _trailing_run(column, SOUTH)
            i = 0
            while i < limit:
                if self.cells[i][j] == SOUTH and self.is_empty(i + 1, j):
                    self.move_south(i, j)
                    i += 1
                    moves += 1
                i += 1

        return moves

    def steps_until_stopped(self) -> int:
        """Number of steps up to and including the first with no movement."""
        steps = 1
        while self.step():
            steps += 1
        return steps

    def __str__(self) -> str:
        return "".join("\n" + "".join(row) for row in self.cells)


def part_one(lines) -> int:
    return Herd.from_lines(lines).steps_until_stopped()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        description="Count the steps until no sea cucumber moves."
    )
    parser.add_argument("filename", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    print(f"Part One: {part_one(load_as_lines(args.filename))} ")