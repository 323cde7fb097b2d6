"""Reactor reboot: count the cubes left on after a series of cuboid steps."""

from __future__ import annotations

import argparse
import re
import time
from dataclasses import dataclass, replace

from aoc2021.utils import load_as_lines

CLAMP_LIMIT = 50

_INSTRUCTION = re.compile(
    r"\s*(\S+) x=([+-]?\d+)\.\.([+-]?\d+),y=([+-]?\d+)\.\.([+-]?\d+),"
    r"z=([+-]?\d+)\.\.([+-]?\d+)"
)


@dataclass(frozen=True)
class Cuboid:
    """An inclusive box of cubes, switched on or off."""

    x1: int
    x2: int
    y1: int
    y2: int
    z1: int
    z2: int
    is_on: bool = False

    def volume(self) -> int:
        """Number of cubes in the box; never less than one."""
        vol = (
            (self.x2 + 1 - self.x1)
            * (self.y2 + 1 - self.y1)
            * (self.z2 + 1 - self.z1)
        )
        if vol == 0:
            return 1
        return abs(vol)

    def intersection(self, other: Cuboid) -> Cuboid | None:
        """The overlapping box, or None when the boxes do not touch."""
        x1, x2 = max(self.x1, other.x1), min(self.x2, other.x2)
        if x2 < x1:
            return None
        y1, y2 = max(self.y1, other.y1), min(self.y2, other.y2)
        if y2 < y1:
            return None
        z1, z2 = max(self.z1, other.z1), min(self.z2, other.z2)
        if z2 < z1:
            return None
        return Cuboid(x1, x2, y1, y2, z1, z2)


def _in_clamp(value: int) -> bool:
    return -CLAMP_LIMIT <= value <= CLAMP_LIMIT


def parse_instructions(lines, clamp: bool) -> list[Cuboid]:
    """Read reboot steps; with ``clamp`` drop steps reaching beyond -50..50."""
    cuboids = []
    for line in lines:
        match = _INSTRUCTION.match(line)
        if match is None:
            raise ValueError(f"could not parse reboot step: {line!r}")
        state, *numbers = match.groups()
        bounds = [int(number) for number in numbers]
        if clamp and not all(_in_clamp(value) for value in bounds):
            continue
        cuboids.append(Cuboid(*bounds, is_on=state == "on"))
    return cuboids


def count_lit(cuboids) -> int:
    """Cubes left on once every step has been applied in order."""
    steps = list(cuboids)
    total = 0
    for index, cuboid in enumerate(steps):
        # "off" steps only ever take volume away from earlier "on" steps
        if not cuboid.is_on:
            continue
        overlaps = [
            replace(overlap, is_on=True)
            for later in steps[index + 1 :]
            if (overlap := cuboid.intersection(later)) is not None
        ]
        total += cuboid.volume() - count_lit(overlaps)
    return total


def part_one(lines) -> int:
    """Lit cubes within the -50..50 region."""
    return count_lit(parse_instructions(lines, clamp=True))


def part_two(lines) -> int:
    """Lit cubes everywhere."""
    return count_lit(parse_instructions(lines, clamp=False))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Reboot the reactor.")
    parser.add_argument("filename", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    lines = load_as_lines(args.filename)
    print(f"Part One: {part_one(lines)} ")

    start = time.perf_counter()
    print(f"Part Two: {part_two(lines)} ")
    print(f"Time: {time.perf_counter() - start:.6f}s")