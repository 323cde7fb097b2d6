"""Count the beacons around all scanners and measure how far apart the scanners are."""

from __future__ import annotations

import argparse
import time
from itertools import combinations

from aoc2021.scanner3d import MergeError, manhattan_distance, merge_scanners
from aoc2021.utils import load_as_lines


def part_one(lines) -> int:
    """Number of distinct beacons once every scanner is merged."""
    composite, _ = merge_scanners(lines)
    return len(composite.beacons)


def part_two(lines) -> int:
    """Largest Manhattan distance between any two scanners."""
    _, positions = merge_scanners(lines)
    return max(
        (manhattan_distance(a, b) for a, b in combinations(positions, 2)),
        default=0,
    )


def _run(label: str, solver, lines) -> bool:
    start = time.perf_counter()
    try:
        answer = solver(lines)
    except (MergeError, ValueError) as error:
        print(f"failed to parse {label.replace(' ', '')}", error)
        return False
    print(f"{label}: {answer} ")
    print(f"Time: {time.perf_counter() - start:.6f}s ")
    return True


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Merge beacon scanner reports.")
    parser.add_argument("filename", nargs="?", default="input.txt")
    parser.add_argument("-part", "--part", type=int, default=-1)
    args = parser.parse_args(argv)

    lines = load_as_lines(args.filename)

    if args.part < 2 and not _run("Part One", part_one, lines):
        return
    if args.part != 1:
        _run("Part Two", part_two, lines)