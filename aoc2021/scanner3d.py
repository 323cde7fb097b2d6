"""Aligning beacon reports from scanners of unknown position and orientation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import chain
from typing import NamedTuple

from aoc2021.structures import Queue
from aoc2021.vector import Vector3d

MIN_SHARED_BEACONS = 12

_BEACON = re.compile(r"\s*([+-]?\d+),\s*([+-]?\d+),\s*([+-]?\d+)")
_ORIGIN = Vector3d(0, 0, 0)


class MergeError(Exception):
    """Raised when the scanners cannot all be merged into one map."""


def _edge_key(edge: Vector3d) -> tuple[int, int, int]:
    """The absolute components in ascending order, independent of orientation."""
    low, mid, high = sorted((abs(edge.x), abs(edge.y), abs(edge.z)))
    return low, mid, high


def _format(vector: Vector3d) -> str:
    return f"{{{vector.x} {vector.y} {vector.z}}}"


def _align(vector: Vector3d, order: tuple[int, int, int], signs: Vector3d) -> Vector3d:
    axes = (vector.x, vector.y, vector.z)
    return Vector3d(*(axes[index] for index in order)).multiply(signs)


@dataclass(eq=False)
class Beacon3d:
    """A beacon and its offsets to the other beacons, grouped by orientation-free key."""

    position: Vector3d
    edges: dict[tuple[int, int, int], list[Vector3d]] = field(default_factory=dict)

    def _add_edge(self, other: Beacon3d) -> None:
        edge = self.position - other.position
        self.edges.setdefault(_edge_key(edge), []).append(edge)

    def _all_edges(self):
        return chain.from_iterable(self.edges.values())

    def _shares_at_least(self, count: int, other: Beacon3d) -> bool:
        shared = 0
        for edge in self._all_edges():
            if _edge_key(edge) in other.edges:
                shared += 1
                if shared == count:
                    return True
        return False

    def _orientation_diff(self, other: Beacon3d) -> tuple[Vector3d, tuple[int, int, int]]:
        """Signs and axis order that turn ``other``'s frame into this one."""
        for edge in self._all_edges():
            matches = other.edges.get(_edge_key(edge))
            if not matches or len(matches) != 1:
                continue
            alt_axes = (matches[0].x, matches[0].y, matches[0].z)
            order = [0, 0, 0]
            reordered = [0, 0, 0]
            for i, axis in enumerate((edge.x, edge.y, edge.z)):
                for j, alt_axis in enumerate(alt_axes):
                    if abs(axis) == abs(alt_axis):
                        order[i] = j
                        reordered[i] = alt_axis
            signs = edge.divide(Vector3d(*reordered))
            return signs, (order[0], order[1], order[2])
        return _ORIGIN, (0, 0, 0)

    def __str__(self) -> str:
        edges = "".join(
            "[" + " ".join(_format(edge) for edge in group) + "] "
            for group in self.edges.values()
        )
        return f"\nposition: {_format(self.position)}\nedges:\n{edges}"


class Comparison(NamedTuple):
    """Outcome of comparing one scanner with another."""

    beacons: list[Beacon3d]
    shared: int
    scanner_position: Vector3d


@dataclass(eq=False)
class Scanner3d:
    """A named scanner and the beacons it reports."""

    name: str
    beacons: list[Beacon3d] = field(default_factory=list)

    def _update_edges(self) -> None:
        for beacon in self.beacons:
            beacon.edges = {}
            for other in self.beacons:
                if other is not beacon:
                    beacon._add_edge(other)

    def compare(self, other: Scanner3d) -> Comparison:
        """Count shared beacons; on a match also place the rest in this frame.

        The new beacons and the scanner position are only filled in when at
        least twelve beacons are shared.
        """
        unmatched = list(other.beacons)
        remaining = len(self.beacons)
        shared = 0
        own = alt = None

        for beacon in self.beacons:
            if remaining + shared < MIN_SHARED_BEACONS:
                break
            remaining -= 1
            for index, candidate in enumerate(unmatched):
                if beacon._shares_at_least(MIN_SHARED_BEACONS - 1, candidate):
                    shared += 1
                    del unmatched[index]
                    own, alt = beacon, candidate
                    break

        if shared < MIN_SHARED_BEACONS:
            return Comparison([], shared, _ORIGIN)

        signs, order = own._orientation_diff(alt)
        anchor = _align(alt.position, order, signs)
        beacons = [
            Beacon3d(own.position + (_align(candidate.position, order, signs) - anchor))
            for candidate in unmatched
        ]
        return Comparison(beacons, shared, own.position - anchor)

    def add_beacons(self, beacons: list[Beacon3d]) -> None:
        """Add beacons and record the edges between them and the others."""
        self.beacons.extend(beacons)
        for beacon in beacons:
            beacon.edges = {}
            for other in self.beacons:
                if other is beacon:
                    continue
                beacon._add_edge(other)
                other._add_edge(beacon)

    def __str__(self) -> str:
        body = "".join(str(beacon) for beacon in self.beacons)
        return f"\n--- {self.name} ---{body}\n"


def parse_scanners(lines) -> list[Scanner3d]:
    """Read scanner blocks of ``x,y,z`` beacon lines under ``--- name ---`` headers."""
    scanners: list[Scanner3d] = []
    current: Scanner3d | None = None

    for line in lines:
        if "---" in line:
            current = Scanner3d(line.strip("- "))
            scanners.append(current)
        elif not line.strip():
            continue
        else:
            match = _BEACON.match(line)
            if match is None:
                raise ValueError(f"could not parse beacon x,y,z: {line!r}")
            if current is None:
                raise ValueError(f"beacon before any scanner header: {line!r}")
            current.beacons.append(Beacon3d(Vector3d(*(int(v) for v in match.groups()))))

    for scanner in scanners:
        scanner._update_edges()

    return scanners


def merge_scanners(lines) -> tuple[Scanner3d, list[Vector3d]]:
    """Merge every scanner into the first; return it and the scanners' positions."""
    scanners = parse_scanners(lines)
    if not scanners:
        raise MergeError("no scanners found")

    composite = scanners[0]
    positions = [_ORIGIN]

    queue: Queue[Scanner3d] = Queue()
    for scanner in scanners[1:]:
        queue.push(scanner)

    last = composite
    while queue:
        scanner = queue.shift()
        if scanner is last:
            raise MergeError(f"repeat scanner found beacons: {len(scanner.beacons)}")
        last = scanner

        beacons, shared, position = composite.compare(scanner)
        if shared > 0:
            composite.add_beacons(beacons)
            positions.append(position)
        else:
            queue.push(scanner)

    return composite, positions


def manhattan_distance(a: Vector3d, b: Vector3d) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)