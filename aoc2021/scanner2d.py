"""Matching beacons seen by two scanners on a plane with a shared orientation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from aoc2021.vector import Vector

MIN_SHARED_BEACONS = 3

_BEACON = re.compile(r"\s*([+-]?\d+),\s*([+-]?\d+)")


def _format(vector: Vector) -> str:
    return f"{{{vector.x} {vector.y}}}"


@dataclass(eq=False)
class Beacon2d:
    """A beacon and the offsets from it to every other beacon of its scanner."""

    position: Vector
    edges: set[Vector] = field(default_factory=set)

    def _add_edge(self, other: Beacon2d) -> None:
        self.edges.add(self.position - other.position)

    def _shares_at_least(self, count: int, other: Beacon2d) -> bool:
        return len(self.edges & other.edges) >= count


@dataclass(eq=False)
class Scanner2d:
    """A named scanner and the beacons it reports."""

    name: str
    beacons: list[Beacon2d] = field(default_factory=list)

    def _update_edges(self) -> None:
        for beacon in self.beacons:
            beacon.edges = set()
            for other in self.beacons:
                if other is not beacon:
                    beacon._add_edge(other)

    def compare(self, other: Scanner2d) -> list[Beacon2d]:
        """Beacons of ``other`` not seen here, placed in this scanner's frame.

        The list is empty unless at least three beacons are shared.
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
            return []

        return [
            Beacon2d(own.position + (candidate.position - alt.position))
            for candidate in unmatched
        ]

    def add_beacons(self, beacons: list[Beacon2d]) -> None:
        """Add beacons and record the edges between them and the others."""
        self.beacons.extend(beacons)
        for beacon in beacons:
            beacon.edges = set()
            for other in self.beacons:
                if other is beacon:
                    continue
                beacon._add_edge(other)
                other._add_edge(beacon)

    def __str__(self) -> str:
        parts = [f"\n--- {self.name} ---"]
        for beacon in self.beacons:
            parts.append(f"\n {_format(beacon.position)}")
            edges = " ".join(sorted(_format(edge) for edge in beacon.edges))
            parts.append(f"\n [{edges}]")
        parts.append("\n")
        return "".join(parts)


def parse_scanners(lines) -> list[Scanner2d]:
    """Read scanner blocks of ``x,y`` beacon lines under ``--- name ---`` headers."""
    scanners: list[Scanner2d] = []
    current: Scanner2d | None = None

    for line in lines:
        if "---" in line:
            current = Scanner2d(line.strip("- "))
            scanners.append(current)
        elif not line.strip():
            continue
        else:
            match = _BEACON.match(line)
            if match is None:
                raise ValueError(f"could not parse beacon x,y: {line!r}")
            if current is None:
                raise ValueError(f"beacon before any scanner header: {line!r}")
            x, y = (int(value) for value in match.groups())
            current.beacons.append(Beacon2d(Vector(x, y)))

    for scanner in scanners:
        scanner._update_edges()

    return scanners