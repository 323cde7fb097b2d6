"""Amphipod: sort the amphipods into their side rooms at the lowest energy cost."""

from __future__ import annotations

import argparse
import re
import time
from dataclasses import dataclass

from aoc2021.structures import PriorityQueue
from aoc2021.utils import load_as_string

HALLWAY_LENGTH = 11
GRID_ROWS = 5
FULL_BURROW = 16
ROOM_COLUMNS = (2, 4, 6, 8)

COSTS = {"A": 1, "B": 10, "C": 100, "D": 1000}
ROOMS = {"A": 2, "B": 4, "C": 6, "D": 8}

EXTRA_ROWS = ("#D#C#B#A#", "#D#B#A#C#")

_POD = re.compile(r"[ABCD]")


@dataclass(eq=False, slots=True)
class Amphipod:
    """One amphipod at a column ``x`` and row ``y`` (row 0 is the hallway)."""

    x: int
    y: int
    kind: str

    def __str__(self) -> str:
        return self.kind


def _cell(pod: Amphipod | None) -> str:
    return "." if pod is None else pod.kind


def _ordered(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a < b else (b, a)


class Burrow:
    """The hallway, the four side rooms, the amphipods in them and the cost so far."""

    def __init__(self, amphipods=(), cost: int = 0) -> None:
        self.amphipods: list[Amphipod] = []
        self.grid: list[list[Amphipod | None]] = [
            [None] * HALLWAY_LENGTH for _ in range(GRID_ROWS)
        ]
        self.cost = cost
        for pod in amphipods:
            self._place(pod)

    def _place(self, pod: Amphipod) -> None:
        if pod.kind not in COSTS:
            raise ValueError(f"unknown amphipod type: {pod.kind!r}")
        if not (0 <= pod.y < GRID_ROWS and 0 <= pod.x < HALLWAY_LENGTH):
            raise ValueError(f"amphipod outside the burrow at {pod.x},{pod.y}")
        self.grid[pod.y][pod.x] = pod
        self.amphipods.append(pod)

    def _room_has_other_types(self, kind: str) -> bool:
        room = ROOMS[kind]
        return any(
            pod is not None and pod.kind != kind
            for pod in (self.grid[y][room] for y in range(1, GRID_ROWS))
        )

    def _room_complete(self, kind: str) -> bool:
        room = ROOMS[kind]
        if self.grid[1][room] is None:
            return False
        for y in range(1, GRID_ROWS):
            pod = self.grid[y][room]
            if pod is None:
                break
            if pod.kind != kind:
                return False
        return True

    def _pods_below_same_type(self, pod: Amphipod) -> bool:
        room = ROOMS[pod.kind]
        for y in range(pod.y + 1, GRID_ROWS):
            below = self.grid[y][room]
            if below is None:
                break
            if below.kind != pod.kind:
                return False
        return True

    def is_hallway_clear(self, start: int, end: int) -> bool:
        """True when no amphipod stands in the hallway between the two columns."""
        low, high = _ordered(start, end)
        return not any(
            pod.y == 0 and low <= pod.x <= high for pod in self.amphipods
        )

    def active_pods(self) -> list[Amphipod]:
        """Amphipods that can make a move right now."""
        active = []

        for pod in self.grid[0]:
            if pod is None:
                continue
            room = ROOMS[pod.kind]
            # the pod's own square does not block it
            first = pod.x - 1 if room < pod.x else pod.x + 1
            if not self._room_has_other_types(pod.kind) and self.is_hallway_clear(
                first, room
            ):
                active.append(pod)

        for x in ROOM_COLUMNS:
            for y in range(1, GRID_ROWS):
                pod = self.grid[y][x]
                if pod is None:
                    continue
                if x == ROOMS[pod.kind] and self._pods_below_same_type(pod):
                    break
                if self.is_hallway_clear(x - 1, x) or self.is_hallway_clear(x, x + 1):
                    active.append(pod)
                # pods deeper in the room are buried
                break

        return active

    def copy(self) -> Burrow:
        return Burrow(
            (Amphipod(pod.x, pod.y, pod.kind) for pod in self.amphipods), self.cost
        )

    def move_pod_to(self, pod: Amphipod, x: int, y: int) -> None:
        """Move a pod and add the energy the move takes to the cost."""
        self.grid[y][x] = pod
        self.grid[pod.y][pod.x] = None
        distance = abs(pod.x - x) + abs(pod.y - y)
        pod.x = x
        pod.y = y
        self.cost += distance * COSTS[pod.kind]

    def valid_hallway_positions(self, room: int) -> list[int]:
        """Hallway columns reachable from a room, excluding those above the rooms."""
        start, end = 0, HALLWAY_LENGTH - 1
        for i in range(room, -1, -1):
            if self.grid[0][i] is not None:
                start = i + 1
                break
        for i in range(room, HALLWAY_LENGTH):
            if self.grid[0][i] is not None:
                end = i - 1
                break
        return [
            i
            for i in range(start, end + 1)
            if i % 2 == 1 or i == 0 or i == HALLWAY_LENGTH - 1
        ]

    def send_pod_to_room(self, pod: Amphipod) -> None:
        """Move a pod to the deepest free square of its own room, if there is one."""
        room = ROOMS[pod.kind]
        depth = 4 if len(self.amphipods) == FULL_BURROW else 2
        for y in range(depth, 0, -1):
            if self.grid[y][room] is None:
                self.move_pod_to(pod, room, y)
                return

    def next_states(self) -> list[Burrow]:
        """Every burrow reachable with a single move."""
        states = []
        for pod in self.active_pods():
            if pod.y == 0:
                state = self.copy()
                state.send_pod_to_room(state.grid[pod.y][pod.x])
                states.append(state)
                continue
            for hallway_x in self.valid_hallway_positions(pod.x):
                state = self.copy()
                state.move_pod_to(state.grid[pod.y][pod.x], hallway_x, 0)
                states.append(state)
        return states

    def is_complete(self) -> bool:
        return all(self._room_complete(kind) for kind in ROOMS)

    def state_key(self) -> str:
        """The arrangement of the pods, independent of cost."""
        hallway = "".join(_cell(pod) for pod in self.grid[0])
        rooms = "".join(
            _cell(row[x]) for row in self.grid[1:] for x in ROOM_COLUMNS
        )
        return hallway + rooms

    def play(self) -> int:
        """Lowest total energy needed to sort every amphipod into its room."""
        queue: PriorityQueue[Burrow] = PriorityQueue()
        queue.push(self, 0)
        best: int | None = None
        cheapest: dict[str, int] = {}

        while queue:
            burrow = queue.pop()
            if best is not None and burrow.cost >= best:
                break
            if cheapest.get(burrow.state_key(), burrow.cost) < burrow.cost:
                continue

            states = burrow.next_states()
            if not states:
                if burrow.is_complete() and (best is None or burrow.cost < best):
                    best = burrow.cost
                continue

            for state in states:
                if best is not None and state.cost > best:
                    continue
                key = state.state_key()
                known = cheapest.get(key)
                if known is not None and known <= state.cost:
                    continue
                cheapest[key] = state.cost
                queue.push(state, state.cost)

        if best is None:
            raise ValueError("the amphipods cannot be organised")
        return best

    def __str__(self) -> str:
        rows = 5 if len(self.amphipods) == FULL_BURROW else 3
        parts = [f"\ncost: {self.cost}\n", "".join(_cell(pod) for pod in self.grid[0])]
        for row in self.grid[1:rows]:
            parts.append("\n  " + "".join(f"{_cell(row[x])} " for x in ROOM_COLUMNS))
        return "".join(parts)


def parse_burrow(text: str) -> Burrow:
    """Fill the side rooms, row by row, with the first sixteen letters A-D found."""
    pods = (
        Amphipod((index % 4) * 2 + 2, index // 4 + 1, letter)
        for index, letter in enumerate(_POD.findall(text)[:FULL_BURROW])
    )
    return Burrow(pods)


def burrow_from_string(text: str) -> Burrow:
    """Read a burrow drawn with one character per square; spaces and dots are empty."""
    return Burrow(
        Amphipod(x, y, char)
        for y, line in enumerate(text.split("\n"))
        for x, char in enumerate(line)
        if char not in " ."
    )


def part_one(text: str) -> int:
    return parse_burrow(text).play()


def part_two(text: str) -> int:
    """Unfold the diagram with the two hidden rows, then solve it."""
    lines = text.split("\n")
    if len(lines) < 4:
        raise ValueError("expected at least four lines of burrow diagram")
    return parse_burrow("".join([lines[2], *EXTRA_ROWS, lines[3]])).play()


def _run(label: str, solver, text: str) -> bool:
    start = time.perf_counter()
    try:
        answer = solver(text)
    except ValueError as error:
        print(f"failed to parse {label.replace(' ', '')}", error)
        return False
    print(f"{label}: {answer} ")
    print(f"Time: {time.perf_counter() - start:.6f}s ")
    return True


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Organise the amphipods.")
    parser.add_argument("filename", nargs="?", default="input.txt")
    parser.add_argument("-part", "--part", type=int, default=-1)
    args = parser.parse_args(argv)

    text = load_as_string(args.filename)

    if args.part < 2 and not _run("Part One", part_one, text):
        return
    if args.part != 1:
        _run("Part Two", part_two, text)