# aoc2021

Solutions to days 19 to 25 of the 2021 Advent of Code, plus the small
helpers and data structures they share. Each puzzle is a module with a
`part_one` function and, where the puzzle has one, a `part_two` function,
so that it can be used from Python or run from the command line.

| Day | Module                     | Puzzle                          |
|-----|----------------------------|---------------------------------|
| 19  | `aoc2021.beacon_survey`    | Beacon Scanner (3-D alignment)  |
| 20  | `aoc2021.trench_map`       | Trench Map (image enhancement)  |
| 21  | `aoc2021.dirac_dice`       | Dirac Dice                      |
| 22  | `aoc2021.reactor`          | Reactor Reboot (cuboids)        |
| 23  | `aoc2021.amphipod`         | Amphipod (cheapest shuffle)     |
| 24  | `aoc2021.alu`              | Arithmetic Logic Unit           |
| 25  | `aoc2021.sea_cucumber`     | Sea Cucumber (part one only)    |

Shared building blocks live in `aoc2021.utils` (file loading, statistics,
string helpers), `aoc2021.vector` (`Vector`, `Vector3d`) and
`aoc2021.structures` (`PriorityQueue`, `Queue`, `Stack`). The scanner
alignment behind day 19 is in `aoc2021.scanner3d` (`parse_scanners`,
`merge_scanners`, `manhattan_distance`), with a two-dimensional version in
`aoc2021.scanner2d`.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running a puzzle

Each command reads the puzzle input from the file named on the command
line, or from `input.txt` in the current directory when none is given, and
prints the answers:

```
aoc2021-beacon-survey
aoc2021-trench-map
aoc2021-dirac-dice
aoc2021-reactor
aoc2021-amphipod
aoc2021-alu
aoc2021-sea-cucumber
```

`aoc2021-beacon-survey`, `aoc2021-amphipod` and `aoc2021-alu` also accept
`-part 1` or `-part 2` (or `--part`) to run just one part; they print the
time each part took. If a part fails on its input, they print
`failed to parse PartOne` (or `PartTwo`) with the reason and stop.

## Using it from Python

The puzzle functions take the input as a list of lines or as a single
string, matching how each puzzle reads its data:

```python
from aoc2021.utils import load_as_lines, load_as_string
from aoc2021 import reactor, trench_map, sea_cucumber

lines = load_as_lines("input.txt")
print(reactor.part_one(lines), reactor.part_two(lines))

text = load_as_string("input.txt")
print(trench_map.part_one(text), trench_map.part_two(text))

print(sea_cucumber.part_one(load_as_lines("input.txt")))
```

`beacon_survey`, `dirac_dice`, `reactor`, `alu` and `sea_cucumber` take
lines; `trench_map` and `amphipod` take the whole text.

The lower-level pieces can be used directly too, for example stepping the
sea cucumber herd one move at a time:

```python
from aoc2021.sea_cucumber import Herd

herd = Herd.from_lines(["...>"])
herd.step()
print(herd)
```

running a small ALU program:

```python
from aoc2021.alu import parse_program

program = parse_program(["inp x", "mul x -1"])
program.run(4)
program.x  # -4
```

or measuring the distance between two scanners:

```python
from aoc2021.scanner3d import manhattan_distance
from aoc2021.vector import Vector3d

manhattan_distance(Vector3d(1105, -1205, 1229), Vector3d(-92, -2380, -20))  # 3621
```

## Limits

- The day 24 solvers (`alu.part_one`, `alu.part_two`,
  `Program.solve_largest`, `Program.solve_smallest`) read the constants of
  each input block from the program and raise `ValueError` if a block does
  not follow the usual 18-instruction MONAD layout.
  `Program.solve_by_execution` runs the instructions themselves instead.
- `scanner3d.merge_scanners` raises `MergeError` when a scanner cannot be
  matched against the beacons merged so far.