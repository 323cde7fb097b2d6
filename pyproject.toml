[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2021"
version = "0.1.0"
description = "Solutions to days 19 to 25 of the 2021 Advent of Code puzzles, with the small data structures they share."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms", "simulation", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2021-beacon-survey = "aoc2021.beacon_survey:main"
aoc2021-trench-map = "aoc2021.trench_map:main"
aoc2021-dirac-dice = "aoc2021.dirac_dice:main"
aoc2021-reactor = "aoc2021.reactor:main"
aoc2021-amphipod = "aoc2021.amphipod:main"
aoc2021-alu = "aoc2021.alu:main"
aoc2021-sea-cucumber = "aoc2021.sea_cucumber:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2021"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
