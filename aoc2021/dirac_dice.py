"""Dirac Dice: a deterministic game and its many-universes quantum variant."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from dataclasses import dataclass
from functools import cache
from itertools import product
from types import MappingProxyType
from typing import Mapping

from aoc2021.utils import load_as_lines

PLAYER_ONE = 0
PLAYER_TWO = 1
BOARD_SIZE = 10
DETERMINISTIC_GOAL = 1000
QUANTUM_GOAL = 21

_LAST_NUMBER = re.compile(r"\d*$")


@dataclass
class Player:
    """A pawn on the circular board and its score."""

    position: int
    score: int = 0

    def update(self, moves: int) -> None:
        """Advance around the board and add the landing space to the score."""
        position = (moves + self.position) % BOARD_SIZE or BOARD_SIZE
        self.position = position
        self.score += position

    def won(self, goal: int) -> bool:
        return self.score >= goal


@dataclass
class DeterministicDie:
    """A die that rolls 1, 2, 3, ... up to its sides, then starts again."""

    sides: int = 100
    current: int = 1
    rolls: int = 0

    def roll(self) -> int:
        value = self.current
        self.current = 1 if value == self.sides else value + 1
        self.rolls += 1
        return value


@cache
def universe_counts() -> Mapping[int, int]:
    """How many universes produce each total of three rolls of a three-sided die."""
    return MappingProxyType(
        dict(Counter(sum(rolls) for rolls in product((1, 2, 3), repeat=3)))
    )


@cache
def _quantum_wins(
    current: int, states: tuple[tuple[int, int], ...], goal: int
) -> tuple[int, int]:
    wins = [0, 0]
    position, score = states[current]
    for roll, universes in universe_counts().items():
        player = Player(position, score)
        player.update(roll)
        if player.won(goal):
            wins[current] += universes
            continue
        next_states = list(states)
        next_states[current] = (player.position, player.score)
        first, second = _quantum_wins(1 - current, tuple(next_states), goal)
        wins[0] += universes * first
        wins[1] += universes * second
    return wins[0], wins[1]


@dataclass
class Game:
    """Players taking turns until one reaches the goal score."""

    players: list[Player]
    goal: int

    def is_over(self) -> bool:
        return any(player.won(self.goal) for player in self.players)

    def play_deterministic(self, die: DeterministicDie) -> bool:
        """Play one round; return True once the game is over."""
        if self.is_over():
            return True
        for player in self.players:
            player.update(sum(die.roll() for _ in range(3)))
            if player.won(self.goal):
                return True
        return False

    def play_quantum(self, current: int) -> tuple[int, int]:
        """Universes in which each player wins, with ``current`` to move."""
        if len(self.players) != 2:
            raise ValueError("the quantum game needs exactly two players")
        states = tuple((player.position, player.score) for player in self.players)
        return _quantum_wins(current, states, self.goal)

    def copy(self) -> Game:
        return Game(
            [Player(player.position, player.score) for player in self.players],
            self.goal,
        )

    def __str__(self) -> str:
        return "".join(
            f"\nPlayer {number}: \n  score:    {player.score}"
            f"\n  position: {player.position}"
            for number, player in enumerate(self.players, start=1)
        )


def start_game(lines, goal: int) -> Game:
    """Read each player's starting position from the number ending its line."""
    players = []
    for line in lines:
        value = _LAST_NUMBER.search(line).group()
        if not value:
            raise ValueError(f"couldn't parse val from line {line!r}")
        players.append(Player(int(value)))
    return Game(players, goal)


def part_one(lines) -> int:
    """Losing score times the number of rolls in the deterministic game."""
    game = start_game(lines, DETERMINISTIC_GOAL)
    die = DeterministicDie(sides=100)
    while not game.play_deterministic(die):
        pass
    loser = next(
        (player for player in game.players if player.score < DETERMINISTIC_GOAL), None
    )
    return die.rolls * loser.score if loser else die.rolls


def part_two(lines) -> int:
    """Universes won by the player who wins the most of them."""
    game = start_game(lines, QUANTUM_GOAL)
    return max(game.play_quantum(PLAYER_ONE))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Play Dirac Dice.")
    parser.add_argument("filename", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    lines = load_as_lines(args.filename)
    print(f"Part One: {part_one(lines)} ")
    print(f"Part Two: {part_two(lines)} ")