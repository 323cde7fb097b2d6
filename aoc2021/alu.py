"""An arithmetic logic unit and a search for the model numbers it accepts."""

from __future__ import annotations

import argparse
import operator
import re
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from aoc2021.utils import load_as_lines

REGISTERS = "wxyz"
MONAD_BLOCK_LENGTH = 18
LARGEST_FIRST = range(9, 0, -1)
SMALLEST_FIRST = range(1, 10)

_LINE = re.compile(r"^(\w{3})\s(\w)\s?(-?\w*?)$", re.ASCII)


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncated toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * _trunc_div(a, b)


class Opcode(Enum):
    INP = "inp"
    ADD = "add"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    EQL = "eql"


_OPERATIONS: dict[Opcode, Callable[[int, int], int]] = {
    Opcode.INP: lambda _, value: value,
    Opcode.ADD: operator.add,
    Opcode.MUL: operator.mul,
    Opcode.DIV: _trunc_div,
    Opcode.MOD: _trunc_mod,
    Opcode.EQL: lambda a, b: int(a == b),
}


@dataclass(frozen=True)
class Instruction:
    """One ALU instruction: an opcode, a target register and an operand."""

    op: Opcode
    left: str
    right: str = ""

    @property
    def is_input(self) -> bool:
        return self.op is Opcode.INP

    def __str__(self) -> str:
        if self.is_input:
            return f"{self.op.value} {self.left}"
        return f"{self.op.value} {self.left} {self.right}"


def block(w: int, z: int, zdiv: int, xdiff: int, ydiff: int) -> int:
    """The value of z after one MONAD input block, computed directly."""
    x = _trunc_mod(z, 26)
    z = _trunc_div(z, zdiv)
    x += xdiff
    x = 0 if x == w else 1
    z *= 25 * x + 1
    z += (w + ydiff) * x
    return z


def _to_number(digits: Iterable[int]) -> int:
    return int("".join(str(digit) for digit in digits))


class Program:
    """A list of instructions, the four registers and the input blocks."""

    def __init__(self, instructions: Sequence[Instruction]) -> None:
        self.instructions = list(instructions)
        self.registers = dict.fromkeys(REGISTERS, 0)
        self.blocks = self._split_blocks()

    @property
    def w(self) -> int:
        return self.registers["w"]

    @property
    def x(self) -> int:
        return self.registers["x"]

    @property
    def y(self) -> int:
        return self.registers["y"]

    @property
    def z(self) -> int:
        return self.registers["z"]

    def _split_blocks(self) -> list[list[Instruction]]:
        blocks: list[list[Instruction]] = []
        for instruction in self.instructions:
            if instruction.is_input:
                blocks.append([])
            elif not blocks:
                raise ValueError("program must start with an inp instruction")
            blocks[-1].append(instruction)
        return blocks

    def _operand(self, text: str) -> int:
        if text in self.registers:
            return self.registers[text]
        if any(name in text for name in REGISTERS):
            raise ValueError(f"can't parse operand {text!r}")
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"can't parse operand {text!r}") from None

    def execute(self, instruction: Instruction, value: int) -> None:
        """Run one instruction; ``value`` is what an inp instruction reads."""
        operand = value if instruction.is_input else self._operand(instruction.right)
        current = self.registers[instruction.left]
        self.registers[instruction.left] = _OPERATIONS[instruction.op](current, operand)

    def run(self, *args: int) -> None:
        """Run the whole program, feeding the arguments to inp one by one."""
        inputs = iter(args)
        value = 0
        for instruction in self.instructions:
            if instruction.is_input:
                value = next(inputs, None)
                if value is None:
                    raise ValueError("program needs more input values")
            self.execute(instruction, value)

    def reset(self) -> None:
        """Set every register back to zero."""
        self.registers = dict.fromkeys(REGISTERS, 0)

    def _block_parameters(self) -> list[tuple[int, int, int]]:
        """The (zdiv, xdiff, ydiff) constants of each MONAD block."""
        expected = ((4, Opcode.DIV, "z"), (5, Opcode.ADD, "x"), (15, Opcode.ADD, "y"))
        parameters = []
        for index, instructions in enumerate(self.blocks):
            if len(instructions) != MONAD_BLOCK_LENGTH:
                raise ValueError(f"block {index} does not follow the MONAD layout")
            values = []
            for position, op, register in expected:
                instruction = instructions[position]
                if instruction.op is not op or instruction.left != register:
                    raise ValueError(f"block {index} does not follow the MONAD layout")
                try:
                    values.append(int(instruction.right))
                except ValueError:
                    raise ValueError(
                        f"block {index} does not follow the MONAD layout"
                    ) from None
            parameters.append((values[0], values[1], values[2]))
        return parameters

    def _search(
        self, step: Callable[[int, int, int], int], digits: Iterable[int]
    ) -> tuple[int, ...]:
        """Depth-first search for the first digits, in order, that end with z == 0."""
        order = tuple(digits)
        last = len(self.blocks) - 1
        if last < 0:
            raise ValueError("program has no input blocks")
        failed: set[tuple[int, int]] = set()

        def solve(index: int, z: int) -> tuple[int, ...] | None:
            if (index, z) in failed:
                return None
            for digit in order:
                next_z = step(index, digit, z)
                if index < last:
                    rest = solve(index + 1, next_z)
                    if rest is not None:
                        return (digit, *rest)
                elif next_z == 0:
                    return (digit,)
            # this block can never succeed from this z
            failed.add((index, z))
            return None

        result = solve(0, self.z)
        if result is None:
            raise ValueError("no model number leaves z at zero")
        return result

    def _run_block(self, index: int, digit: int, z: int) -> int:
        self.registers.update(w=0, x=0, y=0, z=z)
        for instruction in self.blocks[index]:
            self.execute(instruction, digit)
        return self.registers["z"]

    def solve_by_execution(self) -> tuple[int, ...]:
        """Largest accepted digits, found by running the instructions themselves."""
        saved = dict(self.registers)
        try:
            return self._search(self._run_block, LARGEST_FIRST)
        finally:
            self.registers = saved

    def _solve_direct(self, digits: Iterable[int]) -> tuple[int, ...]:
        parameters = self._block_parameters()
        return self._search(
            lambda index, digit, z: block(digit, z, *parameters[index]), digits
        )

    def solve_largest(self) -> tuple[int, ...]:
        """Digits of the largest model number the program accepts."""
        return self._solve_direct(LARGEST_FIRST)

    def solve_smallest(self) -> tuple[int, ...]:
        """Digits of the smallest model number the program accepts."""
        return self._solve_direct(SMALLEST_FIRST)

    def __str__(self) -> str:
        header = f"w: {self.w} x: {self.x} y: {self.y} z: {self.z}\n"
        return header + "".join(f"{instruction} -> " for instruction in self.instructions)


def parse_program(lines) -> Program:
    """Read one instruction per line."""
    instructions = []
    for number, line in enumerate(lines):
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"could not parse instruction {number}: {line!r}")
        command, left, right = match.groups()
        try:
            op = Opcode(command)
        except ValueError:
            raise ValueError(f"unknown instruction {command!r}") from None
        if left not in REGISTERS:
            raise ValueError(f"unknown register {left!r}")
        instructions.append(Instruction(op, left, right))
    return Program(instructions)


def part_one(lines) -> int:
    """Largest model number accepted by the program."""
    return _to_number(parse_program(lines).solve_largest())


def part_two(lines) -> int:
    """Smallest model number accepted by the program."""
    return _to_number(parse_program(lines).solve_smallest())


def _run(label: str, solver, lines) -> bool:
    start = time.perf_counter()
    try:
        answer = solver(lines)
    except ValueError as error:
        print(f"failed to parse {label.replace(' ', '')}", error)
        return False
    print(f"{label}: {answer} ")
    print(f"Time: {time.perf_counter() - start:.6f}s ")
    return True


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Find model numbers for MONAD.")
    parser.add_argument("filename", nargs="?", default="input.txt")
    parser.add_argument("-part", "--part", type=int, default=-1)
    args = parser.parse_args(argv)

    lines = load_as_lines(args.filename)

    if args.part < 2 and not _run("Part One", part_one, lines):
        return
    if args.part != 1:
        _run("Part Two", part_two, lines)