"""Enhance an infinite image with a 512-entry lookup string."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from aoc2021.utils import load_as_string, split_by_empty_newline

LIT = "#"
DARK = "."
ENHANCER_SIZE = 512


@dataclass(frozen=True)
class Image:
    """A finite patch of lit pixels inside an infinite field of one colour."""

    pixels: tuple[tuple[bool, ...], ...]
    infinite_pixel: str = DARK
    next_infinite_pixel: str = DARK

    @property
    def height(self) -> int:
        return len(self.pixels)

    @property
    def width(self) -> int:
        return len(self.pixels[0]) if self.pixels else 0

    def _is_lit(self, row: int, col: int) -> bool:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.pixels[row][col]
        return self.infinite_pixel == LIT

    def _index(self, row: int, col: int) -> int:
        """Read the 3x3 neighbourhood of a pixel as a nine-bit number."""
        value = 0
        for r in range(row - 1, row + 2):
            for c in range(col - 1, col + 2):
                value = value * 2 + self._is_lit(r, c)
        return value

    def enhance(self, enhancer: str) -> Image:
        """Return the next image, one pixel larger on every side."""
        infinite = self.next_infinite_pixel
        following = enhancer[0] if infinite == DARK else enhancer[ENHANCER_SIZE - 1]
        pixels = tuple(
            tuple(
                enhancer[self._index(row, col)] == LIT
                for col in range(-1, self.width + 1)
            )
            for row in range(-1, self.height + 1)
        )
        return Image(pixels, infinite, following)

    def lit_count(self) -> int:
        """Number of lit pixels in the finite patch."""
        return sum(sum(row) for row in self.pixels)

    def __str__(self) -> str:
        return "".join(
            "".join(LIT if pixel else DARK for pixel in row) + "\n"
            for row in self.pixels
        )


def parse_image(text: str) -> tuple[Image, str]:
    """Read the enhancer block and the image block; return both."""
    parts = split_by_empty_newline(text)
    if len(parts) < 2:
        raise ValueError("expected an enhancer and an image separated by a blank line")

    enhancer = "".join(parts[0].split("\n"))
    if len(enhancer) != ENHANCER_SIZE:
        raise ValueError(
            f"enhancer must have {ENHANCER_SIZE} characters, got {len(enhancer)}"
        )

    lines = parts[1].split("\n")
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise ValueError("image rows must all have the same width")

    pixels = tuple(tuple(char == LIT for char in line) for line in lines)
    return Image(pixels, DARK, enhancer[0]), enhancer


def _enhanced_lit_count(text: str, times: int) -> int:
    image, enhancer = parse_image(text)
    for _ in range(times):
        image = image.enhance(enhancer)
    return image.lit_count()


def part_one(text: str) -> int:
    """Lit pixels after two enhancements."""
    return _enhanced_lit_count(text, 2)


def part_two(text: str) -> int:
    """Lit pixels after fifty enhancements."""
    return _enhanced_lit_count(text, 50)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Enhance a trench map image.")
    parser.add_argument("filename", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    text = load_as_string(args.filename)
    print(f"Part One: {part_one(text)} ")
    print(f"Part Two: {part_two(text)} ")