"""Immutable two and three dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncated toward zero; zero when either side is zero."""
    if a == 0 or b == 0:
        return 0
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Vector:
    """A point or direction in the plane."""

    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def angle_radians(self) -> float:
        return math.atan2(self.y, self.x)

    def angle_degrees(self) -> float:
        """Angle in whole degrees, in the range [0, 360)."""
        degree = _round_half_away(math.degrees(self.angle_radians()))
        return degree + 360 if degree < 0 else degree

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_to(self, other: Vector) -> float:
        return (self - other).length()


@dataclass(frozen=True)
class Vector3d:
    """An integer point or direction in space."""

    x: int
    y: int
    z: int

    def __add__(self, other: Vector3d) -> Vector3d:
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3d) -> Vector3d:
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def length_squared(self) -> int:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def divide(self, other: Vector3d) -> Vector3d:
        """Component-wise truncating division; a zero on either side gives zero."""
        return Vector3d(
            _trunc_div(self.x, other.x),
            _trunc_div(self.y, other.y),
            _trunc_div(self.z, other.z),
        )

    def multiply(self, other: Vector3d) -> Vector3d:
        """Component-wise product."""
        return Vector3d(self.x * other.x, self.y * other.y, self.z * other.z)

    def dot(self, other: Vector3d) -> int:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3d) -> Vector3d:
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance_to(self, other: Vector3d) -> float:
        return (self - other).length()

    def angle_between(self, other: Vector3d) -> float:
        """Angle in radians between the two vectors."""
        cosine = self.dot(other) / (self.length() * other.length())
        return math.acos(max(-1.0, min(1.0, cosine)))