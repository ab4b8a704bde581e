"""Two-dimensional vectors and angle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


def rad2deg(x: float) -> float:
    """Convert radians to degrees."""
    return float(x) * 180.0 / math.pi


def deg2rad(x: float) -> float:
    """Convert degrees to radians."""
    return float(x) * math.pi / 180.0


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        return iter((self.x, self.y))

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector | float) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector:
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __pos__(self) -> Vector:
        return Vector(self.x, self.y)

    def sqr_length(self) -> float:
        return float(self.x * self.x + self.y * self.y)

    def length(self) -> float:
        return math.sqrt(self.sqr_length())

    def distance(self, other: Vector) -> float:
        return (self - other).length()

    def normalized(self) -> Vector:
        """Return a unit vector in the same direction; a zero vector stays zero."""
        length = self.length()
        if length <= 0:
            return Vector(self.x, self.y)
        nx, ny = self.x / length, self.y / length
        if isinstance(self.x, int) and isinstance(self.y, int):
            return Vector(int(nx), int(ny))
        return Vector(nx, ny)

    def to_int(self) -> Vector:
        """Return a vector with both components truncated towards zero."""
        return Vector(int(self.x), int(self.y))


def dot(p: Vector, q: Vector) -> float:
    return p.x * q.x + p.y * q.y


def cross(p: Vector, q: Vector) -> float:
    return p.x * q.y - p.y * q.x


def cross_scalar(f: float, q: Vector) -> Vector:
    """Cross product of a scalar (z axis) with a vector."""
    return Vector(-f * q.y, f * q.x)


def reflect(vec: Vector, normal: Vector) -> Vector:
    """Reflect a vector about a (unit) normal."""
    return vec - 2 * dot(vec, normal) * normal