"""Two-dimensional vector used for positions and velocities."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector:
    """A mutable 2D vector with arithmetic operators."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> None:
        """Scale the vector to unit length in place; a zero vector is left alone."""
        size = self.length()
        if size > 0:
            self *= 1 / size

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vector) -> Vector:
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __isub__(self, other: Vector) -> Vector:
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> Vector:
        self.x *= scalar
        self.y *= scalar
        return self

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar)

    def __itruediv__(self, scalar: float) -> Vector:
        self.x /= scalar
        self.y /= scalar
        return self