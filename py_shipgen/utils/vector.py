"""Immutable 2D vector used for every position and direction of a ship."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """
    2D vector.

    Equality is exact, which is what the hull mapping relies on when it
    matches hull points back to vertex indices by coordinates.
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if scalar == 0:
            raise ValueError("Cannot divide vector by zero")
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Z component of the 3D cross product; positive when ``other`` is counter-clockwise."""
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalise(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def rotate(self, angle: float) -> Vector2:
        """Rotate counter-clockwise by ``angle`` radians about the origin."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def angle_to(self, other: Vector2) -> float:
        """Unsigned angle in [0, pi] between the two directions."""
        return abs(self.signed_angle_to(other))

    def signed_angle_to(self, other: Vector2) -> float:
        """Counter-clockwise angle in (-pi, pi] that rotates ``self`` onto ``other``."""
        return math.atan2(self.cross(other), self.dot(other))

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    @classmethod
    def from_iterable(cls, values) -> Vector2:
        x, y = values
        return cls(float(x), float(y))


ZERO = Vector2(0.0, 0.0)
UP = Vector2(0.0, 1.0)
