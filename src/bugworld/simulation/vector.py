"""Two-dimensional vectors for positions and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """An immutable point or direction in the plane."""

    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    @property
    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vector) -> float:
        """Get the distance from this point to another."""
        return (other - self).length

    def normalized(self) -> Vector | None:
        """
        Get the unit vector pointing the same way.

        Returns None for the zero vector, which has no direction.
        """
        length = self.length
        if length == 0:
            return None
        return Vector(self.x / length, self.y / length)


ZERO = Vector(0.0, 0.0)
UNIT_X = Vector(1.0, 0.0)
