"""Infinite lines in 2D and 3D."""

from __future__ import annotations

from dataclasses import dataclass

from geomkit.vector import Vector


@dataclass
class Line:
    """A 3D line given by a point on it and a direction."""

    point: Vector
    direction: Vector

    @classmethod
    def from_points(cls, p1: Vector, p2: Vector) -> "Line":
        """Build the line through p1 and p2 with a unit direction."""
        return cls(p1, (p2 - p1).normalized())


class Line2d:
    """A 2D line with a unit direction and its left normal."""

    __slots__ = ("point", "direction", "normal")

    def __init__(self, point: Vector, direction: Vector) -> None:
        self.point = point
        self.direction = direction.normalized()
        self.normal = Vector(-self.direction[1], self.direction[0])

    def __repr__(self) -> str:
        return f"Line2d(point={self.point!r}, direction={self.direction!r})"


class StdLine:
    """A line with a unit direction, an optional second point and a constant d."""

    __slots__ = ("point", "direction", "second", "d")

    def __init__(self, p1: Vector, p2: Vector, points: bool = False) -> None:
        if points:
            direction = p2 - p1
            self.second = p2
        else:
            direction = p2
            self.second = Vector([0.0] * len(p1))
        self.direction = direction.normalized()
        self.point = p1
        self.d = 0.0

    def __repr__(self) -> str:
        return (
            f"StdLine(point={self.point!r}, direction={self.direction!r}, "
            f"second={self.second!r}, d={self.d!r})"
        )