"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass

from geomkit.vector import Vector


@dataclass
class AABB:
    """An axis-aligned bounding box in the plane."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def contains(self, point: Vector) -> bool:
        """Return True if the point lies inside or on the box."""
        return self.x_min <= point[0] <= self.x_max and self.y_min <= point[1] <= self.y_max


@dataclass
class BoundRectangle:
    """A rectangle given by its left, right, top and bottom edges."""

    left_x: float = 0.0
    right_x: float = 0.0
    top_y: float = 0.0
    bot_y: float = 0.0