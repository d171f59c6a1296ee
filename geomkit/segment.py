"""Line segments in the plane."""

from __future__ import annotations

from dataclasses import dataclass

from geomkit.point import DEFAULT_POINT_2D
from geomkit.vector import Vector


@dataclass
class Segment2d:
    """A 2D segment between p1 and p2; unset ends hold the default point."""

    p1: Vector = DEFAULT_POINT_2D
    p2: Vector = DEFAULT_POINT_2D

    def x_at(self, y: float) -> float:
        """Return the x coordinate of the segment's supporting line at height y."""
        x1, y1 = self.p1[0], self.p1[1]
        x2, y2 = self.p2[0], self.p2[1]
        dy = y2 - y1
        return y * (x2 - x1) / dy + (y2 * x1 - y1 * x2) / dy