"""Point aliases, sentinel points and sort keys for point collections."""

from __future__ import annotations

import math

from geomkit.vector import Vector

Point2d = Vector
Point3d = Vector

DEFAULT_POINT_2D = Vector(math.inf, math.inf)
DEFAULT_POINT_3D = Vector(math.inf, math.inf, math.inf)


def lrtb_key(point: Vector) -> tuple[float, float]:
    """Sort key: left to right, then bottom to top."""
    return (point[0], point[1])


def tblr_key(point: Vector) -> tuple[float, float]:
    """Sort key: top to bottom, then left to right."""
    return (-point[1], point[0])


def x_key(point: Vector) -> float:
    """Sort key on the x coordinate."""
    return point[0]


def y_key(point: Vector) -> float:
    """Sort key on the y coordinate."""
    return point[1]