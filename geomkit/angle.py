"""Angles between lines and planes, in degrees."""

from __future__ import annotations

import math

from geomkit.core import radians_to_degrees
from geomkit.line import Line, Line2d
from geomkit.plane import Plane
from geomkit.vector import Vector, dot_product


def _angle_between(v1: Vector, v2: Vector) -> float:
    """Return the acute angle in degrees between two unit vectors."""
    cosine = min(1.0, abs(dot_product(v1, v2)))
    return radians_to_degrees(math.acos(cosine))


def angle_lines_2d(l1: Line2d, l2: Line2d) -> float:
    """Return the acute angle in degrees between two 2D lines."""
    return _angle_between(l1.direction, l2.direction)


def angle_lines_3d(l1: Line, l2: Line) -> float:
    """Return the acute angle in degrees between two 3D lines with unit directions."""
    return _angle_between(l1.direction, l2.direction)


def angle_line_plane(line: Line, plane: Plane) -> float:
    """Return the angle in degrees between a line and a plane."""
    return 90 - _angle_between(line.direction, plane.normal)


def angle_planes(p1: Plane, p2: Plane) -> float:
    """Return the acute angle in degrees between two planes."""
    return _angle_between(p1.normal, p2.normal)