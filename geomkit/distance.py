"""Distances between points, lines and planes."""

from __future__ import annotations

from geomkit.line import Line
from geomkit.plane import Plane
from geomkit.vector import Vector, cross_product_3d, dot_product


def distance_to_line_through(a: Vector, b: Vector, c: Vector) -> float:
    """Return the unsigned distance from point c to the 3D line through a and b."""
    ab = b - a
    ca = a - c
    return cross_product_3d(ca, ab).magnitude() / ab.magnitude()


def distance_to_line(line: Line, point: Vector) -> float:
    """Return the distance from a point to a 3D line with a unit direction."""
    t = dot_product(line.direction, point - line.point)
    foot = line.point + line.direction * t
    return (foot - point).magnitude()


def distance(p1: Vector, p2: Vector) -> float:
    """Return the Euclidean distance between two points of equal dimension."""
    return (p1 - p2).magnitude()


def distance_to_plane(plane: Plane, point: Vector) -> float:
    """Return the signed distance from the plane to the point along its normal."""
    return dot_product(plane.normal, point) - plane.d