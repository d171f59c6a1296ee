"""Orientation predicates, areas, angles and collinearity tests."""

from __future__ import annotations

import math
from typing import Union

from geomkit.core import (
    TOLERANCE,
    ZERO,
    RelativePosition,
    Winding,
    is_equal_d,
    is_equal_dl,
    radians_to_degrees,
)
from geomkit.line import Line2d, StdLine
from geomkit.plane import Plane
from geomkit.polyhedron import Face
from geomkit.segment import Segment2d
from geomkit.vector import Vector, dot_product, scalar_triple_product


def _classify(
    area: float, ab: Vector, ac: Vector, a: Vector, b: Vector, c: Vector
) -> RelativePosition:
    if 0 < area < TOLERANCE:
        area = 0.0
    if area > 0.0:
        return RelativePosition.LEFT
    if area < 0.0:
        return RelativePosition.RIGHT
    if ab[0] * ac[0] < 0.0 or ab[1] * ac[1] < 0.0:
        return RelativePosition.BEHIND
    if ab.magnitude() < ac.magnitude():
        return RelativePosition.BEYOND
    if a == c:
        return RelativePosition.ORIGIN
    if b == c:
        return RelativePosition.DESTINATION
    return RelativePosition.BETWEEN


def orientation_2d(a: Vector, b: Vector, c: Vector) -> RelativePosition:
    """Return the position of point c relative to the directed segment a->b in the XY plane."""
    return _classify(area_triangle_2d(a, b, c), b - a, c - a, a, b, c)


def orientation_3d(a: Vector, b: Vector, c: Vector) -> RelativePosition:
    """Return the position of c relative to a->b using the unsigned 3D triangle area.

    Because the area is unsigned, non-collinear points always report LEFT.
    """
    return _classify(area_triangle_3d(a, b, c), b - a, c - a, a, b, c)


def _orientation(a: Vector, b: Vector, c: Vector) -> RelativePosition:
    if len(a) == 3:
        return orientation_3d(a, b, c)
    return orientation_2d(a, b, c)


def left(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if c lies to the left of the directed segment a->b."""
    return _orientation(a, b, c) == RelativePosition.LEFT


def left_of_line(line: Union[Line2d, StdLine], point: Vector) -> bool:
    """Return True if the point is on the left side of (or on) the line."""
    if isinstance(line, StdLine):
        normal = Vector(-line.direction[1], line.direction[0])
        d = line.d
    elif isinstance(line, Line2d):
        normal = line.normal
        d = dot_product(normal, line.point)
    else:
        raise TypeError("expected a Line2d or a StdLine")
    return dot_product(normal, point) - d >= 0


def right(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if c lies to the right of the directed segment a->b."""
    return _orientation(a, b, c) == RelativePosition.RIGHT


def left_or_beyond(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if c is left of a->b or on its extension past b."""
    return _orientation(a, b, c) in (RelativePosition.LEFT, RelativePosition.BEYOND)


def left_or_between(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if c is left of a->b or strictly between a and b."""
    return _orientation(a, b, c) in (RelativePosition.LEFT, RelativePosition.BETWEEN)


def polar_angle(other: Vector, ref: Vector) -> float:
    """Return the counter-clockwise angle in degrees (0-360) from ref to other; -1 if equal."""
    x = other[0] - ref[0]
    y = other[1] - ref[1]
    if is_equal_d(x, 0.0) and is_equal_d(y, 0.0):
        return -1.0
    if is_equal_d(x, 0.0):
        return 90.0 if y > 0.0 else 270.0
    theta = radians_to_degrees(math.atan(y / x))
    if x > 0.0:
        return theta if y >= 0.0 else 360 + theta
    return 180 + theta


def area_triangle_2d(a: Vector, b: Vector, c: Vector) -> float:
    """Return the signed area of triangle abc projected onto the XY plane."""
    return 0.5 * ((b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1]))


def area_triangle_3d(a: Vector, b: Vector, c: Vector) -> float:
    """Return the (unsigned) area of the 3D triangle abc."""
    ab = b - a
    ac = c - a
    x = ab[1] * ac[2] - ab[2] * ac[1]
    y = ab[0] * ac[2] - ab[2] * ac[0]
    z = ab[0] * ac[1] - ab[1] * ac[0]
    return math.sqrt(x * x + y * y + z * z) / 2


def face_winding(face: Face, point: Vector) -> Winding:
    """Return how the face's vertices wind when viewed from the given point."""
    points = [vertex.point for vertex in face.vertices]
    if len(points) < 3:
        raise ValueError("a face needs at least three vertices")
    plane = Plane.from_points(points[0], points[1], points[2])
    winding_constant = dot_product(plane.normal, points[0] - point)
    if winding_constant < ZERO:
        return Winding.CCW
    return Winding.CW


def face_visibility(face: Face, point: Vector) -> float:
    """Return the signed volume spanned by the face's first three vertices and the point."""
    if len(face.vertices) < 3:
        raise ValueError("a face needs at least three vertices")
    p1, p2, p3 = (vertex.point for vertex in face.vertices[:3])
    return scalar_triple_product(p2 - p1, p3 - p1, point - p1)


def angle(v1: Vector, v2: Vector) -> float:
    """Return the angle in radians between two vectors."""
    dot = dot_product(v1, v2)
    denominator = v1.magnitude() * v2.magnitude()
    if is_equal_dl(dot, denominator):
        return 0.0
    return math.acos(max(-1.0, min(1.0, dot / denominator)))


def collinear_vectors(a: Vector, b: Vector) -> bool:
    """Return True if the two 3D vectors are parallel."""
    v1 = a[0] * b[1] - a[1] * b[0]
    v2 = a[1] * b[2] - a[2] * b[1]
    v3 = a[0] * b[2] - a[2] * b[0]
    return is_equal_d(v1, ZERO) and is_equal_d(v2, ZERO) and is_equal_d(v3, ZERO)


def collinear(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if the three 3D points lie on one line."""
    return collinear_vectors(b - a, c - a)


def coplanar_vectors(v1: Vector, v2: Vector, v3: Vector) -> bool:
    """Return True if the three vectors have a zero scalar triple product."""
    return is_equal_d(scalar_triple_product(v1, v2, v3), ZERO)


def coplanar(a: Vector, b: Vector, c: Vector, d: Vector) -> bool:
    """Return True if the four 3D points lie in one plane."""
    return coplanar_vectors(b - a, c - a, d - a)


def segment_is_left(base: Segment2d, compare: Segment2d, point: Vector) -> bool:
    """Return True if base lies left of compare at the height of the point."""
    return base.x_at(point[1]) < compare.x_at(point[1])