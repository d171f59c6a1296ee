"""Intersection tests between lines, segments and planes, and polygon diagonals."""

from __future__ import annotations

import math
from typing import Optional

from geomkit.core import ZERO, RelativePosition, is_equal_d
from geomkit.line import Line, Line2d
from geomkit.plane import Plane
from geomkit.polygon import Polygon2dSimple, Vertex2dSimple
from geomkit.predicates import left, left_or_beyond, orientation_2d
from geomkit.segment import Segment2d
from geomkit.vector import Vector, cross_product_3d, dot_product, perpendicular


def _ratio_negative(numerator: float, denominator: float) -> bool:
    """Return True if numerator / denominator is negative, with IEEE rules for a zero divisor."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return False
        return math.copysign(1.0, numerator) * math.copysign(1.0, denominator) < 0
    return numerator / denominator < 0


def intersect_lines_2d(l1: Line2d, l2: Line2d) -> Optional[Vector]:
    """Return where the rays of two 2D lines meet ahead of both their points, or None."""
    l1p, l2p = l1.point, l2.point
    l1d, l2d = l1.direction, l2.direction

    if is_equal_d(dot_product(l1d, perpendicular(l2d)), ZERO):
        return None

    a = l1d[0]
    b = -l2d[0]
    c = l2p[0] - l1p[0]
    d = l1d[1]
    e = -l2d[1]
    f = l2p[1] - l1p[1]

    t = (c * e - b * f) / (a * e - b * d)
    x = l1p[0] + t * l1d[0]
    y = l1p[1] + t * l1d[1]

    if _ratio_negative(x - l1p[0], l1d[0]) or _ratio_negative(y - l1p[1], l1d[1]):
        return None
    if _ratio_negative(x - l2p[0], l2d[0]) or _ratio_negative(y - l2p[1], l2d[1]):
        return None
    return Vector(x, y)


def segments_intersect(a: Vector, b: Vector, c: Vector, d: Vector) -> bool:
    """Return True if segment ab meets segment cd (touching an end point counts)."""
    if RelativePosition.BETWEEN in (
        orientation_2d(a, b, c),
        orientation_2d(a, b, d),
        orientation_2d(c, d, a),
        orientation_2d(c, d, b),
    ):
        return True
    return (left(a, b, c) != left(a, b, d)) and (left(c, d, a) != left(c, d, b))


def segment_lines_intersection(
    a: Vector, b: Vector, c: Vector, d: Vector
) -> Optional[Vector]:
    """Return where the lines through ab and cd meet, or None if they are parallel."""
    ab = b - a
    cd = d - c
    normal = Vector(cd[1], -cd[0])
    denominator = dot_product(normal, ab)
    if is_equal_d(denominator, ZERO):
        return None
    t = dot_product(normal, c - a) / denominator
    return Vector(a[0] + t * ab[0], a[1] + t * ab[1])


def intersect_plane_line(plane: Plane, line: Line) -> Optional[Vector]:
    """Return where the line crosses the plane, or None if it is parallel to it."""
    n = plane.normal
    direction = line.direction
    point = line.point
    denominator = dot_product(n, direction)
    if is_equal_d(denominator, ZERO):
        return None
    t = (plane.d - dot_product(n, point)) / denominator
    return point + direction * t


def intersect_planes(p1: Plane, p2: Plane) -> Optional[Line]:
    """Return the line where two planes meet, or None if they are parallel."""
    n1, n2 = p1.normal, p2.normal
    d1, d2 = p1.d, p2.d
    cross = cross_product_3d(n1, n2)
    if is_equal_d(cross.magnitude(), ZERO):
        return None
    direction = cross.normalized()

    n1n2 = dot_product(n1, n2)
    n1n2_sq = n1n2 * n1n2
    a = (d2 * n1n2 - d1) / (n1n2_sq - 1)
    b = (d1 * n1n2 - d2) / (n1n2_sq - 1)
    return Line(n1 * a + n2 * b, direction)


def _segment_line(segment: Segment2d) -> Line2d:
    return Line2d(segment.p1, segment.p2 - segment.p1)


def line_intersects_segment(line: Line2d, segment: Segment2d) -> bool:
    """Return True if the line's ray meets the ray along the segment from its first point."""
    return intersect_lines_2d(line, _segment_line(segment)) is not None


def line_segment_intersection(line: Line2d, segment: Segment2d) -> Optional[Vector]:
    """Return where the line's ray meets the ray along the segment, or None."""
    return intersect_lines_2d(line, _segment_line(segment))


def _in_cone(v1: Vertex2dSimple, v2: Vertex2dSimple) -> bool:
    if left_or_beyond(v1.point, v1.next.point, v1.prev.point):
        # convex vertex
        return left(v1.point, v2.point, v1.prev.point) and left(
            v2.point, v1.point, v1.next.point
        )
    # reflex vertex
    return not (
        left_or_beyond(v1.point, v2.point, v1.next.point)
        and left_or_beyond(v2.point, v1.point, v1.prev.point)
    )


def is_diagonal(
    v1: Vertex2dSimple,
    v2: Vertex2dSimple,
    polygon: Optional[Polygon2dSimple] = None,
) -> bool:
    """Return True if v1-v2 is a diagonal of the polygon ring they belong to."""
    start = polygon.vertices()[0] if polygon is not None else v1
    endpoints = (v1, v2)
    current = start
    while True:
        following = current.next
        if (
            all(current is not v for v in endpoints)
            and all(following is not v for v in endpoints)
            and segments_intersect(v1.point, v2.point, current.point, following.point)
        ):
            return False
        current = following
        if current is start:
            break
    return _in_cone(v1, v2) and _in_cone(v2, v1)