"""Flatten geometric primitives into float lists for drawing."""

from __future__ import annotations

from typing import Iterable

from geomkit.dcel import DcelEdge
from geomkit.line import StdLine
from geomkit.point import DEFAULT_POINT_2D
from geomkit.polygon import Edge2dSimple
from geomkit.segment import Segment2d
from geomkit.vector import Vector

RECT_2D_POINTS = (
    -0.01, -0.01,
    0.01, -0.01,
    0.01, 0.01,
    0.01, 0.01,
    -0.01, -0.01,
    -0.01, 0.01,
)

POINT_COLORS = (
    0.95, 0.45, 0.2,
    0.2, 0.95, 0.4,
    0.95, 0.2, 0.84,
    1.0, 0.0, 0.0,
    0.0, 1.0, 0.0,
    0.0, 0.0, 1.0,
    0.6, 0.2, 0.95,
    0.2, 0.94, 0.95,
    0.9, 0.95, 0.2,
    0.6, 0.95, 0.2,
    0.8, 0.1, 0.2,
    0.0, 0.0, 1.2,
)

CLIP_Y = 10.0


def rectangle_vertices(point: Vector) -> list[float]:
    """Return two triangles (12 floats) forming a small square around the point."""
    return [
        offset + (point[0] if i % 2 == 0 else point[1])
        for i, offset in enumerate(RECT_2D_POINTS)
    ]


def rectangle_point_cloud(points: Iterable[Vector]) -> list[float]:
    """Return the square vertices of every point, concatenated."""
    return [value for point in points for value in rectangle_vertices(point)]


def line_data_from_points(points: Iterable[Vector]) -> list[float]:
    """Return x, y of every point, concatenated."""
    return [coord for point in points for coord in (point[0], point[1])]


def _pair(p1: Vector, p2: Vector) -> list[float]:
    return [p1[0], p1[1], p2[0], p2[1]]


def line_points_from_edges(edges: Iterable[Edge2dSimple]) -> list[float]:
    """Return the end points of every edge as x1, y1, x2, y2."""
    return [v for edge in edges for v in _pair(edge.p1, edge.p2)]


def line_points_from_segments(segments: Iterable[Segment2d]) -> list[float]:
    """Return the end points of every fully set segment as x1, y1, x2, y2."""
    return [
        v
        for seg in segments
        if seg.p1 != DEFAULT_POINT_2D and seg.p2 != DEFAULT_POINT_2D
        for v in _pair(seg.p1, seg.p2)
    ]


def line_points_from_face_edges(edges: Iterable[Edge2dSimple]) -> list[float]:
    """Return the fp1/fp2 points of every edge where both are set."""
    return [
        v
        for edge in edges
        if edge.fp1 != DEFAULT_POINT_2D and edge.fp2 != DEFAULT_POINT_2D
        for v in _pair(edge.fp1, edge.fp2)
    ]


def line_points_from_dcel(edges: Iterable[DcelEdge]) -> list[float]:
    """Return origin and destination of every half edge as x1, y1, x2, y2."""
    return [v for edge in edges for v in _pair(edge.origin.point, edge.destination().point)]


def colored_point_data(points: Iterable[Vector], color_index: int = 0) -> list[float]:
    """Return x, y, 0 and an RGB colour (chosen from six by color_index) per point."""
    base = color_index % 6 * 3
    color = POINT_COLORS[base:base + 3]
    return [v for point in points for v in (point[0], point[1], 0.0, *color)]


def line_data_2d(line: StdLine) -> list[float]:
    """Return the line clipped to y = 10 and y = -10 as x1, 10, x2, -10."""
    p1 = line.point
    direction = line.direction
    if direction[1] == 0:
        raise ValueError("a horizontal line cannot be clipped to horizontal bounds")
    slope = direction[0] / direction[1]
    x1 = slope * (CLIP_Y - p1[1]) + p1[0]
    x2 = slope * (-CLIP_Y - p1[1]) + p1[0]
    return [x1, CLIP_Y, x2, -CLIP_Y]


def lines_data_2d(lines: Iterable[StdLine]) -> list[float]:
    """Return the clipped end points of every line, concatenated."""
    return [v for line in lines for v in line_data_2d(line)]