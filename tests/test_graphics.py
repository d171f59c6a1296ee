import pytest

from geomkit.dcel import PolygonDCEL
from geomkit.graphics import (
    POINT_COLORS,
    RECT_2D_POINTS,
    colored_point_data,
    line_data_2d,
    line_data_from_points,
    line_points_from_dcel,
    line_points_from_edges,
    line_points_from_face_edges,
    line_points_from_segments,
    lines_data_2d,
    rectangle_point_cloud,
    rectangle_vertices,
)
from geomkit.line import StdLine
from geomkit.polygon import Edge2dSimple
from geomkit.segment import Segment2d
from geomkit.vector import Vector


def test_rectangle_at_origin_is_template():
    assert rectangle_vertices(Vector(0.0, 0.0)) == pytest.approx(list(RECT_2D_POINTS))


def test_rectangle_is_translated():
    data = rectangle_vertices(Vector(0.5, -0.25))
    assert len(data) == 12
    xs = [v - 0.5 for v in data[0::2]]
    ys = [v + 0.25 for v in data[1::2]]
    assert xs == pytest.approx(list(RECT_2D_POINTS[0::2]))
    assert ys == pytest.approx(list(RECT_2D_POINTS[1::2]))


def test_point_cloud_concatenates():
    a, b = Vector(0.1, 0.2), Vector(-0.3, 0.4)
    assert rectangle_point_cloud([a, b]) == rectangle_vertices(a) + rectangle_vertices(b)


def test_line_data_from_points():
    assert line_data_from_points([Vector(1.0, 2.0), Vector(3.0, 4.0)]) == [1.0, 2.0, 3.0, 4.0]


def test_edges_flattened():
    edge = Edge2dSimple(Vector(1.0, 2.0), Vector(3.0, 4.0))
    assert line_points_from_edges([edge]) == [1.0, 2.0, 3.0, 4.0]


def test_unset_segments_are_skipped():
    full = Segment2d(Vector(0.0, 1.0), Vector(2.0, 3.0))
    half = Segment2d(p1=Vector(5.0, 5.0))
    assert line_points_from_segments([full, half, Segment2d()]) == [0.0, 1.0, 2.0, 3.0]


def test_face_edges_use_second_pair():
    edge = Edge2dSimple(
        Vector(1.0, 1.0), Vector(2.0, 2.0), fp1=Vector(7.0, 8.0), fp2=Vector(9.0, 6.0)
    )
    assert line_points_from_face_edges([edge]) == [7.0, 8.0, 9.0, 6.0]


def test_dcel_edges():
    square = [Vector(0.0, 0.0), Vector(1.0, 0.0), Vector(1.0, 1.0), Vector(0.0, 1.0)]
    poly = PolygonDCEL(square)
    edges = poly.edges()
    data = line_points_from_dcel(edges)
    assert len(data) == 4 * len(edges)
    assert data[:4] == [0.0, 0.0, 1.0, 0.0]


def test_colored_point_data_wraps_every_six():
    points = [Vector(0.5, -0.5)]
    first = colored_point_data(points, 0)
    assert first[:3] == [0.5, -0.5, 0.0]
    assert first[3:] == list(POINT_COLORS[:3])
    assert colored_point_data(points, 6) == first
    assert colored_point_data(points, 1)[3:] == list(POINT_COLORS[3:6])


def test_vertical_line_clipped():
    line = StdLine(Vector(0.3, 0.0), Vector(0.0, 1.0))
    assert line_data_2d(line) == pytest.approx([0.3, 10.0, 0.3, -10.0])


def test_clipped_points_lie_on_line():
    line = StdLine(Vector(1.0, 2.0), Vector(2.0, 1.0))
    x1, y1, x2, y2 = line_data_2d(line)
    d = line.direction
    assert (x1 - 1.0) * d[1] == pytest.approx((y1 - 2.0) * d[0])
    assert (x2 - 1.0) * d[1] == pytest.approx((y2 - 2.0) * d[0])


def test_horizontal_line_rejected():
    with pytest.raises(ValueError):
        line_data_2d(StdLine(Vector(0.0, 0.0), Vector(1.0, 0.0)))


def test_lines_data_concatenates():
    l1 = StdLine(Vector(0.3, 0.0), Vector(0.0, 1.0))
    l2 = StdLine(Vector(1.0, 2.0), Vector(2.0, 1.0))
    assert lines_data_2d([l1, l2]) == line_data_2d(l1) + line_data_2d(l2)