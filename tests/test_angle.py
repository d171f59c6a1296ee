import pytest

from geomkit.angle import angle_line_plane, angle_lines_2d, angle_lines_3d, angle_planes
from geomkit.line import Line, Line2d
from geomkit.plane import Plane
from geomkit.vector import Vector


def test_same_2d_line_has_zero_angle():
    line = Line2d(Vector(0.0, 0.0), Vector(1.0, 2.0))
    assert angle_lines_2d(line, line) == pytest.approx(0.0, abs=1e-6)


def test_2d_angle_is_symmetric_and_ignores_direction_sign():
    l1 = Line2d(Vector(0.0, 0.0), Vector(1.0, 0.0))
    l2 = Line2d(Vector(1.0, 1.0), Vector(1.0, 1.0))
    l3 = Line2d(Vector(1.0, 1.0), Vector(-1.0, -1.0))
    assert angle_lines_2d(l1, l2) == pytest.approx(angle_lines_2d(l2, l1))
    assert angle_lines_2d(l1, l2) == pytest.approx(angle_lines_2d(l1, l3))
    assert angle_lines_2d(l1, l2) == pytest.approx(45.0)


def test_perpendicular_3d_lines():
    l1 = Line.from_points(Vector(0.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
    l2 = Line.from_points(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, 5.0))
    assert angle_lines_3d(l1, l2) == pytest.approx(90.0)


def test_line_along_normal_and_line_in_plane():
    plane = Plane(Vector(0.0, 0.0, 1.0), 0.0)
    along = Line.from_points(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, 3.0))
    inside = Line.from_points(Vector(0.0, 0.0, 0.0), Vector(2.0, 1.0, 0.0))
    assert angle_line_plane(inside, plane) == pytest.approx(0.0, abs=1e-6)
    assert angle_line_plane(along, plane) + angle_line_plane(inside, plane) == pytest.approx(
        angle_lines_3d(along, inside)
    )


def test_line_plane_complements_line_normal_angle():
    plane = Plane(Vector(1.0, 1.0, 0.0), 0.0)
    line = Line.from_points(Vector(0.0, 0.0, 0.0), Vector(1.0, 2.0, 3.0))
    normal_line = Line(Vector(0.0, 0.0, 0.0), plane.normal)
    assert angle_line_plane(line, plane) + angle_lines_3d(line, normal_line) == pytest.approx(90.0)


def test_planes_angle_equals_angle_of_normals():
    p1 = Plane(Vector(0.0, 0.0, 1.0), 0.0)
    p2 = Plane(Vector(0.0, 1.0, 1.0), 2.0)
    n1 = Line(Vector(0.0, 0.0, 0.0), p1.normal)
    n2 = Line(Vector(0.0, 0.0, 0.0), p2.normal)
    assert angle_planes(p1, p1) == pytest.approx(0.0, abs=1e-6)
    assert angle_planes(p1, p2) == pytest.approx(angle_lines_3d(n1, n2))
    assert angle_planes(p1, p2) == pytest.approx(angle_planes(p2, p1))


def test_mixed_dimensions_raise():
    l2 = Line2d(Vector(0.0, 0.0), Vector(1.0, 0.0))
    l3 = Line.from_points(Vector(0.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        angle_lines_3d(l2, l3)