import pytest

from geomkit.line import Line, Line2d, StdLine
from geomkit.vector import Vector, cross_product_3d, dot_product


def test_line_from_points():
    p1, p2 = Vector(1, 2, 3), Vector(4, 6, 3)
    line = Line.from_points(p1, p2)
    assert line.point == p1
    assert line.direction.magnitude() == pytest.approx(1.0)
    assert cross_product_3d(line.direction, p2 - p1).magnitude() == pytest.approx(0.0)
    assert dot_product(line.direction, p2 - p1) > 0


def test_line_keeps_given_direction():
    d = Vector(0, 0, 2)
    line = Line(Vector(0, 0, 0), d)
    assert line.direction == d


def test_line2d_normalizes_and_normal_is_perpendicular():
    line = Line2d(Vector(1, 1), Vector(3, 4))
    assert line.point == Vector(1, 1)
    assert line.direction.magnitude() == pytest.approx(1.0)
    assert dot_product(line.direction, line.normal) == pytest.approx(0.0)
    assert line.normal[0] == pytest.approx(-line.direction[1])


def test_stdline_from_points():
    p1, p2 = Vector(0, 0), Vector(2, 2)
    line = StdLine(p1, p2, True)
    assert line.second == p2
    assert line.point == p1
    assert line.direction == (p2 - p1).normalized()


def test_stdline_from_direction():
    p1, d = Vector(1, 1), Vector(0, 5)
    line = StdLine(p1, d)
    assert line.direction == d.normalized()
    assert line.second == Vector(0, 0)


def test_stdline_d_is_settable():
    line = StdLine(Vector(0, 0), Vector(1, 0))
    line.d = 2.5
    assert line.d == 2.5