import pytest

from geomkit.point import DEFAULT_POINT_2D
from geomkit.segment import Segment2d
from geomkit.vector import Vector


def test_x_at_endpoints():
    seg = Segment2d(Vector(1, 2), Vector(5, 10))
    assert seg.x_at(2) == pytest.approx(1)
    assert seg.x_at(10) == pytest.approx(5)


def test_x_at_midpoint():
    a, b = Vector(-3, 1), Vector(7, 9)
    seg = Segment2d(a, b)
    assert seg.x_at((a[1] + b[1]) / 2) == pytest.approx((a[0] + b[0]) / 2)


def test_x_at_vertical_segment_constant():
    seg = Segment2d(Vector(4, 0), Vector(4, 8))
    assert seg.x_at(3) == pytest.approx(4)


def test_horizontal_segment_raises():
    seg = Segment2d(Vector(0, 1), Vector(5, 1))
    with pytest.raises(ZeroDivisionError):
        seg.x_at(1)


def test_default_ends():
    seg = Segment2d()
    assert seg.p1 == DEFAULT_POINT_2D
    assert seg.p2 == DEFAULT_POINT_2D