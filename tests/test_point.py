from geomkit.point import DEFAULT_POINT_2D, lrtb_key, tblr_key, x_key, y_key
from geomkit.vector import Vector


def _points():
    return [Vector(2, 1), Vector(1, 3), Vector(1, 1), Vector(3, 3)]


def test_lrtb_order():
    a, b, c, d = _points()
    assert sorted(_points(), key=lrtb_key) == [c, b, a, d]


def test_tblr_order():
    a, b, c, d = _points()
    assert sorted(_points(), key=tblr_key) == [b, d, c, a]


def test_tblr_works_for_3d_points():
    p, q = Vector(0, 5, 1), Vector(1, 5, -1)
    assert sorted([q, p], key=tblr_key) == [p, q]


def test_x_and_y_keys():
    pts = _points()
    assert [x_key(p) for p in sorted(pts, key=x_key)] == sorted(p[0] for p in pts)
    assert [y_key(p) for p in sorted(pts, key=y_key)] == sorted(p[1] for p in pts)


def test_default_point_equals_itself():
    assert DEFAULT_POINT_2D == Vector(float("inf"), float("inf"))
    assert not (Vector(0, 0) == DEFAULT_POINT_2D)