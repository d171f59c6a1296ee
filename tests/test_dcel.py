import pytest

from geomkit.dcel import DcelEdge, PolygonDCEL, vertex_tblr_key
from geomkit.vector import Vector

SQUARE = [Vector(0, 0), Vector(1, 0), Vector(1, 1), Vector(0, 1)]


@pytest.fixture
def square():
    return PolygonDCEL(SQUARE)


def test_counts(square):
    assert len(square.vertices()) == 4
    assert len(square.edges()) == 8
    assert len(square.faces()) == 2


def test_bounded_face_points(square):
    bounded = square.faces()[0]
    assert bounded.points() == SQUARE


def test_unbounded_face_has_hole_cycle(square):
    unbounded = square.faces()[1]
    assert unbounded.outer is None
    assert unbounded.edges() == []
    start = unbounded.inner[0]
    origins = []
    edge = start
    while True:
        origins.append(edge.origin.point)
        assert edge.incident_face is unbounded
        edge = edge.next
        if edge is start:
            break
    assert origins == [SQUARE[1], SQUARE[0], SQUARE[3], SQUARE[2]]


def test_edge_invariants(square):
    for edge in square.edges():
        assert edge.twin.twin is edge
        assert edge.next.prev is edge
        assert edge.prev.next is edge
        assert edge.destination() is edge.twin.origin
        assert edge.destination() is edge.next.origin


def test_edge_ids_unique_and_positive(square):
    ids = [edge.id for edge in square.edges()]
    assert len(set(ids)) == len(ids)
    assert all(i > 0 for i in ids)


def test_placeholder_edge():
    edge = DcelEdge()
    assert edge.id == -1
    with pytest.raises(ValueError):
        edge.destination()


def test_too_few_points_gives_empty_polygon():
    poly = PolygonDCEL(SQUARE[:2])
    assert poly.vertices() == []
    assert poly.edges() == []
    assert poly.faces() == []


def test_find_vertex(square):
    vertex = square.find_vertex(Vector(1, 1))
    assert vertex is square.vertices()[2]
    assert square.find_vertex(Vector(5, 5)) is None


def test_edges_with_same_face(square):
    v0, _, v2, _ = square.vertices()
    ev1, ev2 = square.edges_with_same_face(v0, v2)
    assert ev1.origin is v0
    assert ev2.origin is v2
    assert ev1.incident_face is ev2.incident_face
    assert ev1.incident_face.outer is not None


def test_split_diagonal(square):
    v0, _, v2, _ = square.vertices()
    old_bounded = square.faces()[0]
    assert square.split(v0, v2) is True
    faces = square.faces()
    assert len(faces) == 3
    assert all(face is not old_bounded for face in faces)
    bounded = [face for face in faces if face.outer is not None]
    assert [face.points() for face in bounded] == [
        [SQUARE[0], SQUARE[2], SQUARE[3]],
        [SQUARE[2], SQUARE[0], SQUARE[1]],
    ]
    for face in bounded:
        for edge in face.edges():
            assert edge.incident_face is face
            assert edge.next.prev is edge


def test_split_adjacent_vertices_refused(square):
    v0, v1, _, _ = square.vertices()
    assert square.split(v0, v1) is False
    assert len(square.faces()) == 2


def test_vertex_tblr_key_sorting(square):
    ordered = sorted(square.vertices(), key=vertex_tblr_key)
    assert [v.point for v in ordered] == [SQUARE[3], SQUARE[2], SQUARE[0], SQUARE[1]]