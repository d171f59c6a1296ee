"""Doubly connected edge list for simple polygons."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from geomkit.vector import Vector

_edge_ids = itertools.count(1)


@dataclass(eq=False)
class DcelVertex:
    """A vertex with one of its outgoing half edges."""

    point: Vector
    incident_edge: Optional["DcelEdge"] = field(default=None, repr=False)


class DcelEdge:
    """A half edge; an edge without an origin is a placeholder with id -1."""

    def __init__(self, origin: Optional[DcelVertex] = None) -> None:
        self.origin = origin
        self.twin: Optional[DcelEdge] = None
        self.next: Optional[DcelEdge] = None
        self.prev: Optional[DcelEdge] = None
        self.incident_face: Optional[DcelFace] = None
        self.id = next(_edge_ids) if origin is not None else -1

    def destination(self) -> DcelVertex:
        """Return the vertex this half edge points to."""
        if self.twin is None:
            raise ValueError("half edge has no twin")
        return self.twin.origin

    def __repr__(self) -> str:
        origin = self.origin.point if self.origin is not None else None
        return f"DcelEdge(id={self.id}, origin={origin!r})"


def _cycle(start: DcelEdge) -> Iterator[DcelEdge]:
    edge = start
    while True:
        yield edge
        edge = edge.next
        if edge is start:
            return


@dataclass(eq=False)
class DcelFace:
    """A face bounded by an outer cycle, possibly with inner (hole) cycles."""

    outer: Optional[DcelEdge] = None
    inner: list[DcelEdge] = field(default_factory=list)

    def edges(self) -> list[DcelEdge]:
        """Return the half edges of the outer cycle."""
        return list(_cycle(self.outer)) if self.outer is not None else []

    def points(self) -> list[Vector]:
        """Return the origin points of the outer cycle."""
        return [edge.origin.point for edge in self.edges()]


def _outgoing(vertex: DcelVertex) -> list[DcelEdge]:
    start = vertex.incident_edge
    edges = [start]
    edge = start.twin.next
    while edge is not start:
        edges.append(edge)
        edge = edge.twin.next
    return edges


class PolygonDCEL:
    """A polygon, given counter-clockwise, held as a doubly connected edge list."""

    def __init__(self, points: Sequence[Vector]) -> None:
        self._vertices: list[DcelVertex] = []
        self._edges: list[DcelEdge] = []
        self._faces: list[DcelFace] = []
        if len(points) < 3:
            return

        self._vertices = [DcelVertex(point) for point in points]
        count = len(self._vertices)
        for i, vertex in enumerate(self._vertices):
            half = DcelEdge(vertex)
            twin = DcelEdge(self._vertices[(i + 1) % count])
            vertex.incident_edge = half
            half.twin = twin
            twin.twin = half
            self._edges.extend((half, twin))

        total = len(self._edges)
        for i, edge in enumerate(self._edges):
            if i % 2 == 0:
                edge.next = self._edges[(i + 2) % total]
                edge.prev = self._edges[(i - 2) % total]
            else:
                edge.next = self._edges[(i - 2) % total]
                edge.prev = self._edges[(i + 2) % total]

        bounded = DcelFace(outer=self._edges[0])
        unbounded = DcelFace(inner=[self._edges[1]])
        self._faces = [bounded, unbounded]
        for edge in _cycle(bounded.outer):
            edge.incident_face = bounded
        for edge in _cycle(unbounded.inner[0]):
            edge.incident_face = unbounded

    def edges_with_same_face(
        self, v1: DcelVertex, v2: DcelVertex
    ) -> Optional[tuple[DcelEdge, DcelEdge]]:
        """Return half edges leaving v1 and v2 on a common bounded face, or None."""
        from_v1 = _outgoing(v1)
        from_v2 = _outgoing(v2)
        for ev1 in from_v1:
            for ev2 in from_v2:
                if ev1.incident_face.outer is not None and ev1.incident_face is ev2.incident_face:
                    return ev1, ev2
        return None

    def split(self, v1: DcelVertex, v2: DcelVertex) -> bool:
        """Insert a diagonal between v1 and v2, splitting their common face in two."""
        pair = self.edges_with_same_face(v1, v2)
        if pair is None:
            return False
        edge_v1, edge_v2 = pair
        if edge_v1.next.origin is v2 or edge_v1.prev.origin is v2:
            return False

        previous_face = edge_v1.incident_face

        half1 = DcelEdge(v1)
        half2 = DcelEdge(v2)
        half1.twin = half2
        half2.twin = half1
        half1.next = edge_v2
        half2.next = edge_v1
        half1.prev = edge_v1.prev
        half2.prev = edge_v2.prev
        half1.next.prev = half1
        half2.next.prev = half2
        half1.prev.next = half1
        half2.prev.next = half2

        new_faces = []
        for half in (half1, half2):
            face = DcelFace(outer=half)
            for edge in _cycle(half):
                edge.incident_face = face
            new_faces.append(face)
        self._faces.extend(new_faces)

        for index, face in enumerate(self._faces):
            if face is previous_face:
                del self._faces[index]
                break
        return True

    def vertices(self) -> list[DcelVertex]:
        """Return the polygon's vertices."""
        return list(self._vertices)

    def faces(self) -> list[DcelFace]:
        """Return all faces, the unbounded one included."""
        return list(self._faces)

    def edges(self) -> list[DcelEdge]:
        """Return the half edges of the original polygon boundary."""
        return list(self._edges)

    def find_vertex(self, point: Vector) -> Optional[DcelVertex]:
        """Return the first vertex at the given point, or None."""
        return next((v for v in self._vertices if v.point == point), None)


def vertex_tblr_key(vertex: DcelVertex) -> tuple[float, float]:
    """Sort key for vertices: top to bottom, then left to right."""
    return (-vertex.point[1], vertex.point[0])