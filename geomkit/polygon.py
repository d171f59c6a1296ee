"""Polygons stored as circular doubly linked vertex rings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from geomkit.vector import Vector


@dataclass(eq=False)
class Vertex:
    """A 3D polygon vertex linked to its neighbours."""

    point: Vector
    next: Optional["Vertex"] = field(default=None, repr=False)
    prev: Optional["Vertex"] = field(default=None, repr=False)
    id: int = 0


@dataclass(eq=False)
class Vertex2dSimple:
    """A 2D polygon vertex linked to its neighbours, with ear-clipping flags."""

    point: Vector
    next: Optional["Vertex2dSimple"] = field(default=None, repr=False)
    prev: Optional["Vertex2dSimple"] = field(default=None, repr=False)
    is_ear: bool = False
    is_processed: bool = False


@dataclass
class Edge2dSimple:
    """A 2D edge with its end points and an optional second pair of points."""

    p1: Vector = field(default_factory=lambda: Vector(0.0, 0.0))
    p2: Vector = field(default_factory=lambda: Vector(0.0, 0.0))
    fp1: Vector = field(default_factory=lambda: Vector(0.0, 0.0))
    fp2: Vector = field(default_factory=lambda: Vector(0.0, 0.0))


def _link_ring(vertices: list) -> None:
    """Link the vertices into a closed ring in list order."""
    size = len(vertices)
    for i, vertex in enumerate(vertices):
        vertex.next = vertices[(i + 1) % size]
        vertex.prev = vertices[i - 1]


def _append_to_ring(vertices: list, vertex) -> None:
    """Append a vertex to the list and splice it in after the previous last vertex."""
    vertices.append(vertex)
    if len(vertices) == 1:
        vertex.next = vertex
        vertex.prev = vertex
        return
    before = vertices[-2]
    vertex.next = before.next
    before.next = vertex
    vertex.prev = before
    vertex.next.prev = vertex


class Polygon:
    """A polygon in 3D space given by a ring of vertices."""

    def __init__(self, points: Iterable[Vector] = ()) -> None:
        self._vertices: list[Vertex] = [Vertex(point) for point in points]
        if self._vertices:
            _link_ring(self._vertices)

    def insert(self, point: Vector) -> None:
        """Add a vertex after the most recently added one."""
        _append_to_ring(self._vertices, Vertex(point))

    def points(self) -> list[Vector]:
        """Return the vertex points in insertion order."""
        return [vertex.point for vertex in self._vertices]

    def __repr__(self) -> str:
        return f"Polygon({self.points()!r})"


class Polygon2dSimple:
    """A simple polygon in the plane given by a ring of vertices."""

    def __init__(self, points: Iterable[Vector] = ()) -> None:
        self._vertices: list[Vertex2dSimple] = [Vertex2dSimple(point) for point in points]
        if self._vertices:
            _link_ring(self._vertices)

    @classmethod
    def from_vertex(cls, root: Vertex2dSimple) -> "Polygon2dSimple":
        """Build a polygon from an existing ring, starting at root."""
        polygon = cls()
        polygon._vertices.append(root)
        current = root.next
        while current is not None and current is not root:
            polygon._vertices.append(current)
            current = current.next
        return polygon

    def insert(self, point: Vector) -> None:
        """Add a vertex after the most recently added one."""
        _append_to_ring(self._vertices, Vertex2dSimple(point))

    def remove_vertex(self, vertex: Vertex2dSimple) -> None:
        """Drop the vertex from the vertex list if present; ring links are left as they are."""
        for index, candidate in enumerate(self._vertices):
            if candidate is vertex:
                del self._vertices[index]
                return

    def vertices(self) -> list[Vertex2dSimple]:
        """Return a copy of the vertex list."""
        return list(self._vertices)

    def points(self) -> list[Vector]:
        """Return the vertex points in list order."""
        return [vertex.point for vertex in self._vertices]

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Polygon2dSimple({self.points()!r})"