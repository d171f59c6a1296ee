"""Vertices, edges and triangular faces of polyhedra."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from geomkit.plane import Plane
from geomkit.vector import Vector


@dataclass(eq=False)
class Vertex3d:
    """A polyhedron vertex referring to a shared point object."""

    point: Optional[Vector] = None
    processed: bool = False


class Edge3d:
    """An edge between two vertices with up to two adjacent faces."""

    def __init__(self, v1: Vertex3d, v2: Vertex3d) -> None:
        self.vertices = [v1, v2]
        self.faces: list[Optional[Face]] = [None, None]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge3d):
            return NotImplemented
        return (
            self.vertices[0].point == other.vertices[0].point
            and self.vertices[1].point == other.vertices[1].point
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Edge3d({self.vertices[0].point!r}, {self.vertices[1].point!r})"


class Face:
    """A triangular face with its supporting plane; may be created empty."""

    def __init__(
        self,
        v1: Optional[Vertex3d] = None,
        v2: Optional[Vertex3d] = None,
        v3: Optional[Vertex3d] = None,
    ) -> None:
        self.edges: list[Edge3d] = []
        self.vertices: list[Vertex3d] = []
        self.plane: Optional[Plane] = None
        self.visible = False
        self.normal_switch_needed = False
        given = [v for v in (v1, v2, v3) if v is not None]
        if not given:
            return
        if len(given) != 3:
            raise ValueError("a face needs three vertices")
        self.vertices = given
        self.plane = Plane.from_points(v1.point, v2.point, v3.point)

    def __eq__(self, other: object) -> bool:
        """Faces are equal when they share the same point objects in the same order."""
        if not isinstance(other, Face):
            return NotImplemented
        if len(self.vertices) != len(other.vertices):
            return False
        return all(a.point is b.point for a, b in zip(self.vertices, other.vertices))

    __hash__ = None  # type: ignore[assignment]

    def add_edge(self, edge: Edge3d) -> None:
        """Attach an edge to this face."""
        self.edges.append(edge)

    def __repr__(self) -> str:
        return f"Face({[v.point for v in self.vertices]!r})"