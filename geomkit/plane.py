"""Planes in normal-point form (n . X = d)."""

from __future__ import annotations

from geomkit.core import is_equal_d
from geomkit.vector import Vector, cross_product_3d, dot_product


class Plane:
    """A 3D plane with normal n and constant d such that n . X = d."""

    __slots__ = ("normal", "d")

    def __init__(self, normal: Vector, d: float = 0.0) -> None:
        self.normal = normal.normalized()
        self.d = float(d)

    @classmethod
    def from_normal_point(cls, normal: Vector, point: Vector) -> "Plane":
        """Build the plane with the given normal (kept as is) through point."""
        plane = cls.__new__(cls)
        plane.normal = normal
        plane.d = dot_product(normal, point)
        return plane

    @classmethod
    def from_points(cls, p1: Vector, p2: Vector, p3: Vector) -> "Plane":
        """Build the plane through three points, normal oriented by their order."""
        normal = cross_product_3d(p2 - p1, p3 - p1).normalized()
        plane = cls.__new__(cls)
        plane.normal = normal
        plane.d = dot_product(normal, p1)
        return plane

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return self.normal == other.normal and is_equal_d(self.d, other.d)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Plane(normal={self.normal!r}, d={self.d!r})"