"""Fixed-dimension vectors with tolerant equality and basic vector algebra."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from geomkit.core import is_equal_d


class Vector:
    """An immutable vector of at least two float coordinates."""

    __slots__ = ("_coords",)

    def __init__(self, *args) -> None:
        if len(args) == 1:
            values: Iterable = args[0]
        else:
            values = args
        coords = tuple(float(c) for c in values)
        if len(coords) < 2:
            raise ValueError("a vector needs at least two coordinates")
        self._coords = coords

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(c) for c in self._coords)})"

    def _check_same_dimension(self, other: "Vector") -> None:
        if len(self._coords) != len(other._coords):
            raise ValueError("vectors have different dimensions")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self._coords) != len(other._coords):
            return False
        return all(is_equal_d(a, b) for a, b in zip(self._coords, other._coords))

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        for a, b in zip(self._coords, other._coords):
            if a < b:
                return True
            if a > b:
                return False
        return False

    def __gt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self == other:
            return False
        return not self < other

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dimension(other)
        return Vector(a + b for a, b in zip(self._coords, other._coords))

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dimension(other)
        return Vector(a - b for a, b in zip(self._coords, other._coords))

    def __mul__(self, value: float) -> "Vector":
        if isinstance(value, Vector):
            return NotImplemented
        return Vector(c * value for c in self._coords)

    __rmul__ = __mul__

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < len(self._coords):
            raise IndexError("vector index out of range")
        return self._coords[index]

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(sum(c * c for c in self._coords))

    def normalized(self) -> "Vector":
        """Return a unit vector in the same direction (NaN coordinates for a zero vector)."""
        mag = self.magnitude()
        if mag == 0:
            return Vector([math.nan] * len(self._coords))
        return Vector(c / mag for c in self._coords)

    def with_coord(self, index: int, value: float) -> "Vector":
        """Return a copy with one coordinate replaced."""
        if not 0 <= index < len(self._coords):
            raise IndexError("vector index out of range")
        coords = list(self._coords)
        coords[index] = float(value)
        return Vector(coords)


def dot_product(v1: Vector, v2: Vector) -> float:
    """Return the dot product of two vectors of equal dimension."""
    if len(v1) != len(v2):
        raise ValueError("vectors have different dimensions")
    return sum(a * b for a, b in zip(v1, v2))


def cross_product_3d(a: Vector, b: Vector) -> Vector:
    """Return the cross product of two 3D vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("cross product needs 3D vectors")
    x = a[1] * b[2] - b[1] * a[2]
    y = -(b[2] * a[0] - a[2] * b[0])
    z = a[0] * b[1] - b[0] * a[1]
    return Vector(x, y, z)


def scalar_triple_product(a: Vector, b: Vector, c: Vector) -> float:
    """Return a . (b x c)."""
    return dot_product(a, cross_product_3d(b, c))


def orthogonal(a: Vector, b: Vector) -> bool:
    """Return True if the two vectors are perpendicular."""
    return is_equal_d(dot_product(a, b), 0.0)


def perpendicular(vec: Vector) -> Vector:
    """Return the 2D vector rotated a quarter turn clockwise."""
    return Vector(vec[1], -vec[0])