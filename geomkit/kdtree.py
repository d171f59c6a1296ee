"""A 2D k-d tree over points in the square [-10, 10] x [-10, 10]."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional

from geomkit.vector import Vector


@dataclass
class KDRange:
    """An axis-aligned query or cell rectangle."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def intersects(self, other: "KDRange") -> bool:
        """Return True if the two rectangles overlap or touch."""
        if self.x_max < other.x_min or self.x_min > other.x_max:
            return False
        if self.y_max < other.y_min or self.y_min > other.y_max:
            return False
        return True

    def within(self, other: "KDRange") -> bool:
        """Return True if this rectangle lies completely inside the other."""
        return (
            self.x_min >= other.x_min
            and self.x_max <= other.x_max
            and self.y_min >= other.y_min
            and self.y_max <= other.y_max
        )

    def contains(self, point: Vector) -> bool:
        """Return True if the point lies inside or on the rectangle."""
        return self.x_min <= point[0] <= self.x_max and self.y_min <= point[1] <= self.y_max


def _default_bound() -> KDRange:
    return KDRange(-10.0, 10.0, -10.0, 10.0)


@dataclass(eq=False)
class _Node:
    data: Optional[Vector] = None
    value: float = math.inf
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    boundary: KDRange = field(default_factory=_default_bound)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _build(points: list[Vector], depth: int) -> _Node:
    if len(points) == 1:
        return _Node(data=points[0])
    axis = depth % 2
    ordered = sorted(points, key=lambda p: p[axis])
    mid = len(ordered) // 2
    return _Node(
        value=ordered[mid][axis],
        left=_build(ordered[:mid], depth + 1),
        right=_build(ordered[mid:], depth + 1),
    )


def _assign_boundaries(node: _Node, even_depth: bool) -> None:
    if node.is_leaf:
        return
    if even_depth:
        node.left.boundary = replace(node.boundary, x_max=node.value)
        node.right.boundary = replace(node.boundary, x_min=node.value)
    else:
        node.left.boundary = replace(node.boundary, y_max=node.value)
        node.right.boundary = replace(node.boundary, y_min=node.value)
    _assign_boundaries(node.left, not even_depth)
    _assign_boundaries(node.right, not even_depth)


def _leaves(node: Optional[_Node]) -> Iterator[Vector]:
    if node is None:
        return
    yield from _leaves(node.left)
    if node.is_leaf:
        yield node.data
    yield from _leaves(node.right)


def _search(node: _Node, query: KDRange) -> Iterator[Vector]:
    if node.is_leaf:
        if query.contains(node.data):
            yield node.data
        return
    for child in (node.left, node.right):
        if child.boundary.within(query):
            yield from _leaves(child)
        elif child.boundary.intersects(query):
            yield from _search(child, query)


def _squared_distance(a: Vector, b: Vector) -> float:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


class KDTree:
    """A 2D k-d tree splitting on x at even depths and on y at odd depths."""

    def __init__(self, points: Iterable[Vector] = ()) -> None:
        data = list(points)
        self._root: Optional[_Node] = None
        if data:
            self._root = _build(data, 0)
            self._root.boundary = _default_bound()
            _assign_boundaries(self._root, True)

    def search(self, x_min: float, x_max: float, y_min: float, y_max: float) -> list[Vector]:
        """Return the stored points inside the given rectangle."""
        if self._root is None:
            return []
        return list(_search(self._root, KDRange(x_min, x_max, y_min, y_max)))

    def traverse(self) -> list[Vector]:
        """Return all stored points, leaves in left-to-right order."""
        return list(_leaves(self._root))

    def split_line_data(self) -> list[Vector]:
        """Return end point pairs of every node's split line, in pre-order."""
        result: list[Vector] = []
        root = self._root
        if root is None:
            return result

        def visit(node: Optional[_Node], even_depth: bool) -> None:
            if node is None:
                return
            if even_depth:
                result.append(Vector(node.value, root.boundary.y_min))
                result.append(Vector(node.value, root.boundary.y_max))
            else:
                result.append(Vector(node.boundary.x_min, node.value))
                result.append(Vector(node.boundary.y_max, node.value))
            visit(node.left, not even_depth)
            visit(node.right, not even_depth)

        visit(root, True)
        return result

    def nearest_neighbour(self, point: Vector) -> Vector:
        """Return the stored point found nearest to the given point."""
        if self._root is None:
            raise ValueError("the tree is empty")
        best: list = [math.inf, None]

        def visit(node: _Node, even_depth: bool) -> None:
            if node.is_leaf:
                dist = _squared_distance(point, node.data)
                if dist < best[0]:
                    best[0] = dist
                    best[1] = node.data
                return
            axis = 0 if even_depth else 1
            if point[axis] < node.value:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left
            visit(near, not even_depth)
            if abs(point[axis] - node.value) < best[0]:
                visit(far, not even_depth)

        visit(self._root, True)
        if best[1] is None:
            raise ValueError("no neighbour could be found")
        return best[1]