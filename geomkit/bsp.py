"""Binary space partitions of 2D point sets and 2D segment sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional

from geomkit.intersection import line_intersects_segment, line_segment_intersection
from geomkit.line import Line2d, StdLine
from geomkit.predicates import left_of_line
from geomkit.segment import Segment2d
from geomkit.vector import Vector, dot_product

MIN_ELEMENTS_PER_PARTITION = 4


class SegmentSide(Enum):
    """Where a segment lies relative to a splitting line."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    INTERSECT = "intersect"


@dataclass(eq=False)
class _PointNode:
    split_line: Optional[StdLine] = None
    points: list[Vector] = field(default_factory=list)
    neg: Optional["_PointNode"] = None
    pos: Optional["_PointNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.neg is None and self.pos is None


def _midpoint(a: Vector, b: Vector) -> Vector:
    return Vector((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def _split_line(points: list[Vector], prev_line: Optional[StdLine]) -> StdLine:
    """Choose the line splitting a sorted point list.

    The first split runs through the midpoints of the two lowest and the two
    highest points; later splits run through the centroid, turned roughly a
    quarter turn from the previous split.
    """
    if prev_line is None:
        p1 = _midpoint(points[0], points[1])
        p2 = _midpoint(points[-1], points[-2])
        line = StdLine(p1, p2, True)
    else:
        size = len(points)
        p1 = Vector(sum(p[0] for p in points) / size, sum(p[1] for p in points) / size)
        prev_dir = prev_line.direction
        p2 = Vector(-prev_dir[1] + 0.2, prev_dir[0] + 0.2)
        line = StdLine(p1, p2, False)

    normal = Vector(-line.direction[1], line.direction[0])
    line.d = dot_product(normal, p2)
    return line


def _build_points(points: list[Vector], prev_line: Optional[StdLine]) -> _PointNode:
    if len(points) <= MIN_ELEMENTS_PER_PARTITION:
        return _PointNode(points=list(points))
    ordered = sorted(points)
    line = _split_line(ordered, prev_line)
    neg = [p for p in ordered if left_of_line(line, p)]
    pos = [p for p in ordered if not left_of_line(line, p)]
    return _PointNode(
        split_line=line,
        neg=_build_points(neg, line),
        pos=_build_points(pos, line),
    )


class BSP2D:
    """A binary space partition of a 2D point set into small cells."""

    def __init__(self, points: Iterable[Vector]) -> None:
        self._root = _build_points(list(points), None)

    def split_lines(self) -> list[StdLine]:
        """Return the split lines of all inner nodes in pre-order (negative side first)."""

        def visit(node: Optional[_PointNode]) -> Iterator[StdLine]:
            if node is None or node.is_leaf:
                return
            yield node.split_line
            yield from visit(node.neg)
            yield from visit(node.pos)

        return list(visit(self._root))


@dataclass(eq=False)
class _SegmentNode:
    segment: Segment2d
    split_line: Line2d
    positive: Optional["_SegmentNode"] = None
    negative: Optional["_SegmentNode"] = None


def _segment_line(segment: Segment2d) -> Line2d:
    return Line2d(segment.p1, segment.p2 - segment.p1)


def _choose_split(segments: list[Segment2d]) -> tuple[int, Line2d]:
    """Return the index and line of the segment whose line meets the fewest others."""
    best_index = -1
    best_line: Optional[Line2d] = None
    best_count: Optional[int] = None
    for i, segment in enumerate(segments):
        line = _segment_line(segment)
        count = sum(
            1
            for j, other in enumerate(segments)
            if j != i and line_intersects_segment(line, other)
        )
        if best_count is None or count < best_count:
            best_index, best_line, best_count = i, line, count
    return best_index, best_line


def _classify(
    segment: Segment2d, line: Line2d
) -> tuple[SegmentSide, Segment2d, Optional[Segment2d]]:
    """Classify a segment against a line; a crossing segment is cut in two."""
    crossing = line_segment_intersection(line, segment)
    if crossing is not None:
        if left_of_line(line, segment.p1):
            pos_part = Segment2d(segment.p1, crossing)
            neg_part = Segment2d(crossing, segment.p2)
        else:
            pos_part = Segment2d(segment.p2, crossing)
            neg_part = Segment2d(crossing, segment.p1)
        return SegmentSide.INTERSECT, pos_part, neg_part
    if left_of_line(line, segment.p1):
        return SegmentSide.POSITIVE, segment, None
    return SegmentSide.NEGATIVE, segment, None


def _build_segments(segments: list[Segment2d]) -> Optional[_SegmentNode]:
    if len(segments) <= 1:
        return None
    split_index, line = _choose_split(segments)
    positive: list[Segment2d] = []
    negative: list[Segment2d] = []
    for i, segment in enumerate(segments):
        if i == split_index:
            continue
        side, first, second = _classify(segment, line)
        if side is SegmentSide.INTERSECT:
            positive.append(first)
            negative.append(second)
        elif side is SegmentSide.POSITIVE:
            positive.append(first)
        else:
            negative.append(first)
    return _SegmentNode(
        segment=segments[split_index],
        split_line=line,
        positive=_build_segments(positive),
        negative=_build_segments(negative),
    )


class BSP2DSegments:
    """A binary space partition of a set of 2D segments by their own lines.

    A partition holding a single segment is not turned into a node.
    """

    def __init__(self, segments: Iterable[Segment2d]) -> None:
        self._root = _build_segments(list(segments))

    def lines(self) -> list[Segment2d]:
        """Return the splitting segments: negative side, node, positive side."""

        def visit(node: Optional[_SegmentNode]) -> Iterator[Segment2d]:
            if node is None:
                return
            yield from visit(node.negative)
            yield node.segment
            yield from visit(node.positive)

        return list(visit(self._root))