# geomkit

A small computational-geometry toolkit. It has immutable vectors and points,
lines, planes and segments, orientation predicates, intersection tests,
angles and distances, ring-linked and doubly connected edge list (DCEL)
polygons, a 2D k-d tree, binary space partitions, a yaw/pitch camera, and
helpers that turn geometry into flat lists of floats for vertex buffers.

## Installation

```
pip install .
```

The only runtime dependency is numpy, used by `geomkit.camera`.
To run the test suite, install the test extra:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `geomkit.core` | tolerances, `is_equal_d` / `is_equal_dl` / `is_equal_dll`, `radians_to_degrees`, the enums `RelativePosition`, `IntersectionOps`, `Winding` |
| `geomkit.vector` | `Vector`, `dot_product`, `cross_product_3d`, `scalar_triple_product`, `orthogonal`, `perpendicular` |
| `geomkit.point` | `Point2d` / `Point3d` aliases, `DEFAULT_POINT_2D` / `DEFAULT_POINT_3D`, sort keys `lrtb_key`, `tblr_key`, `x_key`, `y_key` |
| `geomkit.line` | `Line` (3D), `Line2d`, `StdLine` |
| `geomkit.plane` | `Plane` (normal `n` and constant `d`, with `n . X = d`) |
| `geomkit.segment` | `Segment2d` with `x_at(y)` |
| `geomkit.bounds` | `AABB` with `contains`, `BoundRectangle` |
| `geomkit.polygon` | `Vertex`, `Vertex2dSimple`, `Edge2dSimple`, `Polygon`, `Polygon2dSimple` |
| `geomkit.dcel` | `DcelVertex`, `DcelEdge`, `DcelFace`, `PolygonDCEL`, `vertex_tblr_key` |
| `geomkit.polyhedron` | `Vertex3d`, `Edge3d`, `Face` |
| `geomkit.predicates` | orientation, left/right tests, areas, polar angle, collinearity, coplanarity, face winding and visibility |
| `geomkit.intersection` | line, segment and plane intersections, `is_diagonal` |
| `geomkit.angle` | angles in degrees between lines and planes |
| `geomkit.distance` | distances between points, lines and planes |
| `geomkit.kdtree` | `KDTree`, `KDRange` |
| `geomkit.bsp` | `BSP2D`, `BSP2DSegments`, `SegmentSide` |
| `geomkit.graphics` | float-list builders for points, edges, segments and lines |
| `geomkit.camera` | `Camera`, `CameraMovement` |

## Quick tour

### Vectors

```python
from geomkit.vector import Vector, dot_product, cross_product_3d

a = Vector(1.0, 0.0, 0.0)
b = Vector(0.0, 1.0, 0.0)
dot_product(a, b)          # 0.0
cross_product_3d(a, b)[2]  # 1.0
(a + b).magnitude()        # 1.414...
```

A `Vector` holds two or more coordinates and never changes in place:
`normalized()` and `with_coord(index, value)` return new vectors. Vectors
compare equal within a tolerance of 1e-10 per coordinate, order
lexicographically, and are not hashable. Adding, subtracting or taking the
dot product of vectors of different dimensions raises `ValueError`; an
index out of range raises `IndexError`.

### Predicates and intersections

```python
from geomkit.vector import Vector
from geomkit.predicates import orientation_2d, left
from geomkit.intersection import segments_intersect, segment_lines_intersection

p, q, r = Vector(0.0, 0.0), Vector(1.0, 0.0), Vector(0.5, 1.0)
left(p, q, r)                                    # True
orientation_2d(p, q, r)                          # RelativePosition.LEFT
segments_intersect(p, r, q, Vector(0.0, 1.0))    # True
segment_lines_intersection(p, q, r, Vector(0.5, -1.0))  # Vector(0.5, 0.0)
```

`orientation_3d` uses the unsigned triangle area, so it reports `LEFT` for
any three points that are not collinear. Functions that may find no
intersection (`intersect_lines_2d`, `segment_lines_intersection`,
`intersect_plane_line`, `intersect_planes`, `line_segment_intersection`)
return `None` in that case and the point or line otherwise.

### Angles and distances

`angle_lines_2d`, `angle_lines_3d`, `angle_planes` give the acute angle in
degrees; `angle_line_plane` gives 90 minus the angle between the line and the
plane's normal. `distance(p1, p2)` is the Euclidean distance,
`distance_to_line` and `distance_to_line_through` measure from a point to a
3D line, and `distance_to_plane` is signed along the plane's normal.

### k-d tree

```python
from geomkit.vector import Vector
from geomkit.kdtree import KDTree

tree = KDTree([Vector(0.1, 0.2), Vector(-0.5, 0.4), Vector(0.7, -0.3)])
tree.search(-1.0, 1.0, 0.0, 1.0)          # points inside the rectangle
tree.nearest_neighbour(Vector(0.0, 0.0))
tree.traverse()                           # all points, leaves left to right
tree.split_line_data()                    # end point pairs of the split lines
```

The tree splits on x at even depths and on y at odd depths. Cell boundaries
start from the square [-10, 10] x [-10, 10], so points are expected to lie
inside it. `nearest_neighbour` on an empty tree raises `ValueError`.

### Binary space partitioning

```python
from geomkit.vector import Vector
from geomkit.bsp import BSP2D

points = [Vector(x / 10, (x * 7 % 11) / 10) for x in range(-8, 9)]
bsp = BSP2D(points)
for line in bsp.split_lines():   # StdLine objects, pre-order
    print(line.point, line.direction, line.d)
```

Cells of four points or fewer are not split further. `BSP2DSegments`
partitions a list of `Segment2d` objects by the lines of the segments
themselves, cutting segments that cross a split line; its `lines()` method
returns the splitting segments in order.

### Polygons

`Polygon` and `Polygon2dSimple` keep vertices in a circular doubly linked
ring; `insert` adds a vertex after the most recently added one.
`PolygonDCEL` builds a doubly connected edge list from counter-clockwise
points (fewer than three points give an empty structure) and can `split` a
face along a diagonal between two vertices, returning `False` when the
vertices share no bounded face or are adjacent.

### Rendering helpers and camera

`geomkit.graphics` flattens points, edges, segments, DCEL half edges and
lines into plain lists of floats, for example `rectangle_point_cloud` (a
small square of two triangles per point) and `lines_data_2d` (each line
clipped to y = 10 and y = -10; a horizontal line raises `ValueError`).

`geomkit.camera.Camera` is a yaw/pitch fly camera: `process_keyboard`,
`process_mouse_movement` and `process_mouse_scroll` update it, and
`view_matrix()` returns a 4x4 look-at matrix as a numpy array.

## What it does not do

The package opens no window and draws nothing. It has no command-line
program and no viewer: the graphics helpers and the camera only compute the
numbers a renderer would need, and showing them is left to the caller.