"""Geometry primitives, predicates, intersections, polygons, k-d and BSP trees, and rendering helpers."""

__version__ = "0.1.0"