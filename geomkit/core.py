"""Tolerances, enumerations and small numeric helpers shared across the package."""

from __future__ import annotations

import math
from enum import IntEnum

TOLERANCE = 1e-10
TOLERANCEL = 1e-5
TOLERANCELL = 0.01
ZERO = 0.0


class Winding(IntEnum):
    """Winding order of a polygon's vertices."""

    CW = 1
    CCW = 2


class RelativePosition(IntEnum):
    """Position of a point relative to a directed segment."""

    LEFT = 0
    RIGHT = 1
    BEYOND = 2
    BEHIND = 3
    BETWEEN = 4
    ORIGIN = 5
    DESTINATION = 6


class IntersectionOps(IntEnum):
    """Relation of a primitive to a splitting line or plane."""

    CROSSES = 0
    POSITIVE = 1
    NEGATIVE = 2
    COINCIDENT = 3


def _within(x: float, y: float, tolerance: float) -> bool:
    return x == y or abs(x - y) < tolerance


def is_equal_d(x: float, y: float) -> bool:
    """Return True if x and y differ by less than the strict tolerance."""
    return _within(x, y, TOLERANCE)


def is_equal_dl(x: float, y: float) -> bool:
    """Return True if x and y differ by less than the loose tolerance."""
    return _within(x, y, TOLERANCEL)


def is_equal_dll(x: float, y: float) -> bool:
    """Return True if x and y differ by less than the loosest tolerance."""
    return _within(x, y, TOLERANCELL)


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 360 / (2 * math.pi)