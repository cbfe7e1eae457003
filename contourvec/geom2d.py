"""Plane geometry: points, vectors, segments and point-to-segment distance."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point of the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if isinstance(factor, (Point, Vector)):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        if isinstance(divisor, (Point, Vector)):
            return NotImplemented
        return Point(self.x / divisor, self.y / divisor)

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)


@dataclass(frozen=True)
class Vector:
    """A vector of the plane."""

    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: float) -> Vector:
        if isinstance(factor, (Point, Vector)):
            return NotImplemented
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def dot(self, other: Vector) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y)


@dataclass(frozen=True)
class Segment:
    """The segment [a, b]."""

    a: Point
    b: Point


def vector_between(a: Point, b: Point) -> Vector:
    """The vector from a to b."""
    return Vector(b.x - a.x, b.y - a.y)


def projection_parameter(a: Point, b: Point, p: Point) -> float:
    """Parameter of the orthogonal projection of p on the line (a, b)."""
    ap = vector_between(a, p)
    ab = vector_between(a, b)
    return ap.dot(ab) / ab.dot(ab)


def project(a: Point, b: Point, lam: float) -> Point:
    """The point a + lam * (b - a)."""
    return a + (b - a) * lam


def distance_point_segment(point: Point, segment: Segment) -> float:
    """Distance from a point to a segment."""
    a, b = segment.a, segment.b
    if a == b:
        return a.distance(point)
    lam = projection_parameter(a, b, point)
    if lam < 0:
        return a.distance(point)
    if lam <= 1:
        return project(a, b, lam).distance(point)
    return b.distance(point)