"""
geometry/points.py - Point value types.

COORDINATE FRAME
================
  X-axis: fore-aft position along the hull
  Y-axis: half-breadth from the centerline
  Z-axis: height above the base line

  Units: feet

Flattened planks live in the plane, with Point2D(x, y) where y grows
downward from the top edge of the first plank.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple
import math


@dataclass(frozen=True)
class Point3D:
    """3D point in hull coordinate system."""

    x: float = 0.0
    """Fore-aft position (ft)."""

    y: float = 0.0
    """Half-breadth (ft from centerline)."""

    z: float = 0.0
    """Height (ft above base)."""

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Point3D:
        return Point3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Point3D:
        return self.__mul__(scalar)

    def distance_to(self, other: Point3D) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def lerp(self, other: Point3D, t: float) -> Point3D:
        """Linear interpolation; t=0 gives self, t=1 gives other."""
        return Point3D(
            (1.0 - t) * self.x + t * other.x,
            (1.0 - t) * self.y + t * other.y,
            (1.0 - t) * self.z + t * other.z,
        )

    def project_x(self) -> Point2D:
        """Looking along the hull: (half-breadth, height)."""
        return Point2D(self.y, self.z)

    def reflect_y(self) -> Point3D:
        """Mirror across the centerline."""
        return Point3D(self.x, -self.y, self.z)

    def to_tuple(self) -> Tuple[float, float, float]:
        """Convert to tuple."""
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Point2D:
    """Point (or vector) in the drawing plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point2D:
        return Point2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Point2D:
        return self.__mul__(scalar)

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Distance from origin."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Point2D:
        """Return unit vector."""
        length = self.length()
        if length == 0:
            return Point2D()
        return Point2D(self.x / length, self.y / length)

    def rotate(self, angle: float) -> Point2D:
        """Rotate counterclockwise about the origin by `angle` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Point2D(c * self.x - s * self.y, s * self.x + c * self.y)

    def angle(self) -> float:
        """Angle from the positive x axis, in radians."""
        return math.atan2(self.y, self.x)

    def reflect_x(self) -> Point2D:
        """Mirror across the vertical axis."""
        return Point2D(-self.x, self.y)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": round(self.x, 6), "y": round(self.y, 6)}


@dataclass(frozen=True)
class Bounds2D:
    """Axis-aligned extent of a set of planar points."""

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def union(self, other: Bounds2D) -> Bounds2D:
        return Bounds2D(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def intersection(self, other: Bounds2D) -> Optional[Bounds2D]:
        """Overlap of both, or None if they do not overlap."""
        bounds = Bounds2D(
            max(self.min_x, other.min_x),
            max(self.min_y, other.min_y),
            min(self.max_x, other.max_x),
            min(self.max_y, other.max_y),
        )
        if bounds.width < 0 or bounds.height < 0:
            return None
        return bounds

    def contains(self, other: Bounds2D) -> bool:
        return (
            self.min_x <= other.min_x and other.max_x <= self.max_x
            and self.min_y <= other.min_y and other.max_y <= self.max_y
        )

    def relative_pos(self, fx: float, fy: float) -> Point2D:
        """Point a fraction of the way across (fx) and up (fy) the bounds."""
        return Point2D(self.min_x + fx * self.width, self.min_y + fy * self.height)

    @classmethod
    def around(cls, center: Point2D, radius: float) -> Bounds2D:
        """Bounds of a circle."""
        return cls(center.x - radius, center.y - radius, center.x + radius, center.y + radius)

    @classmethod
    def of(cls, points: Iterable[Point2D]) -> Bounds2D:
        """Smallest bounds containing every point."""
        points = list(points)
        if not points:
            raise ValueError("Cannot bound an empty set of points")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


def bounds_3d(points: List[Point3D]) -> Tuple[Point3D, Point3D]:
    """Minimum and maximum corners of a set of 3D points."""
    if not points:
        raise ValueError("Cannot bound an empty set of points")
    return (
        Point3D(min(p.x for p in points), min(p.y for p in points), min(p.z for p in points)),
        Point3D(max(p.x for p in points), max(p.y for p in points), max(p.z for p in points)),
    )
