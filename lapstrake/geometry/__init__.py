"""
geometry/__init__.py - Curve fitting primitives.

COORDINATE FRAME CONTRACT
=========================
  X: fore-aft position
  Y: half-breadth from the centerline (port side only)
  Z: height above the base line

  Units: feet, as read from the table of offsets
"""

from .points import Point2D, Point3D, Bounds2D, bounds_3d
from .catmullrom import CatmullRomSegment, Segment
from .spline import Spline, remove_duplicates

__all__ = [
    "Point2D",
    "Point3D",
    "Bounds2D",
    "bounds_3d",
    "CatmullRomSegment",
    "Segment",
    "Spline",
    "remove_duplicates",
]
