"""
geometry/catmullrom.py - Centripetal Catmull-Rom interpolation.

One cubic segment through four control points, evaluated with the
Barry-Goldman pyramid of linear blends. Knots follow the centripetal rule
(alpha = 1/2): t_i = t_{i-1} + sqrt(|P_i - P_{i-1}|), which keeps unevenly
spaced survey points from producing cusps or self-intersections.

Only the middle interval [t1, t2] is a true Catmull-Rom curve. The outer
intervals are needed at the two ends of a chained spline; they reuse the
same cascade but finish with the outer knot pair (0, 3), which behaves
like a Lagrange curve through the four points. Downstream plank geometry
is only consistent relative to this exact curve, so it must not be
"corrected".
"""

from __future__ import annotations
from enum import Enum
from typing import List, Sequence, Tuple
import math

from .points import Point3D


class Segment(Enum):
    """Which knot interval of a four-point window to sample."""
    FIRST = 0
    MIDDLE = 1
    LAST = 2

    @property
    def index(self) -> int:
        return self.value


class CatmullRomSegment:
    """
    A cubic interpolation between four points.

    Use the middle segment whenever possible; the first and last segments
    exist only to reach the two ends of a chained spline.
    """

    def __init__(self, points: Sequence[Point3D]):
        """
        Initialize segment.

        Args:
            points: Exactly four ordered control points P0..P3
        """
        if len(points) != 4:
            raise ValueError(f"A Catmull-Rom segment needs 4 points, got {len(points)}")
        self.points: Tuple[Point3D, ...] = tuple(points)
        self.knots: Tuple[float, ...] = _centripetal_knots(self.points)

    def sample(
        self,
        segment: Segment,
        resolution: int,
        include_end: bool = False,
    ) -> List[Point3D]:
        """
        Sample evenly spaced points along one knot interval.

        Args:
            segment: Knot interval to sample
            resolution: Number of samples, at fractions k/resolution
            include_end: Also append the point at fraction 1

        Returns:
            `resolution` points, plus one if `include_end`
        """
        samples = [
            self.at_segment(k / resolution, segment)
            for k in range(resolution)
        ]
        if include_end:
            samples.append(self.at_segment(1.0, segment))
        return samples

    def at_segment(self, f: float, segment: Segment) -> Point3D:
        """Point at fraction `f` of the chosen knot interval."""
        i = segment.index
        t = (1.0 - f) * self.knots[i] + f * self.knots[i + 1]
        return self.compute(t, outer=segment is not Segment.MIDDLE)

    def compute(self, t: float, outer: bool = False) -> Point3D:
        """
        Evaluate the blend cascade at knot parameter `t`.

        Args:
            t: Knot parameter, normally within [t0, t3]
            outer: Finish with the (0, 3) blend used for the end intervals

        Returns:
            Point on the curve
        """
        p0, p1, p2, p3 = self.points
        a1 = self._blend(0, 1, p0, p1, t)
        a2 = self._blend(1, 2, p1, p2, t)
        a3 = self._blend(2, 3, p2, p3, t)
        b1 = self._blend(0, 2, a1, a2, t)
        b2 = self._blend(1, 3, a2, a3, t)
        if outer:
            return self._blend(0, 3, b1, b2, t)
        return self._blend(1, 2, b1, b2, t)

    def _blend(self, i: int, j: int, p: Point3D, q: Point3D, t: float) -> Point3D:
        """Weighted blend of p and q over the knot pair (t_i, t_j)."""
        t_i = self.knots[i]
        t_j = self.knots[j]
        span = t_j - t_i
        if span == 0.0:
            # Coincident control points carry no parameter range.
            return p
        return p * ((t_j - t) / span) + q * ((t - t_i) / span)

    def __repr__(self) -> str:
        return f"CatmullRomSegment(points={self.points!r}, knots={self.knots!r})"


def _centripetal_knots(points: Sequence[Point3D]) -> Tuple[float, ...]:
    """Square-root chord length knots, starting at zero."""
    knots = [0.0]
    for i in range(1, 4):
        knots.append(knots[-1] + math.sqrt(points[i].distance_to(points[i - 1])))
    return tuple(knots)
