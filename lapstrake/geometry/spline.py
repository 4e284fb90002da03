"""
geometry/spline.py - A spline through any number of points.

Chains centripetal Catmull-Rom segments over a sliding window of four
consecutive points and caches one dense polyline at construction time.
All queries (length, by-distance, by-fraction, by-coordinate) walk that
cached polyline.
"""

from __future__ import annotations
from bisect import bisect_left
from typing import List, Optional, Sequence, Tuple
import logging

from ..core.constants import EQUALITY_THRESHOLD, MIN_SPLINE_POINTS
from ..errors import SplineRangeError, TooFewPointsError
from .catmullrom import CatmullRomSegment, Segment
from .points import Point3D, bounds_3d

logger = logging.getLogger(__name__)


def remove_duplicates(
    points: Sequence[Point3D],
    threshold: float = EQUALITY_THRESHOLD,
) -> List[Point3D]:
    """
    Collapse runs of consecutive points closer than `threshold`.

    The first point of each run is kept; later points are compared against
    the last point that was kept.
    """
    kept: List[Point3D] = []
    for point in points:
        if kept and point.distance_to(kept[-1]) < threshold:
            continue
        kept.append(point)
    return kept


class Spline:
    """
    A spline with any number of points.

    Immutable once built. Every window of four consecutive points becomes
    one CatmullRomSegment (N-3 windows for N points). The first window
    contributes its FIRST interval, every window its MIDDLE interval, and
    the last window its LAST interval plus the final endpoint, so the
    cached polyline holds resolution * (N - 1) + 1 samples and starts and
    ends exactly on the first and last reference points.
    """

    def __init__(self, points: Sequence[Point3D], resolution: int):
        """
        Build the spline.

        Args:
            points: Ordered reference points; near-duplicates are collapsed
            resolution: Samples per knot interval

        Raises:
            TooFewPointsError: Fewer than four points after deduplication
        """
        if resolution < 1:
            raise ValueError(f"Spline resolution must be at least 1, got {resolution}")

        ref_points = remove_duplicates(points)
        n = len(ref_points)
        if n < MIN_SPLINE_POINTS:
            raise TooFewPointsError(count=n, minimum=MIN_SPLINE_POINTS)

        samples: List[Point3D] = []
        for i in range(n - 3):
            segment = CatmullRomSegment(ref_points[i:i + 4])
            if i == 0:
                samples.extend(segment.sample(Segment.FIRST, resolution))
            samples.extend(segment.sample(Segment.MIDDLE, resolution))
            if i == n - 4:
                samples.extend(segment.sample(Segment.LAST, resolution, include_end=True))

        self._points: Tuple[Point3D, ...] = tuple(ref_points)
        self._samples: Tuple[Point3D, ...] = tuple(samples)
        self._xs: Tuple[float, ...] = tuple(p.x for p in samples)
        self.resolution = resolution

        logger.debug(
            f"Built spline through {n} points ({len(points) - n} duplicates "
            f"dropped), {len(samples)} samples"
        )

    @property
    def points(self) -> List[Point3D]:
        """Reference points the spline passes through, after deduplication."""
        return list(self._points)

    def sample(self, resolution: Optional[int] = None) -> List[Point3D]:
        """
        A sample of points along the spline.

        Args:
            resolution: None for the cached construction-time polyline;
                otherwise `resolution + 1` points evenly spaced by length

        Returns:
            List of points from start to end
        """
        if resolution is None:
            return list(self._samples)
        if resolution < 1:
            raise ValueError(f"Sample resolution must be at least 1, got {resolution}")
        return [self.at_t(i / resolution) for i in range(resolution + 1)]

    def length(self) -> float:
        """The total length of the cached polyline."""
        length = 0.0
        prev_point = self._samples[0]
        for point in self._samples[1:]:
            length += point.distance_to(prev_point)
            prev_point = point
        return length

    def at_len(self, dist: float) -> Point3D:
        """
        Get the point at a given distance along the curve from its start.

        Args:
            dist: Distance along the polyline, within [0, length()]

        Raises:
            SplineRangeError: `dist` lies outside the spline
        """
        if dist < 0.0:
            raise SplineRangeError(distance=dist, length=self.length())

        length = 0.0
        prev_point = self._samples[0]
        for point in self._samples[1:]:
            delta = point.distance_to(prev_point)
            if length + delta >= dist:
                if delta == 0.0:
                    return prev_point
                # Between prev_point and point: interpolate linearly.
                return prev_point.lerp(point, (dist - length) / delta)
            length += delta
            prev_point = point

        raise SplineRangeError(distance=dist, length=length)

    def at_t(self, t: float) -> Point3D:
        """Point a fraction `t` (0..1) of the way along the curve by length."""
        return self.at_len(t * self.length())

    def at_x(self, x: float) -> Point3D:
        """
        Cached sample whose fore-aft coordinate is nearest to `x`.

        This is a binary search over the samples, not a root find: it
        assumes the polyline is (roughly) ascending in x and returns an
        existing sample rather than interpolating between two.
        """
        xs = self._xs
        i = bisect_left(xs, x)
        if i == 0:
            return self._samples[0]
        if i == len(xs):
            return self._samples[-1]
        if x - xs[i - 1] <= xs[i] - x:
            return self._samples[i - 1]
        return self._samples[i]

    def bounds(self) -> Tuple[Point3D, Point3D]:
        """Minimum and maximum corners of the cached polyline."""
        return bounds_3d(list(self._samples))

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return (
            f"Spline(points={len(self._points)}, samples={len(self._samples)}, "
            f"resolution={self.resolution})"
        )
