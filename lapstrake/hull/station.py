"""
hull/station.py - A cross-section of the hull.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..geometry import Point2D, Point3D, Spline, remove_duplicates


@dataclass(frozen=True)
class Station:
    """
    A named cross-section of the hull.

    Holds its reference points, sorted from the bottom up with near-duplicates
    removed, and the fair curve (Spline) through them.
    """

    name: str
    points: Tuple[Point3D, ...]
    spline: Spline
    position: float = 0.0
    """Fore-aft position of the station at the sheer (ft)."""

    @classmethod
    def create(
        cls,
        name: str,
        points: Sequence[Point3D],
        resolution: int,
        position: Optional[float] = None,
    ) -> Station:
        """
        Build a station from unordered reference points.

        Args:
            name: Station name
            points: Reference points, in any order, possibly repeated
            resolution: Spline samples per knot interval
            position: Fore-aft position; defaults to that of the top point

        Raises:
            TooFewPointsError: Fewer than four distinct points
        """
        ordered = remove_duplicates(sorted(points, key=lambda p: p.z))
        spline = Spline(ordered, resolution)
        if position is None:
            position = ordered[-1].x
        return cls(name=name, points=tuple(ordered), spline=spline, position=position)

    def at_t(self, t: float) -> Point3D:
        """Point a fraction `t` of the way along the station, from the bottom."""
        return self.spline.at_t(t)

    def girth(self) -> float:
        """Length of the station curve from bottom to sheer."""
        return self.spline.length()

    def half_breadth_profile(self) -> List[Point2D]:
        """The fair curve seen looking along the hull: (half-breadth, height)."""
        return [p.project_x() for p in self.spline.sample()]

    def reference_profile(self) -> List[Point2D]:
        """The reference points seen looking along the hull."""
        return [p.project_x() for p in self.points]

    def cross_section_profile(self) -> List[Point2D]:
        """
        Closed outline of the whole section, looking along the hull: from
        the port sheer down to the keel and back up to the starboard sheer.
        """
        samples = self.spline.sample()
        port = [p.project_x() for p in reversed(samples)]
        starboard = [p.reflect_y().project_x() for p in samples]
        return port + starboard
