"""
hull/plank.py - Planks and their flattened (spiled) patterns.

A plank is a curved 3D ribbon between two boundary splines. Flattening
unrolls it onto the plane strip by strip: both boundaries are resampled to
the same number of points, each quad between consecutive samples is split
into two triangles along the bottom_i-top_{i+1} diagonal, and each triangle
is laid down next to the previous one so that its three edge lengths are
kept. This is a forward, local approximation: the error accumulated at one
step is never pushed back onto earlier placements.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple
import logging
import math

from ..core.constants import PLANK_LAYOUT_GAP, PRACTICALLY_ZERO
from ..errors import PlankError
from ..geometry import Bounds2D, Point2D, Point3D, Spline

logger = logging.getLogger(__name__)

EdgeLengths = Tuple[float, float, float, float]


def practically_zero(value: float) -> bool:
    return abs(value) < PRACTICALLY_ZERO


def triangulate(pt1: Point2D, pt2: Point2D, x: float, y: float) -> Point2D:
    """
    Find the third corner of a triangle.

    Given two placed points and the distances `x` (from pt1) and `y`
    (from pt2) to an unknown third point, place it using the law of
    cosines:

        y*y = l*l + x*x - 2*l*x*cos(pt1_angle)

    The point is found by rotating the unit vector from pt1 toward pt2
    counterclockwise by pt1_angle and scaling it by x.
    """
    l = pt1.distance_to(pt2)
    if practically_zero(10.0 * l):
        # There's no orientation information, so make some up.
        logger.debug(f"Degenerate triangle: pivots {l} apart, placing along -x")
        return pt1 + Point2D(-x, 0.0)
    if practically_zero(x):
        # x is small and we would be dividing by it. Pivot at pt2 instead.
        pt2_angle = -math.acos(_clamp_cos((l * l + y * y - x * x) / (2.0 * l * y)))
        return pt2 + (pt1 - pt2).normalize().rotate(pt2_angle) * y
    pt1_angle = math.acos(_clamp_cos((l * l + x * x - y * y) / (2.0 * l * x)))
    return pt1 + (pt2 - pt1).normalize().rotate(pt1_angle) * x


def _clamp_cos(value: float) -> float:
    # Edge lengths from a 3D ribbon need not satisfy the triangle inequality
    # exactly in the plane.
    return max(-1.0, min(1.0, value))


@dataclass(frozen=True)
class FlattenedPlank:
    """
    A plank laid flat. Top and bottom edges have the same number of points.

    Transforms return new instances; the plank is never re-flattened.
    """

    top_line: Tuple[Point2D, ...]
    bottom_line: Tuple[Point2D, ...]

    def __post_init__(self):
        if len(self.top_line) != len(self.bottom_line):
            raise PlankError(len(self.top_line), len(self.bottom_line))

    def outline(self) -> List[Point2D]:
        """Closed outline: the top edge, the bottom edge reversed, back to start."""
        points = list(self.top_line)
        points.extend(reversed(self.bottom_line))
        points.append(self.top_line[0])
        return points

    def bounds(self) -> Bounds2D:
        return Bounds2D.of(self.top_line + self.bottom_line)

    @property
    def min_y(self) -> float:
        return self.bounds().min_y

    @property
    def max_y(self) -> float:
        return self.bounds().max_y

    def transformed(self, func) -> FlattenedPlank:
        """Apply `func` to every point."""
        return FlattenedPlank(
            top_line=tuple(func(p) for p in self.top_line),
            bottom_line=tuple(func(p) for p in self.bottom_line),
        )

    def oriented_horizontally(self) -> FlattenedPlank:
        """Rotate about the first top point so the top chord lies along +x."""
        left = self.top_line[0]
        right = self.top_line[-1]
        angle = -(right - left).angle()
        return self.transformed(lambda p: left + (p - left).rotate(angle))

    def shifted_up(self, dist: float) -> FlattenedPlank:
        """Translate along y by `dist`."""
        offset = Point2D(0.0, dist)
        return self.transformed(lambda p: p + offset)


def layout_planks(
    planks: Iterable[FlattenedPlank],
    gap: float = PLANK_LAYOUT_GAP,
) -> List[FlattenedPlank]:
    """
    Place flattened planks nicely, without overlap.

    Each plank is oriented horizontally, then stacked so that its lowest y
    sits `gap` beyond the highest y of the plank placed before it.
    """
    laid: List[FlattenedPlank] = []
    last_y = None
    for plank in planks:
        plank = plank.oriented_horizontally()
        if last_y is not None:
            plank = plank.shifted_up(last_y - plank.min_y + gap)
        last_y = plank.max_y
        laid.append(plank)
    return laid


@dataclass(frozen=True)
class Plank:
    """A plank on the hull, located at its position on the ship."""

    top_line: Spline
    bottom_line: Spline
    resolution: int
    """Number of intervals both edges are resampled to for flattening."""

    @classmethod
    def create(
        cls,
        bottom_points: Sequence[Point3D],
        top_points: Sequence[Point3D],
        resolution: int,
    ) -> Plank:
        """
        Fit both plank edges.

        Raises:
            TooFewPointsError: An edge has fewer than four distinct points
        """
        return cls(
            resolution=((len(bottom_points) + len(top_points)) // 2) * resolution,
            bottom_line=Spline(bottom_points, resolution),
            top_line=Spline(top_points, resolution),
        )

    def edge_lengths(self) -> Tuple[float, List[EdgeLengths]]:
        """
        The leftmost edge length, then the edge lengths of each quad from
        left to right: (top_i-top_i+1, bot_i-top_i+1, top_i+1-bot_i+1,
        bot_i-bot_i+1).
        """
        top_pts = self.top_line.sample(self.resolution)
        bot_pts = self.bottom_line.sample(self.resolution)
        if len(top_pts) != len(bot_pts):
            raise PlankError(len(top_pts), len(bot_pts))

        left_len = top_pts[0].distance_to(bot_pts[0])
        quads = [
            (
                top_pts[i].distance_to(top_pts[i + 1]),
                bot_pts[i].distance_to(top_pts[i + 1]),
                top_pts[i + 1].distance_to(bot_pts[i + 1]),
                bot_pts[i].distance_to(bot_pts[i + 1]),
            )
            for i in range(len(top_pts) - 1)
        ]
        return left_len, quads

    def flatten(self) -> FlattenedPlank:
        """A plank is a 3d object. Flatten it out to fit on a piece of paper."""
        first_len, quads = self.edge_lengths()
        # Start with the leftmost points; assume WLOG they are at x=0.
        top_pt = Point2D(0.0, 0.0)
        bot_pt = Point2D(0.0, first_len)
        top_line = [top_pt]
        bottom_line = [bot_pt]
        for top_len, diagonal, right_len, bot_len in quads:
            new_top_pt = triangulate(top_pt, bot_pt, top_len, diagonal)
            new_bot_pt = triangulate(new_top_pt, bot_pt, right_len, bot_len)
            top_line.append(new_top_pt)
            bottom_line.append(new_bot_pt)
            top_pt = new_top_pt
            bot_pt = new_bot_pt

        logger.debug(f"Flattened plank into {len(top_line)} stations")
        return FlattenedPlank(top_line=tuple(top_line), bottom_line=tuple(bottom_line))

    def render_lines(self) -> Tuple[List[Point3D], List[Point3D]]:
        """
        Edges for drawing in 3D: the top edge, and the bottom edge closed
        at both ends by the top edge's endpoints.
        """
        top_line = self.top_line.sample()
        bottom_line = [top_line[0]] + self.bottom_line.sample() + [top_line[-1]]
        return top_line, bottom_line
