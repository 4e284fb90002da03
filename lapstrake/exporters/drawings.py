"""
exporters/drawings.py - Build drawings from hull geometry.
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, List, Sequence

from ..errors import DrawingError
from ..geometry import Bounds2D, Point2D
from ..hull import FlattenedPlank, Hull
from .schema import Color, Drawing, DrawingPath, PathStyle

logger = logging.getLogger(__name__)

PLANK_STROKE = 0.01
LINES_STROKE = 0.02

# Cross-section templates
HOLE_DIAMETER = 0.125
HOLE_POSITIONS = ((0.5, 0.33), (0.5, 0.66))
TAB_WIDTH = 0.75
TAB_HEIGHT = 1.2
GRID_SPACING = 1.1
DEFAULT_EXCLUDED = ("Stem", "Post")


def plank_drawing(planks: Iterable[FlattenedPlank]) -> Drawing:
    """Closed outline of every flattened plank."""
    drawing = Drawing(title="Planks")
    for i, plank in enumerate(planks):
        drawing.append(DrawingPath(
            points=plank.outline(),
            stroke=PLANK_STROKE,
            label=f"plank {i}",
        ))
    return drawing


def grid_paths(hull: Hull) -> List[DrawingPath]:
    """Waterline and buttock grid lines, on both sides of the centerline."""
    lo, hi = hull.bounds()
    paths = []
    for height in hull.heights:
        line = [Point2D(lo.y, height), Point2D(hi.y, height)]
        paths.extend(_mirrored(line, f"WL {height:g}"))
    for breadth in hull.breadths:
        line = [Point2D(breadth, lo.z), Point2D(breadth, hi.z)]
        paths.extend(_mirrored(line, f"buttock {breadth:g}"))
    return paths


def half_breadth_drawing(hull: Hull) -> Drawing:
    """
    Body plan: each station's fair curve and reference points, looking
    along the hull. The first half of the stations is drawn to starboard,
    the second half to port, over the measurement grid.
    """
    drawing = Drawing(title="Half breadths")
    drawing.extend(grid_paths(hull))
    stations = hull.stations
    half = len(stations) / 2.0
    for i, station in enumerate(stations):
        curve = station.half_breadth_profile()
        points = station.reference_profile()
        if i >= half:
            curve = [p.reflect_x() for p in curve]
            points = [p.reflect_x() for p in points]
        drawing.append(DrawingPath(points=curve, stroke=LINES_STROKE, label=station.name))
        drawing.append(DrawingPath(
            points=points,
            style=PathStyle.DOTS,
            stroke=LINES_STROKE,
            label=f"{station.name} offsets",
        ))
    return drawing


def cross_section_drawing(hull: Hull, excluded: Sequence[str] = DEFAULT_EXCLUDED) -> Drawing:
    """
    Full-breadth templates of each station, for cutting out and setting up
    as building molds.

    Every template gets a straight tab above the sheer, level across all
    templates, and two alignment holes at the same place on each, inside
    the region every template covers. Templates are laid out on a grid.

    Args:
        hull: The lofted hull
        excluded: Names of stations to leave out

    Raises:
        DrawingError: No station is left to draw, the templates have no
            common overlap, or the holes do not fit in it
    """
    outlines = [
        DrawingPath(
            points=station.cross_section_profile(),
            stroke=LINES_STROKE,
            closed=True,
            label=station.name,
        )
        for station in hull.stations
        if station.name not in excluded
    ]
    if not outlines:
        raise DrawingError("cross-sections", "no stations left after exclusions")

    bounds = [outline.bounds() for outline in outlines]
    union = bounds[0]
    for bound in bounds[1:]:
        union = union.union(bound)
    overlap = bounds[0]
    for bound in bounds[1:]:
        overlap = overlap.intersection(bound)
        if overlap is None:
            break
    if overlap is None:
        raise DrawingError(
            "cross-sections",
            "cross-sections have no overlap in which to place alignment holes",
        )

    radius = HOLE_DIAMETER / 2.0
    holes = [overlap.relative_pos(fx, fy) for fx, fy in HOLE_POSITIONS]
    for hole in holes:
        if not overlap.contains(Bounds2D.around(hole, radius)):
            raise DrawingError(
                "cross-sections",
                "hole doesn't fit in overlap between cross-sections",
            )

    tab_y = TAB_HEIGHT * union.max_y
    templates = []
    for outline, bound in zip(outlines, bounds):
        center_x = (bound.min_x + bound.max_x) / 2.0
        half_tab = TAB_WIDTH * bound.width / 2.0
        templates.append([
            outline,
            DrawingPath(
                points=[Point2D(center_x - half_tab, tab_y), Point2D(center_x + half_tab, tab_y)],
                stroke=LINES_STROKE,
                label=f"{outline.label} tab",
            ),
            DrawingPath(
                points=list(holes),
                style=PathStyle.CIRCLES,
                stroke=LINES_STROKE,
                radius=radius,
                label=f"{outline.label} holes",
            ),
        ])

    logger.info(f"Laying out {len(templates)} cross-section templates")
    drawing = Drawing(title="Cross sections")
    for paths in _grid(templates, GRID_SPACING):
        drawing.extend(paths)
    return drawing


def _grid(items: List[List[DrawingPath]], spacing: float) -> List[List[DrawingPath]]:
    """
    Place groups of paths on a grid of int(sqrt(n)) columns, filled row by
    row from the top. Every cell is `spacing` times the largest group in
    its row and column.
    """
    cols = max(1, int(math.sqrt(len(items))))
    bounds = [_group_bounds(paths) for paths in items]
    rows = [bounds[i:i + cols] for i in range(0, len(bounds), cols)]
    col_widths = [
        spacing * max(row[c].width for row in rows if c < len(row))
        for c in range(cols)
    ]

    placed = []
    top = 0.0
    for r, row in enumerate(rows):
        row_height = spacing * max(bound.height for bound in row)
        left = 0.0
        for c, bound in enumerate(row):
            offset = Point2D(left - bound.min_x, top - row_height - bound.min_y)
            placed.append([path.translated(offset) for path in items[r * cols + c]])
            left += col_widths[c]
        top -= row_height
    return placed


def _group_bounds(paths: List[DrawingPath]) -> Bounds2D:
    bounds = paths[0].bounds()
    for path in paths[1:]:
        bounds = bounds.union(path.bounds())
    return bounds


def _mirrored(line: List[Point2D], label: str) -> List[DrawingPath]:
    return [
        DrawingPath(points=[p.reflect_x() for p in line], color=Color.DARK_GREY, label=label),
        DrawingPath(points=line, color=Color.DARK_GREY, label=label),
    ]
