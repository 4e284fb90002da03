"""
exporters/schema.py - Drawing data contracts.

A Drawing is a flat list of 2D paths in hull units (feet). Exporters turn
it into a file format; builders in drawings.py turn hull geometry into it.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List

from ..geometry import Bounds2D, Point2D


class ExportFormat(Enum):
    """Export format options."""
    SVG = "svg"
    CSV = "csv"
    JSON = "json"


class PathStyle(Enum):
    """How a path is drawn."""
    LINE = "line"      # Connected polyline
    DOTS = "dots"      # One dot per point
    CIRCLES = "circles"  # One open circle of `radius` per point


class Color(Enum):
    """Stroke colors."""
    BLACK = "black"
    DARK_GREY = "#404040"
    GREEN = "green"


@dataclass
class DrawingPath:
    """One path of a drawing."""

    points: List[Point2D] = field(default_factory=list)
    style: PathStyle = PathStyle.LINE
    color: Color = Color.BLACK
    stroke: float = 0.02
    """Stroke width (ft)."""

    closed: bool = False
    label: str = ""
    radius: float = 0.0
    """Circle radius for CIRCLES paths (ft)."""

    def bounds(self) -> Bounds2D:
        bounds = Bounds2D.of(self.points)
        if self.style is PathStyle.CIRCLES:
            bounds = Bounds2D(
                bounds.min_x - self.radius, bounds.min_y - self.radius,
                bounds.max_x + self.radius, bounds.max_y + self.radius,
            )
        return bounds

    def translated(self, offset: Point2D) -> DrawingPath:
        """A copy of this path moved by `offset`."""
        return replace(self, points=[p + offset for p in self.points])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "style": self.style.value,
            "color": self.color.value,
            "stroke": self.stroke,
            "closed": self.closed,
            "radius": self.radius,
            "points": [p.to_dict() for p in self.points],
        }


@dataclass
class Drawing:
    """A collection of paths to be written out together."""

    title: str = ""
    paths: List[DrawingPath] = field(default_factory=list)

    def append(self, path: DrawingPath) -> None:
        self.paths.append(path)

    def extend(self, paths: List[DrawingPath]) -> None:
        self.paths.extend(paths)

    def bounds(self) -> Bounds2D:
        """Extent of every point of every path."""
        nonempty = [path for path in self.paths if path.points]
        if not nonempty:
            return Bounds2D()
        bounds = nonempty[0].bounds()
        for path in nonempty[1:]:
            bounds = bounds.union(path.bounds())
        return bounds

    def to_dict(self) -> Dict[str, Any]:
        bounds = self.bounds()
        return {
            "title": self.title,
            "bounds": {
                "min_x": bounds.min_x,
                "min_y": bounds.min_y,
                "max_x": bounds.max_x,
                "max_y": bounds.max_y,
            },
            "paths": [path.to_dict() for path in self.paths],
        }
