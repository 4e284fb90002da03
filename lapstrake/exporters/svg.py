"""
exporters/svg.py - SVG exporter.

Drawings are in feet with y pointing up; SVG user units grow downward, so
every point is flipped about the drawing's top edge and scaled.
"""

from __future__ import annotations
from typing import List

from ..geometry import Point2D
from .base import BaseExporter
from .schema import Drawing, DrawingPath, ExportFormat, PathStyle

# SVG user units per foot
DEFAULT_SCALE = 100.0
DOT_RADIUS = 0.02


class SVGExporter(BaseExporter):
    """Exports drawings to a standalone SVG document."""

    format = ExportFormat.SVG

    def __init__(self, scale: float = DEFAULT_SCALE, margin: float = 0.25):
        """
        Initialize SVG exporter.

        Args:
            scale: SVG user units per foot
            margin: Blank border around the drawing (ft)
        """
        if scale <= 0:
            raise ValueError(f"SVG scale must be positive, got {scale}")
        self.scale = scale
        self.margin = margin

    def export(self, drawing: Drawing) -> str:
        bounds = drawing.bounds()
        origin = Point2D(bounds.min_x - self.margin, bounds.max_y + self.margin)
        width = (bounds.width + 2 * self.margin) * self.scale
        height = (bounds.height + 2 * self.margin) * self.scale

        parts = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            (
                f'<svg xmlns="http://www.w3.org/2000/svg" '
                f'width="{width:.3f}" height="{height:.3f}" '
                f'viewBox="0 0 {width:.3f} {height:.3f}">'
            ),
        ]
        if drawing.title:
            parts.append(f"<title>{_escape(drawing.title)}</title>")

        for path in drawing.paths:
            if not path.points:
                continue
            if path.style is PathStyle.LINE:
                parts.append(self._polyline(path, origin))
            else:
                parts.extend(self._circles(path, origin))

        parts.append("</svg>")
        return "\n".join(parts) + "\n"

    def _to_svg(self, p: Point2D, origin: Point2D) -> Point2D:
        """Flip `p` about the top edge at `origin` and scale to user units."""
        return Point2D(
            (p.x - origin.x) * self.scale,
            (origin.y - p.y) * self.scale,
        )

    def _polyline(self, path: DrawingPath, origin: Point2D) -> str:
        coords = " ".join(self._coord(p, origin) for p in path.points)
        tag = "polygon" if path.closed else "polyline"
        return (
            f'<{tag} points="{coords}" fill="none" '
            f'stroke="{path.color.value}" stroke-width="{path.stroke * self.scale:.3f}"'
            f'{self._title_attr(path)}/>'
        )

    def _circles(self, path: DrawingPath, origin: Point2D) -> List[str]:
        # DOTS are small filled markers; CIRCLES are outlines of a given radius.
        if path.style is PathStyle.DOTS:
            radius = DOT_RADIUS * self.scale
            paint = f'fill="{path.color.value}"'
        else:
            radius = path.radius * self.scale
            paint = (
                f'fill="none" stroke="{path.color.value}" '
                f'stroke-width="{path.stroke * self.scale:.3f}"'
            )
        lines = []
        for p in path.points:
            q = self._to_svg(p, origin)
            lines.append(
                f'<circle cx="{q.x:.3f}" cy="{q.y:.3f}" r="{radius:.3f}" '
                f'{paint}{self._title_attr(path)}/>'
            )
        return lines

    def _coord(self, p: Point2D, origin: Point2D) -> str:
        q = self._to_svg(p, origin)
        return f"{q.x:.3f},{q.y:.3f}"

    @staticmethod
    def _title_attr(path: DrawingPath) -> str:
        return f' data-label="{_escape(path.label)}"' if path.label else ""


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
