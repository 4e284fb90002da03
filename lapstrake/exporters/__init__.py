"""
exporters/ - Drawings of the lofted hull and the exporters that write them.
"""

from .schema import ExportFormat, PathStyle, Color, DrawingPath, Drawing
from .drawings import plank_drawing, half_breadth_drawing, cross_section_drawing, grid_paths
from .base import BaseExporter
from .svg import SVGExporter
from .csv_exporter import CSVExporter
from .json_exporter import JSONExporter
from .factory import get_exporter, detect_format, exporter_for_file

__all__ = [
    "ExportFormat",
    "PathStyle",
    "Color",
    "DrawingPath",
    "Drawing",
    "plank_drawing",
    "half_breadth_drawing",
    "cross_section_drawing",
    "grid_paths",
    "BaseExporter",
    "SVGExporter",
    "CSVExporter",
    "JSONExporter",
    "get_exporter",
    "detect_format",
    "exporter_for_file",
]
