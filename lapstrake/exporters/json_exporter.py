"""
exporters/json_exporter.py - JSON exporter.
"""

from __future__ import annotations
import json

from .base import BaseExporter
from .schema import Drawing, ExportFormat


class JSONExporter(BaseExporter):
    """Exports drawings to JSON format."""

    format = ExportFormat.JSON

    def __init__(self, indent: int = 2):
        """
        Initialize JSON exporter.

        Args:
            indent: JSON indentation level
        """
        self.indent = indent

    def export(self, drawing: Drawing) -> str:
        return json.dumps(drawing.to_dict(), indent=self.indent)
